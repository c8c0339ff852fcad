"""
metrics_kernel.domain -- Pure types, field rules and the clock.

ZERO I/O (except SystemClock, the sanctioned boundary for time).
"""

from metrics_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from metrics_kernel.domain.dtos import (
    CreateKpiDataInput,
    CreateStaffMemberInput,
    DateRangeQuery,
    KpiData,
    KpiUpdate,
    StaffMember,
    StaffStatus,
    StaffUpdate,
    ValidationError,
)

__all__ = [
    "Clock",
    "DeterministicClock",
    "SystemClock",
    "CreateKpiDataInput",
    "CreateStaffMemberInput",
    "DateRangeQuery",
    "KpiData",
    "KpiUpdate",
    "StaffMember",
    "StaffStatus",
    "StaffUpdate",
    "ValidationError",
]
