"""Kernel services: CRUD over kpi_data and staff_members (flush-only)."""

from metrics_kernel.services.kpi_service import KpiService
from metrics_kernel.services.staff_service import StaffService

__all__ = [
    "KpiService",
    "StaffService",
]
