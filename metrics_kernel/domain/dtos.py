"""
Data transfer objects for the metrics kernel.

Pure frozen dataclasses passed between services, the ingestion layer and
callers. ORM models convert to these via ``to_dto()`` so nothing outside
``metrics_kernel.models`` holds a live session-bound row.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any


class StaffStatus(str, Enum):
    """Staff availability."""

    ACTIVE = "active"
    ON_VACATION = "on_vacation"


STAFF_STATUS_VALUES: tuple[str, ...] = tuple(s.value for s in StaffStatus)


@dataclass(frozen=True)
class ValidationError:
    """
    A single field-level validation failure.

    Carries a machine-readable code, human-readable message, optional field
    name, and optional details dict. ``field`` is None for failures that
    describe the whole record rather than one field.
    """

    code: str
    message: str
    field: str | None = None
    details: dict[str, Any] | None = None


# -----------------------------------------------------------------------------
# KPI data
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class KpiData:
    """Stored weekly KPI sample."""

    id: int
    week_date: date
    efficiency: float
    production_rate: float
    defects_ppm: float
    created_at: datetime | None = None


@dataclass(frozen=True)
class CreateKpiDataInput:
    week_date: date
    efficiency: float
    production_rate: float
    defects_ppm: float


@dataclass(frozen=True)
class KpiUpdate:
    """Partial update for a KPI sample. None means "leave unchanged"."""

    efficiency: float | None = None
    production_rate: float | None = None
    defects_ppm: float | None = None

    def changed_fields(self) -> dict[str, float]:
        values = {
            "efficiency": self.efficiency,
            "production_rate": self.production_rate,
            "defects_ppm": self.defects_ppm,
        }
        return {k: v for k, v in values.items() if v is not None}


@dataclass(frozen=True)
class DateRangeQuery:
    """Inclusive week_date bounds; either side may be open."""

    start_date: date | None = None
    end_date: date | None = None


# -----------------------------------------------------------------------------
# Staff members
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class StaffMember:
    """Stored staff record."""

    id: int
    name: str
    position: str
    department: str
    status: StaffStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CreateStaffMemberInput:
    name: str
    position: str
    department: str
    status: StaffStatus = StaffStatus.ACTIVE


@dataclass(frozen=True)
class StaffUpdate:
    """Partial update for a staff member. None means "leave unchanged"."""

    name: str | None = None
    position: str | None = None
    department: str | None = None
    status: StaffStatus | None = None

    def changed_fields(self) -> dict[str, Any]:
        values = {
            "name": self.name,
            "position": self.position,
            "department": self.department,
            "status": self.status,
        }
        return {k: v for k, v in values.items() if v is not None}
