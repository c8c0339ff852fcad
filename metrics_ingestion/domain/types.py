"""
metrics_ingestion.domain.types -- Pure frozen dataclasses for CSV ingestion.

ZERO I/O. Imports only from metrics_kernel/domain/.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Generic, TypeVar

from metrics_kernel.domain.dtos import StaffStatus, ValidationError

T = TypeVar("T")


class IngestKind(str, Enum):
    """Record kinds accepted by the CSV ingestor."""

    KPI = "kpi"
    STAFF = "staff"


# Column order is part of the contract: headers must match exactly.
EXPECTED_HEADERS: dict[IngestKind, tuple[str, ...]] = {
    IngestKind.KPI: ("week_date", "efficiency", "production_rate", "defects_ppm"),
    IngestKind.STAFF: ("name", "position", "department", "status"),
}


# =============================================================================
# Typed records (post-parse shapes)
# =============================================================================


@dataclass(frozen=True)
class KpiSample:
    """One week of KPIs parsed from a CSV row. week_date is the natural key."""

    week_date: date
    efficiency: float
    production_rate: float
    defects_ppm: float


@dataclass(frozen=True)
class StaffRecord:
    """One staff row parsed from CSV. (name, department) is the natural key."""

    name: str
    position: str
    department: str
    status: StaffStatus


# =============================================================================
# Row validation result (tagged: record or violations, never both)
# =============================================================================


@dataclass(frozen=True)
class RowValidation(Generic[T]):
    record: T | None = None
    errors: tuple[ValidationError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.record is not None and not self.errors

    @classmethod
    def ok(cls, record: T) -> RowValidation[T]:
        return cls(record=record)

    @classmethod
    def failed(cls, errors: list[ValidationError] | tuple[ValidationError, ...]) -> RowValidation[T]:
        return cls(errors=tuple(errors))


# =============================================================================
# Ingest result
# =============================================================================


@dataclass(frozen=True)
class IngestResult:
    """
    Outcome of one ingest call.

    success and records_processed are independent: a partially successful
    file has success=False with records_processed > 0.
    """

    success: bool
    records_processed: int
    errors: tuple[str, ...] = ()

    @classmethod
    def rejected(cls, message: str) -> IngestResult:
        """Input-level failure: nothing was examined or written."""
        return cls(success=False, records_processed=0, errors=(message,))

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "recordsProcessed": self.records_processed,
            "errors": list(self.errors),
        }
