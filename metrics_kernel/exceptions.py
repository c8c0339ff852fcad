"""
Typed exception hierarchy for the metrics kernel.

Every error carries a class-level ``code`` (machine-readable, API-safe) and
keeps its context as attributes rather than inside the message string, so
callers catch by type and read structured data:

    try:
        staff_service.update_staff_member(staff_id, update)
    except StaffMemberNotFoundError as e:
        return {"error": e.code, "staff_id": e.staff_id}

Hierarchy:

    MetricsKernelError (base)
    |
    +-- InvalidInputError
    |
    +-- RecordNotFoundError
    |   +-- KpiDataNotFoundError
    |   +-- StaffMemberNotFoundError
    |
    +-- ConfigurationError

Code            | When Raised
----------------|-----------------------------------------------
INVALID_INPUT   | Create/update payload violates a field rule
KPI_NOT_FOUND   | KPI id doesn't exist
STAFF_NOT_FOUND | Staff member id doesn't exist
CONFIG_ERROR    | Runtime configuration has an invalid value

CSV ingestion never raises these for row-level problems; it reports them in
``IngestResult.errors`` instead.
"""

from __future__ import annotations

from typing import Any


class MetricsKernelError(Exception):
    """
    Base exception for all metrics kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "METRICS_KERNEL_ERROR"


class InvalidInputError(MetricsKernelError):
    """A create or update payload violated one or more field rules."""

    code: str = "INVALID_INPUT"

    def __init__(self, entity: str, field_errors: list[dict[str, Any]]):
        self.entity = entity
        self.field_errors = field_errors
        summary = ", ".join(f"{e['field']} {e['message']}" for e in field_errors)
        super().__init__(f"Invalid {entity} input: {summary}")


class RecordNotFoundError(MetricsKernelError):
    """Base exception for lookups by surrogate id that found nothing."""

    code: str = "RECORD_NOT_FOUND"


class KpiDataNotFoundError(RecordNotFoundError):
    """KPI record with given id was not found."""

    code: str = "KPI_NOT_FOUND"

    def __init__(self, kpi_id: int):
        self.kpi_id = kpi_id
        super().__init__(f"KPI data with id {kpi_id} not found")


class StaffMemberNotFoundError(RecordNotFoundError):
    """Staff member with given id was not found."""

    code: str = "STAFF_NOT_FOUND"

    def __init__(self, staff_id: int):
        self.staff_id = staff_id
        super().__init__(f"Staff member with id {staff_id} not found")


class ConfigurationError(MetricsKernelError):
    """A configuration value is missing or has the wrong type."""

    code: str = "CONFIG_ERROR"

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration for {key!r}: {reason}")
