"""
Field rules shared by the kernel services and CSV ingestion.

ZERO I/O. Each function returns a list of ``ValidationError`` in field
order; an empty list means the values are acceptable.
"""

from __future__ import annotations

import math
from typing import Mapping

from metrics_kernel.domain.dtos import ValidationError

# (minimum, maximum) per KPI number; None means unbounded on that side
KPI_BOUNDS: dict[str, tuple[float | None, float | None]] = {
    "efficiency": (0.0, 100.0),
    "production_rate": (0.0, None),
    "defects_ppm": (0.0, None),
}

MSG_TOO_BIG = "Number must be less than or equal to {limit:g}"
MSG_TOO_SMALL = "Number must be greater than or equal to {limit:g}"
MSG_NOT_A_NUMBER = "Expected number, received nan"
MSG_EMPTY_STRING = "String must contain at least 1 character(s)"
MSG_INVALID_DATE = "Invalid date"


def check_range(
    field: str,
    value: float,
    minimum: float | None = None,
    maximum: float | None = None,
) -> list[ValidationError]:
    """Bounds check for a single number. NaN is rejected outright."""
    if math.isnan(value):
        return [ValidationError(code="INVALID_TYPE", message=MSG_NOT_A_NUMBER, field=field)]
    errors: list[ValidationError] = []
    if minimum is not None and value < minimum:
        errors.append(
            ValidationError(
                code="TOO_SMALL",
                message=MSG_TOO_SMALL.format(limit=minimum),
                field=field,
                details={"value": value, "minimum": minimum},
            )
        )
    if maximum is not None and value > maximum:
        errors.append(
            ValidationError(
                code="TOO_BIG",
                message=MSG_TOO_BIG.format(limit=maximum),
                field=field,
                details={"value": value, "maximum": maximum},
            )
        )
    return errors


def check_non_empty(field: str, value: str) -> list[ValidationError]:
    if not value:
        return [ValidationError(code="TOO_SMALL", message=MSG_EMPTY_STRING, field=field)]
    return []


def validate_kpi_values(
    efficiency: float,
    production_rate: float,
    defects_ppm: float,
) -> list[ValidationError]:
    """efficiency in [0, 100]; production_rate and defects_ppm >= 0."""
    return check_kpi_fields(
        {"efficiency": efficiency, "production_rate": production_rate, "defects_ppm": defects_ppm}
    )


def check_kpi_fields(values: Mapping[str, float]) -> list[ValidationError]:
    """Check any subset of the KPI numbers against KPI_BOUNDS, in column order."""
    errors: list[ValidationError] = []
    for field, (minimum, maximum) in KPI_BOUNDS.items():
        if field in values:
            errors.extend(check_range(field, values[field], minimum, maximum))
    return errors


def validate_staff_values(name: str, position: str, department: str) -> list[ValidationError]:
    """All three text fields must be non-empty."""
    return [
        *check_non_empty("name", name),
        *check_non_empty("position", position),
        *check_non_empty("department", department),
    ]
