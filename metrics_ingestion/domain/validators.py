"""
Validators for uploaded CSV rows.

Header and shape checks, then one parse-and-validate function per record
kind. Each row validator returns a RowValidation: the typed record, or every
ValidationError found for that row. Field bounds come from
metrics_kernel.domain.validation so direct creation and CSV ingestion agree.

Architecture: metrics_ingestion/domain. ZERO I/O.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Callable, Sequence

from metrics_kernel.domain.dtos import STAFF_STATUS_VALUES, StaffStatus, ValidationError
from metrics_kernel.domain.validation import (
    MSG_INVALID_DATE,
    KPI_BOUNDS,
    MSG_NOT_A_NUMBER,
    check_range,
    validate_staff_values,
)

from metrics_ingestion.domain.types import (
    EXPECTED_HEADERS,
    IngestKind,
    KpiSample,
    RowValidation,
    StaffRecord,
)

MSG_REQUIRED = "Required"
MSG_NOT_FINITE = "Number must be finite"

# YYYY-MM-DD, optionally followed by a time part
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}(?:[T ].*)?")


# -----------------------------------------------------------------------------
# Document-level checks
# -----------------------------------------------------------------------------


def validate_header(kind: IngestKind, header: Sequence[str]) -> str | None:
    """Return a message describing the first header mismatch, or None."""
    expected = EXPECTED_HEADERS[kind]
    if len(header) != len(expected):
        return f"Invalid header count. Expected {len(expected)} columns, got {len(header)}"
    for position, (want, got) in enumerate(zip(expected, header), start=1):
        if want != got:
            return f"Invalid header at position {position}. Expected '{want}', got '{got}'"
    return None


def validate_column_count(cells: Sequence[str], expected: int) -> ValidationError | None:
    if len(cells) != expected:
        return ValidationError(
            code="COLUMN_COUNT_MISMATCH",
            message=f"Expected {expected} columns, got {len(cells)}",
            details={"expected": expected, "actual": len(cells)},
        )
    return None


def validate_required_cells(
    cells: dict[str, str],
    columns: Sequence[str],
) -> list[ValidationError]:
    """Every expected column is present as text (content is checked later)."""
    return [
        ValidationError(code="MISSING_REQUIRED_FIELD", message=MSG_REQUIRED, field=column)
        for column in columns
        if not isinstance(cells.get(column), str)
    ]


# -----------------------------------------------------------------------------
# Cell parsers
# -----------------------------------------------------------------------------


def parse_date_cell(value: str) -> date | None:
    """ISO date (2024-01-01) or ISO timestamp; None if unparseable."""
    if not _ISO_DATE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def parse_number_cell(field: str, value: str) -> tuple[float | None, ValidationError | None]:
    """Decimal text to float. Underscore digit grouping is not a number here."""
    if "_" in value:
        return None, ValidationError(code="INVALID_TYPE", message=MSG_NOT_A_NUMBER, field=field)
    try:
        number = float(value)
    except ValueError:
        return None, ValidationError(code="INVALID_TYPE", message=MSG_NOT_A_NUMBER, field=field)
    if math.isnan(number):
        return None, ValidationError(code="INVALID_TYPE", message=MSG_NOT_A_NUMBER, field=field)
    if math.isinf(number):
        return None, ValidationError(code="INVALID_TYPE", message=MSG_NOT_FINITE, field=field)
    return number, None


# -----------------------------------------------------------------------------
# Per-kind row validators
# -----------------------------------------------------------------------------

def validate_kpi_row(cells: dict[str, str]) -> RowValidation[KpiSample]:
    """
    Parse week_date and the three numbers, then check bounds.

    Parse failures and bound violations are collected together in column
    order so one message can report the whole row.
    """
    errors: list[ValidationError] = []

    week_date = parse_date_cell(cells["week_date"])
    if week_date is None:
        errors.append(
            ValidationError(code="INVALID_DATE", message=MSG_INVALID_DATE, field="week_date")
        )

    numbers: dict[str, float] = {}
    for field_name, (minimum, maximum) in KPI_BOUNDS.items():
        number, error = parse_number_cell(field_name, cells[field_name])
        if error is not None:
            errors.append(error)
            continue
        errors.extend(check_range(field_name, number, minimum, maximum))
        numbers[field_name] = number

    if errors:
        return RowValidation.failed(errors)
    return RowValidation.ok(
        KpiSample(
            week_date=week_date,
            efficiency=numbers["efficiency"],
            production_rate=numbers["production_rate"],
            defects_ppm=numbers["defects_ppm"],
        )
    )


def validate_staff_row(cells: dict[str, str]) -> RowValidation[StaffRecord]:
    """
    Check status against the enum (case-sensitive), then non-empty text.

    An invalid status stops validation: the row reports that error alone.
    """
    status = cells["status"]
    if status not in STAFF_STATUS_VALUES:
        return RowValidation.failed(
            [
                ValidationError(
                    code="INVALID_STATUS",
                    message=f"Invalid status '{status}'. Must be 'active' or 'on_vacation'",
                    details={"value": status},
                )
            ]
        )

    errors = validate_staff_values(cells["name"], cells["position"], cells["department"])
    if errors:
        return RowValidation.failed(errors)
    return RowValidation.ok(
        StaffRecord(
            name=cells["name"],
            position=cells["position"],
            department=cells["department"],
            status=StaffStatus(status),
        )
    )


ROW_VALIDATORS: dict[IngestKind, Callable[[dict[str, str]], RowValidation]] = {
    IngestKind.KPI: validate_kpi_row,
    IngestKind.STAFF: validate_staff_row,
}


def format_row_error(row_index: int, errors: Sequence[ValidationError]) -> str:
    """
    Render a row's errors as one line.

    Field errors read "{field} {message}"; record-level errors (field None)
    contribute their message alone. Parts are joined with ", ".
    """
    parts = [e.message if e.field is None else f"{e.field} {e.message}" for e in errors]
    return f"Row {row_index}: " + ", ".join(parts)
