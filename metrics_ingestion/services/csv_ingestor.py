"""
CSV ingestor: raw upload text -> validated records -> store upserts.

Input-level problems (unknown kind, empty text, headers only, header
mismatch) return a rejected IngestResult before any row is read. Everything
after that is row-scoped: a bad or failing row adds one message to
IngestResult.errors and the next row is processed. Rows are handled one at a
time in file order, so a later row sees what earlier rows wrote.
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from metrics_kernel.logging_config import LogContext, get_logger

from metrics_ingestion.adapters.base import CsvRow
from metrics_ingestion.adapters.csv_adapter import parse_csv_text
from metrics_ingestion.domain.types import EXPECTED_HEADERS, IngestKind, IngestResult
from metrics_ingestion.domain.validators import (
    ROW_VALIDATORS,
    format_row_error,
    validate_column_count,
    validate_header,
    validate_required_cells,
)
from metrics_ingestion.promoters import default_promoter_registry
from metrics_ingestion.promoters.base import RecordPromoter
from metrics_ingestion.store.base import RecordStore

logger = get_logger("ingestion.csv_ingestor")

MSG_EMPTY = "CSV data is empty"
MSG_HEADERS_ONLY = "CSV contains only headers, no data rows"


def _resolve_kind(kind: Any) -> IngestKind | None:
    if isinstance(kind, IngestKind):
        return kind
    try:
        return IngestKind(kind)
    except ValueError:
        return None


class CsvIngestor:
    """Parses, validates and upserts one CSV upload against a RecordStore."""

    def __init__(
        self,
        store: RecordStore,
        promoters: dict[IngestKind, RecordPromoter] | None = None,
    ):
        self._store = store
        self._promoters = promoters or default_promoter_registry()

    def ingest(self, kind: IngestKind | str, raw_text: str) -> IngestResult:
        """
        Ingest one upload.

        Never raises for bad input or row failures; the caller always gets
        an IngestResult and must check both success and records_processed.
        """
        ingest_kind = _resolve_kind(kind)
        if ingest_kind is None:
            logger.warning("csv_ingest_rejected", extra={"reason": "invalid_type", "kind": str(kind)})
            return IngestResult.rejected(f"Invalid type '{kind}'. Must be 'kpi' or 'staff'")

        with LogContext.bind(
            correlation_id=str(uuid4()),
            producer="ingestion",
            batch_kind=ingest_kind.value,
        ):
            return self._ingest(ingest_kind, raw_text)

    def _ingest(self, kind: IngestKind, raw_text: str) -> IngestResult:
        document = parse_csv_text(raw_text)
        if document.is_empty:
            logger.warning("csv_ingest_rejected", extra={"reason": "empty"})
            return IngestResult.rejected(MSG_EMPTY)
        if not document.rows:
            logger.warning("csv_ingest_rejected", extra={"reason": "headers_only"})
            return IngestResult.rejected(MSG_HEADERS_ONLY)

        header_error = validate_header(kind, document.header)
        if header_error is not None:
            logger.warning(
                "csv_header_rejected",
                extra={"header": list(document.header), "error_msg": header_error},
            )
            return IngestResult.rejected(header_error)

        logger.info("csv_ingest_started", extra={"row_count": len(document.rows)})

        errors: list[str] = []
        processed = 0
        for row in document.rows:
            error = self._ingest_row(kind, row)
            if error is None:
                processed += 1
            else:
                errors.append(error)

        result = IngestResult(
            success=not errors,
            records_processed=processed,
            errors=tuple(errors),
        )
        logger.info(
            "csv_ingest_completed",
            extra={
                "records_processed": processed,
                "failed": len(errors),
                "success": result.success,
            },
        )
        return result

    def _ingest_row(self, kind: IngestKind, row: CsvRow) -> str | None:
        """Validate and upsert one row. Returns the row's error message, or None."""
        columns = EXPECTED_HEADERS[kind]

        shape_error = validate_column_count(row.cells, len(columns))
        if shape_error is not None:
            return self._reject(row, format_row_error(row.row_index, [shape_error]), "column_count")

        cells = row.as_dict(columns)
        missing = validate_required_cells(cells, columns)
        if missing:
            return self._reject(row, format_row_error(row.row_index, missing), "structure")

        validation = ROW_VALIDATORS[kind](cells)
        if not validation.is_valid:
            return self._reject(row, format_row_error(row.row_index, validation.errors), "validation")

        try:
            result = self._promoters[kind].promote(validation.record, self._store)
        except Exception as exc:
            logger.warning(
                "csv_row_store_failed",
                extra={"row_index": row.row_index, "error_msg": str(exc)},
                exc_info=True,
            )
            return f"Row {row.row_index}: Database error - {exc}"

        logger.debug(
            "csv_row_promoted",
            extra={
                "row_index": row.row_index,
                "action": result.action.value,
                "entity_id": result.entity_id,
            },
        )
        return None

    @staticmethod
    def _reject(row: CsvRow, message: str, stage: str) -> str:
        logger.info(
            "csv_row_rejected",
            extra={"row_index": row.row_index, "stage": stage, "error_msg": message},
        )
        return message
