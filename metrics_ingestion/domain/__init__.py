"""
metrics_ingestion.domain -- Pure types and validators for CSV ingestion.

ZERO I/O. Imports only from metrics_kernel/domain/.
"""

from metrics_ingestion.domain.types import (
    EXPECTED_HEADERS,
    IngestKind,
    IngestResult,
    KpiSample,
    RowValidation,
    StaffRecord,
)

__all__ = [
    "EXPECTED_HEADERS",
    "IngestKind",
    "IngestResult",
    "KpiSample",
    "RowValidation",
    "StaffRecord",
]
