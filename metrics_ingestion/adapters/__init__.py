"""Source adapters for CSV ingestion (text and file I/O only, no DB)."""

from metrics_ingestion.adapters.base import CsvDocument, CsvRow, SourceProbe
from metrics_ingestion.adapters.csv_adapter import parse_csv_text, probe, read_source_text

__all__ = [
    "CsvDocument",
    "CsvRow",
    "SourceProbe",
    "parse_csv_text",
    "probe",
    "read_source_text",
]
