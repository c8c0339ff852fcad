"""
Parsed CSV document and probe DTOs.

Contract:
    CsvDocument holds the trimmed header cells and one CsvRow per data line.
    SourceProbe is a quick snapshot of a document: row count, columns,
    sample rows.

Architecture: metrics_ingestion/adapters. Text and file I/O only, no DB.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CsvRow:
    """One data line. row_index is the 1-based line number (header is line 1)."""

    row_index: int
    cells: tuple[str, ...]

    def as_dict(self, columns: tuple[str, ...]) -> dict[str, str]:
        return dict(zip(columns, self.cells))


@dataclass(frozen=True)
class CsvDocument:
    header: tuple[str, ...]
    rows: tuple[CsvRow, ...]
    is_empty: bool = False

    @classmethod
    def empty(cls) -> CsvDocument:
        return cls(header=(), rows=(), is_empty=True)


@dataclass(frozen=True)
class SourceProbe:
    """Result of probing a source document (row count, columns, first N rows)."""

    row_count: int
    columns: tuple[str, ...]
    sample_rows: tuple[dict[str, str], ...]  # First 5 rows; do not mutate
    detected_delimiter: str | None = None
