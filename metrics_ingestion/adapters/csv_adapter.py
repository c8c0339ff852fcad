"""
CSV text adapter.

Splits uploaded text on newlines and commas. No quoting or escaping: a
comma always separates cells and a newline always ends a row. Every cell is
whitespace-trimmed, which also drops the carriage return of CRLF input.
"""

from __future__ import annotations

from pathlib import Path

from metrics_ingestion.adapters.base import CsvDocument, CsvRow, SourceProbe

DELIMITER = ","
_SAMPLE_SIZE = 5


def _get_encoding(encoding: str) -> str:
    if encoding.lower() == "utf-8":
        return "utf-8-sig"  # Strip BOM if present
    return encoding


def _split_cells(line: str) -> tuple[str, ...]:
    return tuple(cell.strip() for cell in line.split(DELIMITER))


def parse_csv_text(raw_text: str) -> CsvDocument:
    """
    Parse raw upload text into a header and data rows.

    Returns CsvDocument.empty() when the text is blank after trimming. A
    document with a header but no rows is returned as-is; callers decide
    whether that is an error.
    """
    text = raw_text.strip()
    if not text:
        return CsvDocument.empty()

    lines = text.split("\n")
    header = _split_cells(lines[0])
    # Data row n sits on line n + 1
    rows = tuple(
        CsvRow(row_index=number + 1, cells=_split_cells(line))
        for number, line in enumerate(lines[1:], start=1)
    )
    return CsvDocument(header=header, rows=rows)


def read_source_text(source_path: Path, encoding: str = "utf-8") -> str:
    """Read a CSV file as text, stripping a UTF-8 BOM if present."""
    with source_path.open("r", encoding=_get_encoding(encoding), newline="") as f:
        return f.read()


def probe(raw_text: str) -> SourceProbe:
    """Quick probe: data row count, header columns, first rows keyed by header."""
    document = parse_csv_text(raw_text)
    sample = tuple(row.as_dict(document.header) for row in document.rows[:_SAMPLE_SIZE])
    return SourceProbe(
        row_count=len(document.rows),
        columns=document.header,
        sample_rows=sample,
        detected_delimiter=DELIMITER,
    )
