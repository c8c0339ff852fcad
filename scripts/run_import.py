#!/usr/bin/env python3
"""
Ingest a KPI or staff CSV file into the metrics database.

Valid rows are upserted by natural key (week_date for KPIs, name +
department for staff); invalid rows are reported and skipped.

Usage:
    python3 scripts/run_import.py --kind <kpi|staff> --file <path> [options]

Examples:
    # Weekly KPIs into the configured database
    python3 scripts/run_import.py --kind kpi --file weekly_kpis.csv

    # Staff roster into a local SQLite file, creating tables first
    python3 scripts/run_import.py --kind staff --file roster.csv \\
        --db-url sqlite:///metrics.db --create-tables

    # Show row count, columns and sample rows without touching the database
    python3 scripts/run_import.py --kind kpi --file weekly_kpis.csv --probe-only
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Project root on sys.path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

_MAX_PRINTED_ERRORS = 20


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Ingest a KPI or staff CSV file: validate rows and upsert by natural key.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--kind",
        required=True,
        choices=("kpi", "staff"),
        help="Record kind in the file.",
    )
    parser.add_argument(
        "--file",
        required=True,
        type=Path,
        help="Path to the CSV file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings YAML (default: metrics_config/sets/default.yaml).",
    )
    parser.add_argument(
        "--db-url",
        default=None,
        help="Database URL; overrides the settings file and METRICS_DATABASE_URL.",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create kpi_data and staff_members if they do not exist.",
    )
    parser.add_argument(
        "--probe-only",
        action="store_true",
        help="Print row count, columns and sample rows, then exit. No DB access.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    source_path = args.file.resolve()
    if not source_path.is_file():
        print(f"ERROR: File not found: {source_path}", file=sys.stderr)
        return 1

    # Lazy imports so we fail fast on args first
    from metrics_config import get_active_config
    from metrics_ingestion.adapters import probe, read_source_text
    from metrics_ingestion.services import CsvIngestor
    from metrics_ingestion.store import SqlRecordStore
    from metrics_kernel.db.engine import create_tables, init_engine_from_url, session_scope
    from metrics_kernel.logging_config import configure_logging

    text = read_source_text(source_path)

    if args.probe_only:
        result = probe(text)
        print(f"Rows: {result.row_count}")
        print(f"Columns: {list(result.columns)}")
        print("Sample (first 3):")
        for i, row in enumerate(result.sample_rows[:3], 1):
            print(f"  {i}: {row}")
        return 0

    try:
        config = get_active_config(args.config)
    except Exception as e:
        print(f"ERROR: Failed to load config: {e}", file=sys.stderr)
        return 1

    configure_logging(level=config.logging.level)
    db_url = args.db_url or config.database.url
    try:
        init_engine_from_url(
            db_url,
            echo=config.database.echo,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
        )
        if args.create_tables:
            create_tables()
    except Exception as e:
        print(f"ERROR: Database init failed: {e}", file=sys.stderr)
        return 1

    print(f"Ingesting {source_path} as {args.kind}...")
    with session_scope() as session:
        result = CsvIngestor(SqlRecordStore(session)).ingest(args.kind, text)

    print(f"  Records processed: {result.records_processed}")
    if result.errors:
        print(f"  Errors: {len(result.errors)}")
        for message in result.errors[:_MAX_PRINTED_ERRORS]:
            print(f"    {message}")
        if len(result.errors) > _MAX_PRINTED_ERRORS:
            print(f"    ... and {len(result.errors) - _MAX_PRINTED_ERRORS} more.")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
