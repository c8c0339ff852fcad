"""Ingestion services: CSV upload -> validated upserts."""

from metrics_ingestion.services.csv_ingestor import CsvIngestor

__all__ = [
    "CsvIngestor",
]
