"""Record stores consumed by the CSV ingestor."""

from metrics_ingestion.store.base import RecordStore
from metrics_ingestion.store.sql_store import SqlRecordStore

__all__ = [
    "RecordStore",
    "SqlRecordStore",
]
