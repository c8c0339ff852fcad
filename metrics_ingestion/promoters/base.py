"""
RecordPromoter protocol and PromoteResult.

A promoter reconciles one validated record against the RecordStore by its
natural key: update in place when a match exists, insert otherwise. Store
exceptions propagate; CsvIngestor turns them into row errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from metrics_ingestion.store.base import RecordStore


class PromoteAction(str, Enum):
    INSERTED = "inserted"
    UPDATED = "updated"


@dataclass(frozen=True)
class PromoteResult:
    """Result of a single promotion."""

    action: PromoteAction
    entity_id: int


class RecordPromoter(Protocol):
    """Protocol for upserting one validated record."""

    @property
    def entity_type(self) -> str:
        """Entity type this promoter handles ('kpi' or 'staff')."""
        ...

    def promote(self, record: Any, store: RecordStore) -> PromoteResult:
        """Upsert by natural key. Raises whatever the store raises."""
        ...
