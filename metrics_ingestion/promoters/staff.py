"""Staff promoter: upsert a StaffRecord by (name, department)."""

from __future__ import annotations

from metrics_kernel.domain.dtos import StaffUpdate

from metrics_ingestion.domain.types import StaffRecord
from metrics_ingestion.promoters.base import PromoteAction, PromoteResult
from metrics_ingestion.store.base import RecordStore


class StaffPromoter:
    """
    Same name in the same department: update position and status.

    Same name in another department is a different person and gets its own
    row. name and department are never rewritten by an upsert.
    """

    entity_type: str = "staff"

    def promote(self, record: StaffRecord, store: RecordStore) -> PromoteResult:
        existing = store.find_staff_by_name_and_department(record.name, record.department)
        if existing is not None:
            updated = store.update_staff(
                existing.id,
                StaffUpdate(position=record.position, status=record.status),
            )
            return PromoteResult(action=PromoteAction.UPDATED, entity_id=updated.id)
        created = store.insert_staff(record)
        return PromoteResult(action=PromoteAction.INSERTED, entity_id=created.id)
