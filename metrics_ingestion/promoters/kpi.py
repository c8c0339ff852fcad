"""KPI promoter: upsert a KpiSample by week_date."""

from __future__ import annotations

from metrics_kernel.domain.dtos import KpiUpdate

from metrics_ingestion.domain.types import KpiSample
from metrics_ingestion.promoters.base import PromoteAction, PromoteResult
from metrics_ingestion.store.base import RecordStore


class KpiPromoter:
    """Existing week: overwrite the three numbers, keep week_date. New week: insert."""

    entity_type: str = "kpi"

    def promote(self, record: KpiSample, store: RecordStore) -> PromoteResult:
        existing = store.find_kpi_by_week_date(record.week_date)
        if existing is not None:
            updated = store.update_kpi(
                existing.id,
                KpiUpdate(
                    efficiency=record.efficiency,
                    production_rate=record.production_rate,
                    defects_ppm=record.defects_ppm,
                ),
            )
            return PromoteResult(action=PromoteAction.UPDATED, entity_id=updated.id)
        created = store.insert_kpi(record)
        return PromoteResult(action=PromoteAction.INSERTED, entity_id=created.id)
