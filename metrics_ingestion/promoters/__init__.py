"""Record promoters: validated CSV record -> store upsert."""

from metrics_ingestion.domain.types import IngestKind
from metrics_ingestion.promoters.base import PromoteAction, PromoteResult, RecordPromoter
from metrics_ingestion.promoters.kpi import KpiPromoter
from metrics_ingestion.promoters.staff import StaffPromoter


def default_promoter_registry() -> dict[IngestKind, RecordPromoter]:
    """Return a dict of kind -> promoter for both record kinds."""
    return {
        IngestKind.KPI: KpiPromoter(),
        IngestKind.STAFF: StaffPromoter(),
    }


__all__ = [
    "PromoteAction",
    "PromoteResult",
    "RecordPromoter",
    "KpiPromoter",
    "StaffPromoter",
    "default_promoter_registry",
]
