"""
Service layer for weekly KPI samples.

Returns KpiData DTOs instead of ORM entities.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import select

from metrics_kernel.domain.dtos import (
    CreateKpiDataInput,
    DateRangeQuery,
    KpiData,
    KpiUpdate,
)
from metrics_kernel.domain.validation import check_kpi_fields, validate_kpi_values
from metrics_kernel.exceptions import InvalidInputError, KpiDataNotFoundError
from metrics_kernel.logging_config import get_logger
from metrics_kernel.models.kpi_data import KpiDataModel
from metrics_kernel.services.base import BaseService

logger = get_logger("services.kpi")


def _raise_if_invalid(errors) -> None:
    if errors:
        raise InvalidInputError(
            "kpi_data",
            [{"field": e.field, "code": e.code, "message": e.message} for e in errors],
        )


class KpiService(BaseService[KpiDataModel]):
    """
    Service for weekly KPI samples.

    Bounds are checked here as well as in CSV ingestion so that direct
    creation cannot store an out-of-range efficiency.
    """

    def _get_by_id(self, kpi_id: int) -> KpiDataModel:
        kpi = self.session.get(KpiDataModel, kpi_id)
        if kpi is None:
            raise KpiDataNotFoundError(kpi_id)
        return kpi

    def create_kpi_data(self, data: CreateKpiDataInput) -> KpiData:
        """
        Insert a KPI sample.

        Raises:
            InvalidInputError: If a numeric field is out of range.
        """
        _raise_if_invalid(
            validate_kpi_values(data.efficiency, data.production_rate, data.defects_ppm)
        )
        kpi = KpiDataModel(
            week_date=data.week_date,
            efficiency=data.efficiency,
            production_rate=data.production_rate,
            defects_ppm=data.defects_ppm,
        )
        self.session.add(kpi)
        self.session.flush()
        logger.info("kpi_created", extra={"kpi_id": kpi.id, "week_date": data.week_date})
        return kpi.to_dto()

    def get_kpi_data(self, query: DateRangeQuery | None = None) -> list[KpiData]:
        """All samples ordered by week_date, optionally within inclusive bounds."""
        stmt = select(KpiDataModel)
        if query is not None and query.start_date is not None:
            stmt = stmt.where(KpiDataModel.week_date >= query.start_date)
        if query is not None and query.end_date is not None:
            stmt = stmt.where(KpiDataModel.week_date <= query.end_date)
        stmt = stmt.order_by(KpiDataModel.week_date.asc())
        return [k.to_dto() for k in self.session.scalars(stmt)]

    def get_by_week_date(self, week_date: date) -> KpiData | None:
        stmt = select(KpiDataModel).where(KpiDataModel.week_date == week_date)
        kpi = self.session.scalars(stmt).first()
        return kpi.to_dto() if kpi else None

    def update_kpi_data(self, kpi_id: int, update: KpiUpdate) -> KpiData:
        """
        Apply the supplied numeric fields; week_date never changes.

        Raises:
            KpiDataNotFoundError: If kpi_id doesn't exist.
            InvalidInputError: If a supplied value is out of range.
        """
        changes = update.changed_fields()
        _raise_if_invalid(check_kpi_fields(changes))

        kpi = self._get_by_id(kpi_id)
        for field_name, value in changes.items():
            setattr(kpi, field_name, value)
        self.session.flush()
        logger.info(
            "kpi_updated",
            extra={"kpi_id": kpi_id, "fields": sorted(changes)},
        )
        return kpi.to_dto()
