"""
Module: metrics_kernel.models.kpi_data
Responsibility: ORM persistence for weekly production KPI samples.
Architecture position: Kernel > Models. May import from db/base.py and
    domain/dtos.py only. MUST NOT import from services/ or outer layers.

Invariants enforced:
    - week_date is the natural key: uq_kpi_data_week_date allows at most one
      sample per week.
    - Numeric columns keep two decimal places (efficiency NUMERIC(5, 2),
      production_rate and defects_ppm NUMERIC(10, 2)) and load as float.

Failure modes:
    - IntegrityError on a second INSERT for the same week_date. Ingestion
      avoids this by looking the week up first and updating in place.
"""

from datetime import date

from sqlalchemy import Date, Numeric, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from metrics_kernel.db.base import TrackedBase
from metrics_kernel.domain.dtos import KpiData


class KpiDataModel(TrackedBase):
    """One week of production KPIs."""

    __tablename__ = "kpi_data"

    __table_args__ = (
        UniqueConstraint("week_date", name="uq_kpi_data_week_date"),
    )

    # Start date of the week
    week_date: Mapped[date] = mapped_column(Date, nullable=False)
    # Percentage 0-100
    efficiency: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=False)
    # Units per hour
    production_rate: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    defects_ppm: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)

    def to_dto(self) -> KpiData:
        return KpiData(
            id=self.id,
            week_date=self.week_date,
            efficiency=float(self.efficiency),
            production_rate=float(self.production_rate),
            defects_ppm=float(self.defects_ppm),
            created_at=self.created_at,
        )

    def __repr__(self) -> str:
        return f"<KpiDataModel {self.week_date}: eff={self.efficiency}>"
