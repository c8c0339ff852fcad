"""
SQLAlchemy RecordStore backed by the kernel services.

Every write runs inside its own SAVEPOINT (Session.begin_nested()), so a
failed row rolls back alone while earlier rows stay in the caller's
transaction. The store flushes but never commits; the caller owns the outer
transaction (see metrics_kernel.db.engine.session_scope).
"""

from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Session

from metrics_kernel.domain.clock import Clock, SystemClock
from metrics_kernel.domain.dtos import (
    CreateKpiDataInput,
    CreateStaffMemberInput,
    KpiData,
    KpiUpdate,
    StaffMember,
    StaffUpdate,
)
from metrics_kernel.services.kpi_service import KpiService
from metrics_kernel.services.staff_service import StaffService

from metrics_ingestion.domain.types import KpiSample, StaffRecord


class SqlRecordStore:
    """RecordStore over a caller-owned Session."""

    def __init__(self, session: Session, clock: Clock | None = None):
        self._session = session
        self._kpis = KpiService(session)
        self._staff = StaffService(session, clock or SystemClock())

    def find_kpi_by_week_date(self, week_date: date) -> KpiData | None:
        return self._kpis.get_by_week_date(week_date)

    def insert_kpi(self, sample: KpiSample) -> KpiData:
        with self._session.begin_nested():
            return self._kpis.create_kpi_data(
                CreateKpiDataInput(
                    week_date=sample.week_date,
                    efficiency=sample.efficiency,
                    production_rate=sample.production_rate,
                    defects_ppm=sample.defects_ppm,
                )
            )

    def update_kpi(self, kpi_id: int, update: KpiUpdate) -> KpiData:
        with self._session.begin_nested():
            return self._kpis.update_kpi_data(kpi_id, update)

    def find_staff_by_name_and_department(self, name: str, department: str) -> StaffMember | None:
        return self._staff.find_by_name_and_department(name, department)

    def insert_staff(self, record: StaffRecord) -> StaffMember:
        with self._session.begin_nested():
            return self._staff.create_staff_member(
                CreateStaffMemberInput(
                    name=record.name,
                    position=record.position,
                    department=record.department,
                    status=record.status,
                )
            )

    def update_staff(self, staff_id: int, update: StaffUpdate) -> StaffMember:
        with self._session.begin_nested():
            return self._staff.update_staff_member(staff_id, update)
