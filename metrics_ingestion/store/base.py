"""
RecordStore protocol: the persistence seam consumed by CsvIngestor.

Contract:
    find_* return a DTO or None; insert_* and update_* return the stored DTO
    and raise on failure. The store owns ids and timestamps; callers submit
    field values only.

Architecture: metrics_ingestion/store. Implementations may do I/O; the
protocol itself imports only kernel DTOs.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable

from metrics_kernel.domain.dtos import KpiData, KpiUpdate, StaffMember, StaffUpdate

from metrics_ingestion.domain.types import KpiSample, StaffRecord


@runtime_checkable
class RecordStore(Protocol):
    """Natural-key lookups plus insert/update for both record kinds."""

    def find_kpi_by_week_date(self, week_date: date) -> KpiData | None:
        ...

    def insert_kpi(self, sample: KpiSample) -> KpiData:
        ...

    def update_kpi(self, kpi_id: int, update: KpiUpdate) -> KpiData:
        ...

    def find_staff_by_name_and_department(self, name: str, department: str) -> StaffMember | None:
        ...

    def insert_staff(self, record: StaffRecord) -> StaffMember:
        ...

    def update_staff(self, staff_id: int, update: StaffUpdate) -> StaffMember:
        ...
