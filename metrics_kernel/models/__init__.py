"""ORM models for the metrics kernel."""

from metrics_kernel.models.kpi_data import KpiDataModel
from metrics_kernel.models.staff_member import StaffMemberModel

__all__ = [
    "KpiDataModel",
    "StaffMemberModel",
]
