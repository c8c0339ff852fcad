"""
Module: metrics_kernel.models.staff_member
Responsibility: ORM persistence for the production staff roster.
Architecture position: Kernel > Models. May import from db/base.py and
    domain/dtos.py only.

Invariants enforced:
    - Surrogate identity is the integer id. The natural key used by CSV
      ingestion is (name, department); it is indexed but not unique, so
      direct creation through StaffService may still add a second row.
    - name, position and department are unbounded TEXT; the only rule on
      them is non-empty, checked by the services and the CSV validators.
    - status is the staff_status enum (active, on_vacation), default active.
    - updated_at is refreshed by StaffService on every update using the
      injected clock (server NOW() is only the insert default).
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum as SAEnum, Index, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from metrics_kernel.db.base import TrackedBase
from metrics_kernel.domain.dtos import StaffMember, StaffStatus


class StaffMemberModel(TrackedBase):
    """A person on the production staff roster."""

    __tablename__ = "staff_members"

    __table_args__ = (
        Index("ix_staff_members_name_department", "name", "department"),
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[str] = mapped_column(Text, nullable=False)
    department: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[StaffStatus] = mapped_column(
        SAEnum(
            StaffStatus,
            name="staff_status",
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
        default=StaffStatus.ACTIVE,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def to_dto(self) -> StaffMember:
        return StaffMember(
            id=self.id,
            name=self.name,
            position=self.position,
            department=self.department,
            status=StaffStatus(self.status),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        return f"<StaffMemberModel {self.name} ({self.department}): {self.status.value}>"
