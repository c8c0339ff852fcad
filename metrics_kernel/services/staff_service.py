"""
Service layer for the staff roster.

Returns StaffMember DTOs instead of ORM entities. Updates take an explicit
StaffUpdate so only supplied fields change; updated_at always moves to the
injected clock's now().
"""

from __future__ import annotations

from sqlalchemy import select

from metrics_kernel.domain.clock import Clock, SystemClock
from metrics_kernel.domain.dtos import (
    CreateStaffMemberInput,
    StaffMember,
    StaffUpdate,
)
from metrics_kernel.domain.validation import check_non_empty, validate_staff_values
from metrics_kernel.exceptions import InvalidInputError, StaffMemberNotFoundError
from metrics_kernel.logging_config import get_logger
from metrics_kernel.models.staff_member import StaffMemberModel
from metrics_kernel.services.base import BaseService

logger = get_logger("services.staff")


def _raise_if_invalid(errors) -> None:
    if errors:
        raise InvalidInputError(
            "staff_member",
            [{"field": e.field, "code": e.code, "message": e.message} for e in errors],
        )


class StaffService(BaseService[StaffMemberModel]):
    """Service for managing staff members."""

    def __init__(self, session, clock: Clock | None = None):
        super().__init__(session)
        self._clock = clock or SystemClock()

    def _get_by_id(self, staff_id: int) -> StaffMemberModel:
        staff = self.session.get(StaffMemberModel, staff_id)
        if staff is None:
            raise StaffMemberNotFoundError(staff_id)
        return staff

    def create_staff_member(self, data: CreateStaffMemberInput) -> StaffMember:
        """
        Add a staff member.

        Raises:
            InvalidInputError: If name, position or department is empty.
        """
        _raise_if_invalid(validate_staff_values(data.name, data.position, data.department))
        now = self._clock.now()
        staff = StaffMemberModel(
            name=data.name,
            position=data.position,
            department=data.department,
            status=data.status,
            created_at=now,
            updated_at=now,
        )
        self.session.add(staff)
        self.session.flush()
        logger.info(
            "staff_created",
            extra={"staff_id": staff.id, "department": data.department},
        )
        return staff.to_dto()

    def get_staff_members(self) -> list[StaffMember]:
        """All staff members ordered by name."""
        stmt = select(StaffMemberModel).order_by(StaffMemberModel.name.asc(), StaffMemberModel.id.asc())
        return [s.to_dto() for s in self.session.scalars(stmt)]

    def find_by_name_and_department(self, name: str, department: str) -> StaffMember | None:
        """
        Natural-key lookup: rows with this name, narrowed to the department.

        Returns the oldest match when direct creation has left duplicates.
        """
        stmt = (
            select(StaffMemberModel)
            .where(StaffMemberModel.name == name)
            .order_by(StaffMemberModel.id.asc())
        )
        for staff in self.session.scalars(stmt):
            if staff.department == department:
                return staff.to_dto()
        return None

    def update_staff_member(self, staff_id: int, update: StaffUpdate) -> StaffMember:
        """
        Apply the supplied fields and refresh updated_at.

        Raises:
            StaffMemberNotFoundError: If staff_id doesn't exist.
            InvalidInputError: If a supplied text field is empty.
        """
        changes = update.changed_fields()
        errors = []
        for field_name in ("name", "position", "department"):
            if field_name in changes:
                errors.extend(check_non_empty(field_name, changes[field_name]))
        _raise_if_invalid(errors)

        staff = self._get_by_id(staff_id)
        for field_name, value in changes.items():
            setattr(staff, field_name, value)
        staff.updated_at = self._clock.now()
        self.session.flush()
        logger.info(
            "staff_updated",
            extra={"staff_id": staff_id, "fields": sorted(changes)},
        )
        return staff.to_dto()

    def delete_staff_member(self, staff_id: int) -> bool:
        """
        Remove a staff member.

        Raises:
            StaffMemberNotFoundError: If staff_id doesn't exist.
        """
        staff = self._get_by_id(staff_id)
        self.session.delete(staff)
        self.session.flush()
        logger.info("staff_deleted", extra={"staff_id": staff_id})
        return True
