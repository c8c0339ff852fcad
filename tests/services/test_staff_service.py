"""Tests for StaffService."""

import pytest

from metrics_kernel.domain.dtos import CreateStaffMemberInput, StaffStatus, StaffUpdate
from metrics_kernel.exceptions import InvalidInputError, StaffMemberNotFoundError
from metrics_kernel.services.staff_service import StaffService


def _naive(dt):
    # SQLite drops tzinfo on round trip
    return dt.replace(tzinfo=None)


@pytest.fixture
def staff_service(session, deterministic_clock):
    return StaffService(session, clock=deterministic_clock)


def _create(service, name="John Doe", position="Engineer", department="Production", **kwargs):
    return service.create_staff_member(
        CreateStaffMemberInput(name=name, position=position, department=department, **kwargs)
    )


class TestCreateStaffMember:
    def test_defaults_to_active(self, staff_service, deterministic_clock):
        member = _create(staff_service)

        assert member.id is not None
        assert member.status == StaffStatus.ACTIVE
        assert _naive(member.created_at) == _naive(deterministic_clock.now())
        assert _naive(member.updated_at) == _naive(deterministic_clock.now())

    def test_explicit_status(self, staff_service):
        member = _create(staff_service, status=StaffStatus.ON_VACATION)
        assert member.status == StaffStatus.ON_VACATION

    def test_empty_fields_rejected(self, staff_service):
        with pytest.raises(InvalidInputError) as exc_info:
            _create(staff_service, name="", position="")

        assert exc_info.value.entity == "staff_member"
        assert [e["field"] for e in exc_info.value.field_errors] == ["name", "position"]
        assert staff_service.get_staff_members() == []

    def test_duplicates_allowed_on_direct_create(self, staff_service):
        first = _create(staff_service)
        second = _create(staff_service, position="Lead")
        assert first.id != second.id
        assert staff_service.find_by_name_and_department("John Doe", "Production").id == first.id


class TestQueries:
    def test_list_ordered_by_name(self, staff_service):
        for name in ("Carol", "Alice", "Bob"):
            _create(staff_service, name=name)
        names = [m.name for m in staff_service.get_staff_members()]
        assert names == ["Alice", "Bob", "Carol"]

    def test_find_by_name_and_department(self, staff_service):
        production = _create(staff_service, department="Production")
        quality = _create(staff_service, department="Quality")

        assert staff_service.find_by_name_and_department("John Doe", "Production").id == production.id
        assert staff_service.find_by_name_and_department("John Doe", "Quality").id == quality.id
        assert staff_service.find_by_name_and_department("John Doe", "HR") is None
        assert staff_service.find_by_name_and_department("Jane Doe", "Production") is None


class TestUpdateStaffMember:
    def test_partial_update_refreshes_updated_at(self, staff_service, deterministic_clock):
        member = _create(staff_service)
        deterministic_clock.advance(2 * 24 * 3600)

        updated = staff_service.update_staff_member(
            member.id, StaffUpdate(position="Senior Engineer", status=StaffStatus.ON_VACATION)
        )

        assert updated.id == member.id
        assert updated.name == "John Doe"
        assert updated.department == "Production"
        assert updated.position == "Senior Engineer"
        assert updated.status == StaffStatus.ON_VACATION
        assert _naive(updated.updated_at) == _naive(deterministic_clock.now())
        assert _naive(updated.created_at) == _naive(member.created_at)

    def test_empty_update_only_touches_timestamp(self, staff_service, deterministic_clock):
        member = _create(staff_service)
        deterministic_clock.advance(300)

        updated = staff_service.update_staff_member(member.id, StaffUpdate())

        assert (updated.name, updated.position, updated.department) == (
            member.name,
            member.position,
            member.department,
        )
        assert _naive(updated.updated_at) > _naive(member.updated_at)

    def test_empty_text_rejected(self, staff_service):
        member = _create(staff_service)
        with pytest.raises(InvalidInputError):
            staff_service.update_staff_member(member.id, StaffUpdate(department=""))

    def test_unknown_id(self, staff_service):
        with pytest.raises(StaffMemberNotFoundError) as exc_info:
            staff_service.update_staff_member(404, StaffUpdate(position="x"))
        assert exc_info.value.staff_id == 404


class TestDeleteStaffMember:
    def test_delete(self, staff_service):
        member = _create(staff_service)
        assert staff_service.delete_staff_member(member.id) is True
        assert staff_service.get_staff_members() == []

    def test_delete_unknown(self, staff_service):
        with pytest.raises(StaffMemberNotFoundError):
            staff_service.delete_staff_member(12345)
