from datetime import date
from itertools import count

import pytest

from shop_payroll.attendance.service import AttendanceService
from shop_payroll.core.enums import AttendanceStatus, Shift
from shop_payroll.core.exceptions import MissingReferenceError, ValidationError


@pytest.fixture
def service(attendance_repo, staff_repo, staff_factory):
    staff_repo.add(staff_factory("s1"))
    staff_repo.add(staff_factory("s2"))
    staff_repo.add(staff_factory("s3", is_active=False))
    ids = count(1)
    return AttendanceService(attendance_repo, staff_repo, id_factory=lambda: f"pt_{next(ids)}")


def test_mark_full_time_keeps_one_record_per_day(service, attendance_repo):
    service.mark_full_time("s1", "2024-03-05", "Present")
    rec = service.mark_full_time("s1", "2024-03-05", "Half Day")

    assert rec.attendance_value == 0.5
    day_records = attendance_repo.list_for_date(date(2024, 3, 5))
    assert len(day_records) == 1
    assert day_records[0].status is AttendanceStatus.HALF_DAY


def test_mark_full_time_unknown_staff(service):
    with pytest.raises(MissingReferenceError):
        service.mark_full_time("nobody", "2024-03-05", "Present")


def test_mark_full_time_rejects_bad_status(service):
    with pytest.raises(ValidationError):
        service.mark_full_time("s1", "2024-03-05", "Late")


def test_bulk_mark_only_touches_active_staff(service):
    records = service.bulk_mark("2024-03-05", "Present")
    assert sorted(r.staff_id for r in records) == ["s1", "s2"]


def test_add_part_time_entry_uses_rate_table(service):
    sunday = service.add_part_time_entry(staff_name="Ravi", work_date="2024-03-03", shift="Both", location="Godown")
    weekday = service.add_part_time_entry(
        staff_name="Ravi", work_date="2024-03-04", shift="Morning", location="Godown"
    )

    assert sunday.attendance_id == "pt_1"
    assert sunday.salary == 800 + 2 * 400
    assert sunday.salary_override is False
    assert weekday.shift is Shift.MORNING
    assert weekday.salary == 400


def test_override_and_delete_part_time_entry(service, attendance_repo):
    entry = service.add_part_time_entry(staff_name="Ravi", work_date="2024-03-04", shift="Both", location="Godown")

    updated = service.override_part_time_salary(entry.attendance_id, 500)
    assert updated.salary == 500
    assert updated.salary_override is True
    assert attendance_repo.get_part_time(entry.attendance_id).salary == 500

    service.delete_part_time_entry(entry.attendance_id)
    assert attendance_repo.get_part_time(entry.attendance_id) is None
    with pytest.raises(MissingReferenceError):
        service.delete_part_time_entry(entry.attendance_id)


def test_part_time_entry_requires_known_shift(service):
    with pytest.raises(ValidationError):
        service.add_part_time_entry(staff_name="Ravi", work_date="2024-03-04", shift="Night", location="Godown")
