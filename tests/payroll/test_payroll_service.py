from datetime import date

import pytest

from shop_payroll.advances.model import AdvanceDeduction
from shop_payroll.attendance.model import FullTimeAttendance, PartTimeAttendance
from shop_payroll.core.enums import AttendanceStatus, EmploymentType, Location, Shift
from shop_payroll.core.exceptions import MissingReferenceError, ValidationError
from shop_payroll.payroll.service import PayrollService

SUNDAYS = {3, 10, 17, 24, 31}


@pytest.fixture
def service(staff_repo, attendance_repo, advances_repo, staff_factory):
    staff_repo.add(staff_factory("s1"))
    staff_repo.add(staff_factory("s2", employment_type=EmploymentType.PART_TIME))
    staff_repo.add(staff_factory("s3", is_active=False))

    for day in range(1, 32):
        if day not in SUNDAYS:
            attendance_repo.add(
                FullTimeAttendance(staff_id="s1", work_date=date(2024, 3, day), status=AttendanceStatus.PRESENT)
            )
    attendance_repo.add(
        FullTimeAttendance(staff_id="s1", work_date=date(2024, 3, 10), status=AttendanceStatus.ABSENT),
        PartTimeAttendance(
            attendance_id="pt_1",
            staff_name="Ravi",
            work_date=date(2024, 3, 5),
            status=AttendanceStatus.PRESENT,
            shift=Shift.BOTH,
            location=Location.GODOWN,
        ),
    )
    advances_repo.upsert(
        AdvanceDeduction.open(staff_id="s1", month=2, year=2024, old_advance=1000, current_advance=2000, deduction=500)
    )
    return PayrollService(staff_repo, attendance_repo, advances_repo)


def test_monthly_salaries_cover_active_full_time_staff(service):
    details = service.monthly_salaries(2, 2024)

    assert [d.staff_id for d in details] == ["s1"]
    d = details[0]
    assert d.present_days == 26
    assert d.sunday_absents == 1
    assert d.sunday_penalty == 500
    assert d.gross_salary == 15000 + 9500 + 5000
    assert d.old_adv == 1000
    assert d.new_adv == 2500
    assert d.net_salary == 29500 - 2500


def test_salary_for_single_member(service):
    assert service.salary_for("s1", 2, 2024) == service.monthly_salaries(2, 2024)[0]
    with pytest.raises(MissingReferenceError):
        service.salary_for("nobody", 2, 2024)
    with pytest.raises(ValidationError):
        service.monthly_salaries(12, 2024)


def test_part_time_salaries(service):
    [ravi] = service.part_time_salaries(2, 2024)
    assert ravi.staff_name == "Ravi"
    assert ravi.location == "Godown"
    assert ravi.total_earnings == 1600


def test_location_summaries_cover_every_location(service):
    summaries = service.location_summaries(date(2024, 3, 5))
    assert [s.location for s in summaries] == list(Location)
    big, _, godown = summaries
    assert big.present == 1
    assert godown.present_names == ("Ravi (Both)",)


def test_location_summaries_keep_attendance_of_archived_staff(service, staff_repo, attendance_repo, caplog):
    attendance_repo.add(
        FullTimeAttendance(staff_id="s3", work_date=date(2024, 3, 5), status=AttendanceStatus.PRESENT)
    )

    with caplog.at_level("WARNING"):
        big = service.location_summaries(date(2024, 3, 5))[0]

    assert big.present == 2
    assert big.present_names == ("Staff s1", "Staff s3")
    assert big.total == 2
    assert "unknown staff id" not in caplog.text
