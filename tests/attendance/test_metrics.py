from datetime import date

import pytest

from shop_payroll.attendance.metrics import calculate_attendance_metrics
from shop_payroll.attendance.model import FullTimeAttendance, PartTimeAttendance
from shop_payroll.core.enums import AttendanceStatus, Location, Shift

PRESENT_DAYS = [1, 2, 4, 5, 6, 7, 8, 9, 12, 13, 14, 15, 16, 18, 19, 20, 21, 22, 23, 25]


def _march(staff_id, day, status):
    return FullTimeAttendance(staff_id=staff_id, work_date=date(2024, 3, day), status=status)


@pytest.fixture
def march_records():
    records = [_march("s1", d, AttendanceStatus.PRESENT) for d in PRESENT_DAYS]
    records += [_march("s1", d, AttendanceStatus.HALF_DAY) for d in (26, 27, 28)]
    records += [
        _march("s1", 10, AttendanceStatus.ABSENT),  # Sunday
        _march("s1", 11, AttendanceStatus.ABSENT),
        _march("s2", 1, AttendanceStatus.PRESENT),
        FullTimeAttendance(staff_id="s1", work_date=date(2024, 4, 1), status=AttendanceStatus.PRESENT),
        PartTimeAttendance(
            staff_name="s1",
            work_date=date(2024, 3, 29),
            status=AttendanceStatus.PRESENT,
            shift=Shift.BOTH,
            location=Location.GODOWN,
        ),
    ]
    return records


def test_metrics_for_month(march_records):
    m = calculate_attendance_metrics("s1", march_records, 2024, 2)

    assert m.present_days == 20
    assert m.half_days == 3
    assert m.total_present_days == 21.5
    assert m.sunday_absents == 1
    assert m.days_in_month == 31
    assert m.leave_days == 31 - 21


def test_metrics_are_stable_across_calls(march_records):
    first = calculate_attendance_metrics("s1", march_records, 2024, 2)
    second = calculate_attendance_metrics("s1", march_records, 2024, 2)
    assert first == second


def test_no_records_means_whole_month_on_leave():
    m = calculate_attendance_metrics("s1", [], 2024, 1)
    assert m.total_present_days == 0
    assert m.leave_days == 29
    assert m.sunday_absents == 0


def test_record_derives_value_and_sunday_flag():
    rec = FullTimeAttendance(staff_id="s1", work_date=date(2024, 3, 3), status="Half Day")
    assert rec.status is AttendanceStatus.HALF_DAY
    assert rec.attendance_value == 0.5
    assert rec.is_sunday is True
    assert rec.is_part_time is False
