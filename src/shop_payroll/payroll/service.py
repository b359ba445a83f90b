from __future__ import annotations

from datetime import date
from typing import Optional

from ..advances.carry_forward import find_advance
from ..advances.repository import AdvanceRepository
from ..attendance.metrics import calculate_attendance_metrics
from ..attendance.repository import AttendanceRepository
from ..attendance.summary import LocationAttendanceSummary, summarize_location_attendance
from ..common.datetime_utils import require_month, require_year
from ..core.enums import EmploymentType, Location
from ..core.exceptions import MissingReferenceError
from ..staff.model import StaffMember
from ..staff.repository import StaffRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import PartTimeSalaryDetail, SalaryDetail
from .part_time import calculate_part_time_salary, part_time_staff_for_month
from .rates import RateTable


class PayrollService:
    """Read side: settlements, part-time earnings and dashboard rollups."""

    def __init__(
        self,
        staff: StaffRepository,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
        rates: Optional[RateTable] = None,
    ):
        self._staff = staff
        self._attendance = attendance
        self._advances = advances
        self._calculator = calculator or StandardSalaryCalculator()
        self._rates = rates or RateTable()

    def _settle(self, member: StaffMember, attendance, advances, month: int, year: int) -> SalaryDetail:
        metrics = calculate_attendance_metrics(member.staff_id, attendance, year, month)
        current = find_advance(member.staff_id, advances, month, year)
        return self._calculator.calculate(member, metrics, current, advances, month, year)

    def monthly_salaries(self, month: int, year: int) -> list[SalaryDetail]:
        require_month(month)
        require_year(year)
        attendance = self._attendance.list_for_month(year=year, month=month)
        advances = self._advances.list_all()
        return [
            self._settle(member, attendance, advances, month, year)
            for member in self._staff.list_all()
            if member.is_active and member.employment_type == EmploymentType.FULL_TIME
        ]

    def salary_for(self, staff_id: str, month: int, year: int) -> SalaryDetail:
        member = self._staff.get_by_id(staff_id)
        if not member:
            raise MissingReferenceError(f"Staff {staff_id!r} does not exist")
        require_month(month)
        require_year(year)
        attendance = self._attendance.list_for_month(year=year, month=month)
        return self._settle(member, attendance, self._advances.list_for_staff(staff_id), month, year)

    def part_time_salaries(self, month: int, year: int) -> list[PartTimeSalaryDetail]:
        require_month(month)
        require_year(year)
        attendance = self._attendance.list_for_month(year=year, month=month)
        return [
            calculate_part_time_salary(name, location, attendance, year, month, self._rates)
            for name, location in part_time_staff_for_month(attendance, year, month).items()
        ]

    def location_summaries(self, on_date: date) -> list[LocationAttendanceSummary]:
        staff = self._staff.list_all()
        attendance = self._attendance.list_for_date(on_date)
        return [summarize_location_attendance(staff, attendance, on_date, loc) for loc in Location]
