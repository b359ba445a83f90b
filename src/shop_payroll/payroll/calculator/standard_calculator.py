from __future__ import annotations

from typing import Optional, Sequence

from ...advances.carry_forward import previous_month_advance
from ...advances.model import AdvanceDeduction, closing_balance
from ...attendance.metrics import AttendanceMetrics
from ...common.datetime_utils import require_month, require_year
from ...common.money import round_to_nearest_10
from ...core.constants import NEAR_FULL_MONTH_DAYS, STANDARD_WORKING_DAYS, SUNDAY_ABSENCE_PENALTY
from ...core.enums import HraPolicy
from ...core.exceptions import ValidationError
from ...staff.model import StaffMember
from ..model import SalaryDetail
from .base import SalaryCalculator


def _pro_rated(amount: int, present_days: float) -> int:
    return round_to_nearest_10(amount / STANDARD_WORKING_DAYS * present_days)


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule for full-time staff.

    Attendance tiers on the fractional present-day total (baseline 26):
    exactly 26 pays every component in full; 25 up to 26 pro-rates basic only;
    below 25 pro-rates basic and incentive. HRA follows ``hra_policy`` in the
    lowest tier (paid in full by default). Each Sunday absence then costs
    ``sunday_penalty`` out of the incentive, never more than the incentive
    itself.
    """

    def __init__(self, *, hra_policy: HraPolicy = HraPolicy.FULL, sunday_penalty: int = SUNDAY_ABSENCE_PENALTY):
        self._hra_policy = HraPolicy(hra_policy)
        self._sunday_penalty = int(sunday_penalty)

    def calculate(
        self,
        staff: StaffMember,
        metrics: AttendanceMetrics,
        advance: Optional[AdvanceDeduction],
        all_advances: Sequence[AdvanceDeduction],
        month: int,
        year: int,
    ) -> SalaryDetail:
        require_month(month)
        require_year(year)
        if metrics.staff_id != staff.staff_id or (metrics.month, metrics.year) != (month, year):
            raise ValidationError("Attendance metrics do not belong to this staff member and month")
        if advance is not None and (advance.staff_id, advance.month, advance.year) != (staff.staff_id, month, year):
            raise ValidationError("Advance record does not belong to this staff member and month")

        basic, incentive, hra = self._earned_components(staff, metrics.total_present_days)
        incentive, penalty = self._apply_sunday_penalty(incentive, metrics.sunday_absents)
        gross = round_to_nearest_10(basic + incentive + hra)

        if advance is not None:
            # Zero opening balance carries forward from the previous month.
            old_adv = advance.old_advance or previous_month_advance(staff.staff_id, all_advances, month, year)
            cur_adv = advance.current_advance
            deduction = advance.deduction
        else:
            old_adv = previous_month_advance(staff.staff_id, all_advances, month, year)
            cur_adv = 0
            deduction = 0

        return SalaryDetail(
            staff_id=staff.staff_id,
            month=month,
            year=year,
            present_days=metrics.present_days,
            half_days=metrics.half_days,
            leave_days=metrics.leave_days,
            sunday_absents=metrics.sunday_absents,
            old_adv=round_to_nearest_10(old_adv),
            cur_adv=round_to_nearest_10(cur_adv),
            deduction=round_to_nearest_10(deduction),
            basic_earned=round_to_nearest_10(basic),
            incentive_earned=round_to_nearest_10(incentive),
            hra_earned=round_to_nearest_10(hra),
            sunday_penalty=round_to_nearest_10(penalty),
            gross_salary=gross,
            new_adv=closing_balance(old_adv, cur_adv, deduction),
            net_salary=max(0, round_to_nearest_10(gross - cur_adv - deduction)),
        )

    def _earned_components(self, staff: StaffMember, present_days: float) -> tuple[int, int, int]:
        if present_days == STANDARD_WORKING_DAYS:
            return staff.basic_salary, staff.incentive, staff.hra

        basic = _pro_rated(staff.basic_salary, present_days)
        if present_days >= NEAR_FULL_MONTH_DAYS:
            return basic, staff.incentive, staff.hra

        incentive = _pro_rated(staff.incentive, present_days)
        if self._hra_policy == HraPolicy.PRO_RATED:
            return basic, incentive, _pro_rated(staff.hra, present_days)
        return basic, incentive, staff.hra

    def _apply_sunday_penalty(self, incentive: int, sunday_absents: int) -> tuple[int, int]:
        """Return (incentive left, penalty actually applied)."""
        total_penalty = sunday_absents * self._sunday_penalty
        if total_penalty <= 0:
            return incentive, 0
        if incentive >= total_penalty:
            return incentive - total_penalty, total_penalty
        return 0, incentive
