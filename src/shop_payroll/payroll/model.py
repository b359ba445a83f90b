from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import Shift


@dataclass(frozen=True)
class SalaryDetail:
    """Monthly settlement for one full-time staff member.

    Derived on demand from attendance and the advance ledger; every amount is
    a multiple of 10.
    """

    staff_id: str
    month: int
    year: int
    present_days: int
    half_days: int
    leave_days: int
    sunday_absents: int
    old_adv: int
    cur_adv: int
    deduction: int
    basic_earned: int
    incentive_earned: int
    hra_earned: int
    sunday_penalty: int
    gross_salary: int
    new_adv: int
    net_salary: int
    is_processed: bool = False

    def to_dict(self) -> dict:
        return {
            "staffId": self.staff_id,
            "month": self.month,
            "year": self.year,
            "presentDays": self.present_days,
            "halfDays": self.half_days,
            "leaveDays": self.leave_days,
            "sundayAbsents": self.sunday_absents,
            "oldAdv": self.old_adv,
            "curAdv": self.cur_adv,
            "deduction": self.deduction,
            "basicEarned": self.basic_earned,
            "incentiveEarned": self.incentive_earned,
            "hraEarned": self.hra_earned,
            "sundayPenalty": self.sunday_penalty,
            "grossSalary": self.gross_salary,
            "newAdv": self.new_adv,
            "netSalary": self.net_salary,
            "isProcessed": self.is_processed,
        }


@dataclass(frozen=True)
class DailySalary:
    work_date: date
    day_of_week: str
    is_present: bool
    is_sunday: bool
    salary: int
    is_override: bool
    shift: Optional[Shift] = None

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "dayOfWeek": self.day_of_week,
            "isPresent": self.is_present,
            "isSunday": self.is_sunday,
            "salary": self.salary,
            "isOverride": self.is_override,
            "shift": self.shift.value if self.shift else None,
        }


@dataclass(frozen=True)
class WeeklySalary:
    week: int
    days: tuple[DailySalary, ...]
    week_total: int

    def to_dict(self) -> dict:
        return {"week": self.week, "days": [d.to_dict() for d in self.days], "weekTotal": self.week_total}


@dataclass(frozen=True)
class PartTimeSalaryDetail:
    staff_name: str
    location: str
    total_days: int
    total_shifts: int
    rate_per_day: int
    rate_per_shift: int
    total_earnings: int
    month: int
    year: int
    weekly_breakdown: tuple[WeeklySalary, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "staffName": self.staff_name,
            "location": self.location,
            "totalDays": self.total_days,
            "totalShifts": self.total_shifts,
            "ratePerDay": self.rate_per_day,
            "ratePerShift": self.rate_per_shift,
            "totalEarnings": self.total_earnings,
            "month": self.month,
            "year": self.year,
            "weeklyBreakdown": [w.to_dict() for w in self.weekly_breakdown],
        }
