from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.constants import DEFAULT_PART_TIME_RATE_PER_DAY, DEFAULT_PART_TIME_RATE_PER_SHIFT
from ..core.enums import Shift


@dataclass(frozen=True)
class RateTable:
    """Single source of part-time pay rates.

    A Both-shift day earns ``rate_per_day`` plus two shifts; a Morning or
    Evening entry earns one ``rate_per_shift``. Entry defaults, the weekly
    ledger and the monthly total all price entries through ``entry_salary``.
    """

    rate_per_day: int = DEFAULT_PART_TIME_RATE_PER_DAY
    rate_per_shift: int = DEFAULT_PART_TIME_RATE_PER_SHIFT

    @classmethod
    def from_settings(cls, values: Optional[Mapping] = None) -> "RateTable":
        values = dict(values or {})
        known = {"rate_per_day", "rate_per_shift"}
        return cls(**{k: int(v) for k, v in values.items() if k in known})

    def entry_salary(self, shift: Shift) -> int:
        if Shift(shift) == Shift.BOTH:
            return self.rate_per_day + 2 * self.rate_per_shift
        return self.rate_per_shift
