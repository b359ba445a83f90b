from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from numbers import Real


def round_to_nearest_10(value: Real) -> int:
    """Round a currency amount to the nearest multiple of 10.

    Ties go away from zero (15 -> 20, 25 -> 30, -15 -> -20). Floats are read
    through ``repr`` so 14.999999999 style artefacts of division do not move
    a tie.
    """
    if isinstance(value, float):
        amount = Decimal(repr(value))
    else:
        amount = Decimal(value)
    tens = (amount / 10).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(tens) * 10
