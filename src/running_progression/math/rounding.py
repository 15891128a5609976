"""Rounding helpers with explicit, platform-independent conventions.

Python's built-in ``round`` uses round-half-even (``round(22.5) == 22``).
Pace seconds and distance targets use round-half-up instead, so that a
6:22.5 pace reads 6:23 and 5.25 km becomes 5.3 km.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

# Products such as 30 * 1.10 land on 33.000000000000004; anything within
# this many decimal places of an integer is treated as that integer.
_FLOAT_NOISE_DECIMALS = 9


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round *value* to *decimals* places, ties away from zero.

    The shortest repr of the float is used so that 5.25 is treated as
    exactly 5.25 rather than its binary approximation.
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def ceil_clean(value: float) -> int:
    """Ceiling that ignores binary floating-point noise.

    >>> ceil_clean(30 * 1.10)
    33
    >>> ceil_clean(31.5)
    32
    """
    return math.ceil(round(value, _FLOAT_NOISE_DECIMALS))
