"""
Rounding helpers shared by the analysis modules.

Python's built-in round() uses banker's rounding; reported scores use
half-up rounding so that values such as 5.45 always round to 5.5.
"""

import math
from typing import Union


def round_half_up(value: float, digits: int = 0) -> Union[int, float]:
    """Round to ``digits`` decimals with halves rounded towards +infinity.

    Returns an ``int`` when ``digits`` is 0.
    """
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into the closed range [lower, upper]."""
    return max(lower, min(upper, value))
