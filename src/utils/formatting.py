"""
Fixed-precision formatting for display values.

Statistics are computed at full precision and only turned into text here.
Rounding is half-up on the exact binary value of the float, so 6.25 shows
as "6.3" while 1.005 (stored as 1.00499...) shows as "1.00".
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from src.utils.constants import UNDEFINED_LABEL


def round_half_up(value: float, places: int) -> float:
    """
    Round a float to a fixed number of decimals, ties away from zero.

    Args:
        value: Value to round
        places: Number of decimal places

    Returns:
        Rounded value as a float

    Examples:
        >>> round_half_up(6.25, 1)
        6.3
        >>> round_half_up(2.5, 0)
        3.0
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_fixed(value: float, places: int) -> str:
    """
    Format a value with a fixed number of decimals.

    Non-finite values (the variance of a single score) render as
    "undefined" rather than "nan".

    Examples:
        >>> format_fixed(166.6666, 2)
        '166.67'
        >>> format_fixed(float("nan"), 2)
        'undefined'
    """
    if not math.isfinite(value):
        return UNDEFINED_LABEL
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_score(value: float) -> str:
    """Format a score the way it is shown in score lists (shortest form)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
