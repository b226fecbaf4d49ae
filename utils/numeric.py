"""Small numeric helpers shared by the market and the advisor."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def clamp(value, lo, hi):
    """Saturate ``value`` into ``[lo, hi]``."""
    return max(lo, min(hi, value))
