"""Rounding helpers shared by the pricing and optimization cores."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (-2.5 -> -2, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def round2(value: float) -> float:
    """Round to 2 decimal places with half-up semantics."""
    return math.floor(value * 100 + 0.5) / 100
