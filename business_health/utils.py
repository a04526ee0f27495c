"""
Numeric helpers shared by the scoring engines.
"""

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round *value* with halves always going up (12.5 -> 13)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(round_half_up(value))


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp *value* to the closed interval [low, high]."""
    return max(low, min(high, value))


def capped_ratio(value: Number, target: Number) -> float:
    """Return ``value / target`` clamped to [0, 1]."""
    if target <= 0:
        return 0.0
    return clamp(value / target)


def format_number(value: Number) -> str:
    """Render a metric for display: ``85.0`` -> ``"85"``, ``85.5`` -> ``"85.5"``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
