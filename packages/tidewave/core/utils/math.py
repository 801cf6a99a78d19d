"""Math utilities shared by the wave generators."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def fract(x: float) -> float:
    """Fractional part of x in [0, 1), following floor semantics for negatives."""
    return x - math.floor(x)


def round_half_up(x: float, decimals: int = 0) -> float:
    """Round with halves going up, unlike the built-in banker's rounding.

    Example:
        >>> round_half_up(12.5)
        13.0
        >>> round_half_up(2.5)
        3.0
    """
    p = 10**decimals
    return math.floor(x * p + 0.5) / p
