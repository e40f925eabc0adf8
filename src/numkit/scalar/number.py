"""
Tolerant comparison of plain floating point numbers.
"""

from __future__ import annotations

import math
import sys
from fractions import Fraction
from numbers import Integral
from typing import Optional, Union

__all__ = ['DBL_EPSILON', 'nearly_equal']

# Smallest difference between two distinct floats near 1.0
DBL_EPSILON = sys.float_info.epsilon

Real = Union[int, float]

_FLOAT_MAX = int(sys.float_info.max)


def nearly_equal(x: Real, y: Real, epsilon: Optional[float]) -> bool:
    """
    Test whether two numbers are equal within a relative tolerance.

    Args:
        x: First number
        y: Second number
        epsilon: Relative tolerance; None means exact comparison

    Returns:
        True when |x - y| <= max(|x|, |y|) * epsilon, or when the absolute
        difference is below the machine epsilon. NaN is never nearly equal
        to anything; infinities are only equal to themselves.

    Example:
        >>> nearly_equal(1.0, 1.0 + 1e-13, 1e-12)
        True
        >>> nearly_equal(1.0, 1.001, 1e-12)
        False
    """
    if epsilon is None:
        return x == y

    if x == y:
        return True

    if _exceeds_float(x) or _exceeds_float(y):
        return _nearly_equal_exact(x, y, epsilon)

    if math.isnan(x) or math.isnan(y):
        return False

    if math.isfinite(x) and math.isfinite(y):
        diff = abs(x - y)
        if diff < DBL_EPSILON:
            return True
        return diff <= max(abs(x), abs(y)) * epsilon

    # one infinite, or both infinite with opposite sign
    return False


def _exceeds_float(value: Real) -> bool:
    return isinstance(value, Integral) and abs(value) > _FLOAT_MAX


def _nearly_equal_exact(x: Real, y: Real, epsilon: float) -> bool:
    """Same test in rational arithmetic, for ints beyond the float range."""
    for v in (x, y):
        if not isinstance(v, Integral) and not math.isfinite(v):
            return False
    fx = Fraction(int(x)) if isinstance(x, Integral) else Fraction(float(x))
    fy = Fraction(int(y)) if isinstance(y, Integral) else Fraction(float(y))
    diff = abs(fx - fy)
    if diff < DBL_EPSILON:
        return True
    return diff <= max(abs(fx), abs(fy)) * Fraction(epsilon)
