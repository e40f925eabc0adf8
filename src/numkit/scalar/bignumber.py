"""
Tolerant comparison of arbitrary precision (``decimal.Decimal``) numbers.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Optional

__all__ = ['big_nearly_equal']


def big_nearly_equal(
    x: Decimal,
    y: Decimal,
    epsilon: Optional[float],
    precision: Optional[int] = None,
) -> bool:
    """
    Decimal counterpart of :func:`numkit.scalar.nearly_equal`.

    Args:
        x: First value
        y: Second value
        epsilon: Relative tolerance; None means exact comparison
        precision: Significant digits for the intermediate arithmetic
            (current decimal context when None)
    """
    if epsilon is None:
        return x == y

    if x == y:
        return True

    if x.is_nan() or y.is_nan():
        return False

    if not (x.is_finite() and y.is_finite()):
        return False

    with localcontext() as ctx:
        if precision is not None:
            ctx.prec = precision
        diff = abs(x - y)
        if diff.is_zero():
            return True
        max_value = max(abs(x), abs(y))
        return diff <= max_value * Decimal(repr(epsilon))
