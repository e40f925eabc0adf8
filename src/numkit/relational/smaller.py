"""
smaller(x, y): test whether x is smaller than y.

Numbers and BigNumbers that are nearly equal (relative tolerance
``config.epsilon``) are not smaller. Matrices and arrays are compared element
wise.
"""

from __future__ import annotations

from typing import Optional

from ..config import Config, get_config
from ..scalar import big_nearly_equal, check_equal_base, nearly_equal, unit_value
from ..typed import TypedFunction, typed
from ._signatures import matrix_signatures

__all__ = ['create_smaller', 'smaller']


def create_smaller(config: Optional[Config] = None) -> TypedFunction:
    """Build ``smaller`` bound to ``config`` (the global default when None)."""
    if config is None:
        config = get_config()
    epsilon = config.epsilon
    precision = config.precision

    def smaller_number(x, y):
        return x < y and not nearly_equal(x, y, epsilon)

    def smaller_bignumber(x, y):
        if x.is_nan() or y.is_nan():
            return False
        return x < y and not big_nearly_equal(x, y, epsilon, precision)

    def smaller_complex(x, y):
        raise TypeError('No ordering relation is defined for complex numbers')

    def smaller_unit(x, y):
        check_equal_base(x, y)
        return smaller(unit_value(x), unit_value(y))

    smaller = typed('smaller', {
        'boolean, boolean': lambda x, y: x < y,
        'number, number': smaller_number,
        'BigNumber, BigNumber': smaller_bignumber,
        'Fraction, Fraction': lambda x, y: x < y,
        'Complex, Complex': smaller_complex,
        'Unit, Unit': smaller_unit,
        **matrix_signatures(lambda: smaller, config),
    })
    return smaller


smaller = create_smaller()
