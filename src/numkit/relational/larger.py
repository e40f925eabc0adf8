"""
larger(x, y): test whether x is larger than y.

Numbers and BigNumbers that are nearly equal (relative tolerance
``config.epsilon``) are not larger. Matrices and arrays are compared element
wise.

Example:
    >>> larger(2, 3)
    False
    >>> larger([[2, 3]], [[5, 4]])
    [[False, True]]
"""

from __future__ import annotations

from typing import Optional

from ..config import Config, get_config
from ..scalar import big_nearly_equal, check_equal_base, nearly_equal, unit_value
from ..typed import TypedFunction, typed
from ._signatures import matrix_signatures

__all__ = ['create_larger', 'larger']


def create_larger(config: Optional[Config] = None) -> TypedFunction:
    """Build ``larger`` bound to ``config`` (the global default when None)."""
    if config is None:
        config = get_config()
    epsilon = config.epsilon
    precision = config.precision

    def larger_number(x, y):
        return x > y and not nearly_equal(x, y, epsilon)

    def larger_bignumber(x, y):
        # ordering a NaN would signal InvalidOperation
        if x.is_nan() or y.is_nan():
            return False
        return x > y and not big_nearly_equal(x, y, epsilon, precision)

    def larger_complex(x, y):
        raise TypeError('No ordering relation is defined for complex numbers')

    def larger_unit(x, y):
        check_equal_base(x, y)
        return larger(unit_value(x), unit_value(y))

    larger = typed('larger', {
        'boolean, boolean': lambda x, y: x > y,
        'number, number': larger_number,
        'BigNumber, BigNumber': larger_bignumber,
        'Fraction, Fraction': lambda x, y: x > y,
        'Complex, Complex': larger_complex,
        'Unit, Unit': larger_unit,
        **matrix_signatures(lambda: larger, config),
    })
    return larger


larger = create_larger()
