"""
compare(x, y): three-way comparison.

Returns 1 when x > y, -1 when x < y and 0 when x equals y. Numbers and
BigNumbers within the relative tolerance ``config.epsilon`` compare equal.
BigNumber and Fraction operands give a result of their own kind.

Example:
    >>> compare(2, 3)
    -1
    >>> compare(Fraction(1, 2), Fraction(1, 3))
    Fraction(1, 1)
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Optional

from ..config import Config, get_config
from ..scalar import big_nearly_equal, check_equal_base, nearly_equal, unit_value
from ..typed import TypedFunction, typed
from ._signatures import matrix_signatures

__all__ = ['create_compare', 'compare']


def _sign(x, y) -> int:
    if x > y:
        return 1
    if x < y:
        return -1
    return 0


def create_compare(config: Optional[Config] = None) -> TypedFunction:
    """Build ``compare`` bound to ``config`` (the global default when None)."""
    if config is None:
        config = get_config()
    epsilon = config.epsilon
    precision = config.precision

    def compare_number(x, y):
        if nearly_equal(x, y, epsilon):
            return 0
        return 1 if x > y else -1

    def compare_bignumber(x, y):
        if big_nearly_equal(x, y, epsilon, precision):
            return Decimal(0)
        return Decimal(x.compare(y))

    def compare_complex(x, y):
        raise TypeError('No ordering relation is defined for complex numbers')

    def compare_unit(x, y):
        check_equal_base(x, y)
        return compare(unit_value(x), unit_value(y))

    compare = typed('compare', {
        'boolean, boolean': _sign,
        'number, number': compare_number,
        'BigNumber, BigNumber': compare_bignumber,
        'Fraction, Fraction': lambda x, y: Fraction(_sign(x, y)),
        'Complex, Complex': compare_complex,
        'Unit, Unit': compare_unit,
        **matrix_signatures(lambda: compare, config),
    })
    return compare


compare = create_compare()
