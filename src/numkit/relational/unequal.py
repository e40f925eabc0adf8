"""
unequal(x, y): test whether two values differ.

Numbers, BigNumbers and both parts of complex numbers are compared with the
relative tolerance ``config.epsilon``. Units must share a base.
"""

from __future__ import annotations

from typing import Optional

from ..config import Config, get_config
from ..scalar import big_nearly_equal, check_equal_base, nearly_equal, unit_value
from ..typed import TypedFunction, typed
from ._signatures import matrix_signatures

__all__ = ['create_unequal', 'unequal']


def create_unequal(config: Optional[Config] = None) -> TypedFunction:
    """Build ``unequal`` bound to ``config`` (the global default when None)."""
    if config is None:
        config = get_config()
    epsilon = config.epsilon
    precision = config.precision

    def unequal_complex(x, y):
        return not (
            nearly_equal(x.real, y.real, epsilon)
            and nearly_equal(x.imag, y.imag, epsilon)
        )

    def unequal_unit(x, y):
        check_equal_base(x, y)
        return unequal(unit_value(x), unit_value(y))

    unequal = typed('unequal', {
        'boolean, boolean': lambda x, y: x != y,
        'number, number': lambda x, y: not nearly_equal(x, y, epsilon),
        'BigNumber, BigNumber': lambda x, y: not big_nearly_equal(x, y, epsilon, precision),
        'Fraction, Fraction': lambda x, y: x != y,
        'Complex, Complex': unequal_complex,
        'Unit, Unit': unequal_unit,
        **matrix_signatures(lambda: unequal, config),
    })
    return unequal


unequal = create_unequal()
