"""Scalar semantics shared by the relational operators."""

from .number import DBL_EPSILON, nearly_equal
from .bignumber import big_nearly_equal
from .unit import is_unit, unit_parts, equal_base, check_equal_base, unit_value

__all__ = [
    'DBL_EPSILON',
    'nearly_equal',
    'big_nearly_equal',
    'is_unit',
    'unit_parts',
    'equal_base',
    'check_equal_base',
    'unit_value',
]
