"""
Operand Kinds

Every operand handed to a typed function belongs to exactly one concrete
kind. Kinds drive signature dispatch, pick the implicit zero of sparse
storage and define the implicit conversions between scalar kinds.

Kind table:

    boolean       bool, numpy.bool_
    number        int, float, numpy integer / floating scalars
    BigNumber     decimal.Decimal
    Fraction      fractions.Fraction
    Complex       complex, numpy complex scalars
    Unit          SymPy expressions containing a Quantity
    string        str
    Array         list, tuple, numpy.ndarray
    DenseMatrix   numkit.matrix.DenseMatrix
    SparseMatrix  numkit.matrix.SparseMatrix
    Matrix        abstract, matched by DenseMatrix and SparseMatrix
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction
from typing import Any, Callable, NamedTuple, Optional, Tuple, Union

import numpy as np

from .scalar.unit import is_unit

__all__ = [
    'Kind',
    'ANY',
    'ABSTRACT_KINDS',
    'normalize_kind',
    'validate_kind',
    'kind_of',
    'matches',
    'is_zero',
    'zero_of',
    'has_zero',
    'Conversion',
    'DEFAULT_CONVERSIONS',
    'find_conversion',
]


class Kind(Enum):
    """
    Kind names usable in typed function signatures.

    Example:
        >>> kind_of(3.5)
        'number'
        >>> str(Kind.SparseMatrix)
        'SparseMatrix'
    """

    boolean = 'boolean'
    number = 'number'
    BigNumber = 'BigNumber'
    Fraction = 'Fraction'
    Complex = 'Complex'
    Unit = 'Unit'
    string = 'string'
    Array = 'Array'
    Matrix = 'Matrix'
    DenseMatrix = 'DenseMatrix'
    SparseMatrix = 'SparseMatrix'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Kind.{self.name}"


# Wildcard token in signatures
ANY = 'any'

# Abstract kinds and the concrete kinds they match
ABSTRACT_KINDS = {
    'Matrix': ('DenseMatrix', 'SparseMatrix'),
}


# =============================================================================
# Kind Utilities
# =============================================================================

def normalize_kind(kind: Union[str, Kind]) -> str:
    """
    Normalize kind to string.

    Example:
        >>> normalize_kind(Kind.BigNumber)
        'BigNumber'
    """
    if isinstance(kind, Kind):
        return kind.value
    elif isinstance(kind, str):
        return kind
    else:
        raise TypeError(f"kind must be str or Kind, got {type(kind)}")


def validate_kind(kind: str, allow_any: bool = False) -> None:
    """
    Validate a kind name.

    Raises:
        ValueError: If the name is not a known kind
    """
    if allow_any and kind == ANY:
        return
    valid = {k.value for k in Kind}
    if kind not in valid:
        raise ValueError(f"Unknown kind: {kind!r}. Valid: {sorted(valid)}")


# =============================================================================
# Runtime Kind Detection
# =============================================================================

def _is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, Fraction))


def _is_complex(value: Any) -> bool:
    return isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real)


def _is_dense_matrix(value: Any) -> bool:
    # Avoid circular import
    from .matrix import DenseMatrix
    return isinstance(value, DenseMatrix)


def _is_sparse_matrix(value: Any) -> bool:
    from .matrix import SparseMatrix
    return isinstance(value, SparseMatrix)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


# Tested in order; the first match wins
_KIND_TESTS: Tuple[Tuple[str, Callable[[Any], bool]], ...] = (
    ('boolean', _is_boolean),
    ('number', _is_number),
    ('BigNumber', lambda v: isinstance(v, Decimal)),
    ('Fraction', lambda v: isinstance(v, Fraction)),
    ('Complex', _is_complex),
    ('Unit', is_unit),
    ('string', lambda v: isinstance(v, str)),
    ('DenseMatrix', _is_dense_matrix),
    ('SparseMatrix', _is_sparse_matrix),
    ('Array', _is_array),
)


def kind_of(value: Any) -> str:
    """
    Get the concrete kind name of a runtime value.

    Values outside the kind table report their Python type name, which never
    matches a signature token other than ``any``.
    """
    for name, test in _KIND_TESTS:
        if test(value):
            return name
    return type(value).__name__


def matches(kind: str, token: str) -> bool:
    """Check whether a concrete kind satisfies a signature token."""
    return token == ANY or token == kind or kind in ABSTRACT_KINDS.get(token, ())


# =============================================================================
# Canonical Zero
# =============================================================================

_ZEROS = {
    'boolean': False,
    'number': 0,
    'BigNumber': Decimal(0),
    'Fraction': Fraction(0),
    'Complex': 0j,
}


def zero_of(datatype: Optional[str]) -> Any:
    """
    Implicit zero fed to an operator for an absent sparse entry.

    Unknown or missing datatypes use the plain number zero; implicit
    conversions lift it to the kind of the other operand.
    """
    return _ZEROS.get(datatype, 0)


def has_zero(datatype: Optional[str]) -> bool:
    """Check whether a datatype has its own canonical zero."""
    return datatype in _ZEROS


def is_zero(value: Any) -> bool:
    """
    Check whether a scalar is the canonical zero of its kind.

    False, 0, 0.0, Decimal zero, Fraction zero and 0j are canonical zeros.
    NaN, strings and non-scalar values are not.
    """
    if isinstance(value, (bool, np.bool_)):
        return not value
    if isinstance(value, Decimal):
        return value.is_zero()
    if isinstance(value, (str, list, tuple, np.ndarray)):
        return False
    try:
        return bool(value == 0)
    except (TypeError, ValueError):
        return False


# =============================================================================
# Implicit Conversions
# =============================================================================

class Conversion(NamedTuple):
    """Implicit conversion of a value from one kind to another."""
    source: str
    target: str
    convert: Callable[[Any], Any]


def _number_to_bignumber(value: Any) -> Decimal:
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    return Decimal(repr(float(value)))


def _number_to_fraction(value: Any) -> Fraction:
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    return Fraction(repr(float(value)))


def _fraction_to_bignumber(value: Fraction) -> Decimal:
    raise TypeError(
        "Cannot implicitly convert a Fraction to BigNumber or vice versa"
    )


def _string_to_number(value: str) -> Union[int, float]:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        number = float(value)
    except ValueError:
        number = math.nan
    if math.isnan(number):
        raise ValueError(f'Cannot convert "{value}" to a number')
    return number


def _string_to_bignumber(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise ValueError(f'Cannot convert "{value}" to BigNumber') from None


def _string_to_fraction(value: str) -> Fraction:
    try:
        return Fraction(value)
    except (ValueError, ZeroDivisionError):
        raise ValueError(f'Cannot convert "{value}" to Fraction') from None


def _string_to_complex(value: str) -> complex:
    try:
        return complex(value)
    except ValueError:
        raise ValueError(f'Cannot convert "{value}" to Complex') from None


# Order matters: earlier conversions are preferred
DEFAULT_CONVERSIONS: Tuple[Conversion, ...] = (
    Conversion('boolean', 'number', int),
    Conversion('boolean', 'BigNumber', lambda v: Decimal(int(v))),
    Conversion('boolean', 'Fraction', lambda v: Fraction(int(v))),
    Conversion('number', 'BigNumber', _number_to_bignumber),
    Conversion('number', 'Fraction', _number_to_fraction),
    Conversion('number', 'Complex', complex),
    Conversion('Fraction', 'BigNumber', _fraction_to_bignumber),
    Conversion('Fraction', 'Complex', complex),
    Conversion('BigNumber', 'Complex', complex),
    Conversion('string', 'number', _string_to_number),
    Conversion('string', 'BigNumber', _string_to_bignumber),
    Conversion('string', 'Fraction', _string_to_fraction),
    Conversion('string', 'Complex', _string_to_complex),
)


def find_conversion(
    source: str,
    target: str,
    conversions: Tuple[Conversion, ...] = DEFAULT_CONVERSIONS,
) -> Optional[Tuple[int, Conversion]]:
    """
    Find the first conversion from ``source`` kind to ``target`` kind.

    Returns:
        (position, conversion) or None when no conversion exists
    """
    for position, conversion in enumerate(conversions):
        if conversion.source == source and conversion.target == target:
            return position, conversion
    return None
