"""
Physical unit helpers backed by ``sympy.physics.units``.

A Unit operand is any SymPy expression that contains a ``Quantity``, for
example ``5 * units.centimeter``. Two units can be ordered only when they
share the same base dimension; their magnitudes are then compared after scaling
to the reference unit of that dimension in the SI unit system.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Tuple, Union

from ..error import UnitMismatch

__all__ = [
    'is_unit',
    'unit_parts',
    'equal_base',
    'unit_value',
    'check_equal_base',
]


def _import_sympy_units():
    """Lazy import of sympy (only when a SymPy object is seen)."""
    try:
        import sympy
        from sympy.physics import units
        from sympy.physics.units.systems.si import SI
        return sympy, units, SI
    except ImportError as e:
        raise ImportError(
            "sympy is required for unit operands. "
            "Install with: pip install sympy"
        ) from e


def is_unit(value: Any) -> bool:
    """Check if value is a SymPy expression carrying a unit (without importing sympy)."""
    module = type(value).__module__
    if module is None or not module.startswith('sympy'):
        return False
    sympy, units, _ = _import_sympy_units()
    return isinstance(value, sympy.Expr) and bool(value.atoms(units.Quantity))


def unit_parts(value: Any) -> Tuple[Any, Any]:
    """
    Split a unit expression into its SI scale factor and dimension.

    Returns:
        (factor, dimension) where factor is the SymPy scale factor relative to
        the reference unit of the dimension.
    """
    _, _, SI = _import_sympy_units()
    return SI._collect_factor_and_dimension(value)


def equal_base(x: Any, y: Any) -> bool:
    """True when both units have the same base dimension."""
    _, _, SI = _import_sympy_units()
    _, dim_x = unit_parts(x)
    _, dim_y = unit_parts(y)
    return SI.get_dimension_system().equivalent_dims(dim_x, dim_y)


def check_equal_base(x: Any, y: Any) -> None:
    """
    Raises:
        UnitMismatch: If the units have a different base
    """
    if not equal_base(x, y):
        raise UnitMismatch("Cannot compare units with different base")


def unit_value(value: Any) -> Union[int, Fraction, float]:
    """
    Magnitude of a unit scaled to the reference unit of its dimension, as a
    plain Python number.

    Exact SymPy integers and rationals stay exact (int / Fraction); anything
    else becomes a float.

    Raises:
        TypeError: If the magnitude is not a real number (e.g. symbolic)
    """
    factor, _ = unit_parts(value)
    if factor.is_Integer:
        return int(factor)
    if factor.is_Rational:
        return Fraction(int(factor.p), int(factor.q))
    if factor.is_number and factor.is_real:
        return float(factor)
    raise TypeError(f"Unit magnitude is not a real number: {factor}")
