"""Operator resolution shared by the element-wise combinators."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from ..kinds import has_zero, kind_of, zero_of
from ..typed import TypedFunction

__all__ = ['resolve_operator', 'result_datatype']


def resolve_operator(
    op: Callable[[Any, Any], Any],
    adt: Optional[str],
    bdt: Optional[str],
) -> Tuple[Callable[[Any, Any], Any], Any]:
    """
    Pick the per-element callable and the implicit zero for two datatypes.

    When both datatypes are the same known kind and ``op`` is a typed
    function, the scalar implementation for that kind is looked up once so
    that no dispatch happens per element.

    Returns:
        (callable, zero)
    """
    if adt is None or adt != bdt:
        return op, zero_of(None)
    if isinstance(op, TypedFunction):
        impl = op.find(adt, adt)
        if impl is not None:
            return impl, zero_of(adt)
    return op, zero_of(adt)


def result_datatype(sample: Any) -> Optional[str]:
    """
    Datatype tag for a sparse result, taken from one of its elements.

    Implicit entries of the result read back as the zero of this kind, so a
    boolean operator yields ``False`` rather than ``0``. Kinds without a
    canonical zero give None.

    Example:
        >>> result_datatype(True)
        'boolean'
        >>> result_datatype('abc') is None
        True
    """
    kind = kind_of(sample)
    return kind if has_zero(kind) else None
