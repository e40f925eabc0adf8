"""Element-wise operator between a dense matrix and a scalar."""

from __future__ import annotations

from typing import Any, Callable, List

from ..kinds import kind_of
from ..matrix import DenseMatrix
from ._common import resolve_operator

__all__ = ['dense_scalar']


def _map(x: List[Any], level: int, fn: Callable[[Any], Any]) -> List[Any]:
    if level == 1:
        return [fn(v) for v in x]
    return [_map(v, level - 1, fn) for v in x]


def dense_scalar(
    mat: DenseMatrix,
    scalar: Any,
    op: Callable[[Any, Any], Any],
    inverse: bool = False,
) -> DenseMatrix:
    """
    Apply ``op(cell, scalar)`` to every cell, or ``op(scalar, cell)`` when
    ``inverse`` is set. Works for any rank.
    """
    cf, _ = resolve_operator(op, mat.datatype, kind_of(scalar))
    if inverse:
        data = _map(mat.data, mat.ndim, lambda v: cf(scalar, v))
    else:
        data = _map(mat.data, mat.ndim, lambda v: cf(v, scalar))
    return DenseMatrix._from_validated(data, mat.shape)
