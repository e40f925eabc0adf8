"""Element-wise operator over two dense matrices."""

from __future__ import annotations

from typing import Any, Callable, List

from ..error import check_same_shape, operator_name
from ..matrix import DenseMatrix
from ._common import resolve_operator

__all__ = ['dense_dense']


def _apply(x: List[Any], y: List[Any], level: int, cf: Callable[[Any, Any], Any]) -> List[Any]:
    if level == 1:
        return [cf(u, v) for u, v in zip(x, y)]
    return [_apply(u, v, level - 1, cf) for u, v in zip(x, y)]


def dense_dense(
    a: DenseMatrix,
    b: DenseMatrix,
    op: Callable[[Any, Any], Any],
) -> DenseMatrix:
    """
    Apply ``op(a[c], b[c])`` at every coordinate ``c``.

    Works for any rank. The result has no datatype tag.

    Raises:
        DimensionMismatch: If the shapes (or ranks) differ
    """
    check_same_shape(operator_name(op), a.shape, b.shape)
    cf, _ = resolve_operator(op, a.datatype, b.datatype)
    data = _apply(a.data, b.data, a.ndim, cf)
    return DenseMatrix._from_validated(data, a.shape)
