"""Element-wise operator over a dense and a sparse matrix."""

from __future__ import annotations

from typing import Any, Callable

from ..error import check_same_shape, operator_name
from ..matrix import DenseMatrix, SparseMatrix
from ._common import resolve_operator

__all__ = ['sparse_dense']


def sparse_dense(
    dense: DenseMatrix,
    sparse: SparseMatrix,
    op: Callable[[Any, Any], Any],
    inverse: bool = False,
) -> DenseMatrix:
    """
    Apply ``op`` at every coordinate of a dense and a sparse matrix.

    Args:
        dense: 2-D dense operand
        sparse: Sparse operand of the same shape
        op: Binary operator
        inverse: False computes op(dense, sparse), True computes
            op(sparse, dense)

    Returns:
        Dense result; absent sparse entries are fed to ``op`` as zero.

    Raises:
        DimensionMismatch: If the shapes differ
    """
    check_same_shape(operator_name(op), dense.shape, sparse.shape)
    cf, zero = resolve_operator(op, dense.datatype, sparse.datatype)

    rows, cols = sparse.shape
    data = dense.data
    values, row_index, column_pointer = sparse.values, sparse.row_index, sparse.column_pointer
    out = [[None] * cols for _ in range(rows)]

    for j in range(cols):
        k, end = column_pointer[j], column_pointer[j + 1]
        for i in range(rows):
            if k < end and row_index[k] == i:
                s = values[k]
                k += 1
            else:
                s = zero
            d = data[i][j]
            out[i][j] = cf(s, d) if inverse else cf(d, s)

    return DenseMatrix._from_validated(out, (rows, cols))
