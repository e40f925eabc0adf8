"""Element-wise operator over two sparse matrices.

Each column is merged like two sorted lists:

    row present in both   -> op(a, b)
    row present in a only -> op(a, zero)
    row present in b only -> op(zero, b)
    row in neither        -> not visited, stays implicit zero

Results equal to the canonical zero are dropped so the output stays as
sparse as possible. Cost is O(nnz(a) + nnz(b) + columns).
"""

from __future__ import annotations

from typing import Any, Callable

from ..error import check_same_shape, operator_name
from ..kinds import is_zero
from ..matrix import SparseMatrix
from ._common import resolve_operator, result_datatype

__all__ = ['sparse_sparse']


def sparse_sparse(
    a: SparseMatrix,
    b: SparseMatrix,
    op: Callable[[Any, Any], Any],
) -> SparseMatrix:
    """
    Raises:
        DimensionMismatch: If the shapes differ
    """
    check_same_shape(operator_name(op), a.shape, b.shape)
    cf, zero = resolve_operator(op, a.datatype, b.datatype)

    rows, cols = a.shape
    a_values, a_index, a_ptr = a.values, a.row_index, a.column_pointer
    b_values, b_index, b_ptr = b.values, b.row_index, b.column_pointer

    values = []
    row_index = []
    column_pointer = [0]

    for j in range(cols):
        ka, a_end = a_ptr[j], a_ptr[j + 1]
        kb, b_end = b_ptr[j], b_ptr[j + 1]
        while ka < a_end or kb < b_end:
            # exhausted runs sit past the last row
            ia = a_index[ka] if ka < a_end else rows
            ib = b_index[kb] if kb < b_end else rows
            if ia == ib:
                i = ia
                result = cf(a_values[ka], b_values[kb])
                ka += 1
                kb += 1
            elif ia < ib:
                i = ia
                result = cf(a_values[ka], zero)
                ka += 1
            else:
                i = ib
                result = cf(zero, b_values[kb])
                kb += 1
            if not is_zero(result):
                values.append(result)
                row_index.append(i)
        column_pointer.append(len(values))

    # nothing stored: every entry is op(zero, zero)
    sample = values[0] if values else cf(zero, zero)
    return SparseMatrix._from_validated(
        values, row_index, column_pointer, a.shape, result_datatype(sample)
    )
