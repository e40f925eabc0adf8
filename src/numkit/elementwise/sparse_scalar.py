"""Element-wise operator between a sparse matrix and a scalar.

The operator is first evaluated once against the implicit zero:

    test_value = op(zero, scalar)        (op(scalar, zero) when inverse)

If test_value is the canonical zero every implicit entry stays zero, so only
the stored entries are visited and the result stays sparse. Otherwise every
implicit entry becomes test_value and the result is dense.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Union

from ..error import operator_name
from ..kinds import is_zero, kind_of
from ..matrix import DenseMatrix, SparseMatrix
from ._common import resolve_operator, result_datatype

__all__ = ['sparse_scalar']

logger = logging.getLogger("numkit.elementwise")


def sparse_scalar(
    mat: SparseMatrix,
    scalar: Any,
    op: Callable[[Any, Any], Any],
    inverse: bool = False,
) -> Union[SparseMatrix, DenseMatrix]:
    """
    Apply ``op(cell, scalar)`` (or ``op(scalar, cell)`` when ``inverse``).

    Returns:
        SparseMatrix when op maps the implicit zero to zero, DenseMatrix
        otherwise.
    """
    cf, zero = resolve_operator(op, mat.datatype, kind_of(scalar))

    def apply(v: Any) -> Any:
        return cf(scalar, v) if inverse else cf(v, scalar)

    test_value = apply(zero)
    rows, cols = mat.shape

    if is_zero(test_value):
        values = []
        row_index = []
        column_pointer = [0]
        for j in range(cols):
            indices, stored = mat.column(j)
            for i, v in zip(indices, stored):
                result = apply(v)
                if not is_zero(result):
                    values.append(result)
                    row_index.append(i)
            column_pointer.append(len(values))
        return SparseMatrix._from_validated(
            values, row_index, column_pointer, mat.shape, result_datatype(test_value)
        )

    logger.debug(
        "%s: implicit entries evaluate to %r, densifying %dx%d result",
        operator_name(op), test_value, rows, cols,
    )
    out = [[test_value] * cols for _ in range(rows)]
    for i, j, v in mat.items():
        out[i][j] = apply(v)
    return DenseMatrix._from_validated(out, mat.shape)
