"""
Matrix signatures shared by every relational operator.

An operator adds these to its scalar signatures so that matrices and nested
arrays are routed to the element-wise combinators, which call the operator
back on each pair of elements.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from ..config import Config
from ..elementwise import (
    dense_dense, dense_scalar, sparse_dense, sparse_scalar, sparse_sparse,
)
from ..matrix import DenseMatrix, matrix
from ..typed import TypedFunction

__all__ = ['matrix_signatures']


def matrix_signatures(
    resolve_self: Callable[[], TypedFunction],
    config: Config,
) -> Dict[str, Callable[[Any, Any], Any]]:
    """
    Build the matrix signature table of an operator.

    Args:
        resolve_self: Returns the operator being defined; called lazily since
            the operator does not exist yet while its table is built
        config: Supplies the storage used when normalising nested arrays
    """

    def to_matrix(data: Any):
        return matrix(data, config.matrix)

    def array_array(x, y):
        this = resolve_self()
        return this(to_matrix(x), to_matrix(y)).to_array()

    def array_scalar(x, y):
        return dense_scalar(DenseMatrix(x), y, resolve_self(), False).to_array()

    def scalar_array(x, y):
        return dense_scalar(DenseMatrix(y), x, resolve_self(), True).to_array()

    return {
        'SparseMatrix, SparseMatrix': lambda x, y: sparse_sparse(x, y, resolve_self()),
        'SparseMatrix, DenseMatrix': lambda x, y: sparse_dense(y, x, resolve_self(), True),
        'DenseMatrix, SparseMatrix': lambda x, y: sparse_dense(x, y, resolve_self(), False),
        'DenseMatrix, DenseMatrix': lambda x, y: dense_dense(x, y, resolve_self()),
        'Array, Array': array_array,
        'Array, Matrix': lambda x, y: resolve_self()(to_matrix(x), y),
        'Matrix, Array': lambda x, y: resolve_self()(x, to_matrix(y)),
        'SparseMatrix, any': lambda x, y: sparse_scalar(x, y, resolve_self(), False),
        'DenseMatrix, any': lambda x, y: dense_scalar(x, y, resolve_self(), False),
        'any, SparseMatrix': lambda x, y: sparse_scalar(y, x, resolve_self(), True),
        'any, DenseMatrix': lambda x, y: dense_scalar(y, x, resolve_self(), True),
        'Array, any': array_scalar,
        'any, Array': scalar_array,
    }
