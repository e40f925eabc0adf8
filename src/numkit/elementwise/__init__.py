"""
Element-wise combinators.

Each combinator applies an arbitrary binary operator to two matrix operands,
or a matrix and a scalar, and builds a fresh result in the storage format
that keeps it smallest:

    dense_dense(a, b, op)                    -> DenseMatrix
    sparse_sparse(a, b, op)                  -> SparseMatrix
    sparse_dense(dense, sparse, op, inverse) -> DenseMatrix
    dense_scalar(mat, scalar, op, inverse)   -> DenseMatrix
    sparse_scalar(mat, scalar, op, inverse)  -> SparseMatrix or DenseMatrix

The sparse combinators require ``op(zero, zero)`` to be the canonical zero
of its result kind. Sparse results are tagged with that kind, so their
implicit entries read back as its zero. Errors raised by ``op`` propagate
unchanged.
"""

from ._common import resolve_operator, result_datatype
from .dense_dense import dense_dense
from .sparse_sparse import sparse_sparse
from .sparse_dense import sparse_dense
from .dense_scalar import dense_scalar
from .sparse_scalar import sparse_scalar

__all__ = [
    'resolve_operator',
    'result_datatype',
    'dense_dense',
    'sparse_sparse',
    'sparse_dense',
    'dense_scalar',
    'sparse_scalar',
]
