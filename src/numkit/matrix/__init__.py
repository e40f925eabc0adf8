"""
Matrix storage: dense nested lists and compressed sparse column.

Example:
    >>> from numkit.matrix import matrix, to_dense
    >>> s = matrix([[0, 0], [0, 5]], 'sparse')
    >>> s.nnz
    1
    >>> to_dense(s).to_array()
    [[0, 0], [0, 5]]
"""

from ._base import MatrixBase, datatype_of_dtype, normalize_datatype
from ._dense import DenseMatrix
from ._sparse import SparseMatrix
from ._convert import to_sparse, to_dense, from_nested, to_nested, matrix

__all__ = [
    'MatrixBase',
    'DenseMatrix',
    'SparseMatrix',
    'datatype_of_dtype',
    'normalize_datatype',
    'to_sparse',
    'to_dense',
    'from_nested',
    'to_nested',
    'matrix',
]
