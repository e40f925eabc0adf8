"""
Matrix conversions and the ``matrix()`` factory.

All conversions are lossless and shape-preserving. Sparse storage is 2-D
only, so converting a dense matrix of another rank to sparse raises
``ValueError``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

from ..config import MatrixFormat, get_config
from ..kinds import Kind
from ._base import MatrixBase, normalize_datatype
from ._dense import DenseMatrix
from ._sparse import SparseMatrix

__all__ = [
    'to_sparse',
    'to_dense',
    'from_nested',
    'to_nested',
    'matrix',
]

logger = logging.getLogger("numkit.matrix")


def to_sparse(dense: DenseMatrix) -> SparseMatrix:
    """Dense (2-D) to sparse; canonical zeros become implicit."""
    return SparseMatrix.from_dense(dense)


def to_dense(sparse: SparseMatrix) -> DenseMatrix:
    """Sparse to dense; implicit entries become the zero of the datatype."""
    return sparse.to_dense()


def from_nested(array: Any, datatype: Optional[Union[str, Kind]] = None) -> DenseMatrix:
    """Nested lists, tuples or a NumPy array to DenseMatrix."""
    return DenseMatrix(array, datatype=datatype)


def to_nested(mat: MatrixBase) -> List[Any]:
    """Any matrix to nested Python lists."""
    return mat.to_array()


def _is_scipy_sparse(value: Any) -> bool:
    module = type(value).__module__ or ''
    return module.startswith('scipy.sparse')


def matrix(
    data: Any = None,
    format: Optional[Union[MatrixFormat, str]] = None,
    datatype: Optional[Union[str, Kind]] = None,
) -> MatrixBase:
    """
    Create a matrix in the requested storage format.

    Args:
        data: Nested lists/tuples, NumPy array, scipy sparse matrix, an
            existing matrix (copied) or None for an empty matrix
        format: 'dense' or 'sparse'; the configured default when None
        datatype: Element datatype tag; kept from a matrix input when None

    Example:
        >>> matrix([[0, 1], [0, 0]], 'sparse').nnz
        1
    """
    fmt = MatrixFormat.parse(format) if format is not None else get_config().matrix

    if isinstance(data, MatrixBase):
        if datatype is None:
            datatype = data.datatype
        if fmt is MatrixFormat.SPARSE:
            if isinstance(data, SparseMatrix):
                return SparseMatrix._from_validated(
                    data.values, data.row_index, data.column_pointer,
                    data.shape, normalize_datatype(datatype),
                )
            return SparseMatrix.from_dense(data, datatype=datatype)
        if isinstance(data, DenseMatrix):
            return DenseMatrix(data.data, datatype=datatype)
        return DenseMatrix(data.to_array(), datatype=datatype)

    if _is_scipy_sparse(data):
        sparse = SparseMatrix.from_scipy(data, datatype=datatype)
        if fmt is MatrixFormat.DENSE:
            logger.debug("Densifying scipy sparse input of shape %s", sparse.shape)
            return sparse.to_dense()
        return sparse

    dense = DenseMatrix(data, datatype=datatype)
    if fmt is MatrixFormat.SPARSE:
        return SparseMatrix.from_dense(dense)
    return dense
