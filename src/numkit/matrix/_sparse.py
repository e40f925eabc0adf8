"""Compressed Sparse Column (CSC) Matrix.

SparseMatrix stores only the entries that are not the canonical zero of
their kind, column by column:

    values          stored entries in column-major order
    row_index       row of each stored entry, strictly increasing per column
    column_pointer  column j occupies values[column_pointer[j]:column_pointer[j+1]]

Example:
    >>> m = SparseMatrix.from_dense([[0, 0], [0, 5]])
    >>> m.nnz
    1
    >>> m.values, m.row_index, m.column_pointer
    ((5,), (1,), (0, 0, 1))
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import (
    TYPE_CHECKING, Any, Iterator, List, Optional, Sequence, Tuple, Union,
)

import numpy as np

from ..kinds import Kind, is_zero, zero_of
from ._base import MatrixBase, datatype_of_dtype, normalize_datatype

if TYPE_CHECKING:
    from ._dense import DenseMatrix

__all__ = ['SparseMatrix']

logger = logging.getLogger("numkit.matrix")


def _import_scipy_sparse():
    try:
        import scipy.sparse as sp
        return sp
    except ImportError as e:
        raise ImportError(
            "scipy is required for SciPy interop. Install with: pip install scipy"
        ) from e


class SparseMatrix(MatrixBase):
    """Column-oriented sparse matrix with optional element datatype.

    Always 2-D. Absent coordinates read as the zero of ``datatype`` (plain
    ``0`` when the datatype is unknown).

    Attributes:
        shape: Matrix dimensions (rows, cols).
        datatype: Kind name of the elements or None.
        nnz: Number of stored entries.
    """

    __slots__ = ('_values', '_row_index', '_column_pointer', '_shape', '_datatype')

    storage = 'sparse'

    # =========================================================================
    # Initialization
    # =========================================================================

    def __init__(
        self,
        values: Sequence[Any],
        row_index: Sequence[int],
        column_pointer: Sequence[int],
        shape: Tuple[int, int],
        datatype: Optional[Union[str, Kind]] = None,
    ):
        """Create from CSC arrays (copied and validated).

        Note:
            Prefer the factory methods (from_dense, from_coo, from_scipy).

        Raises:
            ValueError: If any CSC invariant is violated.
        """
        values = tuple(values)
        row_index = tuple(int(i) for i in row_index)
        column_pointer = tuple(int(p) for p in column_pointer)
        shape = tuple(int(d) for d in shape)

        self._validate_arrays(values, row_index, column_pointer, shape)

        self._values = values
        self._row_index = row_index
        self._column_pointer = column_pointer
        self._shape = shape
        self._datatype = normalize_datatype(datatype)

    @staticmethod
    def _validate_arrays(
        values: Tuple[Any, ...],
        row_index: Tuple[int, ...],
        column_pointer: Tuple[int, ...],
        shape: Tuple[int, ...],
    ) -> None:
        """Validate the CSC invariants."""
        if len(shape) != 2:
            raise ValueError(f"SparseMatrix must be 2-D, got shape {shape}")
        rows, cols = shape
        if rows < 0 or cols < 0:
            raise ValueError(f"Invalid shape: {shape}")
        if len(column_pointer) != cols + 1:
            raise ValueError(
                f"column_pointer size mismatch: expected {cols + 1}, "
                f"got {len(column_pointer)}"
            )
        if len(row_index) != len(values):
            raise ValueError(
                f"row_index size mismatch: expected {len(values)}, got {len(row_index)}"
            )
        if column_pointer[0] != 0:
            raise ValueError("column_pointer must start at 0")
        if column_pointer[-1] != len(values):
            raise ValueError(
                f"column_pointer must end at nnz ({len(values)}), "
                f"got {column_pointer[-1]}"
            )
        for j in range(cols):
            start, end = column_pointer[j], column_pointer[j + 1]
            if end < start:
                raise ValueError(f"column_pointer decreases at column {j}")
            previous = -1
            for k in range(start, end):
                i = row_index[k]
                if not 0 <= i < rows:
                    raise ValueError(f"Row index {i} out of range in column {j}")
                if i <= previous:
                    raise ValueError(
                        f"Row indices of column {j} must be strictly increasing"
                    )
                previous = i
        for k, value in enumerate(values):
            if is_zero(value):
                raise ValueError(f"Explicit zero stored at position {k}")

    @classmethod
    def _from_validated(
        cls,
        values: Sequence[Any],
        row_index: Sequence[int],
        column_pointer: Sequence[int],
        shape: Tuple[int, int],
        datatype: Optional[str] = None,
    ) -> 'SparseMatrix':
        """Wrap CSC arrays built by a trusted producer, skipping validation."""
        obj = cls.__new__(cls)
        obj._values = tuple(values)
        obj._row_index = tuple(row_index)
        obj._column_pointer = tuple(column_pointer)
        obj._shape = tuple(shape)
        obj._datatype = datatype
        return obj

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        return self._shape

    @property
    def datatype(self) -> Optional[str]:
        return self._datatype

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._shape[1]

    @property
    def values(self) -> Tuple[Any, ...]:
        return self._values

    @property
    def row_index(self) -> Tuple[int, ...]:
        return self._row_index

    @property
    def column_pointer(self) -> Tuple[int, ...]:
        return self._column_pointer

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return len(self._values)

    @property
    def density(self) -> float:
        """Fraction of stored entries."""
        total = self.size
        return self.nnz / total if total > 0 else 0.0

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_dense(
        cls,
        dense: Union['DenseMatrix', Sequence[Sequence[Any]], np.ndarray],
        datatype: Optional[Union[str, Kind]] = None,
    ) -> 'SparseMatrix':
        """Create from a 2-D DenseMatrix or nested lists, dropping zeros.

        The datatype of a DenseMatrix is kept unless ``datatype`` overrides it.
        """
        from ._dense import DenseMatrix

        if not isinstance(dense, DenseMatrix):
            dense = DenseMatrix(dense, datatype=datatype)
        elif datatype is None:
            datatype = dense.datatype

        if dense.ndim != 2:
            raise ValueError(f"SparseMatrix must be 2-D, got shape {dense.shape}")

        rows, cols = dense.shape
        data = dense.data
        values = []
        row_index = []
        column_pointer = [0]

        for j in range(cols):
            for i in range(rows):
                value = data[i][j]
                if not is_zero(value):
                    values.append(value)
                    row_index.append(i)
            column_pointer.append(len(values))

        return cls._from_validated(
            values, row_index, column_pointer, (rows, cols), normalize_datatype(datatype)
        )

    @classmethod
    def from_coo(
        cls,
        row: Sequence[int],
        col: Sequence[int],
        values: Sequence[Any],
        shape: Tuple[int, int],
        datatype: Optional[Union[str, Kind]] = None,
    ) -> 'SparseMatrix':
        """Create from coordinate triplets in any order.

        Zero values are dropped.

        Raises:
            ValueError: On mismatched lengths, out-of-range or duplicate
                coordinates.
        """
        if not (len(row) == len(col) == len(values)):
            raise ValueError("row, col and values must have the same length")
        rows, cols = (int(d) for d in shape)

        entries = sorted(
            ((int(j), int(i), v) for i, j, v in zip(row, col, values)),
            key=lambda e: (e[0], e[1]),
        )
        out_values = []
        out_rows = []
        counts = [0] * cols
        previous = None
        for j, i, v in entries:
            if not (0 <= i < rows and 0 <= j < cols):
                raise ValueError(f"Coordinate ({i}, {j}) out of range for shape {shape}")
            if previous == (i, j):
                raise ValueError(f"Duplicate coordinate ({i}, {j})")
            previous = (i, j)
            if is_zero(v):
                continue
            out_values.append(v)
            out_rows.append(i)
            counts[j] += 1

        column_pointer = [0]
        for count in counts:
            column_pointer.append(column_pointer[-1] + count)

        return cls._from_validated(
            out_values, out_rows, column_pointer, (rows, cols), normalize_datatype(datatype)
        )

    @classmethod
    def from_scipy(cls, mat: Any, datatype: Optional[Union[str, Kind]] = None) -> 'SparseMatrix':
        """Create from any scipy.sparse matrix or array (copied).

        Args:
            mat: scipy sparse matrix; converted to CSC with sorted, summed
                indices and explicit zeros removed.
            datatype: Element datatype; inferred from the dtype if omitted.
        """
        sp = _import_scipy_sparse()
        if not sp.issparse(mat):
            raise TypeError(f"Expected a scipy.sparse matrix, got {type(mat).__name__}")

        csc = sp.csc_matrix(mat, copy=True)
        csc.sum_duplicates()
        csc.sort_indices()
        csc.eliminate_zeros()

        if datatype is None:
            datatype = datatype_of_dtype(csc.dtype)
        logger.debug("Importing scipy sparse matrix %s with nnz=%d", csc.shape, csc.nnz)

        return cls._from_validated(
            csc.data.tolist(),
            csc.indices.tolist(),
            csc.indptr.tolist(),
            csc.shape,
            normalize_datatype(datatype),
        )

    @classmethod
    def zeros(cls, rows: int, cols: int, datatype: Optional[str] = None) -> 'SparseMatrix':
        """Create an all-zero matrix."""
        return cls._from_validated((), (), (0,) * (cols + 1), (rows, cols), normalize_datatype(datatype))

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, index: Union[int, Tuple[int, ...]]) -> Any:
        i, j = self._normalize_index(index)
        start, end = self._column_pointer[j], self._column_pointer[j + 1]
        k = bisect_left(self._row_index, i, start, end)
        if k < end and self._row_index[k] == i:
            return self._values[k]
        return zero_of(self._datatype)

    def column(self, j: int) -> Tuple[Tuple[int, ...], Tuple[Any, ...]]:
        """Stored (row indices, values) of column ``j``."""
        start, end = self._column_pointer[j], self._column_pointer[j + 1]
        return self._row_index[start:end], self._values[start:end]

    def items(self) -> Iterator[Tuple[int, int, Any]]:
        """Iterate stored entries as (row, col, value) in column-major order."""
        for j in range(self.cols):
            for k in range(self._column_pointer[j], self._column_pointer[j + 1]):
                yield self._row_index[k], j, self._values[k]

    # =========================================================================
    # Conversion Methods
    # =========================================================================

    def to_array(self) -> List[List[Any]]:
        zero = zero_of(self._datatype)
        rows, cols = self._shape
        array = [[zero] * cols for _ in range(rows)]
        for i, j, value in self.items():
            array[i][j] = value
        return array

    def to_dense(self) -> 'DenseMatrix':
        """Convert to DenseMatrix, materialising the implicit zeros."""
        from ._dense import DenseMatrix
        return DenseMatrix._from_validated(self.to_array(), self._shape, self._datatype)

    def to_sparse(self) -> 'SparseMatrix':
        return self.copy()

    def to_scipy(self) -> Any:
        """Convert to scipy.sparse.csc_matrix."""
        sp = _import_scipy_sparse()
        values = np.asarray(self._values) if self._values else np.zeros(0)
        return sp.csc_matrix(
            (
                values,
                np.asarray(self._row_index, dtype=np.int64),
                np.asarray(self._column_pointer, dtype=np.int64),
            ),
            shape=self._shape,
        )

    def copy(self) -> 'SparseMatrix':
        # Stored sequences are immutable tuples
        return SparseMatrix._from_validated(
            self._values, self._row_index, self._column_pointer, self._shape, self._datatype
        )

    # =========================================================================
    # Comparison and Representation
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (
            self._shape == other._shape
            and self._datatype == other._datatype
            and self._column_pointer == other._column_pointer
            and self._row_index == other._row_index
            and self._values == other._values
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"SparseMatrix(shape={self._shape}, nnz={self.nnz}, "
            f"datatype={self._datatype!r})"
        )
