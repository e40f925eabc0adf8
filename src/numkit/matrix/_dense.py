"""Dense matrix stored as nested Python lists.

A DenseMatrix holds an explicit value at every coordinate. Any rank >= 1 is
supported; a rank-1 matrix is a plain list of scalars.

Example:
    >>> m = DenseMatrix([[1, 2], [3, 4]])
    >>> m.shape
    (2, 2)
    >>> m[1, 0]
    3
"""

from __future__ import annotations

import copy as _copy
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..kinds import Kind, zero_of
from ._base import MatrixBase, datatype_of_dtype, normalize_datatype

if TYPE_CHECKING:
    from ._sparse import SparseMatrix

__all__ = ['DenseMatrix']


def _is_level(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _infer_shape(data: Sequence[Any]) -> Tuple[int, ...]:
    """Shape read along the first element of every nesting level."""
    shape = []
    level = data
    while _is_level(level):
        shape.append(len(level))
        if len(level) == 0:
            break
        level = level[0]
    return tuple(shape)


def _copy_checked(level: Any, shape: Tuple[int, ...], depth: int) -> Any:
    """Deep copy ``level`` while checking it matches ``shape``."""
    if depth == len(shape):
        if _is_level(level):
            raise ValueError("Dimension mismatch: jagged nested data")
        return level
    if not _is_level(level) or len(level) != shape[depth]:
        raise ValueError(
            f"Dimension mismatch: expected {shape[depth]} elements at depth {depth}"
        )
    return [_copy_checked(item, shape, depth + 1) for item in level]


class DenseMatrix(MatrixBase):
    """Dense matrix with optional element datatype.

    Attributes:
        shape: Matrix dimensions.
        datatype: Kind name of the elements or None.

    Example:
        >>> DenseMatrix([True, False], datatype='boolean').datatype
        'boolean'
    """

    __slots__ = ('_data', '_shape', '_datatype')

    storage = 'dense'

    # =========================================================================
    # Initialization
    # =========================================================================

    def __init__(
        self,
        data: Union[Sequence[Any], np.ndarray, None] = None,
        datatype: Optional[Union[str, Kind]] = None,
    ):
        """Create from nested lists, tuples or a NumPy array (copied).

        Raises:
            ValueError: If the nested data is jagged or a scalar.
        """
        if data is None:
            data = []
        if isinstance(data, np.ndarray):
            data = data.tolist()
        if not _is_level(data):
            raise ValueError(
                f"DenseMatrix data must be a nested list, got {type(data).__name__}"
            )

        shape = _infer_shape(data)
        self._data = _copy_checked(data, shape, 0)
        self._shape = shape
        self._datatype = normalize_datatype(datatype)

    @classmethod
    def _from_validated(
        cls,
        data: List[Any],
        shape: Tuple[int, ...],
        datatype: Optional[str] = None,
    ) -> 'DenseMatrix':
        """Wrap freshly built nested lists without copying or checking."""
        obj = cls.__new__(cls)
        obj._data = data
        obj._shape = tuple(shape)
        obj._datatype = datatype
        return obj

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def datatype(self) -> Optional[str]:
        return self._datatype

    @property
    def data(self) -> List[Any]:
        """Underlying nested lists (read only; use to_array() for a copy)."""
        return self._data

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_numpy(
        cls,
        array: np.ndarray,
        datatype: Optional[Union[str, Kind]] = None,
    ) -> 'DenseMatrix':
        """Create from a NumPy array; datatype inferred from the dtype if omitted."""
        array = np.asarray(array)
        if array.ndim == 0:
            raise ValueError("Cannot create a matrix from a 0-d array")
        if datatype is None:
            datatype = datatype_of_dtype(array.dtype)
        return cls(array.tolist(), datatype=datatype)

    @classmethod
    def zeros(cls, shape: Sequence[int], datatype: Optional[str] = None) -> 'DenseMatrix':
        """Dense matrix of the given shape filled with the zero of ``datatype``."""
        shape = tuple(int(d) for d in shape)
        if not shape:
            raise ValueError("DenseMatrix needs at least one dimension")
        return cls._from_validated(
            _filled(shape, zero_of(datatype)), shape, normalize_datatype(datatype)
        )

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, index: Union[int, Tuple[int, ...]]) -> Any:
        value = self._data
        for i in self._normalize_index(index):
            value = value[i]
        return value

    # =========================================================================
    # Conversion Methods
    # =========================================================================

    def to_array(self) -> List[Any]:
        return _copy.deepcopy(self._data)

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """Convert to a NumPy array (object dtype for non-numeric elements)."""
        return np.array(self._data, dtype=dtype)

    def to_dense(self) -> 'DenseMatrix':
        return self.copy()

    def to_sparse(self) -> 'SparseMatrix':
        """Convert to compressed sparse column storage (2-D only)."""
        from ._sparse import SparseMatrix
        return SparseMatrix.from_dense(self)

    def copy(self) -> 'DenseMatrix':
        return DenseMatrix._from_validated(
            _copy.deepcopy(self._data), self._shape, self._datatype
        )

    # =========================================================================
    # Comparison and Representation
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return (
            self._shape == other._shape
            and self._datatype == other._datatype
            and self._data == other._data
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"DenseMatrix({self._data!r}, shape={self._shape}, datatype={self._datatype!r})"


def _filled(shape: Tuple[int, ...], value: Any) -> List[Any]:
    if len(shape) == 1:
        return [value] * shape[0]
    return [_filled(shape[1:], value) for _ in range(shape[0])]
