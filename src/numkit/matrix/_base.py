"""
Matrix Base Class

Both storage variants share one small interface so that dispatch and the
element-wise combinators can treat them uniformly where storage does not
matter.

Type Hierarchy:

    MatrixBase (ABC)
    ├── DenseMatrix  - every coordinate holds an explicit value
    └── SparseMatrix - compressed sparse column, zeros implicit

Matrices are immutable from the outside: every operation returns a freshly
built matrix and never shares storage with its inputs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple, Union

import numpy as np

from ..kinds import Kind, normalize_kind, validate_kind

__all__ = [
    'MatrixBase',
    'normalize_datatype',
    'datatype_of_dtype',
]


def normalize_datatype(datatype: Optional[Union[str, Kind]]) -> Optional[str]:
    """
    Normalize an optional datatype tag to a kind name.

    Raises:
        ValueError: If the tag is not a known kind
    """
    if datatype is None:
        return None
    datatype = normalize_kind(datatype)
    validate_kind(datatype)
    return datatype


def datatype_of_dtype(dtype: Any) -> Optional[str]:
    """
    Datatype tag matching a NumPy dtype.

    Example:
        >>> datatype_of_dtype(np.dtype('float64'))
        'number'
    """
    dtype = np.dtype(dtype)
    if dtype.kind == 'b':
        return 'boolean'
    if dtype.kind in 'iuf':
        return 'number'
    if dtype.kind == 'c':
        return 'Complex'
    return None


class MatrixBase(ABC):
    """
    Abstract base class for numkit matrices.

    Required Properties (subclasses must implement):
        shape: Matrix dimensions
        datatype: Optional kind tag of the elements
        storage: 'dense' or 'sparse'

    Required Methods (subclasses must implement):
        get(index): Element at a coordinate
        to_array(): Nested Python lists
        copy(): Deep copy
    """

    __slots__ = ()

    # =========================================================================
    # Abstract Properties
    # =========================================================================

    @property
    @abstractmethod
    def shape(self) -> Tuple[int, ...]:
        """Matrix dimensions."""
        ...

    @property
    @abstractmethod
    def datatype(self) -> Optional[str]:
        """Kind name of the elements, or None when unknown or mixed."""
        ...

    @property
    @abstractmethod
    def storage(self) -> str:
        """Storage format ('dense' or 'sparse')."""
        ...

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def ndim(self) -> int:
        """Number of dimensions."""
        return len(self.shape)

    @property
    def size(self) -> int:
        """Total number of coordinates."""
        total = 1
        for dim in self.shape:
            total *= dim
        return total

    # =========================================================================
    # Abstract Methods
    # =========================================================================

    @abstractmethod
    def get(self, index: Tuple[int, ...]) -> Any:
        """Element at ``index`` (implicit zero for absent sparse entries)."""
        ...

    @abstractmethod
    def to_array(self) -> List[Any]:
        """Nested Python lists holding every coordinate."""
        ...

    @abstractmethod
    def copy(self) -> 'MatrixBase':
        """Deep copy."""
        ...

    # =========================================================================
    # Shared Helpers
    # =========================================================================

    def _normalize_index(self, index: Union[int, Tuple[int, ...]]) -> Tuple[int, ...]:
        if isinstance(index, (int, np.integer)):
            index = (index,)
        index = tuple(index)
        if len(index) != self.ndim:
            raise IndexError(
                f"Index {index} has {len(index)} dimensions, "
                f"matrix has {self.ndim}"
            )
        normalized = []
        for i, dim in zip(index, self.shape):
            i = int(i)
            if i < 0:
                i += dim
            if not 0 <= i < dim:
                raise IndexError(f"Index {index} out of range for shape {self.shape}")
            normalized.append(i)
        return tuple(normalized)

    def __getitem__(self, index: Union[int, Tuple[int, ...]]) -> Any:
        return self.get(index)

    def __len__(self) -> int:
        return self.shape[0]
