"""
numkit - Element-wise Relational Operators over Mixed Kinds

Binary relational operators (larger, smaller, unequal, compare) that work on
booleans, numbers, Decimals, Fractions, complex numbers, SymPy units, numeric
strings and matrices, while keeping sparse matrices sparse:
- Runtime multiple dispatch on operand kinds (typed)
- Five element-wise combinators for dense/sparse/scalar operand pairs
- Dense (nested lists) and compressed sparse column storage
- NumPy/SciPy interop

Modules:
- typed: Multiple-dispatch registry
- elementwise: Element-wise combinators
- matrix: DenseMatrix, SparseMatrix and conversions
- relational: The operators and their factories

Architecture:
    ┌──────────────────────────────────────────────┐
    │   larger / smaller / unequal / compare       │
    ├──────────────────────────────────────────────┤
    │   typed dispatch  ->  scalar implementation  │
    │                   ->  element-wise combinator│
    ├──────────────────────────────────────────────┤
    │   DenseMatrix | SparseMatrix (CSC)           │
    └──────────────────────────────────────────────┘

Example:
    >>> import numkit
    >>> numkit.larger(3, 2)
    True
    >>> s = numkit.matrix([[0, 0], [0, 5]], 'sparse')
    >>> numkit.larger(s, 0).nnz
    1
    >>> tolerant = numkit.create_larger(numkit.Config(epsilon=1e-9))
"""

__version__ = '0.1.0'

from .config import Config, MatrixFormat, get_config, set_config, reset_config
from .error import (
    MathError,
    DimensionMismatch,
    TypeMismatch,
    UnitMismatch,
)
from .kinds import Kind, kind_of, is_zero, zero_of
from .matrix import (
    MatrixBase,
    DenseMatrix,
    SparseMatrix,
    to_sparse,
    to_dense,
    from_nested,
    to_nested,
    matrix,
)
from .typed import TypedFunction, typed
from .elementwise import (
    dense_dense,
    sparse_sparse,
    sparse_dense,
    dense_scalar,
    sparse_scalar,
)
from .relational import (
    create_larger,
    create_smaller,
    create_unequal,
    create_compare,
    larger,
    smaller,
    unequal,
    compare,
)

__all__ = [
    # Configuration
    'Config',
    'MatrixFormat',
    'get_config',
    'set_config',
    'reset_config',

    # Errors
    'MathError',
    'DimensionMismatch',
    'TypeMismatch',
    'UnitMismatch',

    # Kinds
    'Kind',
    'kind_of',
    'is_zero',
    'zero_of',

    # Matrices
    'MatrixBase',
    'DenseMatrix',
    'SparseMatrix',
    'to_sparse',
    'to_dense',
    'from_nested',
    'to_nested',
    'matrix',

    # Dispatch
    'TypedFunction',
    'typed',

    # Combinators
    'dense_dense',
    'sparse_sparse',
    'sparse_dense',
    'dense_scalar',
    'sparse_scalar',

    # Operators
    'create_larger',
    'create_smaller',
    'create_unequal',
    'create_compare',
    'larger',
    'smaller',
    'unequal',
    'compare',
]
