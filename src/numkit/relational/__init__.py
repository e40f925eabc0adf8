"""
Relational operators built on typed dispatch and the element-wise combinators.

Each operator exists as a default instance bound to the configuration at
import time, and as a factory for instances bound to another configuration:

    >>> from numkit.config import Config
    >>> tolerant = create_larger(Config(epsilon=1e-9))
"""

from ._signatures import matrix_signatures
from .larger import create_larger, larger
from .smaller import create_smaller, smaller
from .unequal import create_unequal, unequal
from .compare import create_compare, compare

__all__ = [
    'matrix_signatures',
    'create_larger',
    'create_smaller',
    'create_unequal',
    'create_compare',
    'larger',
    'smaller',
    'unequal',
    'compare',
]
