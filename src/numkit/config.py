"""
Global configuration for numkit.

Provides:
- Comparison tolerance (epsilon) for number and BigNumber kinds
- Decimal precision used inside BigNumber comparisons
- Default matrix storage used when plain arrays are normalised

Operators capture a Config when they are created; nothing in the combinator
core reads the global default.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Matrix Storage Formats
# =============================================================================

class MatrixFormat(Enum):
    """Storage format of a matrix."""
    DENSE = "dense"
    SPARSE = "sparse"

    @classmethod
    def parse(cls, value: Union["MatrixFormat", str]) -> "MatrixFormat":
        """Accept a MatrixFormat or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown matrix format: {value!r}. "
            f"Valid: {[f.value for f in cls]}"
        )


# =============================================================================
# Configuration Snapshot
# =============================================================================

@dataclass(frozen=True)
class Config:
    """
    Immutable configuration snapshot.

    Attributes:
        epsilon: Relative tolerance for nearly-equal tests. None disables the
            tolerance (exact comparison).
        precision: Significant digits for Decimal arithmetic.
        matrix: Storage used by matrix() and when normalising plain arrays.
    """
    epsilon: Optional[float] = 1e-12
    precision: int = 64
    matrix: MatrixFormat = MatrixFormat.DENSE

    def __post_init__(self):
        if self.epsilon is not None:
            if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, (int, float)):
                raise TypeError(f"epsilon must be a number or None, got {type(self.epsilon)}")
            if self.epsilon < 0:
                raise ValueError(f"epsilon must be non-negative, got {self.epsilon}")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be an int, got {type(self.precision)}")
        if self.precision < 1:
            raise ValueError(f"precision must be positive, got {self.precision}")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "matrix", MatrixFormat.parse(self.matrix))

    def replace(self, **changes) -> "Config":
        """Return a copy with the given fields changed (validated)."""
        return dataclasses.replace(self, **changes)


# Global default instance
_config = Config()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> Config:
    """Get the process-wide default configuration."""
    return _config


def set_config(**changes) -> Config:
    """
    Change the process-wide default configuration.

    Only operators created afterwards observe the new values.

    Example:
        >>> numkit.set_config(epsilon=1e-9)
        >>> tolerant = numkit.create_larger()
    """
    global _config
    _config = _config.replace(**changes)
    return _config


def reset_config() -> Config:
    """Restore the default configuration."""
    global _config
    _config = Config()
    return _config
