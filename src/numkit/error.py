"""
Error handling for numkit.

Every error raised by the combinator core carries a numeric code so callers
can branch on it without string matching. Errors raised by scalar operator
implementations are propagated unmodified.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


# =============================================================================
# Error Codes
# =============================================================================

# Success
NK_OK = 0

# General errors (1-9)
NK_ERROR_UNKNOWN = 1
NK_ERROR_INTERNAL = 2

# Argument errors (10-19)
NK_ERROR_INVALID_ARGUMENT = 10
NK_ERROR_DIMENSION_MISMATCH = 11
NK_ERROR_DOMAIN_ERROR = 12

# Type errors (20-29)
NK_ERROR_TYPE_ERROR = 20
NK_ERROR_TYPE_MISMATCH = 21

# Unit errors (30-39)
NK_ERROR_UNIT_MISMATCH = 30


_ERROR_MESSAGES = {
    NK_OK: "Success",
    NK_ERROR_UNKNOWN: "Unknown error",
    NK_ERROR_INTERNAL: "Internal error",
    NK_ERROR_INVALID_ARGUMENT: "Invalid argument",
    NK_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    NK_ERROR_DOMAIN_ERROR: "Domain error",
    NK_ERROR_TYPE_ERROR: "Type error",
    NK_ERROR_TYPE_MISMATCH: "Type mismatch",
    NK_ERROR_UNIT_MISMATCH: "Unit mismatch",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MathError(Exception):
    """
    Base exception for all numkit errors.

    The error codes are re-exported as class attributes so that handlers can
    write ``err.code == MathError.ERROR_TYPE_MISMATCH``.
    """

    OK = NK_OK
    ERROR_UNKNOWN = NK_ERROR_UNKNOWN
    ERROR_INTERNAL = NK_ERROR_INTERNAL
    ERROR_INVALID_ARGUMENT = NK_ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = NK_ERROR_DIMENSION_MISMATCH
    ERROR_DOMAIN_ERROR = NK_ERROR_DOMAIN_ERROR
    ERROR_TYPE_ERROR = NK_ERROR_TYPE_ERROR
    ERROR_TYPE_MISMATCH = NK_ERROR_TYPE_MISMATCH
    ERROR_UNIT_MISMATCH = NK_ERROR_UNIT_MISMATCH

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Create a numkit exception.

        Args:
            code: Error code (one of the ``NK_*`` constants)
            message: Optional detailed message (generic text if not provided)
        """
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(message)

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MathError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(code, msg)


class DimensionMismatch(MathError, ValueError):
    """
    Raised when two matrix operands do not have the same shape.

    Attributes:
        name: Name of the operator that was evaluated (may be None)
        actual: Shape of the first operand
        expected: Shape the second operand required
    """

    def __init__(
        self,
        actual: Sequence[int],
        expected: Sequence[int],
        name: Optional[str] = None,
    ):
        self.name = name
        self.actual = tuple(actual)
        self.expected = tuple(expected)
        where = f" in function {name}" if name else ""
        super().__init__(
            NK_ERROR_DIMENSION_MISMATCH,
            f"Dimension mismatch{where}: "
            f"{_format_shape(self.actual)} must match {_format_shape(self.expected)}",
        )


class TypeMismatch(MathError, TypeError):
    """
    Raised when no signature of a typed function accepts the operand kinds.

    Attributes:
        name: Name of the typed function
        kinds: Runtime kind names of the operands, in argument order
    """

    def __init__(self, name: str, kinds: Sequence[str]):
        self.name = name
        self.kinds = tuple(kinds)
        super().__init__(
            NK_ERROR_TYPE_MISMATCH,
            f"Unexpected type of arguments in function {name} "
            f"(actual: {', '.join(self.kinds)})",
        )


class UnitMismatch(MathError, ValueError):
    """Raised when two units with a different base are compared."""

    def __init__(self, message: str = "Cannot compare units with different base"):
        super().__init__(NK_ERROR_UNIT_MISMATCH, message)


# =============================================================================
# Checks
# =============================================================================

def _format_shape(shape: Tuple[int, ...]) -> str:
    return "[" + ", ".join(str(d) for d in shape) + "]"


def check_same_shape(
    name: Optional[str],
    actual: Sequence[int],
    expected: Sequence[int],
) -> None:
    """
    Check that two shapes are identical.

    Args:
        name: Operator name used in the error message
        actual: Shape of the first operand
        expected: Shape of the second operand

    Raises:
        DimensionMismatch: If the shapes differ (including rank)
    """
    if tuple(actual) != tuple(expected):
        raise DimensionMismatch(actual, expected, name)


def operator_name(op: Any) -> Optional[str]:
    """Best-effort display name of an operator callable."""
    name = getattr(op, "name", None)
    if isinstance(name, str):
        return name
    return getattr(op, "__name__", None)
