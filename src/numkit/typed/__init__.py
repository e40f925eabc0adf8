"""Runtime multiple dispatch for binary operators."""

from ._function import TypedFunction, typed, parse_signature

__all__ = ['TypedFunction', 'typed', 'parse_signature']
