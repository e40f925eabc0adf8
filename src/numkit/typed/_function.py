"""
Runtime multiple dispatch on the kinds of two operands.

A typed function is built from a table of signatures. Each signature is a
pattern of two comma separated tokens (a kind name or ``any``) mapped to an
implementation taking two operands:

    larger = typed('larger', {
        'number, number': lambda x, y: x > y,
        'DenseMatrix, any': lambda x, y: dense_scalar(x, y, larger, False),
    })

Resolution order on every call:

    1. exact match of both concrete kinds (dictionary lookup)
    2. signatures with ``any`` or abstract tokens, most specific first
       (fewer ``any``, then fewer abstract tokens, then declaration order)
    3. signatures reachable through implicit conversions of the operands
       (fewest conversions, then earliest conversions, then declaration
       order)

If nothing matches, TypeMismatch is raised naming the function and both
operand kinds.
"""

from __future__ import annotations

import logging
from typing import (
    Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple,
)

from ..error import TypeMismatch
from ..kinds import (
    ABSTRACT_KINDS, ANY, DEFAULT_CONVERSIONS, Conversion,
    find_conversion, kind_of, matches, normalize_kind, validate_kind,
)

__all__ = ['TypedFunction', 'typed', 'parse_signature']

logger = logging.getLogger("numkit.typed")

Implementation = Callable[[Any, Any], Any]


class _Signature(NamedTuple):
    params: Tuple[str, str]
    impl: Implementation
    order: int
    any_count: int
    abstract_count: int

    @property
    def pattern(self) -> str:
        return ', '.join(self.params)


def parse_signature(pattern: str) -> Tuple[str, str]:
    """
    Parse and validate a two-operand signature pattern.

    Example:
        >>> parse_signature('DenseMatrix,any')
        ('DenseMatrix', 'any')

    Raises:
        ValueError: On wrong arity or unknown kind names
    """
    if not isinstance(pattern, str):
        raise TypeError(f"Signature must be a string, got {type(pattern).__name__}")
    tokens = tuple(normalize_kind(t.strip()) for t in pattern.split(','))
    if len(tokens) != 2:
        raise ValueError(
            f"Signature {pattern!r} must name exactly two operands, got {len(tokens)}"
        )
    for token in tokens:
        validate_kind(token, allow_any=True)
    return tokens


class TypedFunction:
    """
    Binary function dispatching on the runtime kinds of its operands.

    Attributes:
        name: Function name used in error messages.
        signatures: Declared patterns in declaration order.
    """

    def __init__(
        self,
        name: str,
        signatures: Mapping[str, Implementation],
        conversions: Sequence[Conversion] = DEFAULT_CONVERSIONS,
    ):
        self.name = name
        self._conversions = tuple(conversions)
        self._declared: List[_Signature] = []
        self._exact: Dict[Tuple[str, str], Implementation] = {}

        for order, (pattern, impl) in enumerate(signatures.items()):
            params = parse_signature(pattern)
            if params == (ANY, ANY):
                raise ValueError(f"Signature 'any, any' is not allowed in {name}")
            if not callable(impl):
                raise TypeError(f"Implementation of {pattern!r} in {name} is not callable")
            if any(sig.params == params for sig in self._declared):
                raise ValueError(f"Duplicate signature {pattern!r} in {name}")

            sig = _Signature(
                params=params,
                impl=impl,
                order=order,
                any_count=params.count(ANY),
                abstract_count=sum(1 for p in params if p in ABSTRACT_KINDS),
            )
            self._declared.append(sig)
            if sig.any_count == 0 and sig.abstract_count == 0:
                self._exact[params] = impl

        self._ordered = sorted(
            (sig for sig in self._declared if sig.params not in self._exact),
            key=lambda sig: (sig.any_count, sig.abstract_count, sig.order),
        )

        logger.debug(
            "Created typed function %s with %d signatures (%d exact)",
            name, len(self._declared), len(self._exact),
        )

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def signatures(self) -> Tuple[str, ...]:
        return tuple(sig.pattern for sig in self._declared)

    def __repr__(self) -> str:
        return f"TypedFunction({self.name!r}, signatures={len(self._declared)})"

    # =========================================================================
    # Resolution
    # =========================================================================

    def _match(self, kinds: Tuple[str, str]) -> Optional[Implementation]:
        impl = self._exact.get(kinds)
        if impl is not None:
            return impl
        for sig in self._ordered:
            if matches(kinds[0], sig.params[0]) and matches(kinds[1], sig.params[1]):
                return sig.impl
        return None

    def find(self, kind_a: str, kind_b: str) -> Optional[Implementation]:
        """
        Resolve statically by kind names, without implicit conversions.

        Returns:
            The implementation, or None when no signature matches.
        """
        return self._match((normalize_kind(kind_a), normalize_kind(kind_b)))

    def _match_with_conversions(
        self, kinds: Tuple[str, str]
    ) -> Optional[Tuple[_Signature, Tuple[Optional[Conversion], ...]]]:
        best = None
        best_key = None
        for sig in self._declared:
            plan = []
            for kind, token in zip(kinds, sig.params):
                if matches(kind, token):
                    plan.append(None)
                    continue
                found = find_conversion(kind, token, self._conversions)
                if found is None:
                    break
                plan.append(found)
            else:
                positions = sorted(p[0] for p in plan if p is not None)
                key = (len(positions), tuple(positions), sig.order)
                if best_key is None or key < best_key:
                    best = (sig, tuple(p[1] if p is not None else None for p in plan))
                    best_key = key
        return best

    def resolve(self, x: Any, y: Any) -> Tuple[Implementation, Tuple[Any, Any]]:
        """
        Select the implementation for two operands.

        Returns:
            (implementation, operands) where the operands have been
            implicitly converted when the match needed it.

        Raises:
            TypeMismatch: If no signature accepts the operand kinds
        """
        kinds = (kind_of(x), kind_of(y))
        impl = self._match(kinds)
        if impl is not None:
            return impl, (x, y)

        found = self._match_with_conversions(kinds)
        if found is None:
            raise TypeMismatch(self.name, kinds)

        sig, plan = found
        logger.debug(
            "%s(%s, %s) resolved to '%s' through implicit conversion",
            self.name, kinds[0], kinds[1], sig.pattern,
        )
        args = tuple(
            conversion.convert(arg) if conversion is not None else arg
            for conversion, arg in zip(plan, (x, y))
        )
        return sig.impl, args

    def __call__(self, x: Any, y: Any) -> Any:
        impl, (a, b) = self.resolve(x, y)
        return impl(a, b)


def typed(
    name: str,
    signatures: Mapping[str, Implementation],
    conversions: Sequence[Conversion] = DEFAULT_CONVERSIONS,
) -> TypedFunction:
    """
    Build a TypedFunction.

    Args:
        name: Function name used in error messages
        signatures: Mapping from pattern ('kind, kind') to implementation
        conversions: Implicit conversions, earlier entries preferred

    Raises:
        ValueError: On malformed, unknown, duplicate or 'any, any' patterns
    """
    return TypedFunction(name, signatures, conversions)
