"""Kernel error types.

Two disjoint families: scope errors for indices with no context entry, and
type errors for ill-formed derivations. Both abort the current derivation.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ast import Term


@dataclass
class PTSError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


class ScopeError(PTSError):
    pass


@dataclass
class UnboundVariable(ScopeError):
    index: int = 0
    depth: int = 0

    @classmethod
    def at(cls, index: int, depth: int) -> UnboundVariable:
        return cls(
            f"Scope Error: No type for variable {index} at depth {depth}",
            index,
            depth,
        )


class PTSTypeError(PTSError, TypeError):
    pass


class TopSortHasNoType(PTSTypeError):
    @classmethod
    def make(cls) -> TopSortHasNoType:
        return cls("Type Error: Kind does not have a type")


@dataclass
class NotAFunctionType(PTSTypeError):
    ty: Term | None = None

    @classmethod
    def of(cls, ty: Term) -> NotAFunctionType:
        return cls("Type Error: Function in application must be function typed", ty)


@dataclass
class TypeMismatch(PTSTypeError):
    expected: Term | None = None
    actual: Term | None = None

    @classmethod
    def between(cls, expected: Term, actual: Term) -> TypeMismatch:
        return cls(
            "Type Error: Function type does not match argument type",
            expected,
            actual,
        )


__all__ = [
    "PTSError",
    "ScopeError",
    "UnboundVariable",
    "PTSTypeError",
    "TopSortHasNoType",
    "NotAFunctionType",
    "TypeMismatch",
]
