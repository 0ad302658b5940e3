"""Abstract syntax tree nodes for the two-sorted pseudoterm calculus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class Sort(Enum):
    """The two sorts. ``TYPE`` classifies types, ``KIND`` classifies ``TYPE``."""

    TYPE = "*"
    KIND = "#"


class Bind(Enum):
    """Binder flavours: value abstraction (``\\``) or dependent product (``@``)."""

    TERM = "\\"
    TYPE = "@"


@dataclass(frozen=True)
class Const:
    """One of the sort constants ``*`` or ``#``."""

    sort: Sort


@dataclass(frozen=True)
class Var:
    """De Bruijn variable pointing to the binder at ``k``.

    Args:
        k: Zero-based index counting binders outward from the use site.
           ``0`` refers to the innermost binder, ``1`` to the next, etc.
    """

    k: int

    def __post_init__(self) -> None:
        if self.k < 0:
            raise ValueError("De Bruijn indices must be non-negative")


@dataclass(frozen=True)
class App:
    """Application of a value-level or type-level function.

    Args:
        func: Term expected to reduce to a function.
        arg: Argument term supplied to ``func``.
    """

    func: Term
    arg: Term


@dataclass(frozen=True)
class Binder:
    """A binder introducing one variable over ``body``.

    Args:
        bind: ``Bind.TERM`` for an abstraction, ``Bind.TYPE`` for a Pi-type.
        ty: Type of the bound variable, scoped in the *outer* context.
        body: Term with the bound variable in scope (index 0).
    """

    bind: Bind
    ty: Term
    body: Term


Term: TypeAlias = Const | Var | App | Binder


STAR = Const(Sort.TYPE)
BOX = Const(Sort.KIND)


def Lam(ty: Term, body: Term) -> Binder:
    return Binder(Bind.TERM, ty, body)


def Pi(ty: Term, body: Term) -> Binder:
    return Binder(Bind.TYPE, ty, body)


__all__ = [
    "Sort",
    "Bind",
    "Term",
    "Const",
    "Var",
    "App",
    "Binder",
    "STAR",
    "BOX",
    "Lam",
    "Pi",
]
