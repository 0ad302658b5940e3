"""Typing context for de Bruijn-indexed terms."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from .ast import Term
from .debruijn import shift
from .errors import UnboundVariable


class Context:
    """
    Stack of variable types, stored outermost first.

    Representation:
        ``entries[i]`` is the type of the ``i``-th binder counted from the
        outside, so the innermost binder is the last entry and ``Var(k)``
        lives at position ``len - k - 1``.

    Invariant:
        Each stored type is scoped in the context *before* its own entry, the
        way it appeared as a binder annotation. Lookup shifts it by ``k + 1``
        to make it valid at the current depth.

    Extension discipline:
        Entries are only added through :meth:`extended`, which pops the entry
        again on every exit path. A failed nested derivation therefore never
        leaves a stale entry behind for its siblings.
    """

    def __init__(self, *entries: Term) -> None:
        self._entries: list[Term] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Context({', '.join(repr(e) for e in self._entries)})"

    def lookup(self, k: int) -> Term:
        """Return the type of ``Var(k)`` shifted to the current depth."""

        if k < 0 or k >= len(self._entries):
            raise UnboundVariable.at(k, len(self._entries))
        return shift(self._entries[len(self._entries) - k - 1], 0, k + 1)

    @contextmanager
    def extended(self, ty: Term) -> Iterator[Context]:
        """Push ``ty`` for the duration of the ``with`` block."""

        self._entries.append(ty)
        try:
            yield self
        finally:
            self._entries.pop()


__all__ = ["Context"]
