"""Budgeted beta normalization."""

from __future__ import annotations

import logging
import time

from .ast import App, Binder, Const, Term, Var
from .debruijn import reduction_step

logger = logging.getLogger(__name__)


def normalize_step(term: Term) -> tuple[Term, bool]:
    """One parallel rewrite pass over ``term``.

    Returns the rewritten term and ``True`` when no redex was contracted,
    i.e. when ``term`` was already normal.
    """

    match term:
        case Var() | Const():
            return term, True
        case App(f, a):
            f1, f_normal = normalize_step(f)
            a1, a_normal = normalize_step(a)
            if isinstance(f1, Binder):
                return reduction_step(f1.body, a1), False
            return App(f1, a1), f_normal and a_normal
        case Binder(bind, ty, body):
            ty1, ty_normal = normalize_step(ty)
            body1, body_normal = normalize_step(body)
            return Binder(bind, ty1, body1), ty_normal and body_normal

    raise TypeError(f"Unexpected term in normalize_step: {term!r}")


def normalize(term: Term, timeout: float | None = None) -> Term:
    """Normalize ``term`` by repeated passes until one reports no reduction.

    When ``timeout`` (seconds of wall-clock time) elapses the loop stops at the
    next pass boundary and the partially reduced term is returned.
    """

    start = time.monotonic()
    passes = 0
    while True:
        term, finished = normalize_step(term)
        passes += 1
        if finished:
            logger.debug("normal form reached after %d passes", passes)
            return term
        if timeout is not None and time.monotonic() - start > timeout:
            logger.debug(
                "normalization budget of %ss spent after %d passes", timeout, passes
            )
            return term


__all__ = ["normalize_step", "normalize"]
