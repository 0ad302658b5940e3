"""Type inference for the two-sorted pseudoterm calculus."""

from __future__ import annotations

import logging

from .ast import App, Bind, Binder, Const, Sort, Term, Var
from .context import Context
from .debruijn import reduction_step
from .errors import NotAFunctionType, TopSortHasNoType, TypeMismatch
from .normalize import normalize

logger = logging.getLogger(__name__)


def type_equal(t1: Term, t2: Term, timeout: float | None = None) -> bool:
    """Return ``True`` when ``t1`` and ``t2`` normalize to the same term."""

    return normalize(t1, timeout) == normalize(t2, timeout)


def infer(ctx: Context, term: Term, timeout: float | None = None) -> Term:
    """Infer the type of ``term`` under ``ctx``.

    ``timeout`` bounds each normalization done while comparing types; ``None``
    leaves them unbounded. Raises a :class:`~pts.kernel.errors.PTSError` on
    the first failure.
    """

    match term:
        case Const(Sort.TYPE):
            return Const(Sort.KIND)
        case Const(Sort.KIND):
            raise TopSortHasNoType.make()
        case Var(k):
            return ctx.lookup(k)
        case App(f, a):
            f_ty = infer(ctx, f, timeout)
            logger.debug("function type: %r", f_ty)
            a_ty = infer(ctx, a, timeout)
            logger.debug("argument type: %r", a_ty)
            match normalize(f_ty, timeout):
                case Binder(Bind.TYPE, dom, cod):
                    expected = normalize(dom, timeout)
                    actual = normalize(a_ty, timeout)
                    if expected != actual:
                        raise TypeMismatch.between(expected, actual)
                    return reduction_step(cod, a)
                case other:
                    raise NotAFunctionType.of(other)
        case Binder(Bind.TERM, arg_ty, body):
            infer(ctx, arg_ty, timeout)
            with ctx.extended(arg_ty):
                body_ty = infer(ctx, body, timeout)
            return Binder(Bind.TYPE, arg_ty, body_ty)
        case Binder(Bind.TYPE, arg_ty, body):
            infer(ctx, arg_ty, timeout)
            with ctx.extended(arg_ty):
                return infer(ctx, body, timeout)

    raise TypeError(f"Unexpected term in infer: {term!r}")


def infer_type(term: Term, timeout: float | None = None) -> Term:
    """Infer the type of the closed ``term``."""

    return infer(Context(), term, timeout)


__all__ = ["type_equal", "infer", "infer_type"]
