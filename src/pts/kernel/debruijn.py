"""Utilities for working with De Bruijn indices such as shifting and substitution."""

from __future__ import annotations

from .ast import App, Binder, Const, Term, Var, Lam, Pi


def shift(term: Term, cutoff: int, amount: int) -> Term:
    """Add ``amount`` to every variable of ``term`` with index ``>= cutoff``.

    Indices below ``cutoff`` are bound somewhere between the root of the
    rewrite and the occurrence, so they are left alone.
    """

    match term:
        case Var(k):
            return Var(k + amount if k >= cutoff else k)
        case App(f, a):
            return App(shift(f, cutoff, amount), shift(a, cutoff, amount))
        case Binder(bind, ty, body):
            return Binder(
                bind, shift(ty, cutoff, amount), shift(body, cutoff + 1, amount)
            )
        case Const():
            return term

    raise TypeError(f"Unexpected term in shift: {term!r}")


def substitute(term: Term, value: Term, var: int) -> Term:
    """Replace every ``Var(var)`` in ``term`` with ``value``.

    Other variables are kept as they are; retracting the binder is the job of
    :func:`reduction_step`.
    """

    match term:
        case Var(k):
            return value if k == var else term
        case App(f, a):
            return App(substitute(f, value, var), substitute(a, value, var))
        case Binder(bind, ty, body):
            return Binder(
                bind,
                substitute(ty, value, var),
                substitute(body, shift(value, 0, 1), var + 1),
            )
        case Const():
            return term

    raise TypeError(f"Unexpected term in substitute: {term!r}")


def reduction_step(body: Term, argument: Term) -> Term:
    """Contract ``(binder body) argument`` by instantiating ``Var(0)``."""

    return shift(substitute(body, shift(argument, 0, 1), 0), 0, -1)


def free_in(term: Term, k: int) -> bool:
    """Return ``True`` if ``Var(k)`` occurs free in ``term``."""

    match term:
        case Var(j):
            return j == k
        case App(f, a):
            return free_in(f, k) or free_in(a, k)
        case Binder(_, ty, body):
            return free_in(ty, k) or free_in(body, k + 1)
        case _:
            return False


def mk_app(fn: Term, *args: Term) -> Term:
    """Apply ``args`` to ``fn`` left-associatively.

    Returns:
        The left-associated application ``(((fn arg0) arg1) ...)``.
    """
    result: Term = fn
    for arg in args:
        result = App(result, arg)
    return result


def mk_lams(*param_tys: Term, body: Term) -> Term:
    """Build a right-nested abstraction chain over ``param_tys`` ending in ``body``.

    The first parameter type binds outermost. Each type is scoped under the
    binders that precede it, exactly as in source syntax.
    """
    fn: Term = body
    for param_ty in reversed(param_tys):
        fn = Lam(param_ty, fn)
    return fn


def mk_pis(*param_tys: Term, return_ty: Term) -> Term:
    """Build a right-nested Pi chain over ``param_tys`` ending in ``return_ty``."""
    pi: Term = return_ty
    for param_ty in reversed(param_tys):
        pi = Pi(param_ty, pi)
    return pi


__all__ = [
    "shift",
    "substitute",
    "reduction_step",
    "free_in",
    "mk_app",
    "mk_lams",
    "mk_pis",
]
