"""Pretty-printing utilities for pseudoterms."""

from __future__ import annotations

from .ast import App, Bind, Binder, Const, Term, Var
from .debruijn import free_in

ATOM_PREC = 3
APP_PREC = 2
PI_PREC = 1
LAM_PREC = 0


def _fresh_name(ctx: list[str], base: str = "x") -> str:
    """Return a name not already present in ``ctx``."""

    candidate = base
    suffix = 0
    while candidate in ctx:
        suffix += 1
        candidate = f"{base}{suffix}"
    return candidate


def _maybe_paren(
    text: str, child_prec: int, parent_prec: int, *, allow_equal: bool
) -> str:
    if child_prec < parent_prec or (child_prec == parent_prec and not allow_equal):
        return f"({text})"
    return text


def pretty(term: Term) -> str:
    """Return ``term`` in surface syntax, inventing names for binders."""

    def fmt(t: Term, ctx: list[str]) -> tuple[str, int]:
        match t:
            case Var(k):
                name = ctx[k] if k < len(ctx) else f"?{k}"
                return name, ATOM_PREC

            case Const(sort):
                return sort.value, ATOM_PREC

            case App(f, a):
                func_text, func_prec = fmt(f, ctx)
                arg_text, arg_prec = fmt(a, ctx)
                func_disp = _maybe_paren(
                    func_text, func_prec, APP_PREC, allow_equal=True
                )
                arg_disp = _maybe_paren(arg_text, arg_prec, APP_PREC, allow_equal=False)
                return f"{func_disp} {arg_disp}", APP_PREC

            case Binder(Bind.TERM, arg_ty, body):
                binder = _fresh_name(ctx)
                arg_text, arg_prec = fmt(arg_ty, ctx)
                body_text, _ = fmt(body, [binder, *ctx])
                arg_disp = _maybe_paren(arg_text, arg_prec, PI_PREC, allow_equal=False)
                return f"\\{binder}:{arg_disp}. {body_text}", LAM_PREC

            case Binder(Bind.TYPE, arg_ty, body):
                # "_" marks a non-dependent product
                binder = _fresh_name(ctx, base="x" if free_in(body, 0) else "_")
                arg_text, arg_prec = fmt(arg_ty, ctx)
                body_text, _ = fmt(body, [binder, *ctx])
                arg_disp = _maybe_paren(arg_text, arg_prec, PI_PREC, allow_equal=False)
                return f"@{binder}:{arg_disp}. {body_text}", LAM_PREC

        raise TypeError(f"Cannot pretty-print unknown term: {t!r}")

    return fmt(term, [])[0]


__all__ = ["pretty"]
