"""Kernel: pseudoterms, index arithmetic, normalization and type inference."""

from .ast import BOX, STAR, App, Bind, Binder, Const, Lam, Pi, Sort, Term, Var
from .context import Context
from .debruijn import (
    free_in,
    mk_app,
    mk_lams,
    mk_pis,
    reduction_step,
    shift,
    substitute,
)
from .errors import (
    NotAFunctionType,
    PTSError,
    PTSTypeError,
    ScopeError,
    TopSortHasNoType,
    TypeMismatch,
    UnboundVariable,
)
from .normalize import normalize, normalize_step
from .pretty import pretty
from .typing import infer, infer_type, type_equal

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
    "Context",
    "shift",
    "substitute",
    "reduction_step",
    "free_in",
    "mk_app",
    "mk_lams",
    "mk_pis",
    "PTSError",
    "ScopeError",
    "UnboundVariable",
    "PTSTypeError",
    "TopSortHasNoType",
    "NotAFunctionType",
    "TypeMismatch",
    "normalize",
    "normalize_step",
    "pretty",
    "infer",
    "infer_type",
    "type_equal",
]
