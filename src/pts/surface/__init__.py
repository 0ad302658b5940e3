"""Surface syntax: tokenizing, parsing and name resolution."""

from .parse import parse, parse_term
from .sast import SApp, SBinder, SConst, Span, SurfaceError, SurfaceTerm, SVar

__all__ = [
    "parse",
    "parse_term",
    "Span",
    "SurfaceError",
    "SurfaceTerm",
    "SConst",
    "SVar",
    "SApp",
    "SBinder",
]
