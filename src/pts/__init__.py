"""A type checker for a two-sorted pure type system in the style of LF."""

from pts.config import CheckerConfig
from pts.kernel import (
    Context,
    PTSError,
    Term,
    infer,
    infer_type,
    normalize,
    pretty,
    type_equal,
)
from pts.surface import SurfaceError, parse

__all__ = [
    "CheckerConfig",
    "Context",
    "PTSError",
    "SurfaceError",
    "Term",
    "infer",
    "infer_type",
    "normalize",
    "parse",
    "pretty",
    "type_equal",
]
