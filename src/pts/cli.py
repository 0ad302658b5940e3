"""Command line driver: type-check one expression.

    pts -e '\\x:*. x'
    echo '\\x:*. x' | pts

The exit status is 0 whether or not the expression type-checks.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pts.config import CheckerConfig
from pts.kernel.errors import PTSError
from pts.kernel.pretty import pretty
from pts.kernel.typing import infer_type
from pts.surface.parse import parse
from pts.surface.sast import SurfaceError

logger = logging.getLogger(__name__)


def check_source(source: str, config: CheckerConfig | None = None) -> str:
    """Parse and type ``source``; return the line to show the user."""

    config = config or CheckerConfig()
    try:
        term = parse(source)
        logger.debug("parsed term: %r", term)
        ty = infer_type(term, config.normalize_timeout)
    except (SurfaceError, PTSError) as err:
        logger.debug("check failed: %s", type(err).__name__)
        return str(err)
    return f"Type is: {pretty(ty) if config.pretty else repr(ty)}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pts",
        description="Infer the type of a pseudoterm in a two-sorted pure type system.",
    )
    parser.add_argument(
        "-e",
        "--expr",
        help="expression to check; read one line from stdin when omitted",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="seconds each normalization may run (default: unbounded)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=None,
        help="print the type in surface syntax instead of its repr",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debug output to stderr"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    config = CheckerConfig.from_env().override(
        normalize_timeout=args.timeout, pretty=args.pretty
    )
    source = args.expr if args.expr is not None else sys.stdin.readline()
    print(check_source(source, config))
    return 0


__all__ = ["check_source", "build_parser", "main"]
