"""Parser for the surface language.

Syntax::

    *            the constant Type
    #            the constant Kind
    \\x:A. b      abstraction
    @x:A. B      dependent product
    f a          application, left associative
    (t)          grouping

Identifiers are any run of non-blank characters other than the reserved
symbols ``* # \\ @ . : ( )``. A binder body extends as far right as possible.
"""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from pts.kernel.ast import Bind, Sort, Term
from pts.surface.sast import (
    SApp,
    SBinder,
    SConst,
    Span,
    SurfaceError,
    SurfaceTerm,
    SVar,
)

_SOURCE: str = ""

tokens = (
    "IDENT",
    "STAR",
    "BOX",
    "LAMBDA",
    "FORALL",
    "DOT",
    "COLON",
    "LPAREN",
    "RPAREN",
)

t_STAR = r"\*"
t_BOX = r"\#"
t_LAMBDA = r"\\"
t_FORALL = r"@"
t_DOT = r"\."
t_COLON = r":"
t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t\r\n\f\v"


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[^\s*\#\\@.:()]+"
    t.end = t.lexpos + len(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise SurfaceError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def _item_span(p: yacc.YaccProduction, index: int) -> Span:
    value = p[index]
    if isinstance(value, SurfaceTerm):
        return value.span
    tok = cast(lex.LexToken, p.slice[index])
    return _tok_span(tok)


def _span(p: yacc.YaccProduction, start: int, end: int) -> Span:
    start_span = _item_span(p, start)
    end_span = _item_span(p, end)
    return Span(start_span.start, end_span.end)


def p_term_app(p: yacc.YaccProduction) -> None:
    "term : app"
    p[0] = p[1]


def p_term_binder(p: yacc.YaccProduction) -> None:
    "term : binder"
    p[0] = p[1]


def p_term_app_binder(p: yacc.YaccProduction) -> None:
    "term : app binder"
    p[0] = SApp(span=_span(p, 1, 2), fn=p[1], arg=p[2])


def p_binder_lambda(p: yacc.YaccProduction) -> None:
    "binder : LAMBDA IDENT COLON term DOT term"
    p[0] = SBinder(span=_span(p, 1, 6), bind=Bind.TERM, name=p[2], ty=p[4], body=p[6])


def p_binder_forall(p: yacc.YaccProduction) -> None:
    "binder : FORALL IDENT COLON term DOT term"
    p[0] = SBinder(span=_span(p, 1, 6), bind=Bind.TYPE, name=p[2], ty=p[4], body=p[6])


def p_app_chain(p: yacc.YaccProduction) -> None:
    "app : app atom"
    p[0] = SApp(span=_span(p, 1, 2), fn=p[1], arg=p[2])


def p_app_atom(p: yacc.YaccProduction) -> None:
    "app : atom"
    p[0] = p[1]


def p_atom_star(p: yacc.YaccProduction) -> None:
    "atom : STAR"
    p[0] = SConst(span=_span(p, 1, 1), sort=Sort.TYPE)


def p_atom_box(p: yacc.YaccProduction) -> None:
    "atom : BOX"
    p[0] = SConst(span=_span(p, 1, 1), sort=Sort.KIND)


def p_atom_ident(p: yacc.YaccProduction) -> None:
    "atom : IDENT"
    p[0] = SVar(span=_span(p, 1, 1), name=p[1])


def p_atom_paren(p: yacc.YaccProduction) -> None:
    "atom : LPAREN term RPAREN"
    p[0] = p[2]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise SurfaceError("Unexpected end of input", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise SurfaceError("Unexpected token", span, _SOURCE)


_PARSER = None


def parse_term(source: str) -> SurfaceTerm:
    global _SOURCE, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="term", debug=False, write_tables=False)
    term = cast(SurfaceTerm, _PARSER.parse(source, lexer=lexer))
    if term is None:
        span = Span(len(source), len(source))
        raise SurfaceError("Unexpected end of input", span, source)
    return term


def parse(source: str) -> Term:
    """Parse ``source`` and resolve its names to de Bruijn indices."""

    term = parse_term(source)
    try:
        return term.resolve()
    except SurfaceError as err:
        err.source = source
        raise


__all__ = ["parse_term", "parse"]
