"""Surface AST and name resolution."""

from __future__ import annotations

from dataclasses import dataclass

from pts.kernel.ast import App, Bind, Binder, Const, Sort, Term, Var


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def extract(self, source: str) -> str:
        return source[self.start : self.end]


@dataclass
class SurfaceError(Exception):
    message: str
    span: Span
    source: str | None = None

    def __str__(self) -> str:
        if self.source is None:
            return f"Parse Error: {self.message} @ {self.span.start}:{self.span.end}"
        snippet = self.span.extract(self.source)
        return (
            f"Parse Error: {self.message} @ {self.span.start}:{self.span.end}: "
            f"{snippet!r}"
        )


@dataclass(frozen=True)
class SurfaceTerm:
    span: Span

    def resolve(self, names: tuple[str, ...] = ()) -> Term:
        """Translate to a kernel term; ``names`` lists binders innermost first."""
        raise SurfaceError("Unsupported surface term", self.span)


@dataclass(frozen=True)
class SConst(SurfaceTerm):
    sort: Sort

    def resolve(self, names: tuple[str, ...] = ()) -> Term:
        return Const(self.sort)


@dataclass(frozen=True)
class SVar(SurfaceTerm):
    name: str

    def resolve(self, names: tuple[str, ...] = ()) -> Term:
        if self.name in names:
            return Var(names.index(self.name))
        raise SurfaceError(f"Unbound identifier {self.name!r}", self.span)


@dataclass(frozen=True)
class SApp(SurfaceTerm):
    fn: SurfaceTerm
    arg: SurfaceTerm

    def resolve(self, names: tuple[str, ...] = ()) -> Term:
        return App(self.fn.resolve(names), self.arg.resolve(names))


@dataclass(frozen=True)
class SBinder(SurfaceTerm):
    bind: Bind
    name: str
    ty: SurfaceTerm
    body: SurfaceTerm

    def resolve(self, names: tuple[str, ...] = ()) -> Term:
        # the annotation cannot see the variable it annotates
        ty = self.ty.resolve(names)
        body = self.body.resolve((self.name, *names))
        return Binder(self.bind, ty, body)


__all__ = [
    "Span",
    "SurfaceError",
    "SurfaceTerm",
    "SConst",
    "SVar",
    "SApp",
    "SBinder",
]
