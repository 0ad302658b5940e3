import logging

import pytest

from pts.kernel.ast import BOX, STAR, App, Lam, Pi, Var
from pts.kernel.context import Context
from pts.kernel.debruijn import mk_app, mk_lams, mk_pis
from pts.kernel.errors import (
    NotAFunctionType,
    PTSTypeError,
    ScopeError,
    TopSortHasNoType,
    TypeMismatch,
    UnboundVariable,
)
from pts.kernel.typing import infer, infer_type, type_equal

POLY_ID = mk_lams(STAR, Var(0), body=Var(0))


def test_type_has_type_kind() -> None:
    assert infer(Context(), STAR) == BOX


def test_kind_has_no_type() -> None:
    with pytest.raises(TopSortHasNoType, match="Kind does not have a type"):
        infer(Context(), BOX)


def test_unbound_variable_in_empty_context() -> None:
    with pytest.raises(UnboundVariable, match="No type for variable 0") as info:
        infer_type(Var(0))
    assert isinstance(info.value, ScopeError)
    assert (info.value.index, info.value.depth) == (0, 0)


def test_unbound_variable_past_context_end() -> None:
    with pytest.raises(UnboundVariable, match="variable 1 at depth 1"):
        infer(Context(STAR), Var(1))


def test_identity_on_types_has_pi_type() -> None:
    assert infer_type(Lam(STAR, Var(0))) == Pi(STAR, STAR)


def test_polymorphic_identity() -> None:
    assert infer_type(POLY_ID) == mk_pis(STAR, Var(0), return_ty=Var(1))


def test_pi_type_has_type_of_its_codomain() -> None:
    assert infer_type(Pi(STAR, STAR)) == BOX
    assert infer_type(mk_pis(STAR, Var(0), return_ty=Var(1))) == STAR


def test_pi_over_kind_is_rejected() -> None:
    with pytest.raises(TopSortHasNoType):
        infer_type(Pi(STAR, BOX))


def test_lookup_shifts_dependent_types() -> None:
    # A : *, a : A  |-  a : A
    ctx = Context(STAR, Var(0))
    assert infer(ctx, Var(0)) == Var(1)
    assert infer(ctx, Var(1)) == STAR


def test_application_substitutes_argument_into_codomain() -> None:
    # B : *, b : B  |-  POLY_ID B b : B
    ctx = Context(STAR, Var(0))
    term = mk_app(POLY_ID, Var(1), Var(0))
    assert infer(ctx, term) == Var(1)


def test_partial_application_yields_instantiated_pi() -> None:
    ctx = Context(STAR, Var(0))
    assert infer(ctx, App(POLY_ID, Var(1))) == Pi(Var(1), Var(2))


def test_application_type_mismatch() -> None:
    # f : @x:*.*  |-  f f  fails, since f's type is not *
    ctx = Context(Pi(STAR, STAR))
    with pytest.raises(TypeMismatch, match="does not match") as info:
        infer(ctx, App(Var(0), Var(0)))
    assert info.value.expected == STAR
    assert info.value.actual == Pi(STAR, STAR)
    assert isinstance(info.value, PTSTypeError)
    assert isinstance(info.value, TypeError)


def test_applying_identity_to_a_sort_is_a_mismatch() -> None:
    with pytest.raises(TypeMismatch):
        infer_type(App(Lam(STAR, Var(0)), STAR))


def test_application_of_non_function() -> None:
    with pytest.raises(NotAFunctionType, match="must be function typed") as info:
        infer_type(App(STAR, STAR))
    assert info.value.ty == BOX


def test_abstraction_typed_head_is_not_a_function_type() -> None:
    ctx = Context(Lam(STAR, Var(0)))
    with pytest.raises(NotAFunctionType):
        infer(ctx, App(Var(0), STAR))


def test_argument_type_compared_up_to_beta() -> None:
    # \A:*. \f:(@_:((\T:*. T) A). A). \a:A. f a
    redex_dom = App(Lam(STAR, Var(0)), Var(0))
    f_ty = Pi(redex_dom, Var(1))
    term = mk_lams(STAR, f_ty, Var(1), body=App(Var(1), Var(0)))
    assert infer_type(term) == mk_pis(STAR, f_ty, Var(1), return_ty=Var(2))


def test_function_type_is_normalized_before_matching() -> None:
    # A : *, F : (\T:#. T) (@_:*. *)  |-  F A : *
    ctx = Context(STAR, App(Lam(BOX, Var(0)), Pi(STAR, STAR)))
    assert infer(ctx, App(Var(0), Var(1))) == STAR


def test_context_restored_after_failure() -> None:
    ctx = Context(STAR)
    with pytest.raises(TopSortHasNoType):
        infer(ctx, Lam(STAR, BOX))
    assert len(ctx) == 1
    assert list(ctx) == [STAR]


def test_failure_in_annotation_aborts() -> None:
    with pytest.raises(UnboundVariable):
        infer_type(Lam(Var(0), STAR))


def test_type_equal_normalizes_beta_equivalent_terms() -> None:
    beta_equiv = App(Lam(BOX, Var(0)), STAR)
    assert type_equal(beta_equiv, STAR)
    assert not type_equal(beta_equiv, BOX)


def test_infer_with_timeout() -> None:
    assert infer_type(Lam(STAR, Var(0)), timeout=1.0) == Pi(STAR, STAR)


def test_infer_logs_function_type(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="pts.kernel.typing")
    ctx = Context(STAR, Var(0))
    infer(ctx, mk_app(POLY_ID, Var(1), Var(0)))
    assert "function type" in caplog.text
