"""Tests for predicate shapes and result variants."""

from __future__ import annotations

import pytest

from datagrid_filters.predicates import (
    SKIP,
    USE_DEFAULT,
    ExplicitPredicate,
    ScopeBoundPredicate,
    Skip,
    UseDefault,
    as_predicate,
    explicit,
    scoped,
)


def test_sentinels_are_singletons():
    assert UseDefault() is USE_DEFAULT
    assert Skip() is SKIP
    assert repr(USE_DEFAULT) == "USE_DEFAULT"
    assert repr(SKIP) == "SKIP"


def test_explicit_arity_computed_at_construction():
    assert ExplicitPredicate(lambda v: v).arity == 1
    assert ExplicitPredicate(lambda v, s: v).arity == 2
    assert ExplicitPredicate(lambda v, s, g: v).arity == 3
    assert ExplicitPredicate(lambda *args: args).arity is None


def test_explicit_passes_leading_arguments():
    assert explicit(lambda v: v)(1, "scope", "grid") == 1
    assert explicit(lambda v, s: (v, s))(1, "scope", "grid") == (1, "scope")
    assert explicit(lambda *args: args)(1, "scope", "grid") == (1, "scope", "grid")


def test_explicit_keyword_only_parameters_are_ignored():
    def predicate(value, scope, *, extra=None):
        return (value, scope, extra)

    assert explicit(predicate)(1, "scope", "grid") == (1, "scope", None)


def test_scope_bound_calls_like_a_method():
    predicate = scoped(lambda scope, value: f"{scope}:{value}")
    assert predicate(1, "scope", "grid") == "scope:1"


def test_scope_bound_by_method_name():
    predicate = ScopeBoundPredicate("upper")

    class Scope:
        def upper(self, value):
            return str(value).upper()

    assert predicate("abc", Scope(), None) == "ABC"


def test_as_predicate_wraps_callables():
    existing = scoped("x")
    assert as_predicate(existing) is existing
    assert isinstance(as_predicate(lambda v: v), ExplicitPredicate)


def test_as_predicate_rejects_non_callables():
    with pytest.raises(TypeError):
        as_predicate(42)
