"""
Predicate shapes and their result variants.

A predicate maps a value to a narrowed scope.  Two calling conventions
exist and are chosen when the filter is built, never per call:

- ``ScopeBoundPredicate``: behaves like a method of the scope:
  ``fn(scope, value)``, or the name of a scope method called with ``value``.
- ``ExplicitPredicate``: receives ``(value, scope, grid)``; callables
  accepting fewer positional parameters get only the leading ones.

A predicate returns a scope, ``Applied(scope)``, ``USE_DEFAULT`` to run
the filter's default behaviour, or ``SKIP`` / ``None`` / ``False`` to
leave the scope untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .utils import positional_arity

if TYPE_CHECKING:
    from collections.abc import Callable


# ---------------------------------------------------------------------------
# Result variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Applied:
    """Explicitly narrowed scope."""

    scope: Any


class UseDefault:
    """Run the filter's default behaviour instead."""

    _instance: UseDefault | None = None

    def __new__(cls) -> UseDefault:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "USE_DEFAULT"


class Skip:
    """Leave the scope untouched."""

    _instance: Skip | None = None

    def __new__(cls) -> Skip:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"


USE_DEFAULT = UseDefault()
SKIP = Skip()


# ---------------------------------------------------------------------------
# Predicate shapes
# ---------------------------------------------------------------------------


class Predicate:
    """Base for predicate shapes."""

    def __call__(self, value: Any, scope: Any, grid: Any) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class ScopeBoundPredicate(Predicate):
    """Runs against the scope as if it were one of its methods."""

    fn: Callable[[Any, Any], Any] | str

    def __call__(self, value: Any, scope: Any, grid: Any) -> Any:
        if isinstance(self.fn, str):
            return getattr(scope, self.fn)(value)
        return self.fn(scope, value)


@dataclass(frozen=True)
class ExplicitPredicate(Predicate):
    """Receives ``(value, scope, grid)`` positionally, as far as accepted."""

    fn: Callable[..., Any]
    arity: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.arity is None:
            object.__setattr__(self, "arity", positional_arity(self.fn))

    def __call__(self, value: Any, scope: Any, grid: Any) -> Any:
        args = (value, scope, grid)
        if self.arity is None:
            return self.fn(*args)
        return self.fn(*args[: self.arity])


def scoped(fn: Callable[[Any, Any], Any] | str) -> ScopeBoundPredicate:
    """Decorator/helper building a ``ScopeBoundPredicate``."""
    return ScopeBoundPredicate(fn)


def explicit(fn: Callable[..., Any]) -> ExplicitPredicate:
    """Decorator/helper building an ``ExplicitPredicate``."""
    return ExplicitPredicate(fn)


def as_predicate(fn: Predicate | Callable[..., Any]) -> Predicate:
    """Bare callables become ``ExplicitPredicate``."""
    if isinstance(fn, Predicate):
        return fn
    if not callable(fn):
        raise TypeError(f"Predicate must be callable, got {fn!r}")
    return ExplicitPredicate(fn)
