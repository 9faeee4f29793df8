"""
Conditional enablement and grid-resolved values.

``if`` / ``unless`` options accept a literal boolean, a grid method name
or a callable.  They are coerced once, at filter construction, into one
of four closed variants:

- ``Always`` / ``Never``: literal outcomes
- ``Named(identifier)``: attribute or method looked up on the grid
- ``Custom(fn)``: callable receiving the grid
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .utils import apply_args

if TYPE_CHECKING:
    from collections.abc import Callable


class Condition:
    """Base for enablement conditions."""

    def resolve(self, grid: Any) -> bool:
        raise NotImplementedError

    @staticmethod
    def coerce(raw: Any) -> Condition | None:
        """Turn a raw option value into a condition; ``None`` stays ``None``."""
        if raw is None or isinstance(raw, Condition):
            return raw
        if isinstance(raw, bool):
            return ALWAYS if raw else NEVER
        if isinstance(raw, str):
            return Named(raw)
        if callable(raw):
            return Custom(raw)
        raise TypeError(
            f"Condition must be a bool, a grid method name or a callable, got {raw!r}"
        )


@dataclass(frozen=True)
class Always(Condition):
    def resolve(self, grid: Any) -> bool:
        return True


@dataclass(frozen=True)
class Never(Condition):
    def resolve(self, grid: Any) -> bool:
        return False


@dataclass(frozen=True)
class Named(Condition):
    """Identifier resolved against the grid (called if it is a method)."""

    identifier: str

    def value(self, grid: Any) -> Any:
        attr = getattr(grid, self.identifier)
        return attr() if callable(attr) else attr

    def resolve(self, grid: Any) -> bool:
        return bool(self.value(grid))


@dataclass(frozen=True)
class Custom(Condition):
    fn: Callable[..., Any]

    def resolve(self, grid: Any) -> bool:
        return bool(apply_args(self.fn, grid))


ALWAYS = Always()
NEVER = Never()


def process_availability(
    grid: Any, if_: Condition | None, unless: Condition | None
) -> bool:
    """Enabled iff ``if_`` is absent or truthy and ``unless`` is absent or falsy."""
    if if_ is not None and not if_.resolve(grid):
        return False
    return not (unless is not None and unless.resolve(grid))


def resolve_value(grid: Any, raw: Any) -> Any:
    """
    Resolve an option value against the grid.

    ``Named`` identifiers are looked up on the grid, callables are
    called with the grid when they accept it, anything else is a literal.
    """
    if isinstance(raw, Named):
        return raw.value(grid)
    if callable(raw):
        return apply_args(raw, grid)
    return raw
