"""Collaborator protocols: scope drivers and grids."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IScopeDriver(Protocol):
    """
    Backend adapter narrowing scopes by column conditions.

    A *scope* is an opaque, backend-defined handle to a queryable
    collection.  Implementations never mutate a scope; every narrowing
    returns a new one.
    """

    def match(self, candidate: Any) -> bool:
        """Return ``True`` if *candidate* is a scope of this backend's kind."""
        ...

    def to_scope(self, scope: Any) -> Any:
        """Coerce a collection-like object into the native scope type."""
        ...

    def has_column(self, scope: Any, column_name: str) -> bool:
        """Return ``True`` if the scope's records have the named column."""
        ...

    def where(self, scope: Any, attribute: str, value: Any) -> Any:
        """Equality condition; sequences mean inclusion, ``None`` means null."""
        ...

    def greater_equal(self, scope: Any, field: str, value: Any) -> Any:
        """Lower-bound condition used by ranged filters."""
        ...

    def less_equal(self, scope: Any, field: str, value: Any) -> Any:
        """Upper-bound condition used by ranged filters."""
        ...


@runtime_checkable
class IGrid(Protocol):
    """The report object owning filter definitions."""

    @property
    def driver(self) -> IScopeDriver: ...
