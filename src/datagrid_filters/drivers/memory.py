"""In-memory scopes over mappings or plain objects."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..normalizer import is_sequence

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger("datagrid_filters.drivers.memory")


def _read(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _fields(record: Any) -> Iterable[str]:
    if isinstance(record, Mapping):
        return record.keys()
    return (name for name in vars(record) if not name.startswith("_"))


class MemoryScope:
    """
    Immutable collection of records.

    Subclass to add named queries; every narrowing returns an instance
    of the same class::

        class UserScope(MemoryScope):
            def active_since(self, year):
                return self.filter(lambda u: u["joined"] >= year)
    """

    def __init__(
        self, records: Iterable[Any] = (), columns: Iterable[str] | None = None
    ) -> None:
        self._records = tuple(records)
        if columns is None:
            found: dict[str, None] = {}
            for record in self._records:
                found.update(dict.fromkeys(_fields(record)))
            columns = found
        self._columns = frozenset(columns)

    @property
    def records(self) -> tuple[Any, ...]:
        return self._records

    @property
    def columns(self) -> frozenset[str]:
        return self._columns

    def filter(self, predicate: Callable[[Any], bool]) -> MemoryScope:
        """Return a new scope keeping records for which *predicate* holds."""
        return type(self)(
            (r for r in self._records if predicate(r)), columns=self._columns
        )

    def values(self, field: str) -> list[Any]:
        return [_read(r, field) for r in self._records]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoryScope):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} records={len(self._records)}>"


class MemoryDriver:
    """Scope driver for :class:`MemoryScope`."""

    def __init__(self, scope_cls: type[MemoryScope] = MemoryScope) -> None:
        self.scope_cls = scope_cls

    def match(self, candidate: Any) -> bool:
        return isinstance(candidate, MemoryScope)

    def to_scope(self, scope: Any) -> MemoryScope:
        if isinstance(scope, MemoryScope):
            return scope
        return self.scope_cls(scope)

    def has_column(self, scope: Any, column_name: str) -> bool:
        return column_name in self.to_scope(scope).columns

    def where(self, scope: Any, attribute: str, value: Any) -> MemoryScope:
        logger.debug("where %s = %r", attribute, value)
        if is_sequence(value):
            allowed = list(value)
            return self.to_scope(scope).filter(
                lambda r: _read(r, attribute) in allowed
            )
        return self.to_scope(scope).filter(lambda r: _read(r, attribute) == value)

    def greater_equal(self, scope: Any, field: str, value: Any) -> MemoryScope:
        return self.to_scope(scope).filter(
            lambda r: _compare(_read(r, field), value, lambda a, b: a >= b)
        )

    def less_equal(self, scope: Any, field: str, value: Any) -> MemoryScope:
        return self.to_scope(scope).filter(
            lambda r: _compare(_read(r, field), value, lambda a, b: a <= b)
        )


def _compare(actual: Any, bound: Any, op: Callable[[Any, Any], bool]) -> bool:
    if actual is None:
        return False
    try:
        return bool(op(actual, bound))
    except TypeError:
        return False
