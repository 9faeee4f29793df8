"""
Filter kinds and their registry.

Every filter class carries its kind tag directly (``kind`` class
attribute).  The registry maps each tag to the class that introduced
it; subclasses inherit the tag and classify as their registered
ancestor, so no ordering between related kinds matters.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import FilterKindError

if TYPE_CHECKING:
    from .filters.base import BaseFilter

logger = logging.getLogger("datagrid_filters.kinds")


class FilterKind(str, Enum):
    """Supported filter kinds."""

    DEFAULT = "default"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DATE = "date"
    DATETIME = "datetime"
    ENUM = "enum"
    BOOLEAN = "boolean"
    XBOOLEAN = "xboolean"
    EBOOLEAN = "eboolean"


class FilterKindRegistry:
    """
    Registry of filter classes keyed by ``FilterKind``.

    Usage::

        registry = FilterKindRegistry()
        registry.register(IntegerFilter)

        age = registry.build("integer", "age", range=True)
    """

    def __init__(self) -> None:
        self._classes: dict[FilterKind, type[BaseFilter]] = {}

    # -- registration --------------------------------------------------------

    def register(self, filter_cls: type[BaseFilter]) -> type[BaseFilter]:
        """Register a filter class under its ``kind`` tag."""
        kind = getattr(filter_cls, "kind", None)
        if kind is None:
            raise FilterKindError(filter_cls.__name__)
        self._classes[_coerce_kind(kind)] = filter_cls
        logger.debug("Registered filter kind %s -> %s", kind, filter_cls.__name__)
        return filter_cls

    def register_all(self, *filter_classes: type[BaseFilter]) -> None:
        for filter_cls in filter_classes:
            self.register(filter_cls)

    def unregister(self, kind: FilterKind | str) -> None:
        self._classes.pop(_coerce_kind(kind), None)

    # -- look-up -------------------------------------------------------------

    def get(self, kind: FilterKind | str) -> type[BaseFilter] | None:
        return self._classes.get(_coerce_kind(kind))

    def has(self, kind: FilterKind | str) -> bool:
        return _coerce_kind(kind) in self._classes

    @property
    def kinds(self) -> list[FilterKind]:
        return list(self._classes)

    def kind_of(self, filter_cls: type[Any]) -> FilterKind:
        """
        Return the kind of *filter_cls*.

        Raises:
            FilterKindError: The class carries no tag, or its tag is not
                registered to the class or one of its ancestors.
        """
        try:
            kind = FilterKind(getattr(filter_cls, "kind", None))
        except ValueError:
            raise FilterKindError(filter_cls.__name__) from None
        registered = self._classes.get(kind)
        if registered is None or not issubclass(filter_cls, registered):
            raise FilterKindError(filter_cls.__name__)
        return kind

    # -- construction --------------------------------------------------------

    def build(
        self,
        kind: FilterKind | str,
        name: str,
        predicate: Any = None,
        *,
        driver: Any = None,
        **options: Any,
    ) -> BaseFilter:
        """Instantiate the filter class registered for *kind*."""
        filter_cls = self.get(kind)
        if filter_cls is None:
            raise FilterKindError(f"Kind {_coerce_kind(kind).value!r}")
        return filter_cls(name, options, predicate, driver=driver)


FILTER_TYPES = FilterKindRegistry()


def build_filter(
    kind: FilterKind | str,
    name: str,
    predicate: Any = None,
    *,
    driver: Any = None,
    **options: Any,
) -> BaseFilter:
    """Build a filter from the global registry."""
    return FILTER_TYPES.build(kind, name, predicate, driver=driver, **options)


def _coerce_kind(kind: Any) -> FilterKind:
    try:
        return FilterKind(kind)
    except ValueError as exc:
        raise FilterKindError(f"Kind {kind!r}") from exc
