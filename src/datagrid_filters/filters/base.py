"""
BaseFilter: applies one declared filter to a scope.

Pipeline for :meth:`BaseFilter.apply`:

1. applicability: ``None`` needs ``allow_nil``, blank input needs
   ``allow_blank``; otherwise the scope is returned untouched
2. normalization and parsing (:meth:`BaseFilter.parse_values`)
3. predicate execution (custom or default)
4. result handling: ``USE_DEFAULT`` runs the default filter once,
   ``SKIP`` / ``None`` / ``False`` keep the original scope
5. the result must be a scope of the driver's kind, else ``FilteringError``
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from ..conditions import process_availability, resolve_value
from ..exceptions import ArgumentError, FilteringError
from ..kinds import FILTER_TYPES, FilterKind
from ..normalizer import (
    DEFAULT_SEPARATOR,
    is_blank,
    is_sequence,
    normalize_multiple_value,
)
from ..options import FilterOptions
from ..predicates import (
    Applied,
    ExplicitPredicate,
    Predicate,
    Skip,
    UseDefault,
    as_predicate,
)
from ..utils import callable_value, humanize

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from ..ports import IGrid, IScopeDriver

logger = logging.getLogger("datagrid_filters.filters")


class BaseFilter:
    """
    Immutable definition of one named filter.

    Args:
        name: Filter name; also the column matched by the default filter.
        options: Mapping of option keys or a ready ``FilterOptions``.
        predicate: A :class:`~datagrid_filters.predicates.Predicate`, a bare
            callable (treated as explicit), or ``None`` for the default filter.
        driver: Scope driver.  When omitted, ``grid.driver`` is used.
    """

    kind: ClassVar[FilterKind | None] = None
    supports_range: ClassVar[bool] = False

    def __init__(
        self,
        name: str,
        options: Mapping[str, Any] | FilterOptions | None = None,
        predicate: Predicate | Callable[..., Any] | None = None,
        *,
        driver: IScopeDriver | None = None,
    ) -> None:
        self._name = str(name)
        if not isinstance(options, FilterOptions):
            options = FilterOptions.build(self._name, dict(options or {}))
        self._options = self.prepare_options(options)
        self._driver = driver
        self._predicate = (
            as_predicate(predicate)
            if predicate is not None
            else self.default_predicate()
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self._name!r}>"

    # ── Definition ───────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def options(self) -> FilterOptions:
        return self._options

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    @property
    def driver(self) -> IScopeDriver | None:
        return self._driver

    def prepare_options(self, options: FilterOptions) -> FilterOptions:
        """Hook for kinds that derive or validate options."""
        return options

    def default_predicate(self) -> Predicate:
        return ExplicitPredicate(self.default_filter)

    # ── Parsing ──────────────────────────────────────────────────

    def parse(self, value: Any) -> Any:
        raise NotImplementedError("parse(value) must be overridden")

    def parse_values(self, value: Any) -> Any:
        """Normalize and parse *value* without applying it.

        Raises:
            ArgumentError: A sequence was given to a non-multiple filter.
        """
        if self.multiple:
            if value is None:
                return None
            parsed: list[Any] = []
            for raw in normalize_multiple_value(value, self.separator):
                item = self.parse(raw)
                # unparseable elements are dropped, explicit None is kept
                if item is not None or raw is None:
                    parsed.append(item)
            return parsed
        if is_sequence(value):
            raise ArgumentError(self._name, value)
        return self.parse(value)

    def unapplicable_value(self, value: Any) -> bool:
        if value is None:
            return not self.allow_nil
        return is_blank(value) and not self.allow_blank

    def format(self, value: Any) -> Any:
        """String form of a parsed value for rendering."""
        if value is None:
            return None
        if is_sequence(value):
            return [self.format(v) for v in value]
        return str(value)

    # ── Application ──────────────────────────────────────────────

    def apply(self, grid: Any, scope: Any, value: Any) -> Any:
        """Return *scope* narrowed by *value*.

        Raises:
            ArgumentError: A sequence was given to a non-multiple filter.
            FilteringError: The predicate result is not a scope.
        """
        if self.unapplicable_value(value):
            logger.debug("Filter %r skipped: %r is not applicable", self._name, value)
            return scope

        parsed = self.parse_values(value)
        if self.unapplicable_value(parsed):
            logger.debug(
                "Filter %r skipped: %r parsed to %r", self._name, value, parsed
            )
            return scope

        result = self.execute(parsed, scope, grid)
        if isinstance(result, Applied):
            result = result.scope
        elif isinstance(result, UseDefault):
            logger.debug("Filter %r falls back to the default filter", self._name)
            result = self.default_filter(parsed, scope, grid)

        if result is None or result is False or isinstance(result, Skip):
            return scope

        driver = self.driver_for(grid)
        if not driver.match(result):
            raise FilteringError(self._name, result, driver)
        return result

    def execute(self, value: Any, scope: Any, grid: Any) -> Any:
        return self._predicate(value, scope, grid)

    def default_filter(self, value: Any, scope: Any, grid: Any) -> Any:
        """
        Narrow *scope* by column match.

        A dummy filter returns ``None``.  When the scope has no column named
        after the filter but exposes a method of that name, the method is
        called with *value*; otherwise the driver builds the condition.
        """
        if self.dummy:
            return None
        driver = self.driver_for(grid)
        if not driver.has_column(scope, self._name):
            method = getattr(driver.to_scope(scope), self._name, None)
            if callable(method):
                return method(value)
        return self.default_filter_where(scope, value, driver)

    def default_filter_where(
        self, scope: Any, value: Any, driver: IScopeDriver
    ) -> Any:
        return driver.where(scope, self._name, value)

    def driver_for(self, grid: IGrid | None) -> IScopeDriver:
        if self._driver is not None:
            return self._driver
        if grid is None:
            raise ValueError(f"{self._name!r} filter has no driver and no grid")
        return grid.driver

    # ── Metadata ─────────────────────────────────────────────────

    @property
    def type(self) -> FilterKind:
        return FILTER_TYPES.kind_of(type(self))

    @property
    def header(self) -> str:
        header = self._options.header
        if header is not None:
            return str(callable_value(header))
        return humanize(self._name)

    def default(self, grid: Any) -> Any:
        return resolve_value(grid, self._options.default)

    def enabled(self, grid: Any) -> bool:
        return process_availability(grid, self._options.if_, self._options.unless)

    @property
    def multiple(self) -> bool:
        return bool(self._options.multiple)

    @property
    def separator(self) -> str:
        multiple = self._options.multiple
        return multiple if isinstance(multiple, str) else DEFAULT_SEPARATOR

    @property
    def allow_nil(self) -> bool:
        allow_nil = self._options.allow_nil
        return self._options.allow_blank if allow_nil is None else allow_nil

    @property
    def allow_blank(self) -> bool:
        return self._options.allow_blank

    @property
    def dummy(self) -> bool:
        return self._options.dummy

    @property
    def input_options(self) -> dict[str, Any]:
        return dict(self._options.input_options)

    @property
    def label_options(self) -> dict[str, Any]:
        return dict(self._options.label_options)
