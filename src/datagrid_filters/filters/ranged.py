"""RangedFilterMixin: ``range=True`` support for ordered kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import FilterConfigurationError
from ..normalizer import Range, is_blank, is_sequence, normalize_multiple_value
from .base import BaseFilter

if TYPE_CHECKING:
    from ..options import FilterOptions
    from ..ports import IScopeDriver

RANGE_SEPARATOR = ".."


class RangedFilterMixin(BaseFilter):
    """
    Parse input as a ``(from, to)`` boundary pair when ``range`` is set.

    Accepted input: ``Range``, ``range``, a sequence (first and last
    items), or a ``"from..to"`` string.  Either side may be open.  A
    scalar still filters by equality.
    """

    supports_range = True

    def prepare_options(self, options: FilterOptions) -> FilterOptions:
        options = super().prepare_options(options)
        if options.range and options.multiple:
            raise FilterConfigurationError(
                self.name, {"range": ["can not be combined with multiple"]}
            )
        return options

    @property
    def range(self) -> bool:
        return self.options.range

    def parse_values(self, value: Any) -> Any:
        if not self.range or value is None:
            return super().parse_values(value)
        bounds = self._bounds(value)
        if bounds is None:
            return self.parse(value)
        start, end = (self._parse_bound(b) for b in bounds)
        if start is None and end is None:
            return None
        if start is not None and end is not None and _reversed(start, end):
            start, end = end, start
        return (start, end)

    def format(self, value: Any) -> Any:
        if isinstance(value, tuple):
            return RANGE_SEPARATOR.join(
                "" if v is None else str(self.format(v)) for v in value
            )
        return super().format(value)

    def default_filter_where(
        self, scope: Any, value: Any, driver: IScopeDriver
    ) -> Any:
        if not isinstance(value, tuple):
            return super().default_filter_where(scope, value, driver)
        start, end = value
        if start is not None:
            scope = driver.greater_equal(scope, self.name, start)
        if end is not None:
            scope = driver.less_equal(scope, self.name, end)
        return scope

    def _bounds(self, value: Any) -> list[Any] | None:
        if isinstance(value, str):
            if RANGE_SEPARATOR not in value:
                return None
            return normalize_multiple_value(value, RANGE_SEPARATOR)[:2]
        if isinstance(value, Range | range):
            return normalize_multiple_value(value)
        if is_sequence(value):
            items = list(value)
            return [items[0], items[-1]] if items else [None, None]
        return None

    def _parse_bound(self, bound: Any) -> Any:
        if bound is None or is_blank(bound):
            return None
        return self.parse(bound)


def _reversed(start: Any, end: Any) -> bool:
    # naive and aware datetimes do not compare; keep the given order
    try:
        return bool(start > end)
    except TypeError:
        return False

