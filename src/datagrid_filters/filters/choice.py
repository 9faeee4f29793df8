"""Choice filter kinds: enum and the boolean variants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..conditions import resolve_value
from ..exceptions import FilterConfigurationError
from ..kinds import FilterKind
from ..normalizer import is_blank, is_sequence
from ..utils import cast_boolean, warn_once
from .base import BaseFilter

if TYPE_CHECKING:
    from ..options import FilterOptions

YES = "YES"
NO = "NO"
BOOLEAN_SELECT = (("Yes", YES), ("No", NO))


class EnumFilter(BaseFilter):
    """
    Value from a declared set of choices.

    ``select`` is a sequence of values or ``(label, value)`` pairs, or a
    callable resolved against the grid.  ``checkboxes`` implies
    ``multiple``.  With ``strict``, values outside a static ``select``
    parse to ``None``; input is compared by string form, so ``"1"``
    parses to the declared choice ``1``.
    """

    kind = FilterKind.ENUM

    def prepare_options(self, options: FilterOptions) -> FilterOptions:
        options = super().prepare_options(options)
        if options.select is None:
            raise FilterConfigurationError(self.name, {"select": ["is required"]})
        if options.checkboxes and not options.multiple:
            options = options.with_changes(multiple=True)
        return options

    @property
    def strict(self) -> bool:
        return self.options.strict

    @property
    def checkboxes(self) -> bool:
        return self.options.checkboxes

    def select_options(self, grid: Any = None) -> list[Any]:
        """Declared choices as given, resolved against *grid* if callable."""
        return list(resolve_value(grid, self.options.select) or [])

    def choices(self, grid: Any = None) -> list[Any]:
        """Choice values, with labels stripped from ``(label, value)`` pairs."""
        return [
            item[1] if is_sequence(item) and len(item) == 2 else item
            for item in self.select_options(grid)
        ]

    def parse(self, value: Any) -> Any:
        if not self.strict or callable(self.options.select):
            return value
        for choice in self.choices():
            if str(choice) == str(value):
                return choice
        return None


class BooleanFilter(BaseFilter):
    """Checkbox: a cleared box leaves the scope alone."""

    kind = FilterKind.BOOLEAN

    def parse(self, value: Any) -> bool:
        return cast_boolean(value)

    def unapplicable_value(self, value: Any) -> bool:
        return value is False or super().unapplicable_value(value)


class ExtendedBooleanFilter(EnumFilter):
    """Tri-state select: ``YES``, ``NO`` or nothing."""

    kind = FilterKind.XBOOLEAN

    def prepare_options(self, options: FilterOptions) -> FilterOptions:
        if options.select is None:
            options = options.with_changes(select=BOOLEAN_SELECT)
        return super().prepare_options(options)

    def parse(self, value: Any) -> bool | None:
        if value is None or is_blank(value):
            return None
        if isinstance(value, bool):
            return value
        text = str(value).strip().upper()
        if text == YES:
            return True
        if text == NO:
            return False
        return None


class BooleanEnumFilter(EnumFilter):
    """``YES`` / ``NO`` enum.  Deprecated in favour of ``xboolean``."""

    kind = FilterKind.EBOOLEAN

    def prepare_options(self, options: FilterOptions) -> FilterOptions:
        warn_once("eboolean filter is deprecated in favor of xboolean filter")
        options = options.with_changes(select=BOOLEAN_SELECT)
        return super().prepare_options(options)
