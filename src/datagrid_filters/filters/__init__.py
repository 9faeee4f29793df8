"""Filter kinds and the application engine."""

from __future__ import annotations

from ..kinds import FILTER_TYPES, FilterKindRegistry
from .base import BaseFilter
from .choice import BooleanEnumFilter, BooleanFilter, EnumFilter, ExtendedBooleanFilter
from .ranged import RangedFilterMixin
from .standard import (
    DateFilter,
    DateTimeFilter,
    DefaultFilter,
    FloatFilter,
    IntegerFilter,
    StringFilter,
)

BUILTIN_FILTERS: tuple[type[BaseFilter], ...] = (
    DefaultFilter,
    StringFilter,
    IntegerFilter,
    FloatFilter,
    DateFilter,
    DateTimeFilter,
    EnumFilter,
    BooleanFilter,
    ExtendedBooleanFilter,
    BooleanEnumFilter,
)


def build_default_registry() -> FilterKindRegistry:
    """Return a registry holding every built-in filter kind."""
    registry = FilterKindRegistry()
    registry.register_all(*BUILTIN_FILTERS)
    return registry


FILTER_TYPES.register_all(*BUILTIN_FILTERS)

__all__ = [
    "BUILTIN_FILTERS",
    "BaseFilter",
    "BooleanEnumFilter",
    "BooleanFilter",
    "DateFilter",
    "DateTimeFilter",
    "DefaultFilter",
    "EnumFilter",
    "ExtendedBooleanFilter",
    "FloatFilter",
    "IntegerFilter",
    "RangedFilterMixin",
    "StringFilter",
    "build_default_registry",
]
