"""Declarative filters applied to backend scopes through pluggable drivers."""

from __future__ import annotations

from .conditions import (
    ALWAYS,
    NEVER,
    Always,
    Condition,
    Custom,
    Named,
    Never,
    process_availability,
)
from .drivers import MemoryDriver, MemoryScope
from .exceptions import (
    ArgumentError,
    DatagridError,
    FilterConfigurationError,
    FilteringError,
    FilterKindError,
)
from .filters import (
    BaseFilter,
    BooleanEnumFilter,
    BooleanFilter,
    DateFilter,
    DateTimeFilter,
    DefaultFilter,
    EnumFilter,
    ExtendedBooleanFilter,
    FloatFilter,
    IntegerFilter,
    RangedFilterMixin,
    StringFilter,
    build_default_registry,
)
from .kinds import FILTER_TYPES, FilterKind, FilterKindRegistry, build_filter
from .normalizer import Range, normalize_multiple_value
from .options import FilterOptions
from .ports import IGrid, IScopeDriver
from .predicates import (
    SKIP,
    USE_DEFAULT,
    Applied,
    ExplicitPredicate,
    Predicate,
    ScopeBoundPredicate,
    Skip,
    UseDefault,
    explicit,
    scoped,
)

__all__ = [
    # Engine and kinds
    "BaseFilter",
    "RangedFilterMixin",
    "DefaultFilter",
    "StringFilter",
    "IntegerFilter",
    "FloatFilter",
    "DateFilter",
    "DateTimeFilter",
    "EnumFilter",
    "BooleanFilter",
    "ExtendedBooleanFilter",
    "BooleanEnumFilter",
    "FilterKind",
    "FilterKindRegistry",
    "FILTER_TYPES",
    "build_default_registry",
    "build_filter",
    # Configuration
    "FilterOptions",
    "Condition",
    "Always",
    "Never",
    "Named",
    "Custom",
    "ALWAYS",
    "NEVER",
    "process_availability",
    # Predicates
    "Predicate",
    "ScopeBoundPredicate",
    "ExplicitPredicate",
    "Applied",
    "UseDefault",
    "Skip",
    "USE_DEFAULT",
    "SKIP",
    "scoped",
    "explicit",
    # Values
    "Range",
    "normalize_multiple_value",
    # Ports and drivers
    "IScopeDriver",
    "IGrid",
    "MemoryDriver",
    "MemoryScope",
    # Exceptions
    "DatagridError",
    "FilteringError",
    "ArgumentError",
    "FilterConfigurationError",
    "FilterKindError",
]
