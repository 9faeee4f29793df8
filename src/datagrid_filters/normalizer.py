"""Raw input normalization for multiple-valued and ranged filters."""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import Any

DEFAULT_SEPARATOR = ","


@dataclass(frozen=True)
class Range:
    """Inclusive boundary pair; ``None`` on either side means open."""

    start: Any = None
    end: Any = None

    def __iter__(self) -> Any:
        return iter((self.start, self.end))


def is_sequence(value: Any) -> bool:
    """Ordered or unordered collections, excluding strings, bytes and mappings."""
    return isinstance(value, list | tuple | Set)


def is_blank(value: Any) -> bool:
    """Empty or whitespace-only strings and empty collections are blank."""
    if isinstance(value, str):
        return not value.strip()
    if is_sequence(value) or isinstance(value, Mapping):
        return len(value) == 0
    return False


def normalize_multiple_value(value: Any, separator: str = DEFAULT_SEPARATOR) -> list[Any]:
    """
    Turn raw input into a list of raw values.

    - strings are split on *separator*
    - ``Range`` / ``range`` collapse to ``[start, end]`` (not expanded)
    - lists and tuples keep their order; sets are listed as-is
    - anything else is wrapped in a one-element list
    """
    if isinstance(value, str):
        return value.split(separator)
    if isinstance(value, Range):
        return [value.start, value.end]
    if isinstance(value, range):
        return [value.start, value.stop]
    if is_sequence(value):
        return list(value)
    return [value]
