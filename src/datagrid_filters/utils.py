"""
Shared helpers for filter definitions.

These are pure-Python helpers with no backend dependencies.
"""

from __future__ import annotations

import datetime
import inspect
import logging
import math
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("datagrid_filters")

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on", "y", "t"})

# ---------------------------------------------------------------------------
# Calling conventions
# ---------------------------------------------------------------------------


def positional_arity(fn: Callable[..., Any]) -> int | None:
    """
    Return how many positional arguments *fn* accepts.

    ``None`` means unlimited (``*args``).  Callables whose signature
    cannot be inspected (some builtins) are treated as unlimited.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def apply_args(fn: Callable[..., Any], *args: Any, arity: int | None = None) -> Any:
    """Call *fn* with as many leading *args* as it accepts."""
    if arity is None:
        arity = positional_arity(fn)
    if arity is None:
        return fn(*args)
    return fn(*args[:arity])


def callable_value(value: Any, *args: Any) -> Any:
    """Return ``value(*args)`` when *value* is callable, else *value* itself."""
    if callable(value):
        return apply_args(value, *args)
    return value


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def humanize(name: str) -> str:
    """``created_at`` -> ``Created at``; ``userId`` -> ``User id``."""
    text = _CAMEL_RE.sub("_", name).replace("_", " ").strip().lower()
    if text.endswith(" id") and text != "id":
        text = text[:-3]
    return text[:1].upper() + text[1:]


_warned: set[str] = set()


def warn_once(message: str) -> None:
    """Log *message* as a warning the first time it is seen."""
    if message in _warned:
        return
    _warned.add(message)
    logger.warning(message)


# ---------------------------------------------------------------------------
# Value casting
# ---------------------------------------------------------------------------


def cast_integer(value: Any) -> int | None:
    """Cast to ``int``; floats truncate, invalid input yields ``None``."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = value if isinstance(value, float) else float(text)
    except (ValueError, OverflowError):
        return None
    # inf and nan have no integer form
    if not math.isfinite(number):
        return None
    return int(number)


def cast_float(value: Any) -> float | None:
    """Cast to ``float``; invalid input yields ``None``."""
    if isinstance(value, float):
        return value
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def cast_boolean(value: Any) -> bool:
    """Cast to ``bool``; strings are compared against common truthy words."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def cast_date(value: Any) -> datetime.date | None:
    """Cast ISO strings, ``date`` or ``datetime`` to ``date``."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value).strip())
    except ValueError:
        pass
    parsed = cast_datetime(value)
    return parsed.date() if parsed is not None else None


def cast_datetime(value: Any) -> datetime.datetime | None:
    """Cast ISO strings or ``date`` to ``datetime``; ``Z`` means UTC."""
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day)
    try:
        result = datetime.datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if result.tzinfo is not None:
        result = result.astimezone(datetime.timezone.utc)
    return result
