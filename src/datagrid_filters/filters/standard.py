"""Scalar filter kinds: default, string, integer, float, date, datetime."""

from __future__ import annotations

import datetime
from typing import Any

from ..kinds import FilterKind
from ..normalizer import is_blank
from ..utils import cast_date, cast_datetime, cast_float, cast_integer
from .base import BaseFilter
from .ranged import RangedFilterMixin


class DefaultFilter(BaseFilter):
    """Passes values through unchanged."""

    kind = FilterKind.DEFAULT

    def parse(self, value: Any) -> Any:
        return value


class StringFilter(BaseFilter):
    kind = FilterKind.STRING

    def parse(self, value: Any) -> str | None:
        return None if value is None else str(value)


class IntegerFilter(RangedFilterMixin):
    kind = FilterKind.INTEGER

    def parse(self, value: Any) -> int | None:
        if value is None or is_blank(value):
            return None
        return cast_integer(value)


class FloatFilter(RangedFilterMixin):
    kind = FilterKind.FLOAT

    def parse(self, value: Any) -> float | None:
        if value is None or is_blank(value):
            return None
        return cast_float(value)


class DateFilter(RangedFilterMixin):
    """ISO-8601 dates; datetimes are truncated to their date."""

    kind = FilterKind.DATE

    def parse(self, value: Any) -> datetime.date | None:
        if value is None or is_blank(value):
            return None
        return cast_date(value)

    def format(self, value: Any) -> Any:
        if isinstance(value, datetime.date):
            return value.isoformat()
        return super().format(value)


class DateTimeFilter(RangedFilterMixin):
    """ISO-8601 datetimes; aware values are converted to UTC."""

    kind = FilterKind.DATETIME

    def parse(self, value: Any) -> datetime.datetime | None:
        if value is None or is_blank(value):
            return None
        return cast_datetime(value)

    def format(self, value: Any) -> Any:
        if isinstance(value, datetime.datetime):
            return value.isoformat()
        return super().format(value)
