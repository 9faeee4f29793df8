"""
SQLAlchemy scopes: 2.x ``Select`` statements.

``to_scope`` accepts a mapped class (``select(Model)``) or an existing
statement.  Columns are looked up on the mapper of the statement's
first entity, falling back to the selected columns for plain
``select(table)`` / column statements.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, inspect, select

from ..normalizer import is_sequence

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

logger = logging.getLogger("datagrid_filters.drivers.sqlalchemy")


class SQLAlchemyDriver:
    """Scope driver for SQLAlchemy ``Select`` statements."""

    def match(self, candidate: Any) -> bool:
        return isinstance(candidate, Select)

    def to_scope(self, scope: Any) -> Select[Any]:
        if isinstance(scope, Select):
            return scope
        return select(scope)

    def has_column(self, scope: Any, column_name: str) -> bool:
        stmt = self.to_scope(scope)
        entity = _entity(stmt)
        if entity is not None:
            return column_name in inspect(entity).mapper.columns
        return column_name in stmt.selected_columns

    def where(self, scope: Any, attribute: str, value: Any) -> Select[Any]:
        stmt = self.to_scope(scope)
        column = self._column(stmt, attribute)
        if is_sequence(value):
            condition = column.in_(list(value))
        elif value is None:
            condition = column.is_(None)
        else:
            condition = column == value
        logger.debug("where %s", condition)
        return stmt.where(condition)

    def greater_equal(self, scope: Any, field: str, value: Any) -> Select[Any]:
        stmt = self.to_scope(scope)
        return stmt.where(self._column(stmt, field) >= value)

    def less_equal(self, scope: Any, field: str, value: Any) -> Select[Any]:
        stmt = self.to_scope(scope)
        return stmt.where(self._column(stmt, field) <= value)

    def _column(self, stmt: Select[Any], name: str) -> ColumnElement[Any]:
        entity = _entity(stmt)
        if entity is not None:
            return getattr(entity, name)
        return stmt.selected_columns[name]


def _entity(stmt: Select[Any]) -> Any:
    """Mapped class of the statement's first entity, if any."""
    for description in stmt.column_descriptions:
        entity = description.get("entity")
        if entity is None:
            continue
        if getattr(inspect(entity, raiseerr=False), "mapper", None) is not None:
            return entity
    return None
