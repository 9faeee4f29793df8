"""Scope drivers.

``SQLAlchemyDriver`` lives in :mod:`datagrid_filters.drivers.sqlalchemy`
and needs the ``sqlalchemy`` extra.
"""

from __future__ import annotations

from .memory import MemoryDriver, MemoryScope

__all__ = ["MemoryDriver", "MemoryScope"]
