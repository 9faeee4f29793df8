"""Shared fixtures for filter tests."""

from __future__ import annotations

from typing import Any

import pytest

from datagrid_filters.drivers import MemoryDriver, MemoryScope


class PeopleScope(MemoryScope):
    """Scope with a named query that is not a column."""

    def born_after(self, year: Any) -> PeopleScope:
        return self.filter(lambda r: r["born"] > int(year))


class Grid:
    """Minimal grid: exposes a driver and a few resolvable members."""

    def __init__(self, driver: Any, *, admin: bool = False) -> None:
        self.driver = driver
        self.admin = admin

    def is_admin(self) -> bool:
        return self.admin

    def current_year(self) -> int:
        return 2024


PEOPLE = [
    {"id": 1, "name": "Ada", "age": 36, "born": 1815, "group": "a"},
    {"id": 2, "name": "Alan", "age": 41, "born": 1912, "group": "b"},
    {"id": 3, "name": "Grace", "age": 85, "born": 1906, "group": "a"},
    {"id": 4, "name": "Edsger", "age": 72, "born": 1930, "group": "c"},
]


@pytest.fixture
def driver() -> MemoryDriver:
    return MemoryDriver(PeopleScope)


@pytest.fixture
def scope() -> PeopleScope:
    return PeopleScope(PEOPLE)


@pytest.fixture
def grid(driver: MemoryDriver) -> Grid:
    return Grid(driver)


@pytest.fixture
def make_grid(driver: MemoryDriver) -> Any:
    def factory(**kwargs: Any) -> Grid:
        return Grid(driver, **kwargs)

    return factory
