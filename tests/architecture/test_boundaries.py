"""Package boundary tests: the engine stays backend-agnostic."""

import pytest

pytest.importorskip("pytest_archon")

from pytest_archon import archrule  # noqa: E402


def test_only_sqlalchemy_driver_imports_sqlalchemy() -> None:
    """
    SQLAlchemy is an optional backend.
    Nothing outside its driver module may import it.
    """
    (
        archrule("sqlalchemy_is_optional")
        .match("datagrid_filters*")
        .exclude("datagrid_filters.drivers.sqlalchemy")
        .should_not_import("sqlalchemy*")
        .check("datagrid_filters")
    )


def test_engine_independent_of_drivers() -> None:
    """
    Filters talk to backends only through the driver protocol.
    """
    (
        archrule("engine_no_drivers")
        .match("datagrid_filters.filters*")
        .should_not_import("datagrid_filters.drivers*")
        .check("datagrid_filters", only_direct_imports=True)
    )


def test_value_primitives_isolation() -> None:
    """
    Normalization, predicates and conditions are the lowest level.
    They must not import filters, kinds or drivers.
    """
    (
        archrule("primitives_isolation")
        .match("datagrid_filters.normalizer")
        .match("datagrid_filters.predicates")
        .match("datagrid_filters.conditions")
        .should_not_import("datagrid_filters.filters*")
        .should_not_import("datagrid_filters.kinds")
        .should_not_import("datagrid_filters.drivers*")
        .check("datagrid_filters", only_direct_imports=True)
    )
