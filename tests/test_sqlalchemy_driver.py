"""Tests for SQLAlchemyDriver against compiled SQL and in-memory SQLite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import Integer, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from datagrid_filters import (
    USE_DEFAULT,
    FilteringError,
    IScopeDriver,
    Range,
    build_filter,
)
from datagrid_filters.drivers.sqlalchemy import SQLAlchemyDriver


class Base(DeclarativeBase):
    pass


class UserRecord(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String)
    status: Mapped[str] = mapped_column(String, default="active")
    age: Mapped[int] = mapped_column(Integer, default=0)


@pytest.fixture
def driver() -> SQLAlchemyDriver:
    return SQLAlchemyDriver()


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            [
                UserRecord(id=1, name="Ada", status="active", age=36),
                UserRecord(id=2, name="Alan", status="blocked", age=41),
                UserRecord(id=3, name="Grace", status="active", age=85),
            ]
        )
        session.commit()
        yield session
    engine.dispose()


def compiled(stmt) -> str:
    return str(stmt.compile())


# -- driver ------------------------------------------------------------------


def test_driver_satisfies_protocol(driver):
    assert isinstance(driver, IScopeDriver)


def test_match(driver):
    assert driver.match(select(UserRecord))
    assert not driver.match(UserRecord)
    assert not driver.match(True)


def test_to_scope_selects_mapped_class(driver):
    stmt = driver.to_scope(UserRecord)
    assert driver.match(stmt)
    assert "FROM users" in compiled(stmt)


def test_has_column(driver):
    stmt = select(UserRecord)
    assert driver.has_column(stmt, "status")
    assert not driver.has_column(stmt, "limit")


def test_has_column_on_table_select(driver):
    stmt = select(UserRecord.__table__)
    assert driver.has_column(stmt, "status")
    assert not driver.has_column(stmt, "nope")


def test_where_equality(driver):
    stmt = driver.where(select(UserRecord), "status", "active")
    assert "WHERE users.status = :status_1" in compiled(stmt)


def test_where_inclusion(driver):
    stmt = driver.where(select(UserRecord), "status", ["active", "blocked"])
    assert "users.status IN" in compiled(stmt)


def test_where_null(driver):
    stmt = driver.where(select(UserRecord), "status", None)
    assert "users.status IS NULL" in compiled(stmt)


def test_where_on_table_select(driver):
    stmt = driver.where(select(UserRecord.__table__), "status", "active")
    assert "users.status = :status_1" in compiled(stmt)


def test_bounds(driver):
    stmt = driver.greater_equal(select(UserRecord), "age", 40)
    stmt = driver.less_equal(stmt, "age", 80)
    sql = compiled(stmt)
    assert "users.age >= :age_1" in sql
    assert "users.age <= :age_2" in sql


# -- filters over SQLAlchemy scopes --------------------------------------------


def test_filter_narrows_select(driver, session):
    status = build_filter("string", "status", driver=driver)
    stmt = status.apply(None, select(UserRecord), "active")
    assert [u.name for u in session.scalars(stmt.order_by(UserRecord.id))] == [
        "Ada",
        "Grace",
    ]


def test_multiple_filter(driver, session):
    ident = build_filter("integer", "id", multiple=True, driver=driver)
    stmt = ident.apply(None, select(UserRecord), "2,3")
    assert sorted(u.id for u in session.scalars(stmt)) == [2, 3]


def test_ranged_filter(driver, session):
    age = build_filter("integer", "age", range=True, driver=driver)
    stmt = age.apply(None, select(UserRecord), Range(40, None))
    assert sorted(u.name for u in session.scalars(stmt)) == ["Alan", "Grace"]


def test_statement_method_used_when_no_column(driver):
    limit = build_filter("integer", "limit", driver=driver)
    stmt = limit.apply(None, select(UserRecord), "2")
    assert "LIMIT" in compiled(stmt)


def test_custom_predicate_with_default_fallback(driver, session):
    def adults_or_default(value, scope):
        if value == "adults":
            return scope.where(UserRecord.age >= 40)
        return USE_DEFAULT

    name = build_filter("string", "name", adults_or_default, driver=driver)
    adults = name.apply(None, select(UserRecord), "adults")
    assert sorted(u.name for u in session.scalars(adults)) == ["Alan", "Grace"]
    ada = name.apply(None, select(UserRecord), "Ada")
    assert [u.id for u in session.scalars(ada)] == [1]


def test_predicate_returning_rows_raises(driver, session):
    eager = build_filter(
        "string",
        "name",
        lambda value, scope: session.scalars(scope).all(),
        driver=driver,
    )
    with pytest.raises(FilteringError):
        eager.apply(None, select(UserRecord), "Ada")
