"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from db import connection


@pytest.fixture
def mock_pool(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """A connection pool whose getconn() hands out one mock connection."""
    conn = MagicMock()
    cursor = MagicMock()
    cursor.rowcount = 0
    conn.cursor.return_value.__enter__.return_value = cursor
    pool = MagicMock()
    pool.getconn.return_value = conn
    monkeypatch.setattr(connection, "_pool", pool)
    return pool


@pytest.fixture
def mock_conn(mock_pool: MagicMock) -> MagicMock:
    return mock_pool.getconn.return_value


@pytest.fixture
def cursor(mock_conn: MagicMock) -> MagicMock:
    """The cursor yielded by db.connection.transaction()."""
    return mock_conn.cursor.return_value.__enter__.return_value


def executed_sql(cursor: MagicMock) -> list[str]:
    """Every SQL string passed to cursor.execute, whitespace-normalized."""
    return [" ".join(c.args[0].split()) for c in cursor.execute.call_args_list]


@pytest.fixture
def albert_row() -> dict:
    return {
        "id": 1,
        "username": "albert",
        "password": "bertie99",
        "name": "Al Bert",
        "location": "Sidney, Australia",
        "active": True,
    }


@pytest.fixture
def author_row() -> dict:
    return {"id": 1, "username": "albert", "name": "Al Bert", "location": "Sidney, Australia"}


@pytest.fixture
def post_row() -> dict:
    return {
        "id": 10,
        "author_id": 1,
        "title": "First Post",
        "content": "This is my first post.",
        "active": True,
    }


@pytest.fixture
def tag_rows() -> list[dict]:
    return [{"id": 1, "name": "#happy"}, {"id": 2, "name": "#youcandoanything"}]
