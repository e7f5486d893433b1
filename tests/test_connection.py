"""Tests for db/connection.py."""

from __future__ import annotations

from unittest.mock import MagicMock

import psycopg2
import pytest

from db import connection


class TestTransaction:
    def test_commits_and_releases(self, mock_pool: MagicMock, mock_conn: MagicMock) -> None:
        with connection.transaction("do work") as cur:
            cur.execute("SELECT 1;")

        mock_conn.commit.assert_called_once()
        mock_conn.rollback.assert_not_called()
        mock_pool.putconn.assert_called_once_with(mock_conn)

    def test_uses_dict_rows(self, mock_conn: MagicMock) -> None:
        with connection.transaction("do work"):
            pass

        _, kwargs = mock_conn.cursor.call_args
        assert kwargs["cursor_factory"] is psycopg2.extras.RealDictCursor

    def test_rolls_back_and_reraises(self, mock_pool: MagicMock, mock_conn: MagicMock) -> None:
        with pytest.raises(ValueError, match="boom"):
            with connection.transaction("do work"):
                raise ValueError("boom")

        mock_conn.rollback.assert_called_once()
        mock_conn.commit.assert_not_called()
        mock_pool.putconn.assert_called_once_with(mock_conn)

    def test_driver_error_propagates_unchanged(self, mock_conn: MagicMock, cursor: MagicMock) -> None:
        error = psycopg2.IntegrityError("duplicate key")
        cursor.execute.side_effect = error

        with pytest.raises(psycopg2.IntegrityError) as exc_info:
            with connection.transaction("insert") as cur:
                cur.execute("INSERT ...")

        assert exc_info.value is error


class TestPool:
    def test_get_connection_requires_pool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(connection, "_pool", None)
        with pytest.raises(RuntimeError):
            connection.get_connection()

    def test_init_pool_uses_database_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        factory = MagicMock()
        monkeypatch.setattr(connection, "_pool", None)
        monkeypatch.setattr(connection.pool, "SimpleConnectionPool", factory)
        monkeypatch.setattr(connection, "DATABASE_URL", "postgresql://db/test")

        connection.init_pool(1, 3)
        connection.init_pool(1, 3)

        factory.assert_called_once_with(1, 3, "postgresql://db/test")
        assert connection._pool is factory.return_value

    def test_init_pool_reraises_operational_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(connection, "_pool", None)
        monkeypatch.setattr(
            connection.pool,
            "SimpleConnectionPool",
            MagicMock(side_effect=psycopg2.OperationalError("unreachable")),
        )
        with pytest.raises(psycopg2.OperationalError):
            connection.init_pool()
        assert connection._pool is None

    def test_close_pool(self, mock_pool: MagicMock) -> None:
        connection.close_pool()
        mock_pool.closeall.assert_called_once()
        assert connection._pool is None
