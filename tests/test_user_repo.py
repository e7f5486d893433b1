"""Tests for repositories/user_repo.py."""

from __future__ import annotations

from unittest.mock import MagicMock

from conftest import executed_sql
from models.user import User, UserUpdate
from repositories.user_repo import UserRepository


class TestListUsers:
    def test_public_projection(self, cursor: MagicMock) -> None:
        cursor.fetchall.return_value = [
            {"id": 1, "username": "albert", "name": "Al Bert", "location": "Sidney", "active": True},
        ]

        users = UserRepository().list_users()

        assert users == [User(id=1, username="albert", name="Al Bert", location="Sidney")]
        assert users[0].password is None
        assert "password" not in executed_sql(cursor)[0]


class TestCreateUser:
    def test_returns_created_user(self, cursor: MagicMock, albert_row: dict) -> None:
        cursor.fetchone.return_value = albert_row

        user = UserRepository().create_user("albert", "bertie99", "Al Bert", "Sidney, Australia")

        assert user.id == 1
        assert user.password == "bertie99"
        assert "ON CONFLICT (username) DO NOTHING" in cursor.execute.call_args.args[0]
        assert cursor.execute.call_args.args[1] == ("albert", "bertie99", "Al Bert", "Sidney, Australia")

    def test_duplicate_username_returns_none(self, cursor: MagicMock, mock_conn: MagicMock) -> None:
        cursor.fetchone.return_value = None

        assert UserRepository().create_user("albert", "x", "Al", "NY") is None
        mock_conn.commit.assert_called_once()


class TestUpdateUser:
    def test_empty_request_is_noop(self, mock_pool: MagicMock) -> None:
        assert UserRepository().update_user(1, UserUpdate()) is None
        mock_pool.getconn.assert_not_called()

    def test_updates_only_set_columns(self, cursor: MagicMock, albert_row: dict) -> None:
        cursor.fetchone.return_value = dict(albert_row, name="Newname Sogood", location="Lesterville, KY")

        user = UserRepository().update_user(
            1, UserUpdate(name="Newname Sogood", location="Lesterville, KY")
        )

        sql = executed_sql(cursor)[0]
        assert sql.startswith("UPDATE users SET name = %s, location = %s WHERE id = %s")
        assert cursor.execute.call_args.args[1] == ("Newname Sogood", "Lesterville, KY", 1)
        assert user.name == "Newname Sogood"

    def test_missing_user_returns_none(self, cursor: MagicMock) -> None:
        cursor.fetchone.return_value = None
        assert UserRepository().update_user(99, UserUpdate(active=False)) is None


class TestGetUser:
    def test_by_id_attaches_posts(
        self,
        cursor: MagicMock,
        post_row: dict,
        author_row: dict,
        tag_rows: list[dict],
    ) -> None:
        public_row = {"id": 1, "username": "albert", "name": "Al Bert", "location": "Sidney, Australia", "active": True}
        cursor.fetchone.side_effect = [public_row, post_row, author_row]
        cursor.fetchall.side_effect = [[{"id": 10}], tag_rows]

        user = UserRepository().get_user_by_id(1)

        assert user.password is None
        assert [p.id for p in user.posts] == [10]
        assert user.posts[0].author.username == "albert"

    def test_by_id_missing(self, cursor: MagicMock) -> None:
        cursor.fetchone.return_value = None
        assert UserRepository().get_user_by_id(42) is None
        assert len(cursor.execute.call_args_list) == 1

    def test_by_username_includes_password(self, cursor: MagicMock, albert_row: dict) -> None:
        cursor.fetchone.return_value = albert_row

        user = UserRepository().get_user_by_username("albert")

        assert user.password == "bertie99"
        assert cursor.execute.call_args.args[1] == ("albert",)

    def test_by_username_missing(self, cursor: MagicMock) -> None:
        cursor.fetchone.return_value = None
        assert UserRepository().get_user_by_username("nobody") is None
