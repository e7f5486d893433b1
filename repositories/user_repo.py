"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import transaction
from models.user import User, UserUpdate
from repositories import queries
from utils.logger import get_logger

logger = get_logger(__name__)

_PUBLIC_COLUMNS = "id, username, name, location, active"


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def list_users(self) -> list[User]:
        """
        Get every user's public projection (no password, no posts).
        """
        sql = f"SELECT {_PUBLIC_COLUMNS} FROM users ORDER BY id;"
        with transaction("list users") as cur:
            cur.execute(sql)
            return [User(**r) for r in cur.fetchall()]

    def create_user(
        self, username: str, password: str, name: str, location: str
    ) -> Optional[User]:
        """
        Insert a new user.
        Uses PostgreSQL's ON CONFLICT DO NOTHING on the unique username.

        Args:
            username: Unique login name.
            password: Stored as-is.
            name: Display name.
            location: Free-form location string.

        Returns:
            The created user (password included), or None if the username
            is already taken.
        """
        sql = """
            INSERT INTO users (username, password, name, location)
            VALUES (%s, %s, %s, %s)
            ON CONFLICT (username) DO NOTHING
            RETURNING id, username, password, name, location, active;
        """
        with transaction(f"create user {username}") as cur:
            cur.execute(sql, (username, password, name, location))
            row = cur.fetchone()
        if row is None:
            logger.info(f"Username '{username}' already exists, skipped")
            return None
        logger.info(f"Created user #{row['id']} '{username}'")
        return User(**row)

    def update_user(self, user_id: int, fields: UserUpdate) -> Optional[User]:
        """
        Update the columns set on `fields`.

        Returns:
            The updated user (password included); None if `fields` is
            empty or no user has this id.
        """
        changes = fields.changes()
        if not changes:
            return None
        set_clause = ", ".join(f"{column} = %s" for column in changes)
        sql = f"""
            UPDATE users
            SET {set_clause}
            WHERE id = %s
            RETURNING id, username, password, name, location, active;
        """
        with transaction(f"update user #{user_id}") as cur:
            cur.execute(sql, (*changes.values(), user_id))
            row = cur.fetchone()
        if row:
            logger.info(f"Updated user #{user_id}: {sorted(changes)}")
            return User(**row)
        return None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user's public projection with their hydrated posts.

        Returns:
            User or None.
        """
        sql = f"SELECT {_PUBLIC_COLUMNS} FROM users WHERE id = %s;"
        with transaction(f"get user #{user_id}") as cur:
            cur.execute(sql, (user_id,))
            row = cur.fetchone()
            if not row:
                return None
            user = User(**row)
            user.posts = queries.fetch_posts_by_author(cur, user_id)
            return user

    def get_user_by_username(self, username: str) -> Optional[User]:
        """
        Fetch the full user row, password included, for authentication.

        Returns:
            User or None.
        """
        sql = """
            SELECT id, username, password, name, location, active
            FROM users
            WHERE username = %s;
        """
        with transaction(f"get user {username}") as cur:
            cur.execute(sql, (username,))
            row = cur.fetchone()
            return User(**row) if row else None
