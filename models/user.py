"""
models/user.py
--------------
Domain models for blog users and the partial-update request applied to them.
"""

from dataclasses import dataclass, field, fields
from typing import Optional

from models.post import Post


@dataclass
class User:
    """
    Represents a blog user.

    Attributes:
        id: Database primary key.
        username: Globally unique login name.
        name: Display name.
        location: Free-form location string.
        active: Whether the account is active.
        password: Stored as-is. Only populated by username lookups;
            None in the public projection.
        posts: The user's hydrated posts, attached by id lookups.
    """
    id: int
    username: str
    name: str
    location: str
    active: bool = True
    password: Optional[str] = field(default=None, repr=False)
    posts: list[Post] = field(default_factory=list)

    def __str__(self) -> str:
        return f"@{self.username} ({self.name}, {self.location})"


@dataclass
class UserUpdate:
    """
    The mutable columns of a user. Only fields left non-None are written.
    """
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None
    active: Optional[bool] = None

    def changes(self) -> dict:
        """Return {column: value} for every field that was set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
