"""
models/post.py
--------------
Domain models for blog posts, their embedded author, and the partial-update
request applied to them.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.tag import Tag


@dataclass
class Author:
    """
    Public projection of the user who wrote a post.

    Attributes:
        id: The user's primary key.
        username: The user's unique login name.
        name: Display name.
        location: Free-form location string.
    """
    id: int
    username: str
    name: str
    location: str


@dataclass
class Post:
    """
    A fully hydrated blog post.

    The raw author id column is not kept; `author` carries it instead.

    Attributes:
        id: Database primary key.
        title: Post title.
        content: Post body.
        active: Whether the post is visible.
        author: The author's public projection.
        tags: Tags associated through post_tags.
    """
    id: int
    title: str
    content: str
    active: bool = True
    author: Optional[Author] = None
    tags: list[Tag] = field(default_factory=list)

    @property
    def tag_names(self) -> set[str]:
        """Names of the attached tags."""
        return {tag.name for tag in self.tags}

    def __str__(self) -> str:
        by = f" by @{self.author.username}" if self.author else ""
        tags = " ".join(sorted(self.tag_names))
        return f"#{self.id} {self.title}{by} [{tags}]"


@dataclass
class PostUpdate:
    """
    The mutable parts of a post.

    Scalar fields left None are not written. `tags`, when not None, is the
    complete desired tag set (an empty list removes every tag).
    """
    title: Optional[str] = None
    content: Optional[str] = None
    active: Optional[bool] = None
    tags: Optional[list[str]] = None

    def changes(self) -> dict:
        """Return {column: value} for every scalar field that was set."""
        values = {"title": self.title, "content": self.content, "active": self.active}
        return {column: value for column, value in values.items() if value is not None}
