"""
models/tag.py
-------------
Domain model for post tags.
"""

from dataclasses import dataclass


@dataclass
class Tag:
    """A tag such as '#happy'. Names are globally unique."""
    id: int
    name: str

    def __str__(self) -> str:
        return self.name
