"""
exceptions.py
-------------
Errors raised by the data-access layer itself.
Database driver errors (psycopg2.Error) are never wrapped and propagate as-is.
"""


class PostNotFoundError(LookupError):
    """Raised when a post lookup by id finds no row."""

    name = "PostNotFoundError"

    def __init__(self, post_id: int):
        self.post_id = post_id
        self.message = "Could not find a post with that postId"
        super().__init__(f"{self.message}: {post_id}")
