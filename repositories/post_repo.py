"""
repositories/post_repo.py
-------------------------
Data access layer for blog posts.
Every post returned from here is hydrated with its tags and author.
"""

from db.connection import transaction
from models.post import Post, PostUpdate
from repositories import queries
from utils.logger import get_logger

logger = get_logger(__name__)


class PostRepository:
    """Repository for CRUD operations on the posts table."""

    # ── CREATE ────────────────────────────────────────────

    def create_post(
        self,
        author_id: int,
        title: str,
        content: str,
        tags: list[str] | None = None,
    ) -> Post:
        """
        Insert a post and tag it, in one transaction.

        Missing tags are created on the fly.

        Args:
            author_id: Primary key of an existing user.
            title: Post title.
            content: Post body.
            tags: Tag names to attach.

        Returns:
            The hydrated post.

        Raises:
            psycopg2.errors.ForeignKeyViolation: If the author does not exist.
        """
        sql = """
            INSERT INTO posts (author_id, title, content)
            VALUES (%s, %s, %s)
            RETURNING id;
        """
        with transaction("create post") as cur:
            cur.execute(sql, (author_id, title, content))
            post_id = cur.fetchone()["id"]
            for tag in queries.insert_tags(cur, tags or []):
                queries.link_post_tag(cur, post_id, tag.id)
            post = queries.fetch_post(cur, post_id)
        logger.info(f"Created post #{post.id} for user {author_id}")
        return post

    # ── READ ──────────────────────────────────────────────

    def get_post_by_id(self, post_id: int) -> Post:
        """
        Fetch a single hydrated post.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        with transaction(f"get post #{post_id}") as cur:
            return queries.fetch_post(cur, post_id)

    def list_all_posts(self) -> list[Post]:
        """Get every post, ordered by id."""
        with transaction("list posts") as cur:
            cur.execute("SELECT id FROM posts ORDER BY id;")
            return queries.fetch_posts(cur, [r["id"] for r in cur.fetchall()])

    def list_posts_by_user(self, user_id: int) -> list[Post]:
        """Get every post written by a user, ordered by id."""
        with transaction(f"list posts of user {user_id}") as cur:
            return queries.fetch_posts_by_author(cur, user_id)

    def list_posts_by_tag_name(self, tag_name: str) -> list[Post]:
        """
        Get every post carrying a tag.

        Returns:
            The matching posts ordered by id; empty if the tag is unknown
            or unused.
        """
        sql = """
            SELECT posts.id
            FROM posts
            JOIN post_tags ON posts.id = post_tags.post_id
            JOIN tags ON tags.id = post_tags.tag_id
            WHERE tags.name = %s
            ORDER BY posts.id;
        """
        with transaction(f"list posts tagged {tag_name}") as cur:
            cur.execute(sql, (tag_name,))
            return queries.fetch_posts(cur, [r["id"] for r in cur.fetchall()])

    # ── UPDATE ────────────────────────────────────────────

    def update_post(self, post_id: int, fields: PostUpdate) -> Post:
        """
        Update a post's scalar columns and/or replace its tag set.

        The scalar update matches rows on `author_id = post_id`, not on the
        post's own id.
        When `fields.tags` is given it becomes the post's exact tag set:
        missing tags are created, stale associations deleted, new ones added.

        Args:
            post_id: Primary key of the post to return (and retag).
            fields: Columns to change.

        Returns:
            The hydrated post.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        changes = fields.changes()
        with transaction(f"update post #{post_id}") as cur:
            if changes:
                set_clause = ", ".join(f"{column} = %s" for column in changes)
                # FIXME: matches author_id against the post id, not posts.id
                cur.execute(
                    f"UPDATE posts SET {set_clause} WHERE author_id = %s;",
                    (*changes.values(), post_id),
                )
            if fields.tags is not None:
                tag_list = queries.insert_tags(cur, fields.tags)
                removed = queries.unlink_tags_except(
                    cur, post_id, [tag.id for tag in tag_list]
                )
                for tag in tag_list:
                    queries.link_post_tag(cur, post_id, tag.id)
                logger.debug(
                    f"Retagged post #{post_id}: {len(tag_list)} tag(s), {removed} removed"
                )
            post = queries.fetch_post(cur, post_id)
        logger.info(f"Updated post #{post_id}")
        return post
