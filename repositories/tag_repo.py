"""
repositories/tag_repo.py
------------------------
Data access layer for tags and their association with posts.
All SQL touching the `tags` and `post_tags` tables is issued from here
or from the shared helpers in `repositories.queries`.
"""

from typing import Optional

from db.connection import transaction
from models.post import Post
from models.tag import Tag
from repositories import queries
from utils.logger import get_logger

logger = get_logger(__name__)


class TagRepository:
    """Repository for CRUD operations on the tags and post_tags tables."""

    # ── CREATE ────────────────────────────────────────────

    def create_tags(self, names: list[str]) -> list[Tag]:
        """
        Ensure every tag name exists.

        Idempotent: names that already exist are not duplicated.

        Args:
            names: Tag names, duplicates allowed.

        Returns:
            One Tag per unique requested name, including pre-existing ones.
            An empty list for empty input, without touching the database.
        """
        if not names:
            return []
        with transaction("create tags") as cur:
            tags = queries.insert_tags(cur, names)
        logger.debug(f"Ensured {len(tags)} tag(s): {[t.name for t in tags]}")
        return tags

    def create_post_tag(self, post_id: int, tag_id: int) -> None:
        """Associate a tag with a post. An existing pair is silently kept."""
        with transaction(f"link tag #{tag_id} to post #{post_id}") as cur:
            queries.link_post_tag(cur, post_id, tag_id)

    def add_tags_to_post(self, post_id: int, tags: list[Tag]) -> Post:
        """
        Associate every tag in `tags` with a post.

        Returns:
            The hydrated post.

        Raises:
            PostNotFoundError: If the post does not exist once linked.
        """
        with transaction(f"add tags to post #{post_id}") as cur:
            for tag in tags:
                queries.link_post_tag(cur, post_id, tag.id)
            return queries.fetch_post(cur, post_id)

    # ── READ ──────────────────────────────────────────────

    def list_all_tags(self) -> list[Tag]:
        """Get every tag, ordered by id."""
        with transaction("list tags") as cur:
            cur.execute("SELECT id FROM tags ORDER BY id;")
            tag_ids = [r["id"] for r in cur.fetchall()]
            return [queries.fetch_tag(cur, tag_id) for tag_id in tag_ids]

    def get_tag_by_id(self, tag_id: int) -> Optional[Tag]:
        """
        Fetch a single tag.

        Returns:
            The Tag, or None if no tag has this id.
        """
        with transaction(f"get tag #{tag_id}") as cur:
            return queries.fetch_tag(cur, tag_id)
