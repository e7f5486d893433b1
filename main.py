"""
main.py
-------
Entry point for the Juicebox data layer.

Responsibilities:
    - Initialize the database connection pool.
    - Rebuild the schema and load the sample data.
    - Run a smoke pass over the repositories, logging every result.
"""

import sys

from db.connection import init_pool, close_pool
from db.seed import rebuild_db
from models.post import PostUpdate
from models.user import UserUpdate
from repositories.post_repo import PostRepository
from repositories.tag_repo import TagRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def exercise_db() -> None:
    """Exercise the repositories against the freshly seeded database."""
    users = UserRepository()
    posts = PostRepository()
    tags = TagRepository()

    logger.info("Starting to test database...")

    all_users = users.list_users()
    logger.info(f"Users: {[str(u) for u in all_users]}")

    logger.info("Calling update_user on the first user")
    updated = users.update_user(
        all_users[0].id,
        UserUpdate(name="Newname Sogood", location="Lesterville, KY"),
    )
    logger.info(f"Result: {updated}")

    all_posts = posts.list_all_posts()
    logger.info(f"Posts: {[str(p) for p in all_posts]}")

    logger.info("Calling update_post on the first post")
    edited = posts.update_post(
        all_posts[0].id,
        PostUpdate(
            title="Edited First Post",
            content="This is my first post. I hope people love reading my blogs as much as I love writing them.",
        ),
    )
    logger.info(f"Result: {edited}")

    logger.info("Calling update_post on the second post, only updating tags")
    retagged = posts.update_post(
        all_posts[1].id,
        PostUpdate(tags=["#youcandoanything", "#redfish", "#bluefish"]),
    )
    logger.info(f"Result: {retagged}")

    albert = users.get_user_by_id(all_users[0].id)
    logger.info(f"User #{albert.id} has {len(albert.posts)} post(s)")

    happy = posts.list_posts_by_tag_name("#happy")
    logger.info(f"Posts tagged #happy: {[str(p) for p in happy]}")

    logger.info(f"Tags: {[str(t) for t in tags.list_all_tags()]}")
    logger.info("Finished database tests!")


def main() -> None:
    """Rebuild, seed and smoke-test the database."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()

    try:
        # ── 2. Schema + sample data ───────────────────────
        rebuild_db()

        # ── 3. Smoke pass ─────────────────────────────────
        exercise_db()
    except Exception as e:
        logger.error(f"Error during rebuild: {e}")
        sys.exit(1)
    finally:
        # ── 4. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    main()
