"""
db/seed.py
----------
Rebuilds the database with a small set of sample users, posts and tags.
Run it through the entry point:
    python main.py
"""

from db.init_db import create_tables, drop_tables
from repositories.post_repo import PostRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)

INITIAL_USERS = [
    {"username": "albert", "password": "bertie99", "name": "Al Bert", "location": "Sidney, Australia"},
    {"username": "sandra", "password": "2sandy4me", "name": "Just Sandra", "location": "Ain't tellin'"},
    {"username": "glamgal", "password": "soglam", "name": "Joshua", "location": "Upper East Side"},
]

# (author username, title, content, tags)
INITIAL_POSTS = [
    (
        "albert",
        "First Post",
        "This is my first post. I hope I love writing blogs as much as I love writing them.",
        ["#happy", "#youcandoanything"],
    ),
    (
        "sandra",
        "Second Post",
        "Maybe I live in a desert, you'll never know.",
        ["#worst-day-ever", "#youcandoanything"],
    ),
    (
        "glamgal",
        "Third Post",
        "My first step on the road to being an influencer.",
        ["#happy", "#youcandoanything", "#catmandoeverything"],
    ),
]


def create_initial_users(users: UserRepository) -> dict[str, int]:
    """
    Create the sample users.

    Returns:
        Mapping of username to user id.
    """
    logger.info("Starting to create users...")
    ids = {}
    for data in INITIAL_USERS:
        user = users.create_user(**data) or users.get_user_by_username(data["username"])
        ids[user.username] = user.id
    logger.info(f"Finished creating users! {sorted(ids)}")
    return ids


def create_initial_posts(posts: PostRepository, user_ids: dict[str, int]) -> None:
    logger.info("Starting to create posts...")
    for username, title, content, tags in INITIAL_POSTS:
        posts.create_post(user_ids[username], title, content, tags)
    logger.info("Finished creating posts!")


def rebuild_db() -> None:
    """Drop every table, recreate the schema and load the sample data."""
    drop_tables()
    create_tables()
    user_ids = create_initial_users(UserRepository())
    create_initial_posts(PostRepository(), user_ids)
