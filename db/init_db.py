"""
db/init_db.py
-------------
Creates (and drops) the database schema.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import transaction
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: blog authors and their login credentials
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    username        VARCHAR(255) UNIQUE NOT NULL,
    password        VARCHAR(255) NOT NULL,
    name            VARCHAR(255) NOT NULL,
    location        VARCHAR(255) NOT NULL,
    active          BOOLEAN DEFAULT TRUE
);

-- Posts table: every post belongs to exactly one existing user
CREATE TABLE IF NOT EXISTS posts (
    id              SERIAL PRIMARY KEY,
    author_id       INTEGER NOT NULL REFERENCES users(id),
    title           VARCHAR(255) NOT NULL,
    content         TEXT NOT NULL,
    active          BOOLEAN DEFAULT TRUE
);

-- Tags table: tag names are globally unique
CREATE TABLE IF NOT EXISTS tags (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(255) UNIQUE NOT NULL
);

-- Join table: a (post, tag) pair appears at most once
CREATE TABLE IF NOT EXISTS post_tags (
    post_id         INTEGER REFERENCES posts(id),
    tag_id          INTEGER REFERENCES tags(id),
    UNIQUE(post_id, tag_id)
);

-- Indexes for faster queries
CREATE INDEX IF NOT EXISTS idx_posts_author ON posts(author_id);
CREATE INDEX IF NOT EXISTS idx_post_tags_tag ON post_tags(tag_id);
"""

DROP_SQL = """
DROP TABLE IF EXISTS post_tags;
DROP TABLE IF EXISTS tags;
DROP TABLE IF EXISTS posts;
DROP TABLE IF EXISTS users;
"""


def drop_tables() -> None:
    """Drop all tables, children before parents."""
    logger.info("Starting to drop tables...")
    with transaction("drop tables") as cur:
        cur.execute(DROP_SQL)
    logger.info("Finished dropping tables!")


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with transaction("initialize schema") as cur:
        cur.execute(SCHEMA_SQL)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    create_tables()
    close_pool()
    print("✅ Database schema created successfully.")
