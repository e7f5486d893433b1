"""
repositories/queries.py
-----------------------
Cursor-level SQL shared by the repositories.

Every helper takes an open cursor (see `db.connection.transaction`) so that a
repository method can compose several of them inside one transaction. The
cursor is expected to return rows as dicts.
"""

from typing import Optional

from exceptions import PostNotFoundError
from models.post import Author, Post
from models.tag import Tag

# ── TAGS ──────────────────────────────────────────────────


def insert_tags(cur, names: list[str]) -> list[Tag]:
    """
    Make sure every name exists in `tags` and return their rows.

    Names that already exist are skipped by the insert but still returned,
    one Tag per unique requested name.
    """
    unique = list(dict.fromkeys(names))
    if not unique:
        return []
    cur.execute(
        """
        INSERT INTO tags (name)
        SELECT unnest(%s::varchar[])
        ON CONFLICT (name) DO NOTHING;
        """,
        (unique,),
    )
    cur.execute(
        "SELECT id, name FROM tags WHERE name = ANY(%s::varchar[]) ORDER BY id;",
        (unique,),
    )
    return [row_to_tag(r) for r in cur.fetchall()]


def link_post_tag(cur, post_id: int, tag_id: int) -> None:
    """Associate a tag with a post; an existing pair is left as is."""
    cur.execute(
        """
        INSERT INTO post_tags (post_id, tag_id)
        VALUES (%s, %s)
        ON CONFLICT (post_id, tag_id) DO NOTHING;
        """,
        (post_id, tag_id),
    )


def unlink_tags_except(cur, post_id: int, keep_tag_ids: list[int]) -> int:
    """
    Delete the post's associations whose tag is not in `keep_tag_ids`.

    Returns:
        Number of association rows removed.
    """
    cur.execute(
        "DELETE FROM post_tags WHERE post_id = %s AND NOT (tag_id = ANY(%s::integer[]));",
        (post_id, keep_tag_ids),
    )
    return cur.rowcount


def fetch_tag(cur, tag_id: int) -> Optional[Tag]:
    cur.execute("SELECT id, name FROM tags WHERE id = %s;", (tag_id,))
    row = cur.fetchone()
    return row_to_tag(row) if row else None


def fetch_post_tags(cur, post_id: int) -> list[Tag]:
    cur.execute(
        """
        SELECT tags.id, tags.name
        FROM tags
        JOIN post_tags ON tags.id = post_tags.tag_id
        WHERE post_tags.post_id = %s
        ORDER BY tags.id;
        """,
        (post_id,),
    )
    return [row_to_tag(r) for r in cur.fetchall()]


# ── POSTS ─────────────────────────────────────────────────


def fetch_author(cur, user_id: int) -> Optional[Author]:
    cur.execute(
        "SELECT id, username, name, location FROM users WHERE id = %s;",
        (user_id,),
    )
    row = cur.fetchone()
    return Author(**row) if row else None


def fetch_post(cur, post_id: int) -> Post:
    """
    Load a post and hydrate it with its tags and author.

    Issues three queries: the post row, its tags, its author.

    Raises:
        PostNotFoundError: If no post has this id.
    """
    cur.execute(
        "SELECT id, author_id, title, content, active FROM posts WHERE id = %s;",
        (post_id,),
    )
    row = cur.fetchone()
    if not row:
        raise PostNotFoundError(post_id)
    tags = fetch_post_tags(cur, post_id)
    author = fetch_author(cur, row["author_id"])
    return Post(
        id=row["id"],
        title=row["title"],
        content=row["content"],
        active=row["active"],
        author=author,
        tags=tags,
    )


def fetch_posts(cur, post_ids: list[int]) -> list[Post]:
    """Hydrate each post id in turn, keeping the given order."""
    return [fetch_post(cur, post_id) for post_id in post_ids]


def fetch_posts_by_author(cur, author_id: int) -> list[Post]:
    cur.execute(
        "SELECT id FROM posts WHERE author_id = %s ORDER BY id;", (author_id,)
    )
    return fetch_posts(cur, [r["id"] for r in cur.fetchall()])


# ── HELPERS ───────────────────────────────────────────────


def row_to_tag(row: dict) -> Tag:
    """Convert a database row to a Tag domain object."""
    return Tag(id=row["id"], name=row["name"])
