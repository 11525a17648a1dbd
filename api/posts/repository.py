"""
Post persistence (raw SQL).

Reads join the author's public columns; the password hash is never selected.
"""

from __future__ import annotations

from core import db

_POST_WITH_AUTHOR = """
    SELECT p.id, p.title, p.content, p.author_id, p.created_at, p.updated_at,
           u.username AS author_username,
           u.first_name AS author_first_name,
           u.last_name AS author_last_name
    FROM {source} p
    JOIN users u ON u.id = p.author_id
"""


class PostRepository:
    async def create_post(self, *, title: str, content: str, author_id: int) -> dict:
        row = await db.fetch_one(
            """
            WITH inserted AS (
                INSERT INTO posts (title, content, author_id)
                VALUES ($1, $2, $3)
                RETURNING id, title, content, author_id, created_at, updated_at
            )
            """
            + _POST_WITH_AUTHOR.format(source="inserted"),
            title,
            content,
            author_id,
        )
        if row is None:
            raise RuntimeError("Failed to create post.")
        return row

    async def list_posts(self) -> list[dict]:
        return await db.fetch_all(
            _POST_WITH_AUTHOR.format(source="posts")
            + """
            ORDER BY p.created_at DESC, p.id DESC
            """
        )

    async def list_posts_by_author(self, author_id: int) -> list[dict]:
        return await db.fetch_all(
            _POST_WITH_AUTHOR.format(source="posts")
            + """
            WHERE p.author_id = $1
            ORDER BY p.created_at DESC, p.id DESC
            """,
            author_id,
        )

    async def get_post_by_id(self, post_id: int) -> dict | None:
        return await db.fetch_one(
            _POST_WITH_AUTHOR.format(source="posts")
            + """
            WHERE p.id = $1
            """,
            post_id,
        )

    async def update_post(
        self,
        post_id: int,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> dict | None:
        # author_id is never part of the SET list.
        return await db.fetch_one(
            """
            WITH updated AS (
                UPDATE posts
                SET title = COALESCE($2, title),
                    content = COALESCE($3, content),
                    updated_at = now()
                WHERE id = $1
                RETURNING id, title, content, author_id, created_at, updated_at
            )
            """
            + _POST_WITH_AUTHOR.format(source="updated"),
            post_id,
            title,
            content,
        )

    async def delete_post(self, post_id: int) -> bool:
        row = await db.fetch_one(
            """
            DELETE FROM posts
            WHERE id = $1
            RETURNING id
            """,
            post_id,
        )
        return row is not None
