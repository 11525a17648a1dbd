"""
Post registry: CRUD over posts with authorship enforcement.

Mutations always load the post first, so a missing post answers NotFound
before any ownership comparison happens.
"""

from __future__ import annotations

import logging

from core.errors import ForbiddenError, NotFoundError

from . import schemas
from .repository import PostRepository

logger = logging.getLogger(__name__)


def _to_post_response(row: dict) -> schemas.PostResponse:
    author_id = int(row["author_id"])
    return schemas.PostResponse(
        id=int(row["id"]),
        title=str(row["title"]),
        content=str(row["content"]),
        author_id=author_id,
        author=schemas.PostAuthor(
            id=author_id,
            username=str(row["author_username"]),
            first_name=str(row["author_first_name"]),
            last_name=str(row["author_last_name"]),
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class PostRegistry:
    def __init__(self, repository: PostRepository) -> None:
        self.repository = repository

    async def create(self, payload: schemas.CreatePostRequest, author_id: int) -> schemas.PostResponse:
        row = await self.repository.create_post(
            title=payload.title,
            content=payload.content,
            author_id=author_id,
        )
        logger.info("Created post id=%s by user id=%s", row["id"], author_id)
        return _to_post_response(row)

    async def find_all(self) -> list[schemas.PostResponse]:
        rows = await self.repository.list_posts()
        return [_to_post_response(row) for row in rows]

    async def find_one(self, post_id: int) -> schemas.PostResponse:
        row = await self.repository.get_post_by_id(post_id)
        if row is None:
            raise NotFoundError(f"Post with ID {post_id} not found.")
        return _to_post_response(row)

    async def find_by_author(self, author_id: int) -> list[schemas.PostResponse]:
        rows = await self.repository.list_posts_by_author(author_id)
        return [_to_post_response(row) for row in rows]

    async def update(
        self,
        post_id: int,
        payload: schemas.UpdatePostRequest,
        caller_id: int,
    ) -> schemas.PostResponse:
        post = await self.find_one(post_id)
        if post.author_id != caller_id:
            raise ForbiddenError("You can only update your own posts.")

        row = await self.repository.update_post(
            post_id,
            title=payload.title,
            content=payload.content,
        )
        if row is None:
            # Deleted between the ownership check and the update.
            raise NotFoundError(f"Post with ID {post_id} not found.")
        logger.info("Updated post id=%s", post_id)
        return _to_post_response(row)

    async def remove(self, post_id: int, caller_id: int) -> None:
        post = await self.find_one(post_id)
        if post.author_id != caller_id:
            raise ForbiddenError("You can only delete your own posts.")

        await self.repository.delete_post(post_id)
        logger.info("Removed post id=%s", post_id)
