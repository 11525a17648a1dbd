"""
Post API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from core.schemas import ApiModel, RequestModel


class CreatePostRequest(RequestModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)


class UpdatePostRequest(RequestModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)


class PostAuthor(ApiModel):
    """
    Public author fields embedded in posts.
    """

    id: int
    username: str
    first_name: str
    last_name: str


class PostResponse(ApiModel):
    id: int
    title: str
    content: str
    author_id: int
    author: PostAuthor
    created_at: datetime
    updated_at: datetime
