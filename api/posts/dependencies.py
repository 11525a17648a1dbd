"""
Composition of the post registry and its storage.
"""

from __future__ import annotations

from fastapi import Depends

from .repository import PostRepository
from .service import PostRegistry


def get_post_repository() -> PostRepository:
    return PostRepository()


def get_post_registry(
    repository: PostRepository = Depends(get_post_repository),
) -> PostRegistry:
    return PostRegistry(repository)
