"""
Composition of the user directory and its storage.
"""

from __future__ import annotations

from fastapi import Depends

from .repository import UserRepository
from .service import UserDirectory


def get_user_repository() -> UserRepository:
    return UserRepository()


def get_user_directory(
    repository: UserRepository = Depends(get_user_repository),
) -> UserDirectory:
    return UserDirectory(repository)
