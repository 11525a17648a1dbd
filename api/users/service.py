"""
User directory: CRUD over user records.

Owns email/username uniqueness and password hashing. `find_by_email` is the
only read that returns the password hash; it exists for credential checks
and its result never leaves the service layer.
"""

from __future__ import annotations

import logging

from auth import security
from core.errors import ConflictError, NotFoundError

from . import schemas
from .repository import UserRepository

logger = logging.getLogger(__name__)


def to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        email=str(user_row["email"]),
        username=str(user_row["username"]),
        first_name=str(user_row["first_name"]),
        last_name=str(user_row["last_name"]),
        created_at=user_row["created_at"],
        updated_at=user_row["updated_at"],
    )


class UserDirectory:
    def __init__(self, repository: UserRepository, *, bcrypt_rounds: int | None = None) -> None:
        self.repository = repository
        self.bcrypt_rounds = bcrypt_rounds

    async def create(self, payload: schemas.CreateUserRequest) -> schemas.UserResponse:
        existing = await self.repository.get_user_by_email_or_username(
            email=payload.email,
            username=payload.username,
        )
        if existing is not None:
            raise ConflictError("User with this email or username already exists.")

        password_hash = security.hash_password(payload.password, rounds=self.bcrypt_rounds)
        user_row = await self.repository.create_user(
            email=payload.email,
            username=payload.username,
            password_hash=password_hash,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        logger.info("Created user %s (id=%s)", user_row["username"], user_row["id"])
        return to_user_response(user_row)

    async def find_all(self) -> list[schemas.UserResponse]:
        rows = await self.repository.list_users()
        return [to_user_response(row) for row in rows]

    async def find_by_id(self, user_id: int) -> schemas.UserResponse:
        user_row = await self.repository.get_user_by_id(user_id)
        if user_row is None:
            raise NotFoundError(f"User with ID {user_id} not found.")
        return to_user_response(user_row)

    async def find_by_email(self, email: str) -> dict | None:
        return await self.repository.get_user_by_email(email)

    async def find_by_username(self, username: str) -> dict | None:
        return await self.repository.get_user_by_username(username)

    async def update(self, user_id: int, payload: schemas.UpdateUserRequest) -> schemas.UserResponse:
        user_row = await self.repository.update_user(
            user_id,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        if user_row is None:
            raise NotFoundError(f"User with ID {user_id} not found.")
        logger.info("Updated user id=%s", user_id)
        return to_user_response(user_row)

    async def remove(self, user_id: int) -> None:
        deleted = await self.repository.delete_user(user_id)
        if not deleted:
            raise NotFoundError(f"User with ID {user_id} not found.")
        # Authored posts go with the user (ON DELETE CASCADE).
        logger.info("Removed user id=%s", user_id)
