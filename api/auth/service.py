"""
Auth business logic: registration, login and token re-validation.
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import ConflictError, UnauthorizedError
from users.schemas import UserResponse
from users.service import UserDirectory, to_user_response

from . import schemas, security

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid credentials."


class AuthService:
    def __init__(self, users: UserDirectory, signer: security.TokenSigner) -> None:
        self.users = users
        self.signer = signer

    def _issue(self, user: UserResponse) -> schemas.AuthResponse:
        access_token = self.signer.sign(user_id=user.id, email=user.email)
        return schemas.AuthResponse(user=user, access_token=access_token)

    async def register(self, payload: schemas.RegisterRequest) -> schemas.AuthResponse:
        by_email = await self.users.find_by_email(payload.email)
        by_username = await self.users.find_by_username(payload.username)
        if by_email is not None or by_username is not None:
            raise ConflictError("User with this email or username already exists.")

        user = await self.users.create(payload)
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return self._issue(user)

    async def login(self, payload: schemas.LoginRequest) -> schemas.AuthResponse:
        user_row = await self.users.find_by_email(payload.email)
        if user_row is None:
            logger.info("Failed login attempt.")
            raise UnauthorizedError(_INVALID_CREDENTIALS)

        is_valid = security.verify_password(payload.password, str(user_row.get("password_hash") or ""))
        if not is_valid:
            logger.info("Failed login attempt.")
            raise UnauthorizedError(_INVALID_CREDENTIALS)

        user = to_user_response(user_row)
        logger.info("Login: %s (id=%s)", user.username, user.id)
        return self._issue(user)

    async def validate_token(self, payload: dict[str, Any]) -> UserResponse:
        """
        Re-fetch the user named by verified claims.

        Looked up by email on every request so a deleted account stops
        authenticating even while its token signature is still valid. The
        subject must match the stored id: an email re-registered after
        deletion belongs to a different account.
        """
        email = str(payload.get("email") or "").strip()
        user_row = await self.users.find_by_email(email) if email else None
        if user_row is None:
            raise UnauthorizedError("Invalid token.")
        if str(user_row["id"]) != str(payload.get("sub") or "").strip():
            raise UnauthorizedError("Invalid token.")
        return to_user_response(user_row)
