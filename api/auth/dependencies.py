"""
Auth dependencies for protected FastAPI routes.

Protected routes chain: bearer extraction -> signature check -> live-user
re-validation. Ownership checks happen later, in the feature services.
"""

from __future__ import annotations

from fastapi import Depends, Header

from core.errors import UnauthorizedError
from users.dependencies import get_user_directory
from users.schemas import UserResponse
from users.service import UserDirectory

from . import security
from .service import AuthService


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise UnauthorizedError("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise UnauthorizedError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise UnauthorizedError("Authorization must be: Bearer <token>.")
    return token


def get_token_signer() -> security.TokenSigner:
    return security.TokenSigner.from_env()


def get_auth_service(
    users: UserDirectory = Depends(get_user_directory),
    signer: security.TokenSigner = Depends(get_token_signer),
) -> AuthService:
    return AuthService(users, signer)


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_current_user(
    access_token: str = Depends(get_bearer_token),
    signer: security.TokenSigner = Depends(get_token_signer),
    auth: AuthService = Depends(get_auth_service),
) -> UserResponse:
    try:
        payload = signer.verify(access_token)
    except security.AuthSecurityError as exc:
        raise UnauthorizedError(str(exc)) from exc
    return await auth.validate_token(payload)
