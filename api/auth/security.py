"""
Auth security helpers: password hashing and access-token signing.
"""

from __future__ import annotations

import time
from typing import Any

import bcrypt
import jwt

from core import settings


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str, *, rounds: int | None = None) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds())
    return bcrypt.hashpw(password, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


class TokenSigner:
    """
    Issues and verifies HS256-class bearer tokens carrying {sub, email}.

    There is no revocation list. With `expire_minutes=0` tokens stay valid
    for as long as the signing secret does.
    """

    def __init__(self, *, secret: str, algorithm: str = "HS256", expire_minutes: int = 0) -> None:
        if not secret:
            raise AuthSecurityError("Token secret is empty.")
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_env(cls) -> "TokenSigner":
        return cls(
            secret=settings.jwt_secret(),
            algorithm=settings.jwt_algorithm(),
            expire_minutes=settings.access_token_expire_minutes(),
        )

    def sign(self, *, user_id: int, email: str) -> str:
        issued_at = now_epoch_s()
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "type": "access",
            "iat": issued_at,
        }
        if self.expire_minutes > 0:
            payload["exp"] = issued_at + (self.expire_minutes * 60)
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        raw = (token or "").strip()
        if not raw:
            raise AuthSecurityError("Access token is empty.")

        try:
            payload = jwt.decode(raw, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise AuthSecurityError("Access token is expired.") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthSecurityError("Invalid access token.") from exc

        token_type = str(payload.get("type") or "").strip().lower()
        if token_type != "access":
            raise AuthSecurityError("Token is not an access token.")
        if not str(payload.get("email") or "").strip():
            raise AuthSecurityError("Access token has no email claim.")

        return payload
