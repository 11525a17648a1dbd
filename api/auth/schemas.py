"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, field_validator

from core.schemas import RequestModel, check_password_bytes
from users.schemas import CreateUserRequest, UserResponse


class RegisterRequest(CreateUserRequest):
    """
    Same shape as a directory create; registration adds the token.
    """


class LoginRequest(RequestModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


class AuthResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
