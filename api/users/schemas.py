"""
User API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from core.schemas import ApiModel, RequestModel, check_password_bytes


class CreateUserRequest(RequestModel):
    email: EmailStr
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=72)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


class UpdateUserRequest(RequestModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)


class UserResponse(ApiModel):
    """
    Sanitized user view. Never carries the password hash.
    """

    id: int
    email: str
    username: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime
