"""
Base pydantic models shared by feature schemas.

Fields are declared snake_case and exposed camelCase on the wire.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(ApiModel):
    # Unknown fields are rejected instead of silently dropped.
    model_config = ConfigDict(extra="forbid")


# bcrypt rejects passwords longer than 72 bytes.
BCRYPT_MAX_PASSWORD_BYTES = 72


def check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes in UTF-8.")
    return value


# Primary keys are SERIAL (int4); larger values cannot reach the database.
MAX_SERIAL_ID = 2**31 - 1

RecordId = Annotated[int, Path(ge=1, le=MAX_SERIAL_ID)]
