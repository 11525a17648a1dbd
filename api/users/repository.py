"""
User persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db
from core.errors import ConflictError

_PUBLIC_COLUMNS = "id, email, username, first_name, last_name, created_at, updated_at"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class UserRepository:
    async def create_user(
        self,
        *,
        email: str,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
    ) -> dict:
        try:
            row = await db.fetch_one(
                f"""
                INSERT INTO users (email, username, password_hash, first_name, last_name)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {_PUBLIC_COLUMNS}
                """,
                normalize_email(email),
                username,
                password_hash,
                first_name,
                last_name,
            )
        except asyncpg.UniqueViolationError as exc:
            # Concurrent registrations can slip past the service pre-check.
            raise ConflictError("User with this email or username already exists.") from exc
        if row is None:
            raise RuntimeError("Failed to create user.")
        return row

    async def list_users(self) -> list[dict]:
        return await db.fetch_all(
            f"""
            SELECT {_PUBLIC_COLUMNS}
            FROM users
            ORDER BY id ASC
            """
        )

    async def get_user_by_id(self, user_id: int) -> dict | None:
        return await db.fetch_one(
            f"""
            SELECT {_PUBLIC_COLUMNS}
            FROM users
            WHERE id = $1
            """,
            user_id,
        )

    async def get_user_by_email(self, email: str) -> dict | None:
        """
        Includes password_hash. Callers must not return this row as-is.
        """
        return await db.fetch_one(
            f"""
            SELECT {_PUBLIC_COLUMNS}, password_hash
            FROM users
            WHERE email = $1
            """,
            normalize_email(email),
        )

    async def get_user_by_username(self, username: str) -> dict | None:
        return await db.fetch_one(
            f"""
            SELECT {_PUBLIC_COLUMNS}
            FROM users
            WHERE username = $1
            """,
            username,
        )

    async def get_user_by_email_or_username(self, *, email: str, username: str) -> dict | None:
        return await db.fetch_one(
            f"""
            SELECT {_PUBLIC_COLUMNS}
            FROM users
            WHERE email = $1
               OR username = $2
            LIMIT 1
            """,
            normalize_email(email),
            username,
        )

    async def update_user(
        self,
        user_id: int,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> dict | None:
        # NULL arguments keep the stored value.
        return await db.fetch_one(
            f"""
            UPDATE users
            SET first_name = COALESCE($2, first_name),
                last_name = COALESCE($3, last_name),
                updated_at = now()
            WHERE id = $1
            RETURNING {_PUBLIC_COLUMNS}
            """,
            user_id,
            first_name,
            last_name,
        )

    async def delete_user(self, user_id: int) -> bool:
        row = await db.fetch_one(
            """
            DELETE FROM users
            WHERE id = $1
            RETURNING id
            """,
            user_id,
        )
        return row is not None
