"""
Tests for the user SQL layer with the pool helpers patched out.
"""

from unittest.mock import AsyncMock

import asyncpg
import pytest

from core import db
from core.errors import ConflictError
from users.repository import UserRepository

NEW_USER = {
    "email": " Test@Example.com ",
    "username": "testuser",
    "password_hash": "hashed",
    "first_name": "Test",
    "last_name": "User",
}


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_unique_violation_is_conflict(self, monkeypatch):
        fetch_one = AsyncMock(
            side_effect=asyncpg.UniqueViolationError(
                'duplicate key value violates unique constraint "users_email_key"'
            )
        )
        monkeypatch.setattr(db, "fetch_one", fetch_one)

        with pytest.raises(ConflictError) as exc_info:
            await UserRepository().create_user(**NEW_USER)
        assert exc_info.value.status_code == 409
        assert isinstance(exc_info.value.__cause__, asyncpg.UniqueViolationError)

    @pytest.mark.asyncio
    async def test_email_is_normalized(self, monkeypatch):
        fetch_one = AsyncMock(return_value={"id": 1})
        monkeypatch.setattr(db, "fetch_one", fetch_one)

        await UserRepository().create_user(**NEW_USER)

        args = fetch_one.await_args.args
        assert args[1:] == ("test@example.com", "testuser", "hashed", "Test", "User")

    @pytest.mark.asyncio
    async def test_missing_row_is_an_error(self, monkeypatch):
        monkeypatch.setattr(db, "fetch_one", AsyncMock(return_value=None))

        with pytest.raises(RuntimeError):
            await UserRepository().create_user(**NEW_USER)


class TestLookups:
    @pytest.mark.asyncio
    async def test_get_user_by_email_selects_hash(self, monkeypatch):
        fetch_one = AsyncMock(return_value=None)
        monkeypatch.setattr(db, "fetch_one", fetch_one)

        await UserRepository().get_user_by_email("A@X.com")

        sql, email = fetch_one.await_args.args
        assert "password_hash" in sql
        assert email == "a@x.com"

    @pytest.mark.asyncio
    async def test_get_user_by_id_omits_hash(self, monkeypatch):
        fetch_one = AsyncMock(return_value=None)
        monkeypatch.setattr(db, "fetch_one", fetch_one)

        assert await UserRepository().get_user_by_id(1) is None

        sql = fetch_one.await_args.args[0]
        assert "password_hash" not in sql

    @pytest.mark.asyncio
    async def test_delete_reports_missing(self, monkeypatch):
        monkeypatch.setattr(db, "fetch_one", AsyncMock(return_value=None))
        assert await UserRepository().delete_user(1) is False
