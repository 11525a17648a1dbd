"""
Shared fixtures: in-memory repositories and an app wired to them.
"""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import count

import pytest
from fastapi.testclient import TestClient

from core.errors import ConflictError
from posts.dependencies import get_post_repository
from users.dependencies import get_user_repository
from users.repository import normalize_email

_PUBLIC_USER_FIELDS = ("id", "email", "username", "first_name", "last_name", "created_at", "updated_at")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryStore:
    def __init__(self) -> None:
        self.users: dict[int, dict] = {}
        self.posts: dict[int, dict] = {}
        self.user_ids = count(1)
        self.post_ids = count(1)


class FakeUserRepository:
    """Mirrors users.repository.UserRepository over a dict."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @staticmethod
    def _public(row: dict) -> dict:
        return {k: row[k] for k in _PUBLIC_USER_FIELDS}

    async def create_user(self, *, email, username, password_hash, first_name, last_name) -> dict:
        email = normalize_email(email)
        for row in self.store.users.values():
            if row["email"] == email or row["username"] == username:
                raise ConflictError("User with this email or username already exists.")
        now = _now()
        row = {
            "id": next(self.store.user_ids),
            "email": email,
            "username": username,
            "password_hash": password_hash,
            "first_name": first_name,
            "last_name": last_name,
            "created_at": now,
            "updated_at": now,
        }
        self.store.users[row["id"]] = row
        return self._public(row)

    async def list_users(self) -> list[dict]:
        return [self._public(row) for row in self.store.users.values()]

    async def get_user_by_id(self, user_id: int) -> dict | None:
        row = self.store.users.get(user_id)
        return self._public(row) if row else None

    async def get_user_by_email(self, email: str) -> dict | None:
        email = normalize_email(email)
        for row in self.store.users.values():
            if row["email"] == email:
                return dict(row)
        return None

    async def get_user_by_username(self, username: str) -> dict | None:
        for row in self.store.users.values():
            if row["username"] == username:
                return self._public(row)
        return None

    async def get_user_by_email_or_username(self, *, email: str, username: str) -> dict | None:
        return await self.get_user_by_email(email) or await self.get_user_by_username(username)

    async def update_user(self, user_id: int, *, first_name=None, last_name=None) -> dict | None:
        row = self.store.users.get(user_id)
        if row is None:
            return None
        if first_name is not None:
            row["first_name"] = first_name
        if last_name is not None:
            row["last_name"] = last_name
        row["updated_at"] = _now()
        return self._public(row)

    async def delete_user(self, user_id: int) -> bool:
        if self.store.users.pop(user_id, None) is None:
            return False
        for post_id in [pid for pid, post in self.store.posts.items() if post["author_id"] == user_id]:
            del self.store.posts[post_id]
        return True


class FakePostRepository:
    """Mirrors posts.repository.PostRepository over a dict."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _with_author(self, post: dict) -> dict:
        author = self.store.users[post["author_id"]]
        return {
            **post,
            "author_username": author["username"],
            "author_first_name": author["first_name"],
            "author_last_name": author["last_name"],
        }

    async def create_post(self, *, title: str, content: str, author_id: int) -> dict:
        now = _now()
        post = {
            "id": next(self.store.post_ids),
            "title": title,
            "content": content,
            "author_id": author_id,
            "created_at": now,
            "updated_at": now,
        }
        self.store.posts[post["id"]] = post
        return self._with_author(post)

    async def list_posts(self) -> list[dict]:
        return [self._with_author(post) for post in self.store.posts.values()]

    async def list_posts_by_author(self, author_id: int) -> list[dict]:
        return [
            self._with_author(post)
            for post in self.store.posts.values()
            if post["author_id"] == author_id
        ]

    async def get_post_by_id(self, post_id: int) -> dict | None:
        post = self.store.posts.get(post_id)
        return self._with_author(post) if post else None

    async def update_post(self, post_id: int, *, title=None, content=None) -> dict | None:
        post = self.store.posts.get(post_id)
        if post is None:
            return None
        if title is not None:
            post["title"] = title
        if content is not None:
            post["content"] = content
        post["updated_at"] = _now()
        return self._with_author(post)

    async def delete_post(self, post_id: int) -> bool:
        return self.store.posts.pop(post_id, None) is not None


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MIN", "60")


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(store):
    from main import create_app

    app = create_app(use_lifespan=False)
    app.dependency_overrides[get_user_repository] = lambda: FakeUserRepository(store)
    app.dependency_overrides[get_post_repository] = lambda: FakePostRepository(store)
    with TestClient(app) as test_client:
        yield test_client
