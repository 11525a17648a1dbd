"""
Tests for settings parsing and the app-level error handling.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from core import settings
from core.errors import ForbiddenError
from core.middleware import register_exception_handlers, register_middleware


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("JWT_ALG", "BCRYPT_ROUNDS", "API_PREFIX", "CORS_ORIGINS", "DB_SYNCHRONIZE"):
            monkeypatch.delenv(name, raising=False)
        assert settings.jwt_algorithm() == "HS256"
        assert settings.bcrypt_rounds() == 10
        assert settings.api_prefix() == ""
        assert settings.cors_origins() == ["http://localhost:5173", "http://127.0.0.1:5173"]
        assert settings.db_synchronize() is False

    def test_bad_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "lots")
        assert settings.bcrypt_rounds() == 10

    def test_negative_expiry_disables(self, monkeypatch):
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MIN", "-5")
        assert settings.access_token_expire_minutes() == 0

    def test_prefix_normalized(self, monkeypatch):
        monkeypatch.setenv("API_PREFIX", "api/")
        assert settings.api_prefix() == "/api"

    def test_bool_parsing(self, monkeypatch):
        monkeypatch.setenv("DB_SYNCHRONIZE", "Yes")
        assert settings.db_synchronize() is True


def _app() -> FastAPI:
    app = FastAPI()
    register_middleware(app)
    register_exception_handlers(app)

    @app.get("/boom")
    def boom() -> dict:
        raise RuntimeError("database password is hunter2")

    @app.get("/forbidden")
    def forbidden() -> dict:
        raise ForbiddenError("nope")

    @app.get("/items/{item_id}")
    def item(item_id: int) -> dict:
        return {"id": item_id}

    return app


class TestErrorHandling:
    def test_unexpected_error_is_generic_500(self):
        client = TestClient(_app(), raise_server_exceptions=False)
        resp = client.get("/boom")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error."}
        assert "hunter2" not in resp.text

    def test_taxonomy_status(self):
        resp = TestClient(_app()).get("/forbidden")
        assert resp.status_code == 403
        assert resp.json() == {"detail": "nope"}

    def test_validation_is_400(self):
        resp = TestClient(_app()).get("/items/abc")
        assert resp.status_code == 400
        assert isinstance(resp.json()["detail"], list)

    def test_process_time_header(self):
        resp = TestClient(_app()).get("/items/3")
        assert resp.status_code == 200
        assert "x-process-time" in resp.headers
