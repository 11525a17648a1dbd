"""
Environment-backed settings.

Every value is read on call so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return _env_str("JWT_SECRET", "dev-change-this-secret")


def jwt_algorithm() -> str:
    return _env_str("JWT_ALG", "HS256")


def access_token_expire_minutes() -> int:
    # 0 means tokens carry no exp claim.
    return max(0, _env_int("ACCESS_TOKEN_EXPIRE_MIN", 60))


def bcrypt_rounds() -> int:
    return _env_int("BCRYPT_ROUNDS", 10)


def db_pool_min_size() -> int:
    return _env_int("DB_POOL_MIN_SIZE", 1)


def db_pool_max_size() -> int:
    return _env_int("DB_POOL_MAX_SIZE", 5)


def db_synchronize() -> bool:
    return _env_bool("DB_SYNCHRONIZE", False)


def api_prefix() -> str:
    prefix = os.environ.get("API_PREFIX", "").strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix
    return prefix


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()
