"""
Environment-driven settings.

Every value is read at call time so tests can set env vars per test.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 4001


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), pool_min_size(), 1)


def command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*").strip() or "*"
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)
