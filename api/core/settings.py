"""
Environment-driven settings.

Every value is read on call, so tests can patch `os.environ` without reloading
modules.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 3001
DEFAULT_DB_PORT = 5432


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def host() -> str:
    return _env_str("HOST", "0.0.0.0")


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def database_url_override() -> str:
    return os.environ.get("DATABASE_URL", "").strip()


def db_host() -> str:
    return _env_str("DB_HOST", "localhost")


def db_port() -> int:
    return _env_int("DB_PORT", DEFAULT_DB_PORT)


def db_user() -> str:
    return _env_str("DB_USER", "postgres")


def db_password() -> str:
    # Empty is a valid password for local trust auth.
    return os.environ.get("DB_PASSWORD", "")


def db_name() -> str:
    return _env_str("DB_NAME", "election")


def db_pool_min_size() -> int:
    # At least one connection, so an unreachable database fails pool creation.
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(1, db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)
