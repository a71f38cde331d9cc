"""
Async database access helpers (raw SQL) using asyncpg.

The connection pool is created by the FastAPI lifespan (see `api/main.py`) and
kept on `app.state.pool`. Route handlers receive it through `get_pool()` and
hand it to repository functions explicitly.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
from typing import Any, Union
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import settings

# Repository functions only need fetch/fetchrow/execute, which both a pool and
# a single connection provide.
Executor = Union[asyncpg.Pool, asyncpg.Connection]

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)

TIMEOUT_MESSAGE = "statement timed out"


class QueryError(Exception):
    """A statement was rejected by the database or never reached it."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.database_url_override()
    if not url:
        user = quote(settings.db_user(), safe="")
        password = settings.db_password()
        auth = f"{user}:{quote(password, safe='')}" if password else user
        url = f"postgresql://{auth}@{settings.db_host()}:{settings.db_port()}/{settings.db_name()}"
    return _sanitize_database_url(url)


async def create_pool() -> asyncpg.Pool:
    return await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout(),
    )


def get_pool(request: Request) -> asyncpg.Pool:
    """
    FastAPI dependency returning the pool created on startup.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created in the app lifespan.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def affected_rows(status: str | None) -> int:
    """
    Parse the row count out of a command tag such as `DELETE 1` or `INSERT 0 1`.
    """
    if not status:
        return 0
    tail = status.strip().rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


async def fetch_one(executor: Executor, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await executor.fetchrow(sql, *args)
    except asyncio.TimeoutError as exc:
        raise QueryError(TIMEOUT_MESSAGE) from exc
    except _DRIVER_ERRORS as exc:
        raise QueryError(str(exc)) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(executor: Executor, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await executor.fetch(sql, *args)
    except asyncio.TimeoutError as exc:
        raise QueryError(TIMEOUT_MESSAGE) from exc
    except _DRIVER_ERRORS as exc:
        raise QueryError(str(exc)) from exc
    return [_record_to_dict(r) for r in rows]


async def execute(executor: Executor, sql: str, *args: Any) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE) and return the affected row count.
    """
    try:
        status = await executor.execute(sql, *args)
    except asyncio.TimeoutError as exc:
        raise QueryError(TIMEOUT_MESSAGE) from exc
    except _DRIVER_ERRORS as exc:
        raise QueryError(str(exc)) from exc
    return affected_rows(status)


async def ping(executor: Executor) -> bool:
    row = await fetch_one(executor, "SELECT 1 AS ok")
    return row is not None
