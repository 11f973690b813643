"""
Async database access (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI creates one instance on startup,
stores it on `app.state.db` and closes it on shutdown (see `api/main.py`).
Route handlers receive it through the `get_db` dependency, so tests can
swap in a fake with `app.dependency_overrides[get_db]`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import settings


# Driver failures are explicit and separable from other runtime errors.
class DatabaseError(RuntimeError):
    pass


# asyncio.TimeoutError covers command_timeout and pool acquire timeouts.
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


def sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def affected_rows(status: str) -> int:
    """
    Parse the row count out of a command status tag.

    asyncpg returns e.g. "UPDATE 1", "DELETE 3", "INSERT 0 1".
    """
    last = (status or "").rsplit(" ", 1)[-1]
    try:
        return int(last)
    except ValueError:
        return 0


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, dsn: str | None = None) -> None:
        self._dsn = dsn
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        dsn = sanitize_database_url(self._dsn or settings.database_url())
        try:
            self._pool = await asyncpg.create_pool(
                dsn=dsn,
                min_size=settings.pool_min_size(),
                max_size=settings.pool_max_size(),
                command_timeout=settings.command_timeout(),
            )
        except _DRIVER_ERRORS as e:
            raise DatabaseError(f"Could not connect to database: {e}") from e

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise DatabaseError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self.pool().fetchrow(sql, *args)
        except _DRIVER_ERRORS as e:
            raise DatabaseError(str(e)) from e
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self.pool().fetch(sql, *args)
        except _DRIVER_ERRORS as e:
            raise DatabaseError(str(e)) from e
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> int:
        """
        Run a statement (INSERT/UPDATE/DELETE). Returns the affected row count.
        """
        try:
            status = await self.pool().execute(sql, *args)
        except _DRIVER_ERRORS as e:
            raise DatabaseError(str(e)) from e
        return affected_rows(status)


def get_db(request: Request) -> Database:
    return request.app.state.db
