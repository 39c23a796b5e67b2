"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Each helper acquires a pooled
connection for the duration of one statement.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver or connectivity failure is re-raised as `DatabaseError` so the
service layer can translate it without knowing about asyncpg.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import config

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

# asyncio.TimeoutError is what `command_timeout` raises; it is not an OSError before 3.11.
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


class DatabaseError(RuntimeError):
    pass


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = config.env_str("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    min_size = max(config.env_int("DB_POOL_MIN_SIZE", 1), 0)
    max_size = max(config.env_int("DB_POOL_MAX_SIZE", 5), max(min_size, 1))
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=min_size,
        max_size=max_size,
        command_timeout=config.env_int("DB_COMMAND_TIMEOUT", 30),
    )
    logger.info("db_pool_ready min_size=%s max_size=%s", min_size, max_size)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise DatabaseError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def parse_row_count(status: str | None) -> int:
    """
    Extract the affected row count from an asyncpg command tag.

    "UPDATE 3" -> 3, "INSERT 0 1" -> 1, "DELETE 0" -> 0.
    """
    if not status:
        return 0
    last = status.rsplit(" ", 1)[-1]
    return int(last) if last.isdigit() else 0


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool().fetchrow(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise DatabaseError(str(exc)) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise DatabaseError(str(exc)) from exc
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE). Returns the affected row count.
    """
    try:
        status = await pool().execute(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise DatabaseError(str(exc)) from exc
    return parse_row_count(status)


@asynccontextmanager
async def transaction() -> AsyncIterator[asyncpg.Connection]:
    """
    Hold one pooled connection inside a transaction for several statements.

    Driver errors raised inside the block roll the transaction back and
    surface as `DatabaseError`.
    """
    try:
        async with pool().acquire() as conn:  # type: asyncpg.Connection
            async with conn.transaction():
                yield conn
    except _DRIVER_ERRORS as exc:
        raise DatabaseError(str(exc)) from exc


def records_to_dicts(records: list[asyncpg.Record]) -> list[dict[str, Any]]:
    return [_record_to_dict(r) for r in records]
