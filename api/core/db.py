"""
Async Postgres access (raw SQL over an asyncpg pool).

The pool is created in the FastAPI lifespan (see `api/main.py`) and shared by
every repository module. Queries use asyncpg's positional placeholders
($1, $2, ...) and rows come back as plain dicts.

Each helper borrows its own pooled connection, so consecutive helper calls
are separate statements. Use `transaction()` when several statements must
commit together.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import asyncpg

from core import settings

_pool: asyncpg.Pool | None = None


def database_url() -> str:
    url = settings.database_url()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=30,
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


@asynccontextmanager
async def transaction() -> AsyncIterator[asyncpg.Connection]:
    """
    Borrow one connection and run everything issued on it in a transaction.
    """
    async with pool().acquire() as conn:
        async with conn.transaction():
            yield conn


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool().fetchrow(sql, *args)
    return dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    rows = await pool().fetch(sql, *args)
    return [dict(r) for r in rows]


async def fetch_value(sql: str, *args: Any) -> Any:
    """
    Return the first column of the first row (None when there is no row).
    """
    return await pool().fetchval(sql, *args)


async def execute(sql: str, *args: Any) -> str:
    """
    Run a statement and return its status tag, e.g. "DELETE 1".
    """
    return await pool().execute(sql, *args)


def affected_rows(status: str) -> int:
    # "UPDATE 3", "INSERT 0 1": the count is always last.
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0
