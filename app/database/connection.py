"""Process-wide psycopg pool shared across warm invocations.

The pool is configured once per process and opened on first use, so a cold
start that never reaches the commit step never dials the database.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from app.config.settings import Settings
from app.logging.logger import Log

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    """Build a libpq connection string; values are quoted as needed."""
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
        connect_timeout=settings.db_connect_timeout_seconds,
        application_name="docsummary-worker",
    )


def init_pool(settings: Settings) -> None:
    """Configure the pool from settings. Reuses the pool of a warm process."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        return
    _pool = ConnectionPool(
        build_conninfo(settings),
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        name="docsummary",
        timeout=settings.db_connect_timeout_seconds,
        open=False,
    )
    Log.debug(
        f"Configured connection pool for {settings.db_host}:{settings.db_port}/"
        f"{settings.db_database} (max {settings.db_pool_max_size})"
    )


def close_pool() -> None:
    """Close and forget the pool."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a pooled connection, opening the pool on first use.

    Caller manages commit/rollback.
    """
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    if _pool.closed:
        _pool.open()
    with _pool.connection() as conn:
        yield conn
