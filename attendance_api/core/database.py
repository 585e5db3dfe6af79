import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Iterable, List, Optional

from psycopg import AsyncConnection, Error as PsycopgError, OperationalError
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool, PoolTimeout, TooManyRequests

from .config import settings
from .errors import DatabaseError

log = logging.getLogger(__name__)

pool: Optional[AsyncConnectionPool] = None


def _connection_kwargs():
    """Build connection kwargs for psycopg"""
    kwargs = {}
    kwargs["sslmode"] = "require" if settings.db_ssl else "prefer"
    kwargs["connect_timeout"] = 10
    kwargs["application_name"] = "attendance_api"
    return kwargs


def _mask(conninfo: str) -> str:
    try:
        return conninfo.split("@")[0].rsplit(":", 1)[0] + ":****@" + conninfo.split("@")[1]
    except IndexError:
        return "postgresql://****"


def _diagnose(exc: OperationalError) -> None:
    message = str(exc).lower()
    if "timeout" in message:
        log.error("Database connection timed out: check DB_HOST/DB_PORT and that the server is running")
    elif "password" in message or "authentication" in message:
        log.error("Database authentication failed: check DB_USER/DB_PASSWORD")
    elif "does not exist" in message:
        log.error("Database %r does not exist: create it or check DB_NAME", settings.db_name)
    elif "connection refused" in message:
        log.error("Database connection refused: check DB_HOST/DB_PORT")
    log.error(
        "Current configuration: host=%s port=%s db=%s user=%s password=%s url=%s",
        settings.db_host,
        settings.db_port,
        settings.db_name,
        settings.db_user,
        "set" if settings.db_password else "NOT SET",
        "set" if settings.database_url else "NOT SET",
    )


async def get_pool() -> AsyncConnectionPool:
    """
    Get or create the process-wide connection pool.
    The first call opens the pool and checks one connection.
    """
    global pool

    if pool is not None:
        return pool

    conninfo = settings.build_db_url()
    if not conninfo:
        raise RuntimeError(
            "Database configuration is missing. "
            "Set DATABASE_URL or DB_HOST/DB_USER/DB_PASSWORD/DB_NAME environment variables."
        )

    log.info("Initializing database pool: %s", _mask(conninfo))

    new_pool = AsyncConnectionPool(
        conninfo=conninfo,
        open=False,
        kwargs=_connection_kwargs(),
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        timeout=settings.db_pool_timeout,  # wait for a free connection
        max_waiting=settings.db_pool_max_waiting,  # queued requests before rejecting
        max_idle=300,
        max_lifetime=3600,
    )
    try:
        await new_pool.open(wait=True, timeout=settings.db_pool_timeout)
        async with new_pool.connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute("SELECT version()")
                version = await cur.fetchone()
                log.info("Successfully connected to the database: %s", version[0][:80])
    except OperationalError as exc:
        log.error("Error connecting to the database: %s", exc)
        _diagnose(exc)
        await new_pool.close()
        raise
    except PoolTimeout as exc:
        log.error("Timed out opening the database pool: %s", exc)
        await new_pool.close()
        raise

    pool = new_pool
    return pool


async def close_pool():
    """Close the database connection pool"""
    global pool

    if pool:
        log.info("Closing database pool")
        await pool.close()
        pool = None


@asynccontextmanager
async def connection() -> AsyncIterator[AsyncConnection]:
    """
    Borrow a pooled connection for the duration of the block.
    The connection goes back to the pool on every exit path; driver and pool
    failures are re-raised as DatabaseError.
    """
    try:
        pool_instance = await get_pool()
        async with pool_instance.connection() as conn:
            yield conn
    except TooManyRequests as exc:
        log.error("Connection pool queue is full (max_waiting=%s)", settings.db_pool_max_waiting)
        raise DatabaseError(operation="acquire") from exc
    except PoolTimeout as exc:
        log.error("Timed out after %ss waiting for a database connection", settings.db_pool_timeout)
        raise DatabaseError(operation="acquire") from exc
    except PsycopgError as exc:
        log.error("Database error: %s", exc)
        raise DatabaseError() from exc


async def fetch(query: str, params: Iterable[Any] | None = None) -> List[dict]:
    """Execute a SELECT query and return all rows as dictionaries"""
    async with connection() as conn:
        async with conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(query, params or [])
            rows = await cur.fetchall()
            return [dict(r) for r in rows]


async def fetchrow(query: str, params: Iterable[Any] | None = None) -> Optional[dict]:
    """Execute a query and return a single row as a dictionary"""
    async with connection() as conn:
        async with conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(query, params or [])
            row = await cur.fetchone()
            await conn.commit()
            return dict(row) if row else None


async def execute(query: str, params: Iterable[Any] | None = None) -> int:
    """Execute an INSERT/UPDATE/DELETE query and return affected row count"""
    async with connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(query, params or [])
            await conn.commit()
            return cur.rowcount


async def insert_returning_id(query: str, params: Iterable[Any] | None = None) -> Any:
    """Execute an INSERT ... RETURNING id and return the generated id"""
    row = await fetchrow(query, params)
    return row["id"] if row else None


async def ping() -> bool:
    try:
        row = await fetchrow("SELECT 1 AS ok")
    except (DatabaseError, RuntimeError):
        return False
    return bool(row and row.get("ok") == 1)
