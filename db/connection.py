"""
db/connection.py
----------------
Opens PostgreSQL connections and manages the process-wide connection pool.
Uses psycopg2's ThreadedConnectionPool because request handlers run
on a worker threadpool. Checkout waits for a free connection rather than
failing when every pooled connection is in use.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool

from config import DB_POOL_MAX, DB_POOL_MIN, get_database_url
from utils.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.ThreadedConnectionPool | None = None
# One slot per pooled connection; checkout blocks until a slot frees up
_slots: threading.BoundedSemaphore | None = None


def establish_connection():
    """
    Open a new, unpooled connection to the database.

    Returns:
        A psycopg2 connection object. The caller owns it and must close it.

    Raises:
        ConfigError: If DATABASE_URL is not configured.
        psycopg2.OperationalError: If the database is unreachable.
    """
    database_url = get_database_url()
    try:
        return psycopg2.connect(database_url)
    except psycopg2.OperationalError as e:
        logger.error(f"Error connecting to database: {e}")
        raise


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Raises:
        ConfigError: If DATABASE_URL is not configured.
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool, _slots
    if _pool is not None:
        return
    database_url = get_database_url()
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, database_url)
        _slots = threading.BoundedSemaphore(max_conn)
        logger.info(f"Database connection pool initialized ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Get a connection from the pool, waiting for one to be released if all are in use.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
        StorageError: If a new connection cannot be opened.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    slots = _slots
    slots.acquire()
    try:
        return _pool.getconn()
    except (pool.PoolError, psycopg2.OperationalError) as e:
        slots.release()
        logger.error(f"Could not check out a database connection: {e}")
        raise StorageError("No database connection available") from e


def release_connection(conn) -> None:
    """
    Return a connection back to the pool and free its slot.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is None:
        return
    try:
        _pool.putconn(conn)
    finally:
        _slots.release()


@contextmanager
def connection() -> Iterator:
    """
    Check out a pooled connection for the duration of a ``with`` block.

    The connection goes back to the pool on every exit path.
    """
    conn = get_connection()
    try:
        yield conn
    finally:
        release_connection(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool, _slots
    if _pool is not None:
        _pool.closeall()
        _pool = None
        _slots = None
        logger.info("Database connection pool closed.")
