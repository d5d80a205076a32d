"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import connection, establish_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: one row per user, keyed by a raw 16-byte UUID
CREATE TABLE IF NOT EXISTS users (
    id      BYTEA PRIMARY KEY CHECK (octet_length(id) = 16),
    name    TEXT NOT NULL,
    email   TEXT NOT NULL
);
"""


def create_tables(conn) -> None:
    """
    Execute the schema SQL on an open connection.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


def create_tables_pooled() -> None:
    """Create the schema using a connection from the pool."""
    with connection() as conn:
        create_tables(conn)


if __name__ == "__main__":
    conn = establish_connection()
    try:
        create_tables(conn)
    finally:
        conn.close()
    print("Database schema created successfully.")
