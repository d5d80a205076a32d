"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.
Every method takes an already-open connection; the caller decides where it comes from.
"""

from typing import Optional

import psycopg2

from models.user import User, encode_id, new_id
from utils.errors import StorageError, UserNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the users table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, conn, name: str, email: str) -> User:
        """
        Insert a new user with a freshly generated id.

        Returns:
            The User that was inserted (not re-read from the database).

        Raises:
            StorageError: On constraint violations or connectivity failures.
        """
        user = User(name=name, email=email, id=new_id())
        sql = "INSERT INTO users (id, name, email) VALUES (%s, %s, %s);"
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user.id, user.name, user.email))
            conn.commit()
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to create user: {e}")
            raise StorageError("Failed to create user") from e
        logger.info(f"Created user {user.hex_id}")
        return user

    # ── READ ──────────────────────────────────────────────

    def read_all(self, conn) -> list[User]:
        """
        Fetch every user. Row order is whatever the database yields.
        """
        sql = "SELECT id, name, email FROM users;"
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_user(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to read users: {e}")
            raise StorageError("Failed to read users") from e

    def get(self, conn, user_id: bytes) -> Optional[User]:
        """
        Fetch a single user by id.

        Returns:
            A User object or None if not found.
        """
        sql = "SELECT id, name, email FROM users WHERE id = %s;"
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to read user {encode_id(user_id)}: {e}")
            raise StorageError("Failed to read user") from e

    # ── UPDATE ────────────────────────────────────────────

    def update(self, conn, user_id: bytes, name: str, email: str) -> User:
        """
        Replace the name and email of an existing user.

        Returns:
            The row as stored after the update.

        Raises:
            UserNotFoundError: If no row has this id.
            StorageError: On query or connectivity failures.
        """
        sql = """
            UPDATE users
            SET name = %s, email = %s
            WHERE id = %s
            RETURNING id, name, email;
        """
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (name, email, user_id))
                row = cur.fetchone()
            conn.commit()
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to update user {encode_id(user_id)}: {e}")
            raise StorageError("Failed to update user") from e
        if row is None:
            raise UserNotFoundError(encode_id(user_id))
        logger.info(f"Updated user {encode_id(user_id)}")
        return self._row_to_user(row)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, conn, user_id: bytes) -> int:
        """
        Delete a user by id.

        Returns:
            Number of rows deleted (0 or 1). Zero is not an error here.
        """
        sql = "DELETE FROM users WHERE id = %s;"
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                deleted = cur.rowcount
            conn.commit()
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to delete user {encode_id(user_id)}: {e}")
            raise StorageError("Failed to delete user") from e
        if deleted:
            logger.info(f"Deleted user {encode_id(user_id)}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a database row tuple to a User domain object."""
        # BYTEA comes back as a memoryview
        return User(id=bytes(row[0]), name=row[1], email=row[2])

    @staticmethod
    def _rollback(conn) -> None:
        """Roll back the failed transaction unless the connection is already gone."""
        if conn.closed:
            return
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.warning(f"Rollback failed: {e}")
