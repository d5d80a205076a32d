"""
services/user_service.py
------------------------
Business logic for managing users.
Checks out one pooled connection per call and hands it to the UserRepository.
"""

from typing import Optional

from db.connection import connection
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Entry point used by the HTTP handlers for every user operation."""

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    def list_users(self) -> list[User]:
        with connection() as conn:
            return self.repo.read_all(conn)

    def get_user(self, user_id: bytes) -> Optional[User]:
        with connection() as conn:
            return self.repo.get(conn, user_id)

    def create_user(self, name: str, email: str) -> User:
        with connection() as conn:
            return self.repo.create(conn, name, email)

    def update_user(self, user_id: bytes, name: str, email: str) -> User:
        """Raises UserNotFoundError if the id matches no row."""
        with connection() as conn:
            return self.repo.update(conn, user_id, name, email)

    def delete_user(self, user_id: bytes) -> int:
        """Returns the number of rows removed; the caller decides what zero means."""
        with connection() as conn:
            return self.repo.delete(conn, user_id)
