"""
pytest configuration and fixtures.
"""

from typing import Generator, Optional

import pytest
from fastapi.testclient import TestClient

from db import connection as db_connection
from handlers.users import get_user_service
from main import create_app
from models.user import User, encode_id, new_id
from utils.errors import UserNotFoundError


class InMemoryUserService:
    """Stands in for UserService; keeps rows in a dict and records every call."""

    def __init__(self):
        self.rows: dict[bytes, User] = {}
        self.calls: list[str] = []

    def list_users(self) -> list[User]:
        self.calls.append("list_users")
        return list(self.rows.values())

    def get_user(self, user_id: bytes) -> Optional[User]:
        self.calls.append("get_user")
        return self.rows.get(user_id)

    def create_user(self, name: str, email: str) -> User:
        self.calls.append("create_user")
        user = User(name=name, email=email, id=new_id())
        self.rows[user.id] = user
        return user

    def update_user(self, user_id: bytes, name: str, email: str) -> User:
        self.calls.append("update_user")
        if user_id not in self.rows:
            raise UserNotFoundError(encode_id(user_id))
        user = User(name=name, email=email, id=user_id)
        self.rows[user_id] = user
        return user

    def delete_user(self, user_id: bytes) -> int:
        self.calls.append("delete_user")
        return 1 if self.rows.pop(user_id, None) else 0


@pytest.fixture
def static_dir(tmp_path):
    """A static directory with an index page and one asset."""
    (tmp_path / "index.html").write_text("<h1>Users</h1>")
    (tmp_path / "app.js").write_text("loadUsers();")
    return tmp_path


@pytest.fixture
def fake_service() -> InMemoryUserService:
    return InMemoryUserService()


@pytest.fixture
def app(static_dir, fake_service):
    application = create_app(str(static_dir))
    application.dependency_overrides[get_user_service] = lambda: fake_service
    return application


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def reset_pool() -> Generator[None, None, None]:
    """Make sure no pool leaks between tests."""
    db_connection._pool = None
    db_connection._slots = None
    yield
    db_connection._pool = None
    db_connection._slots = None
