"""
Shared test fixtures.

Provides an in-memory user store, an in-memory SQLite engine and
TestClients wired to either of them through dependency overrides.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from financial_api.domain.user.entities import User
from financial_api.domain.user.errors import UserAlreadyExistsError
from financial_api.domain.user.ports import UserRepository
from financial_api.infrastructure.database import create_schema
from financial_api.interfaces.user.dependencies import get_engine, get_user_repository
from financial_api.main import app
from financial_api.shared.security.rate_limiting import limiter


class InMemoryUserRepository(UserRepository):
    """UserRepository test double that counts writes."""

    def __init__(self, first_id: int = 1) -> None:
        self._next_id = first_id
        self.users: dict[int, User] = {}
        self.save_calls = 0

    def save(self, user: User) -> User:
        self.save_calls += 1
        if any(existing.name == user.name for existing in self.users.values()):
            raise UserAlreadyExistsError(user.name)
        saved = replace(user, id=self._next_id, created_at=datetime.now(timezone.utc))
        self.users[saved.id] = saved
        self._next_id += 1
        return saved

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)


@pytest.fixture(autouse=True)
def _rate_limit_off():
    """Rate limiting is exercised explicitly; keep it out of other tests."""
    limiter.enabled = False
    limiter.reset()
    yield
    limiter.enabled = True
    limiter.reset()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository(first_id=42)


@pytest.fixture
def client(user_repo: InMemoryUserRepository):
    """TestClient backed by the in-memory user store."""
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads, schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_client(engine):
    """TestClient backed by the real SQLAlchemy adapter."""
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()
