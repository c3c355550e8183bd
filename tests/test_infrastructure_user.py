"""
Tests for the SQLAlchemy user repository adapter.

Runs against an in-memory SQLite database.
"""

from datetime import timezone

import pytest
from sqlalchemy.exc import IntegrityError

from financial_api.domain.user.entities import Role, User
from financial_api.domain.user.errors import UserAlreadyExistsError
from financial_api.infrastructure.user.user_repository import UserRepositoryAdapter


@pytest.fixture
def repo(engine) -> UserRepositoryAdapter:
    return UserRepositoryAdapter(engine=engine)


class TestUserRepositoryAdapter:
    """Tests for UserRepositoryAdapter."""

    def test_save_generates_identifiers(self, repo: UserRepositoryAdapter) -> None:
        """Each saved user gets a new, increasing id and a creation time."""
        first = repo.save(User(name="Alice"))
        second = repo.save(User(name="Bob", role=Role.ROLE_ADMIN))

        assert first.id is not None
        assert second.id is not None
        assert second.id > first.id
        assert first.created_at is not None
        assert second.role is Role.ROLE_ADMIN

    def test_saved_user_can_be_read_back(self, repo: UserRepositoryAdapter) -> None:
        """A saved user is returned unchanged by get_by_id."""
        saved = repo.save(User(name="Alice", role=Role.ROLE_ADMIN))

        loaded = repo.get_by_id(saved.id)

        assert loaded is not None
        assert (loaded.id, loaded.name, loaded.role) == (saved.id, "Alice", Role.ROLE_ADMIN)

    def test_read_back_timestamp_is_utc(self, repo: UserRepositoryAdapter) -> None:
        """created_at is timezone-aware UTC both on save and on read."""
        saved = repo.save(User(name="Alice"))

        loaded = repo.get_by_id(saved.id)

        assert saved.created_at.tzinfo is timezone.utc
        assert loaded.created_at.tzinfo is timezone.utc
        assert loaded.created_at.replace(microsecond=0) == saved.created_at.replace(microsecond=0)

    def test_missing_user_is_none(self, repo: UserRepositoryAdapter) -> None:
        """Unknown ids return None."""
        assert repo.get_by_id(12345) is None

    def test_duplicate_name_is_rejected(self, repo: UserRepositoryAdapter) -> None:
        """A second user with the same name raises UserAlreadyExistsError."""
        repo.save(User(name="Alice"))

        with pytest.raises(UserAlreadyExistsError) as excinfo:
            repo.save(User(name="Alice"))
        assert excinfo.value.name == "Alice"

    def test_other_integrity_errors_propagate(self, repo: UserRepositoryAdapter) -> None:
        """Constraint violations unrelated to the name are not reported as duplicates."""
        with pytest.raises(IntegrityError):
            repo.save(User(name=None))  # type: ignore[arg-type]
