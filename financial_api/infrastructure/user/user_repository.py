"""
Adapter: User repository.

Implements UserRepository port.
Persists and retrieves users through SQLAlchemy Core.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from financial_api.domain.user.entities import Role, User
from financial_api.domain.user.errors import UserAlreadyExistsError
from financial_api.domain.user.ports import UserRepository
from financial_api.infrastructure.database import users_table

logger = logging.getLogger(__name__)


class UserRepositoryAdapter(UserRepository):
    """Stores users in the `users` table.

    Implements the UserRepository port defined in the domain layer.
    Each call runs in its own transaction.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, user: User) -> User:
        """Insert a user and return it with its generated id.

        Args:
            user: User entity to persist. Its id is ignored.

        Returns:
            A copy of the user carrying the generated id and creation time.

        Raises:
            UserAlreadyExistsError: If the name is already stored.
            IntegrityError: For any other constraint violation.
        """
        created_at = datetime.now(timezone.utc)
        statement = users_table.insert().values(
            name=user.name,
            role=user.role.value,
            created_at=created_at,
        )

        try:
            with self._engine.begin() as conn:
                result = conn.execute(statement)
                user_id = result.inserted_primary_key[0]
        except IntegrityError as exc:
            if not self._name_exists(user.name):
                raise
            logger.warning("Rejected duplicate user name")
            raise UserAlreadyExistsError(user.name) from exc

        logger.debug("Saved user id=%d.", user_id)
        return replace(user, id=user_id, created_at=created_at)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by its ID, or None if not found.

        Args:
            user_id: Identifier of the user to retrieve.
        """
        query = select(
            users_table.c.id,
            users_table.c.name,
            users_table.c.role,
            users_table.c.created_at,
        ).where(users_table.c.id == user_id)

        with self._engine.connect() as conn:
            row = conn.execute(query).first()

        if row is None:
            return None

        return User(
            id=row.id,
            name=row.name,
            role=Role(row.role),
            created_at=_as_utc(row.created_at),
        )

    def _name_exists(self, name: str) -> bool:
        query = select(users_table.c.id).where(users_table.c.name == name)
        with self._engine.connect() as conn:
            return conn.execute(query).first() is not None


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to timestamps the driver returns without a timezone."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
