"""
Port interfaces (ABCs) for the user bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from financial_api.domain.user.entities import User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def save(self, user: User) -> User:
        """Persist a new user and return it with its generated identifier.

        Raises:
            UserAlreadyExistsError: If the user name is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by its ID, or None if not found."""
        raise NotImplementedError
