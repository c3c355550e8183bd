"""
Use case: Create a user.

Input: User entity (identifier not yet assigned)
Output: persisted User carrying its generated identifier
Side effects: exactly one write to the UserRepository.
Failure cases: UserAlreadyExistsError, any store connectivity error.
"""

import logging
from dataclasses import replace

from financial_api.domain.user.entities import User
from financial_api.domain.user.ports import UserRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Orchestrates persisting a new user.

    Identifiers are always generated by the store, so any identifier
    carried by the incoming entity is discarded before saving.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user: User) -> User:
        """Run the create-user use case.

        Args:
            user: The user to persist.

        Returns:
            The persisted user with its generated identifier.

        Raises:
            UserAlreadyExistsError: If the user name is already taken.
        """
        if user.is_persisted:
            logger.debug("Discarding client-supplied user id=%s", user.id)
            user = replace(user, id=None, created_at=None)

        saved = self._user_repo.save(user)
        logger.info("Created user id=%s role=%s", saved.id, saved.role.value)
        return saved
