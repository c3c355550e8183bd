"""
Use case: Get a user by identifier.

Input: user id
Output: User
Side effects: None.
Failure cases: UserNotFoundError.
"""

import logging

from financial_api.domain.user.entities import User
from financial_api.domain.user.errors import UserNotFoundError
from financial_api.domain.user.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Looks up a single user, failing when it does not exist."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: int) -> User:
        """Run the get-user use case.

        Raises:
            UserNotFoundError: If no user has this identifier.
        """
        logger.debug("Fetching user id=%d", user_id)
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
