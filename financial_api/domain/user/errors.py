"""
Domain-specific errors for the user bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class UserDomainError(Exception):
    """Base error for all user domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserAlreadyExistsError(UserDomainError):
    """Raised when a user with the same name is already stored."""

    def __init__(self, name: str) -> None:
        super().__init__(f"User already exists: {name}")
        self.name = name


class UserNotFoundError(UserDomainError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id
