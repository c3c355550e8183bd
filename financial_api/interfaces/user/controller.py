"""
Request handlers for the user resource.

Handlers sit between the HTTP routes and the use cases: they turn a
bound request into a use-case call and the result into a versioned
response envelope. Routing, header parsing and body binding happen
before a handler is called.

Only validation failures are answered here. Errors raised by the
mapper, the use cases or the store propagate to the centralized
error handlers.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi.responses import JSONResponse

from financial_api.application.user.create_user import CreateUserUseCase
from financial_api.application.user.get_user import GetUserUseCase
from financial_api.domain.user.entities import User
from financial_api.interfaces.user.mappers import to_entity, to_representation
from financial_api.interfaces.user.schemas import UserRepresentation
from financial_api.shared.links import self_link
from financial_api.shared.responses import Envelope, Failure, Success, envelope_response
from financial_api.shared.validation import ValidationOutcome

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_201 = 201
HTTP_400 = 400


@dataclass(frozen=True)
class HandlerResponse:
    """Envelope, status code and headers produced by a handler."""

    envelope: Envelope
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)

    def to_response(self) -> JSONResponse:
        return envelope_response(self.envelope, self.status_code, self.headers)


class _VersionedUserHandler:
    """Shared plumbing: API version echo and self links."""

    def __init__(self, base_url: str, default_api_version: str, version_header: str) -> None:
        self._base_url = base_url
        self._default_api_version = default_api_version
        self._version_header = version_header

    def _version_headers(self, api_version: Optional[str]) -> dict[str, str]:
        return {self._version_header: api_version or self._default_api_version}

    def _present(self, user: User) -> UserRepresentation:
        representation = to_representation(user)
        representation.links.append(self_link(self._base_url, user.id))
        return representation


class CreateUserHandler(_VersionedUserHandler):
    """Handles user creation requests."""

    def __init__(
        self,
        use_case: CreateUserUseCase,
        base_url: str,
        default_api_version: str,
        version_header: str,
    ) -> None:
        super().__init__(base_url, default_api_version, version_header)
        self._use_case = use_case

    def create(
        self,
        api_version: Optional[str],
        body: Optional[UserRepresentation],
        outcome: ValidationOutcome,
    ) -> HandlerResponse:
        """Create a user from a bound request.

        Args:
            api_version: Value of the API version header, None when absent.
            body: The bound representation, None when binding failed.
            outcome: Validation failures reported while binding the body.

        Returns:
            400 with the validation messages, or 201 with the created
            user, its self link and the echoed API version header.
        """
        if outcome.has_errors:
            logger.info("Rejected user creation: %d validation error(s)", len(outcome.messages))
            return HandlerResponse(Failure(outcome.messages), HTTP_400)

        user = self._use_case.execute(to_entity(body))
        return HandlerResponse(
            Success(self._present(user)),
            HTTP_201,
            self._version_headers(api_version),
        )


class GetUserHandler(_VersionedUserHandler):
    """Handles single-user lookups."""

    def __init__(
        self,
        use_case: GetUserUseCase,
        base_url: str,
        default_api_version: str,
        version_header: str,
    ) -> None:
        super().__init__(base_url, default_api_version, version_header)
        self._use_case = use_case

    def get(self, api_version: Optional[str], user_id: int) -> HandlerResponse:
        user = self._use_case.execute(user_id)
        return HandlerResponse(
            Success(self._present(user)),
            HTTP_200,
            self._version_headers(api_version),
        )
