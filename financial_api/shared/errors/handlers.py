"""
Centralized error handlers for FastAPI.

Maps domain-specific and framework errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the failure envelope: {"errors": [...]}.
"""

import logging
from typing import Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from financial_api.domain.user.errors import (
    UserAlreadyExistsError,
    UserDomainError,
    UserNotFoundError,
)
from financial_api.shared.responses import Failure, envelope_response
from financial_api.shared.security.headers import SECURE_HEADERS
from financial_api.shared.validation import ValidationOutcome

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(
    status_code: int, *messages: str, headers: Optional[Mapping[str, str]] = None
) -> JSONResponse:
    """Build a consistent JSON failure envelope."""
    return envelope_response(Failure.from_messages(*messages), status_code, headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed requests the framework could not bind."""
        outcome = ValidationOutcome.from_errors(exc.errors())
        logger.info("Request validation failed: %d error(s)", len(outcome.messages))
        if not outcome.has_errors:
            return _error_response(HTTP_400, "Malformed request")
        return _error_response(HTTP_400, *outcome.messages)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
        return envelope_response(
            Failure.from_messages(str(exc.detail)),
            exc.status_code,
            getattr(exc, "headers", None),
        )

    @app.exception_handler(UserAlreadyExistsError)
    async def handle_user_already_exists(
        _request: Request, exc: UserAlreadyExistsError
    ) -> JSONResponse:
        """Handle duplicate user errors."""
        logger.warning("User conflict")
        return _error_response(HTTP_409, exc.message)

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle missing user errors."""
        logger.warning("User not found: %s", exc.user_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled user domain errors."""
        logger.error("Unhandled user domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        # Built outside the middleware stack, so security headers are set here.
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE, headers=SECURE_HEADERS)
