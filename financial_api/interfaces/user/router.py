"""
FastAPI router for the user bounded context.

All routes delegate to handlers. No business logic here.
Request bodies are bound with pydantic schemas; validation failures
are answered by the handler, other errors by the centralized error
handlers.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Path, Request
from fastapi.responses import JSONResponse

from financial_api.core.config import settings
from financial_api.interfaces.user.controller import CreateUserHandler, GetUserHandler
from financial_api.interfaces.user.dependencies import (
    USER_PATH,
    get_api_version,
    get_create_user_handler,
    get_get_user_handler,
)
from financial_api.interfaces.user.schemas import UserEnvelope, UserRepresentation
from financial_api.shared.responses import ErrorEnvelope
from financial_api.shared.security.rate_limiting import limiter
from financial_api.shared.validation import bind

# Largest identifier a 64-bit signed INTEGER column can hold.
MAX_USER_ID = 2**63 - 1

router = APIRouter(prefix=USER_PATH, tags=["user"])


@router.post(
    "",
    status_code=201,
    response_model=None,
    responses={
        201: {"model": UserEnvelope, "description": "User created"},
        400: {"model": ErrorEnvelope, "description": "Validation failed"},
        409: {"model": ErrorEnvelope, "description": "User already exists"},
        429: {"model": ErrorEnvelope, "description": "Rate limit exceeded"},
    },
    summary="Create a user",
    description=(
        "Validate and persist a user. Returns the created user with a self "
        "link and echoes the API version header."
    ),
)
@limiter.limit(settings.rate_limit_default)
def create_user(
    request: Request,
    payload: Any = Body(default=None),
    api_version: Optional[str] = Depends(get_api_version),
    handler: CreateUserHandler = Depends(get_create_user_handler),
) -> JSONResponse:
    """Create a user from the JSON request body."""
    body, outcome = bind(UserRepresentation, payload)
    return handler.create(api_version, body, outcome).to_response()


@router.get(
    "/{user_id}",
    response_model=None,
    responses={
        200: {"model": UserEnvelope, "description": "User found"},
        400: {"model": ErrorEnvelope, "description": "Invalid identifier"},
        404: {"model": ErrorEnvelope, "description": "User not found"},
    },
    summary="Get a user",
    description="Return a single user by identifier. Target of the self link.",
)
def get_user(
    user_id: int = Path(..., ge=1, le=MAX_USER_ID, description="Identifier of the user"),
    api_version: Optional[str] = Depends(get_api_version),
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> JSONResponse:
    """Return the user with the given identifier."""
    return handler.get(api_version, user_id).to_response()
