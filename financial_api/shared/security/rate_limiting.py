"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits, keyed by
client address. Exceeded limits are answered with a failure envelope.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from financial_api.core.config import settings
from financial_api.shared.responses import Failure, envelope_response

logger = logging.getLogger(__name__)

HTTP_429 = 429

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a failure envelope.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response naming the exceeded limit.
    """
    logger.warning("Rate limit exceeded on %s", request.url.path)
    return envelope_response(
        Failure.from_messages(f"Rate limit exceeded: {exc.detail}"),
        HTTP_429,
    )
