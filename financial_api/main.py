"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, user)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database schema creation on startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from financial_api.core.config import settings
from financial_api.infrastructure.database import create_schema
from financial_api.interfaces.health import router as health_router
from financial_api.interfaces.user.dependencies import get_engine
from financial_api.interfaces.user.router import router as user_router
from financial_api.shared.errors.handlers import register_error_handlers
from financial_api.shared.logging import configure_logging
from financial_api.shared.security.headers import SecurityHeadersMiddleware
from financial_api.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the user store, release it on shutdown."""
    engine = get_engine()
    create_schema(engine)
    logger.info("%s %s started", settings.project_name, settings.version)

    yield

    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(user_router, prefix=settings.api_prefix)

    return app


app = create_app()
