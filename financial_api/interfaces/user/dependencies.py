"""
Dependency injection for the user bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases and handlers via constructor injection.
These are the composition root for the user context.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.engine import Engine

from financial_api.application.user.create_user import CreateUserUseCase
from financial_api.application.user.get_user import GetUserUseCase
from financial_api.core.config import settings
from financial_api.domain.user.ports import UserRepository
from financial_api.infrastructure.database import create_db_engine
from financial_api.infrastructure.user.user_repository import UserRepositoryAdapter
from financial_api.interfaces.user.controller import CreateUserHandler, GetUserHandler

USER_PATH = "/user"


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the process-wide SQLAlchemy engine."""
    return create_db_engine(settings.database_url)


def get_user_repository(engine: Engine = Depends(get_engine)) -> UserRepository:
    return UserRepositoryAdapter(engine=engine)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its infrastructure dependencies."""
    return CreateUserUseCase(user_repo=user_repo)


def get_get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=user_repo)


def get_api_version(
    api_version: Optional[str] = Header(default=None, alias=settings.api_version_header),
) -> Optional[str]:
    """Return the client's API version header, or None when absent."""
    return api_version


def get_user_base_url(request: Request) -> str:
    """Return the absolute URL of the user collection.

    Uses the configured public base URL when set, otherwise the
    base URL the request was received on.
    """
    base_url = settings.public_base_url or str(request.base_url)
    return f"{base_url.rstrip('/')}{settings.api_prefix}{USER_PATH}"


def get_create_user_handler(
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
    base_url: str = Depends(get_user_base_url),
) -> CreateUserHandler:
    return CreateUserHandler(
        use_case=use_case,
        base_url=base_url,
        default_api_version=settings.api_version,
        version_header=settings.api_version_header,
    )


def get_get_user_handler(
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
    base_url: str = Depends(get_user_base_url),
) -> GetUserHandler:
    return GetUserHandler(
        use_case=use_case,
        base_url=base_url,
        default_api_version=settings.api_version,
        version_header=settings.api_version_header,
    )
