"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current application version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_version: API version echoed when the client sends no version header.
        api_version_header: Name of the request/response API version header.
        api_prefix: Path prefix shared by every versioned route.
        public_base_url: Externally visible base URL used for hypermedia links.
            When unset, links are built from the incoming request.
        database_url: SQLAlchemy URL of the user store.
        rate_limit_default: Default rate limit for write endpoints.
        rate_limit_enabled: Toggle rate limiting (disable for local tooling).
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Financial API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    api_version: str = "V1"
    api_version_header: str = "X-Financial-Api-Version"
    api_prefix: str = "/financial/v1"
    public_base_url: Optional[str] = None

    database_url: str = "sqlite:///./financial.db"

    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True


settings = Settings()
