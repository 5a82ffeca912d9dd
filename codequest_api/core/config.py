"""
Application configuration settings
"""

import json
from typing import Annotated, Any, cast

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def coerce_comma_separated_to_list(v: Any, *, filter_empty: bool = False) -> Any:
    """
    Coerce values that may be a comma-separated string or list into a list.
    - If v is a non-JSON-looking string (doesn't start with '['), split by comma and strip items.
    - If v is a JSON array string, decode it.
    - If v is already a list, return as-is.
    - Optionally filter out empty items after stripping.
    """
    if isinstance(v, str) and not v.strip().startswith("["):
        items = [i.strip() for i in v.split(",")]
        if filter_empty:
            items = [i for i in items if i]
        return items
    if isinstance(v, str):
        return json.loads(v)
    if isinstance(v, list):
        return cast(Any, v)
    raise ValueError(f"Invalid type for list coercion: {type(v)}")


def to_async_database_url(url: str) -> str:
    """
    Convert postgresql:// (or postgres://) to postgresql+asyncpg://.
    URLs that already name an async driver pass through unchanged.
    """
    url = url.strip()
    for scheme in ("postgresql://", "postgres://"):
        if url.startswith(scheme):
            return "postgresql+asyncpg://" + url[len(scheme) :]
    return url


class Settings(BaseSettings):
    """Application settings"""

    # API Configuration
    PROJECT_NAME: str = "CodeQuest API"
    DESCRIPTION: str = "CodeQuest API - read-only JSON views of users, projects and tasks"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"
    ENVIRONMENT: str = "development"
    DOCS_ENABLED: bool = True
    GREETING: str = "Hello from Python backend!"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    # CORS Configuration (permissive unless narrowed)
    # Env values: comma-separated ("http://a,http://b") or a JSON array
    CORS_ALLOW_ORIGINS: Annotated[list[str], NoDecode] = ["*"]
    CORS_ALLOW_METHODS: Annotated[list[str], NoDecode] = ["*"]
    CORS_ALLOW_HEADERS: Annotated[list[str], NoDecode] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False

    @field_validator("CORS_ALLOW_ORIGINS", "CORS_ALLOW_METHODS", "CORS_ALLOW_HEADERS", mode="before")
    @classmethod
    def assemble_cors_lists(cls, v: Any) -> Any:
        try:
            return coerce_comma_separated_to_list(v, filter_empty=True)
        except ValueError:
            raise ValueError(f"Invalid value for CORS list: {v!r}")

    # Database Configuration
    DATABASE_URL: str | None = None
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 10  # Keep 10 connections open
    DB_MAX_OVERFLOW: int = 20  # Allow 20 extra connections
    DB_POOL_TIMEOUT: int = 30  # Wait 30s for connection
    DB_POOL_RECYCLE: int = 1800  # Recycle connections every 30 minutes

    @property
    def database_url(self) -> str:
        """Async driver URL; raises if DATABASE_URL is missing"""
        if not self.DATABASE_URL or not self.DATABASE_URL.strip():
            raise RuntimeError("DATABASE_URL must be set (environment or .env file)")
        return to_async_database_url(self.DATABASE_URL)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
