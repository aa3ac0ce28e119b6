"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for validating bearer tokens", min_length=1
    )
    app_url: str = Field(
        default="http://localhost:3000/",
        description="Public base URL used to build notification and issue links",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to store naive datetimes",
    )
    max_in_size: int = Field(
        default=50,
        description="Maximum number of identifiers sent in a single IN (...) lookup",
        gt=0,
    )
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("app_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        return value if value.endswith("/") else value + "/"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
