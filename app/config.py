"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    app_name: str = Field(
        default="Activity Board API",
        description="Title exposed by the OpenAPI documentation",
    )
    database_url: str = Field(
        default="sqlite:///./activity_board.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    database_echo: bool = Field(
        default=False, description="Log every SQL statement emitted by the engine"
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: str = Field(
        default="*",
        description="Comma separated list of origins allowed to call the API",
    )
    strict_update_validation: bool = Field(
        default=False,
        description=(
            "Apply the creation format checks (date, duration, non-empty names) "
            "to update payloads as well"
        ),
    )

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
