"""Application settings loaded from environment variables."""

from datetime import date
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the API, CLI and events client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    events_api_base_url: str = Field(
        default="http://127.0.0.1:3000",
        alias="EVENTS_API_BASE_URL",
    )
    events_api_timeout_seconds: float = Field(
        default=10.0,
        alias="EVENTS_API_TIMEOUT_SECONDS",
        gt=0,
    )
    recurrence_ceiling_date: date = Field(
        default=date(2025, 6, 25),
        alias="RECURRENCE_CEILING_DATE",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
