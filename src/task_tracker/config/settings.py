"""Application settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "task-tracker"
    app_env: str = "dev"
    host: str = "127.0.0.1"
    # Falls back to the conventional PORT variable used by most hosts.
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("TASK_TRACKER_PORT", "PORT"),
    )
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TASK_TRACKER_",
        extra="ignore",
        populate_by_name=True,
        env_file=(PROJECT_ROOT / ".env", PROJECT_ROOT / ".env.local"),
        env_file_encoding="utf-8",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
