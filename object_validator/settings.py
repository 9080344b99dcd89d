"""Library settings using pydantic-settings.

Loads configuration from ``OBJECT_VALIDATOR_*`` environment variables with
.env file support.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validator configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OBJECT_VALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level for the object_validator package logger",
    )

    # Registries
    warn_on_constraint_override: bool = Field(
        default=True,
        description="Log a warning when a constraint identifier is registered again",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are loaded once and reused.
    """
    return Settings()
