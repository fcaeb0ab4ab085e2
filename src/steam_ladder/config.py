"""
Library configuration using Pydantic Settings.

Loads configuration from environment variables (or a .env file)
with validation, type coercion, and sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://steamladder.com/api/v1/"


class SteamLadderConfig(BaseSettings):
    """Steam Ladder API specific configuration."""

    model_config = SettingsConfigDict(env_prefix="STEAMLADDER_")

    api_key: SecretStr = Field(
        default=...,
        description="Steam Ladder API key from https://steamladder.com/user/settings/api",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL for the Steam Ladder API",
    )
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="HTTP request timeout in seconds (None = no timeout)",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {v}")
        return v


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["json", "console"] = Field(
        default="json",
        description="Log output format",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Include timestamp in log entries",
    )


class Settings(BaseSettings):
    """
    Main library settings.

    Aggregates all configuration sections and provides
    a single entry point for configuration access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sub-configurations
    steamladder: SteamLadderConfig = Field(default_factory=SteamLadderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Uses lru_cache so settings are only loaded once
    and reused across the process.

    Returns:
        Settings: Configuration instance
    """
    return Settings()
