"""Centralized configuration for the Movie API.

Configuration strategy:
- DATABASE settings: connection parameters for the MySQL store,
  overridable as a whole with DATABASE_URL.
- INFRASTRUCTURE settings (Logging, API, CORS): safe defaults,
  override via .env as needed.

All configuration values are sourced from environment variables (.env file).

Usage:
    from src.settings import settings

    settings.database.sync_url
    settings.api.port
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.settings.api import APISettings, CORSSettings
from src.settings.base import LoggingSettings
from src.settings.database import DatabaseSettings

__all__ = [
    # Main
    "Settings",
    "settings",
    # Logging
    "LoggingSettings",
    # Database
    "DatabaseSettings",
    # API
    "APISettings",
    "CORSSettings",
    # Utilities
    "get_masked_settings",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from src.settings import settings`
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # Logging
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Database
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    # API
    api: APISettings = Field(default_factory=APISettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "production", "test"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid ENVIRONMENT. Valid: {valid_envs}")
        return v_lower


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_masked_settings() -> dict[str, Any]:
    """Return settings dict with sensitive values masked.

    Returns:
        Configuration dictionary safe for logging.
    """
    config = settings.model_dump()
    mask = "***MASKED***"

    secrets = [
        ("database", "password"),
        ("database", "url"),
    ]

    for section, key in secrets:
        if section in config and key in config[section] and config[section][key]:
            config[section][key] = mask

    return config
