"""Logging settings shared by every entry point."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Directory receiving the dated log files.
    """

    level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Reject names the logging module does not know."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping() or level == "NOTSET":
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @property
    def level_number(self) -> int:
        """Numeric level understood by the logging module."""
        return logging.getLevelNamesMapping()[self.level]
