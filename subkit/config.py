"""
Configuration module for the subkit helper service.

This module centralizes environment variables and runtime defaults
using pydantic-settings for type-safe configuration management.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # CORS Configuration
    allowed_origin: str = Field(
        default="*",
        validation_alias="ALLOWED_ORIGIN",
        description="Allowed CORS origin for API requests"
    )

    # API Authentication
    api_key: str = Field(
        default="",
        validation_alias="API_KEY",
        description="API key for endpoint authentication"
    )

    app_name: str = Field(
        default="subkit",
        validation_alias="APP_NAME",
        description="Application name used for the logger and config directory"
    )

    config_dir: str = Field(
        default=os.path.join("~", ".config", "subkit"),
        validate_default=True,
        validation_alias="CONFIG_DIR",
        description="Application config directory (created on startup)"
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level name (DEBUG, INFO, WARNING, ...)"
    )

    # Timecode formatting defaults
    fraction_digits: int = Field(
        default=3,
        ge=0,
        le=9,
        validation_alias="FRACTION_DIGITS",
        description="Fractional digits used when formatting timecodes"
    )

    fraction_separator: str = Field(
        default=".",
        validation_alias="FRACTION_SEPARATOR",
        description="Separator between seconds and fraction ('.' for VTT, ',' for SRT)"
    )

    race_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        validation_alias="RACE_TIMEOUT_SECONDS",
        description="Deadline for startup tasks raced with timeout()"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("config_dir")
    @classmethod
    def expand_config_dir(cls, value: str) -> str:
        return os.path.expanduser(value)

    @field_validator("fraction_separator")
    @classmethod
    def check_separator(cls, value: str) -> str:
        if value not in (".", ","):
            raise ValueError("fraction_separator must be '.' or ','")
        return value


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()
