# =============================================================================
# static_site/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
#
# Usage:
#   from static_site.config import get_settings
#   print(get_settings().PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in the working directory (if exists)
#
# Settings are read once at startup. PORT has no default, so a missing or
# invalid value fails validation before the server binds.
# =============================================================================

import re
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from static_site.logging_config import DEFAULT_LOG_FILTER


_PORT_PATTERN = re.compile(r"\+?[0-9]+")

_MODEL_CONFIG = SettingsConfigDict(
    # Load from .env file in the working directory
    env_file=".env",
    env_file_encoding="utf-8",
    # Treat PORT="" the same as an unset PORT
    env_ignore_empty=True,
    # Case-sensitive environment variable names
    case_sensitive=True,
    # Both settings classes read the same .env file
    extra="ignore",
)


class LoggingSettings(BaseSettings):
    """
    Logging settings, loaded separately so logging can be configured
    before the rest of the environment is validated.
    """

    LOG_FILTER: str = Field(
        default=DEFAULT_LOG_FILTER,
        description="Comma-separated log directives, e.g. 'info' or 'static_site=debug,uvicorn=info'"
    )

    model_config = _MODEL_CONFIG


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via get_settings().
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    PORT: int = Field(
        ...,  # required, the process refuses to start without it
        ge=0,
        le=65535,
        description="TCP port for the HTTP listener"
    )

    HOST: str = Field(
        default="0.0.0.0",
        description="Address to bind the HTTP listener to"
    )

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    ASSETS_DIR: str = Field(
        default="assets",
        description="Directory served under /assets, relative to the working directory"
    )

    model_config = _MODEL_CONFIG

    @field_validator("PORT", mode="before")
    @classmethod
    def port_digits_only(cls, value):
        """
        Accept only plain decimal digits, optionally with a leading '+'.

        Rejects what int() would otherwise tolerate: surrounding
        whitespace, underscores and decimal points.
        """
        if isinstance(value, str):
            if not _PORT_PATTERN.fullmatch(value):
                raise ValueError(f"PORT must be a decimal integer, got {value!r}")
            return int(value)
        return value


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Raises:
        pydantic.ValidationError: If PORT is missing or not a valid port
    """
    return Settings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance."""
    return LoggingSettings()
