"""Centralized configuration using pydantic-settings.

The parsing functions in :mod:`oratime.core.time` are pure and take no
configuration. Settings only drive the batch helpers and the command line.

Environment Variables:
- ORATIME_LOG_LEVEL: Logging level for the CLI (default: "INFO")
- ORATIME_LOG_FORMAT: Logging format string
- ORATIME_ON_ERROR: Batch failure policy, "raise" or "coerce" (default: "raise")
- ORATIME_LITERAL_COLUMN: Default CSV column holding literals (default: "value")

Example:
    >>> from oratime.settings import get_settings
    >>> settings = get_settings()
    >>> settings.on_error
    'raise'
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oratime.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    oratime configuration.

    All settings can be overridden via environment variables or a .env file.
    Environment variables take precedence over .env file values.
    """

    # ===== Logging =====
    log_level: str = Field(
        default="INFO",
        description="Logging level used by the command line interface",
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format used by the command line interface",
    )

    # ===== Batch Conversion =====
    on_error: Literal["raise", "coerce"] = Field(
        default="raise",
        description="Raise on unparseable literals, or coerce them to NaT",
    )
    literal_column: str = Field(
        default="value",
        description="Default column holding raw literals in CSV input",
        min_length=1,
    )

    model_config = SettingsConfigDict(
        env_prefix="ORATIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Upper-case the level and reject names logging does not know."""
        if isinstance(v, str):
            v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached Settings instance.

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationError: If an environment value fails validation
    """
    try:
        settings = Settings()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid oratime settings",
            details={"errors": e.error_count()},
        ) from e

    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Batch error policy: {settings.on_error}")

    return settings
