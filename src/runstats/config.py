"""Configuration parsing and validation for workflow run statistics."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "RUNSTATS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class Config:
    """Validated runtime settings for the statistics package."""

    log_level: str


def load_config() -> Config:
    """Build and validate configuration from the environment.

    Returns:
        A validated ``Config`` instance.

    Raises:
        ConfigurationError: If ``RUNSTATS_LOG_LEVEL`` is not a standard logging level name.
    """
    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "").strip().upper() or DEFAULT_LOG_LEVEL
    if log_level not in _VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid value for '{LOG_LEVEL_ENV_VAR}': {log_level!r}. "
            f"Expected one of: {', '.join(_VALID_LOG_LEVELS)}."
        )

    return Config(log_level=log_level)


def configure_logging(config: Config) -> logging.Logger:
    """Apply the configured level to the package logger and return it.

    The root logger is left untouched; handlers are the application's concern.
    """
    package_logger = logging.getLogger(__package__ or "runstats")
    package_logger.setLevel(config.log_level)
    return package_logger
