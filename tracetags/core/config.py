"""Environment-driven configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .logger import LogLevel, configure_logger, validate_log_level

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "TRACETAGS_LOG_LEVEL"


@dataclass
class TraceTagsConfig:
    log_level: LogLevel = "warn"


def load_config(log_level: LogLevel | None = None) -> TraceTagsConfig:
    """
    Build the configuration.

    Precedence (highest to lowest):
    1. Arguments to this function
    2. Environment variables
    3. Built-in defaults
    """
    config = TraceTagsConfig()

    if log_level is not None:
        config.log_level = validate_log_level(log_level)
        return config

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        try:
            config.log_level = validate_log_level(env_level.strip().lower())
        except ValueError:
            logger.warning(
                f"Invalid {LOG_LEVEL_ENV_VAR}={env_level!r}, using default {config.log_level!r}"
            )
    return config


def init(log_level: LogLevel | None = None) -> TraceTagsConfig:
    """Load the configuration and configure package logging from it."""
    config = load_config(log_level)
    configure_logger(log_level=config.log_level)
    logger.debug(f"tracetags initialized with {config}")
    return config
