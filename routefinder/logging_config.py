"""Logging bootstrap driven by ``ObservabilityConfig``."""

from __future__ import annotations

import logging
from typing import Optional

from .config import AppConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[AppConfig] = None) -> None:
    """Apply the configured level and format to the root logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level name.
    """
    observability = (config or get_config()).observability
    level = logging.getLevelName(observability.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {observability.level}",
            setting_name="ROUTEFINDER_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    logging.basicConfig(
        level=level,
        format=observability.format,
        datefmt=observability.datefmt,
    )
