"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the tunable values of
the route finder:
- the time cost model constants (transfer overhead, seconds per unit)
- the default cost model used by the planner service
- logging level and format

Configuration can be overridden via environment variables:
- ROUTEFINDER_COST_TRANSFER_OVERHEAD_SECONDS=90
- ROUTEFINDER_COST_SECONDS_PER_UNIT=30
- ROUTEFINDER_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CostConfig(BaseSettings):
    """Cost model configuration.

    Environment variables prefixed with ROUTEFINDER_COST_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTEFINDER_COST_")

    transfer_overhead_seconds: int = Field(default=120, ge=0)
    seconds_per_unit: int = Field(default=40, ge=0)
    default_model: Literal["distance", "time"] = "distance"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROUTEFINDER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTEFINDER_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.cost.transfer_overhead_seconds)
        print(config.observability.level)

    Environment variables prefixed with ROUTEFINDER_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTEFINDER_")

    cost: CostConfig = Field(default_factory=CostConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
