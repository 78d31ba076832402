"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for configuration: where the
map data lives, whether route results are cached, and how logging is
set up.

Configuration can be overridden via environment variables:
- MAPNAV_GRAPH_DATA_DIR=/path/to/data
- MAPNAV_CACHE_ENABLED=false
- MAPNAV_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Map data configuration.

    Environment variables prefixed with MAPNAV_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    locations_file: str = "locations.csv"
    roads_file: str = "roads.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to the locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def roads_path(self) -> Path:
        """Full path to the roads CSV file."""
        return self.data_dir / self.roads_file


class CacheConfig(BaseSettings):
    """Route cache configuration.

    Environment variables prefixed with MAPNAV_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_CACHE_")

    enabled: bool = True
    max_size: Optional[int] = Field(default=256, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with MAPNAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.roads_path)
        print(config.cache.enabled)

    Environment variables prefixed with MAPNAV_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
