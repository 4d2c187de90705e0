"""Configuration loading, schema, and defaults."""

from gitgrove.config.loader import ConfigError, load_config
from gitgrove.config.schema import GitConfig, GroveConfig

__all__ = [
    "ConfigError",
    "GitConfig",
    "GroveConfig",
    "load_config",
]
