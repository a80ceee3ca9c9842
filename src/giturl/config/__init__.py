"""Configuration loading, schema, and defaults."""

from giturl.config.loader import ConfigError, load_config
from giturl.config.schema import ConvertConfig, GitURLConfig, OutputConfig

__all__ = [
    "ConfigError",
    "ConvertConfig",
    "GitURLConfig",
    "OutputConfig",
    "load_config",
]
