"""Configuration loading, schema, and defaults."""

from gitsummary.config.loader import ConfigError, find_config_file, load_config
from gitsummary.config.schema import GitConfig, GitSummaryConfig, OutputConfig

__all__ = [
    "ConfigError",
    "GitConfig",
    "GitSummaryConfig",
    "OutputConfig",
    "find_config_file",
    "load_config",
]
