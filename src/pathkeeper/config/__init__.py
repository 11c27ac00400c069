"""Configuration models and loaders for pathkeeper."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, HOME_ENV_VAR, dump_example_config, load_config
from .models import LoggingConfig, PathkeeperConfig, RegistryConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "HOME_ENV_VAR",
    "LoggingConfig",
    "PathkeeperConfig",
    "RegistryConfig",
    "dump_example_config",
    "load_config",
]
