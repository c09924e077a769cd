"""
Configuration management for the DarkThrone API client.

Handles loading and validation of configuration files.
"""

from darkthrone.config.settings import (
    DEFAULT_BASE_URL,
    ApiConfig,
    DarkThroneConfig,
    LoggingConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiConfig",
    "DarkThroneConfig",
    "LoggingConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
