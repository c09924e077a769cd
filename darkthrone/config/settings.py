"""
Configuration management for the DarkThrone API client.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from darkthrone.exceptions import InvalidConfigurationError
from darkthrone.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.darkthronereborn.com"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_VALID_TRANSPORTS = ("requests", "httpx")


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${DARKTHRONE_BASE_URL}" -> value of DARKTHRONE_BASE_URL env var
        "${DARKTHRONE_BASE_URL:http://localhost:3000}" -> env value or the default
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class ApiConfig:
    """Remote API configuration."""

    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None  # seconds; None waits indefinitely
    transport: str = "requests"  # "requests" or "httpx"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class DarkThroneConfig:
    """Main DarkThrone client configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.darkthrone/config.yaml")


def get_default_config() -> DarkThroneConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        DarkThroneConfig: Default configuration object
    """
    return DarkThroneConfig()


def load_config(config_path: Optional[str] = None) -> DarkThroneConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        DarkThroneConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(str(config_path))

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': top level must be a mapping"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except (InvalidConfigurationError, TypeError, ValueError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> DarkThroneConfig:
    """
    Build DarkThroneConfig from dictionary loaded from YAML.

    Merges user configuration with defaults.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        DarkThroneConfig: Configuration object
    """
    default_config = get_default_config()

    api_data = config_data.get('api') or {}
    timeout = api_data.get('timeout', default_config.api.timeout)
    api = ApiConfig(
        base_url=str(api_data.get('base_url', default_config.api.base_url)),
        # Env expansion turns every value into a string
        timeout=float(timeout) if timeout not in (None, "") else None,
        transport=str(api_data.get('transport', default_config.api.transport)),
    )

    logging_data = config_data.get('logging') or {}
    json_format = logging_data.get('json_format', default_config.logging.json_format)
    if isinstance(json_format, str):
        json_format = json_format.strip().lower() in ("1", "true", "yes", "on")
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)).upper(),
        file=os.path.expanduser(
            str(logging_data.get('file', default_config.logging.file) or "")
        ),
        json_format=bool(json_format),
    )

    return DarkThroneConfig(api=api, logging=logging)


def _validate_config(config: DarkThroneConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not config.api.base_url:
        raise InvalidConfigurationError("api.base_url cannot be empty")
    if not config.api.base_url.startswith(("http://", "https://")):
        raise InvalidConfigurationError(
            f"api.base_url must start with http:// or https://, got '{config.api.base_url}'"
        )

    if config.api.timeout is not None and config.api.timeout <= 0:
        raise InvalidConfigurationError(
            f"api.timeout must be positive, got {config.api.timeout}"
        )

    if config.api.transport not in _VALID_TRANSPORTS:
        raise InvalidConfigurationError(
            f"api.transport must be one of {list(_VALID_TRANSPORTS)}, "
            f"got '{config.api.transport}'"
        )

    if config.logging.level not in _VALID_LOG_LEVELS:
        raise InvalidConfigurationError(
            f"logging.level must be one of {list(_VALID_LOG_LEVELS)}, "
            f"got '{config.logging.level}'"
        )
