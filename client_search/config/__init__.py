"""Configuration management module for Client Search."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AppConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    OutputFormat,
    SearchConfig,
    ServerConfig,
    SourceConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "SourceConfig",
    "SearchConfig",
    "LoggingConfig",
    "ServerConfig",
    "EnvironmentConfig",
    # Enums
    "OutputFormat",
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
