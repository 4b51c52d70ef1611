"""Environment variable loading and validation."""

import os
import re
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        data_file: Optional[str] = None,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """Initialize environment configuration."""
        self.api_url = api_url
        self.data_file = data_file
        self.log_level = log_level
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - CLIENT_SEARCH_API_URL: Base URL of the clients API
    - CLIENT_SEARCH_FILE: Local JSON file to search instead of the API
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment label attached to log records

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    api_url = os.getenv("CLIENT_SEARCH_API_URL")
    data_file = os.getenv("CLIENT_SEARCH_FILE")
    log_level = os.getenv("LOG_LEVEL")
    environment = os.getenv("ENVIRONMENT")

    if api_url is not None:
        api_url = api_url.strip() or None
    if data_file is not None:
        data_file = data_file.strip() or None

    if api_url and not _is_http_url(api_url):
        errors.append(
            f"Invalid CLIENT_SEARCH_API_URL: '{api_url}'. Must start with http:// or https://."
        )

    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.upper()

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        api_url=api_url,
        data_file=data_file,
        log_level=log_level or None,
        environment=environment,
    )


def _is_http_url(url: str) -> bool:
    return bool(re.match(r"^https?://[^\s/]+", url))
