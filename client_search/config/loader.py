"""Configuration loader for Client Search."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

DEFAULT_CONFIG_LOCATIONS = [
    Path("client_search.yaml"),
    Path("config") / "client_search.yaml",
]


def load_config(config_path: Optional[Path] = None) -> tuple[AppConfig, EnvironmentConfig]:
    """
    Load and validate configuration from YAML file and environment variables.

    Implements fallback logic for config file location:
    1. Use provided config_path if given (it must exist)
    2. Try client_search.yaml in current directory
    3. Try ./config/client_search.yaml
    4. Fall back to built-in defaults

    Environment variables override values from the file.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with validated configuration

    Raises:
        ConfigurationError: If configuration is invalid or the given file is missing
    """
    config_file = _find_config_file(config_path)

    config_dict = {}
    if config_file is not None:
        config_dict = _read_config_file(config_file)

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    app_config = _validate_config(config_dict)

    try:
        env_config = load_environment_config()
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load environment configuration: {e}",
            suggestions=["Check the CLIENT_SEARCH_* and LOG_LEVEL environment variables"],
        ) from e

    apply_environment_overrides(app_config, env_config)

    return app_config, env_config


def apply_environment_overrides(app_config: AppConfig, env_config: EnvironmentConfig) -> None:
    """Copy environment-provided source settings onto the app config."""
    source_updates = {}
    if env_config.api_url:
        source_updates["base_url"] = env_config.api_url
    if env_config.data_file:
        source_updates["file"] = env_config.data_file

    if source_updates:
        merged = {**app_config.source.model_dump(), **source_updates}
        try:
            app_config.source = type(app_config.source).model_validate(merged)
        except ValidationError as e:
            raise ConfigurationError(
                "Environment overrides produced an invalid source configuration",
                errors=_format_validation_errors(e),
            ) from e


def _read_config_file(config_file: Path) -> dict:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(
            f"Configuration file not found: {config_file}",
            suggestions=[
                "Copy client_search.example.yaml to client_search.yaml",
                f"Ensure {config_file} exists and is readable",
            ],
        )
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        )
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
        )

    if config_dict is None:
        return {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            suggestions=["Review client_search.example.yaml for the expected layout"],
        )

    return config_dict


def _validate_config(config_dict: dict) -> AppConfig:
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            "Configuration validation failed",
            errors=_format_validation_errors(e),
            suggestions=[
                "Review client_search.example.yaml for correct format",
                "Verify field types match the expected schema",
            ],
        ) from e


def _format_validation_errors(error: ValidationError) -> list[str]:
    """Convert Pydantic validation errors to user-friendly messages."""
    errors = []
    for item in error.errors():
        field_path = " -> ".join(str(loc) for loc in item["loc"])
        error_type = item["type"]

        if error_type == "missing":
            errors.append(f"Missing required field: {field_path}")
        elif error_type in ["string_type", "int_type", "int_parsing", "bool_type"]:
            expected_type = error_type.split("_")[0]
            errors.append(
                f"Invalid type for '{field_path}': expected {expected_type}, got {item.get('input')}"
            )
        elif "enum" in error_type:
            errors.append(f"Invalid value for '{field_path}': {item['msg']}")
        else:
            errors.append(f"{field_path}: {item['msg']}")
    return errors


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find configuration file using fallback logic.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to configuration file, or None when no default file exists

    Raises:
        ConfigurationError: If an explicit path was given but does not exist
    """
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Omit --config to run with built-in defaults",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return None


def validate_config_file(config_path: Path) -> bool:
    """
    Validate a configuration file without loading environment variables.

    Args:
        config_path: Path to configuration file

    Returns:
        True if valid, False otherwise (errors printed to stdout)
    """
    try:
        _validate_config(_read_config_file(config_path))
        print(f"✓ Configuration file {config_path} is valid")
        return True
    except ConfigurationError as e:
        print(f"✗ Configuration validation failed:\n{e}")
        return False
