"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

from .models import DEFAULT_API_URL


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    source = config_dict.get("source", {})
    if isinstance(source, dict):
        base_url = source.get("base_url")
        file_path = source.get("file")

        # A file source always wins over the API
        if file_path and base_url and str(base_url).rstrip("/") != DEFAULT_API_URL:
            warning_messages.append(
                f"source.file ({file_path}) is set, so source.base_url ({base_url}) will be ignored"
            )

        if isinstance(base_url, str) and base_url.strip().startswith("http://"):
            warning_messages.append(
                f"source.base_url ({base_url}) uses plain HTTP; client data will travel unencrypted"
            )

        max_records = source.get("max_records", 0)
        if isinstance(max_records, int) and max_records > 100000:
            warning_messages.append(
                f"Large max_records ({max_records}) may make searches slow"
            )

    search = config_dict.get("search", {})
    if isinstance(search, dict):
        limit = search.get("limit")
        if isinstance(limit, int) and limit > 10000:
            warning_messages.append(f"Large search.limit ({limit}) may produce very long output")

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
