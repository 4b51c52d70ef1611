"""Structured logging helpers for Client Search."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges a default component with per-call extra fields."""

    def process(self, msg, kwargs):
        # Call-site extra takes precedence over the adapter defaults
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a logger, optionally tagging every record with a component field.

    Example:
        >>> logger = get_logger(__name__, component="source")
        >>> logger.info("Fetching records", extra={"event": "source.fetch.request"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger
