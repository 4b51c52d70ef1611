"""Factory function for instantiating record sources."""

import logging

from client_search.config.models import SourceConfig

from .base import RecordSource
from .exceptions import SourceConfigurationError
from .file import FileRecordSource
from .http import HttpRecordSource

logger = logging.getLogger(__name__)


def get_source(source_config: SourceConfig) -> RecordSource:
    """Instantiate the record source described by ``source_config``.

    A configured ``file`` takes precedence over the HTTP API.

    Args:
        source_config: Source configuration

    Returns:
        FileRecordSource or HttpRecordSource

    Raises:
        SourceConfigurationError: If the source cannot be constructed

    Example:
        >>> source = get_source(SourceConfig(file="clients.json"))
        >>> records = source.fetch_records()
    """
    if source_config.file:
        logger.debug(
            "Creating file record source",
            extra={"source": "file", "path": source_config.file},
        )
        return FileRecordSource(source_config.file, max_records=source_config.max_records)

    logger.debug(
        "Creating HTTP record source",
        extra={"source": "http", "url": source_config.url},
    )

    try:
        return HttpRecordSource(
            url=source_config.url,
            timeout=source_config.timeout,
            user_agent=source_config.user_agent,
            max_records=source_config.max_records,
        )
    except SourceConfigurationError:
        raise
    except Exception as e:
        raise SourceConfigurationError(f"Failed to create HTTP source: {e}") from e
