"""Record sources that supply raw client records.

- HTTP: http.HttpRecordSource (clients JSON API)
- File: file.FileRecordSource (local JSON file)

Use the factory function to pick one from configuration:
    from client_search.sources import get_source
    records = get_source(app_config.source).fetch_records()
"""

from .base import RecordSource
from .exceptions import (
    SourceConfigurationError,
    SourceError,
    SourceFileError,
    SourceHTTPError,
    SourceResponseError,
    SourceTimeoutError,
)
from .factory import get_source
from .file import FileRecordSource
from .http import HttpRecordSource

__all__ = [
    # Base and factory
    "RecordSource",
    "get_source",
    # Sources
    "HttpRecordSource",
    "FileRecordSource",
    # Exceptions
    "SourceError",
    "SourceHTTPError",
    "SourceTimeoutError",
    "SourceResponseError",
    "SourceFileError",
    "SourceConfigurationError",
]
