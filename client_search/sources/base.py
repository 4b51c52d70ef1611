"""Base record source with shared payload handling.

A record source supplies the raw client records that searches and duplicate
detection run against. Concrete sources fetch over HTTP or read a local
JSON file; both hand their decoded payload to ``_coerce_records`` so that
callers always receive a list of string-keyed dicts.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from client_search.logging import get_logger

from .exceptions import SourceConfigurationError, SourceResponseError

logger = get_logger(__name__, component="source")

RawRecord = Dict[str, Any]


class RecordSource(ABC):
    """Base class for all record sources.

    Attributes:
        max_records: Maximum records to return per fetch (0 = unlimited)
    """

    SOURCE_NAME = "base"

    def __init__(self, max_records: int = 0) -> None:
        """Initialize source.

        Args:
            max_records: Maximum records to return per fetch (0 = unlimited)

        Raises:
            SourceConfigurationError: If max_records is negative
        """
        if max_records < 0:
            raise SourceConfigurationError(
                f"max_records must be zero or positive, got: {max_records}"
            )
        self.max_records = max_records

    @abstractmethod
    def fetch_records(self) -> List[RawRecord]:
        """Fetch all raw records.

        Returns:
            List of raw records (string-keyed dicts), in source order

        Raises:
            SourceError: On any retrieval failure. Subclasses indicate the kind:
            - SourceHTTPError: HTTP 4xx/5xx or connection failures
            - SourceTimeoutError: Request timed out
            - SourceResponseError: Payload could not be decoded
            - SourceFileError: Local file missing or unreadable
        """

    @property
    def description(self) -> str:
        """Human-readable location of the records, for logs."""
        return self.SOURCE_NAME

    def _coerce_records(self, payload: Any) -> List[RawRecord]:
        """Normalize a decoded JSON payload into a list of raw records.

        A single object is wrapped into a one-element list. Non-object list
        items are skipped with a warning. Keys are converted to strings.

        Raises:
            SourceResponseError: If the payload is neither an object nor an array
        """
        if isinstance(payload, dict):
            payload = [payload]

        if not isinstance(payload, list):
            raise SourceResponseError(
                f"Expected a JSON array of client objects from {self.description}, "
                f"got {type(payload).__name__}"
            )

        records: List[RawRecord] = []
        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                logger.warning(
                    "Skipping non-object record",
                    extra={
                        "event": "source.record.skipped",
                        "source": self.description,
                        "index": index,
                        "item_type": type(item).__name__,
                    },
                )
                continue
            records.append({str(key): value for key, value in item.items()})

        return self._truncate_records(records)

    def _truncate_records(self, records: List[RawRecord]) -> List[RawRecord]:
        """Truncate records to max_records if configured."""
        if self.max_records > 0 and len(records) > self.max_records:
            logger.warning(
                "Truncating records to max_records limit",
                extra={
                    "event": "source.records.truncated",
                    "source": self.description,
                    "total": len(records),
                    "max": self.max_records,
                },
            )
            return records[: self.max_records]

        return records
