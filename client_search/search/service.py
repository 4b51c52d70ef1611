"""Search service: the boundary between record sources and the matching engine.

Every call fetches a fresh snapshot from the source, runs the matching engine
over it and returns new Record objects; nothing is cached between calls.
Retrieval failures never escape this layer. They are logged, handed to the
optional ``on_source_error`` callback and turned into an empty result.
"""

from typing import Callable, Dict, List, Optional

from client_search.domain.models import Record
from client_search.logging import get_logger
from client_search.logging.context import log_context
from client_search.matching import RecordMatcher, SearchResult, group_duplicate_emails
from client_search.sources.base import RawRecord, RecordSource
from client_search.sources.exceptions import SourceError

logger = get_logger(__name__, component="search")

SourceErrorHandler = Callable[[SourceError], None]


class ClientSearch:
    """Finds client records by field and detects duplicate emails.

    Example:
        >>> service = ClientSearch(FileRecordSource("clients.json"))
        >>> service.search("john doe")
        >>> service.find_duplicate_emails()
    """

    def __init__(
        self,
        source: RecordSource,
        matcher: Optional[RecordMatcher] = None,
        on_source_error: Optional[SourceErrorHandler] = None,
    ):
        """Initialize ClientSearch.

        Args:
            source: Record source to fetch from on every call
            matcher: Matching engine (a default RecordMatcher if omitted)
            on_source_error: Called with the SourceError when retrieval fails
        """
        self.source = source
        self.matcher = matcher or RecordMatcher()
        self.on_source_error = on_source_error

    def search(
        self,
        query: Optional[str],
        field: Optional[str] = "full_name",
        limit: Optional[int] = None,
        exact: bool = False,
    ) -> List[Record]:
        """Search records for ``query`` in ``field``.

        Args:
            query: Free-text query (None or blank is an empty query)
            field: Field to search; blank or None means full_name
            limit: Maximum number of results (None for all)
            exact: Only accept exact matches

        Returns:
            Matching records in source order; empty on retrieval failure

        Raises:
            ValueError: If limit is given and smaller than 1
        """
        limit = _check_limit(limit)
        return self.search_detailed(query, field, exact=exact).limited(limit)

    def search_detailed(
        self,
        query: Optional[str],
        field: Optional[str] = "full_name",
        exact: bool = False,
    ) -> SearchResult:
        """Like search() but returns the full SearchResult (tier, scan count)."""
        if field is None or not str(field).strip():
            field = "full_name"

        with log_context(operation="search", field=field):
            raw_records = self._load_records()
            result = self.matcher.search(raw_records, query, field, exact=exact)

            logger.info(
                f"Search completed: {len(result)} result(s)",
                extra={
                    "event": "search.completed",
                    "tier": result.tier.value,
                    "results": len(result),
                    "scanned": result.total_scanned,
                },
            )
            return result

    def find_duplicate_emails(self) -> Dict[str, List[Record]]:
        """Group records sharing a normalized email.

        Returns:
            Ordered mapping of normalized email to its records (each group has
            two or more members); empty on retrieval failure
        """
        with log_context(operation="duplicates"):
            records = [Record.from_raw(raw) for raw in self._load_records()]
            duplicates = group_duplicate_emails(records)

            logger.info(
                f"Duplicate detection completed: {len(duplicates)} group(s)",
                extra={
                    "event": "duplicates.completed",
                    "groups": len(duplicates),
                    "scanned": len(records),
                },
            )
            return duplicates

    def _load_records(self) -> List[RawRecord]:
        """Fetch a snapshot from the source, degrading to [] on failure."""
        try:
            return self.source.fetch_records()
        except SourceError as e:
            logger.error(
                f"Could not retrieve client records: {e}",
                extra={
                    "event": "source.fetch.failed",
                    "source": self.source.description,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            if self.on_source_error is not None:
                self.on_source_error(e)
            return []


def _check_limit(limit: Optional[int]) -> Optional[int]:
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be at least 1, got: {limit}")
    return limit
