"""Matching engine for searching client records by field.

RecordMatcher dispatches a search either to the generic predicate (see
predicates.py) or to the tiered name strategy (see names.py), then wraps the
surviving raw records into Record entities.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from client_search.domain.fields import canonical_field, is_name_field
from client_search.domain.models import Record

from .models import MatchTier, SearchQuery, SearchResult
from .names import NameSearchStrategy
from .predicates import record_matches

logger = logging.getLogger(__name__)


class RecordMatcher:
    """Searches a snapshot of raw records.

    Responsibilities:
    - Route name searches (``name``/``full_name``) through NameSearchStrategy
    - Apply the generic predicate to every other field
    - Wrap matching raw records into Record entities, preserving source order
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        """Initialize RecordMatcher.

        Args:
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.logger = logger_instance or logger
        self.name_strategy = NameSearchStrategy()

    def search(
        self,
        raw_records: Iterable[Mapping[str, Any]],
        query: Optional[str],
        field: Optional[str] = "full_name",
        exact: bool = False,
    ) -> SearchResult:
        """Find records whose ``field`` matches ``query``.

        Args:
            raw_records: Raw records from a record source
            query: Free-text query; None is treated as empty
            field: Field to search, any case, aliases allowed
            exact: Only accept exact (whole value) matches

        Returns:
            SearchResult with matching records and the tier that produced them
        """
        search_query = SearchQuery.parse(query)
        records = [raw for raw in raw_records if isinstance(raw, Mapping)]
        canonical = canonical_field(field)

        if is_name_field(canonical):
            matched, tier = self.name_strategy.select(records, search_query, exact=exact)
        else:
            matched = [raw for raw in records if record_matches(raw, canonical, search_query, exact)]
            tier = MatchTier.GENERIC

        result = SearchResult(
            records=[Record.from_raw(raw) for raw in matched],
            tier=tier,
            field=canonical,
            total_scanned=len(records),
        )

        self.logger.debug(
            f"Search on {canonical} matched {len(result)} of {len(records)} records",
            extra={
                "event": "matching.search.evaluated",
                "field": canonical,
                "tier": tier.value,
                "query_parts": len(search_query.parts),
                "exact": exact,
                "matched": len(result),
                "scanned": len(records),
            },
        )

        return result


def search_records(
    raw_records: Iterable[Mapping[str, Any]],
    query: Optional[str],
    field: Optional[str] = "full_name",
    exact: bool = False,
) -> List[Record]:
    """Convenience wrapper around RecordMatcher.search returning only records."""
    return RecordMatcher().search(raw_records, query, field, exact=exact).records
