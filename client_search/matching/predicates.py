"""Match predicates shared by the generic engine and the name strategy."""

from typing import Any, Mapping, Optional, Sequence

from client_search.domain.fields import MISSING, FieldValue, resolve_field

from .models import SearchQuery


def tokens_match(field_tokens: Sequence[str], query_parts: Sequence[str]) -> bool:
    """True if any field token equals, or starts with, any query token.

    Empty query tokens are ignored: ``"".startswith`` would match everything.
    """
    for field_token in field_tokens:
        for part in query_parts:
            if not part:
                continue
            if field_token == part or field_token.startswith(part):
                return True
    return False


def value_matches(value: FieldValue, query: SearchQuery, exact: bool = False) -> bool:
    """Decide whether a resolved field value matches a query.

    Rules, any of which is sufficient:
    1. Exact equality with the normalized query
    2. The value contains the query as a substring
    3. Some whitespace-separated token of the value equals or starts with
       some query token

    Missing and blank values never match. An empty query matches every
    non-blank value. With ``exact=True`` only rule 1 applies.

    Args:
        value: Resolved field value, or MISSING
        query: Normalized search query
        exact: Restrict matching to exact equality

    Returns:
        True if the value matches
    """
    if value is MISSING:
        return False

    lowered = value.strip().lower()
    if not lowered:
        return False

    if query.is_empty:
        return True

    if lowered == query.text:
        return True

    if exact:
        return False

    if query.text in lowered:
        return True

    return tokens_match(lowered.split(), query.parts)


def contains_query(value: FieldValue, query: SearchQuery) -> bool:
    """Substring containment only; missing and blank values never match."""
    if value is MISSING:
        return False
    lowered = value.strip().lower()
    return bool(lowered) and query.text in lowered


def record_matches(
    raw: Mapping[str, Any], field: Optional[str], query: SearchQuery, exact: bool = False
) -> bool:
    """Generic predicate: resolve ``field`` on ``raw`` and test it against ``query``."""
    return value_matches(resolve_field(raw, field), query, exact=exact)
