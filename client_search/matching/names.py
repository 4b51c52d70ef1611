"""Tiered search strategy for the full-name field.

A plain OR of substring/prefix rules is too noisy for names: "Ann" would hit
"Anna" and "Banner", and "John Smith" would return every John. Name searches
therefore walk a chain of tiers:

1. Multi-word query
   a. exact full-name match; if anything matches, stop
   b. otherwise every query token must equal some name token (AND)
2. Single-word query: every hyphen-separated piece of the word equals some
   name token
3. Anything else (an empty query): the generic predicate over the full name,
   with email containment as an extra OR clause

Name tokens are split on whitespace and hyphens, so "John-Paul Jones" has the
tokens ``john``, ``paul`` and ``jones``. Query words are split the same way
before comparing, so "Jones John-Paul" finds that record.
"""

from typing import Any, List, Mapping, Sequence, Tuple

from client_search.domain.fields import EMAIL_FIELD, FULL_NAME_FIELD, MISSING, resolve_field

from .models import MatchTier, SearchQuery, split_name
from .predicates import contains_query, value_matches

RawRecord = Mapping[str, Any]


def _normalized_name(raw: RawRecord) -> str:
    value = resolve_field(raw, FULL_NAME_FIELD)
    if value is MISSING:
        return ""
    return value.lower()


def _query_name_tokens(parts: Sequence[str]) -> List[str]:
    """Split query words the same way names are split (whitespace and hyphens)."""
    return [token for part in parts for token in split_name(part)]


def _records_with_every_token(
    records: Sequence[RawRecord], tokens: Sequence[str]
) -> List[RawRecord]:
    if not tokens:
        return []
    matches = []
    for raw in records:
        name_tokens = set(split_name(_normalized_name(raw)))
        if name_tokens and all(token in name_tokens for token in tokens):
            matches.append(raw)
    return matches


class NameSearchStrategy:
    """Selects records for a name search using the tier chain above."""

    def select(
        self, records: Sequence[RawRecord], query: SearchQuery, exact: bool = False
    ) -> Tuple[List[RawRecord], MatchTier]:
        """Return the matching raw records and the tier that produced them.

        Args:
            records: Raw records to search
            query: Normalized search query
            exact: Only run the exact full-name tier (empty queries still
                fall back to the generic predicate)

        Returns:
            Tuple of (matching records in source order, tier used)
        """
        if query.is_empty:
            return self._fallback(records, query), MatchTier.FALLBACK

        if exact:
            return self._exact(records, query), MatchTier.EXACT

        if query.is_multi_word:
            matches = self._exact(records, query)
            if matches:
                return matches, MatchTier.EXACT
            return self._all_tokens(records, query), MatchTier.ALL_TOKENS

        if query.is_single_word:
            return self._whole_word(records, query), MatchTier.WHOLE_WORD

        return self._fallback(records, query), MatchTier.FALLBACK

    @staticmethod
    def _exact(records: Sequence[RawRecord], query: SearchQuery) -> List[RawRecord]:
        target = query.collapsed
        return [raw for raw in records if " ".join(_normalized_name(raw).split()) == target]

    @staticmethod
    def _all_tokens(records: Sequence[RawRecord], query: SearchQuery) -> List[RawRecord]:
        return _records_with_every_token(records, _query_name_tokens(query.parts))

    @staticmethod
    def _whole_word(records: Sequence[RawRecord], query: SearchQuery) -> List[RawRecord]:
        # "mary-jane" is one query word but two name tokens; both must match
        return _records_with_every_token(records, _query_name_tokens(query.parts[:1]))

    @staticmethod
    def _fallback(records: Sequence[RawRecord], query: SearchQuery) -> List[RawRecord]:
        matches = []
        for raw in records:
            name = resolve_field(raw, FULL_NAME_FIELD)
            email = resolve_field(raw, EMAIL_FIELD)
            if value_matches(name, query) or contains_query(email, query):
                matches.append(raw)
        return matches
