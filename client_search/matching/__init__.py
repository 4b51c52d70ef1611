"""Matching engine for searching and de-duplicating client records.

This module provides:
- RecordMatcher / search_records: field search with the tiered name strategy
- NameSearchStrategy: the exact / all-tokens / whole-word / fallback chain
- group_duplicate_emails: records sharing a normalized email
- SearchQuery, SearchResult, MatchTier: supporting models
"""

from .duplicates import group_duplicate_emails, normalize_email
from .engine import RecordMatcher, search_records
from .predicates import contains_query, record_matches, tokens_match, value_matches
from .models import MatchTier, SearchQuery, SearchResult
from .names import NameSearchStrategy

__all__ = [
    "RecordMatcher",
    "NameSearchStrategy",
    "search_records",
    "record_matches",
    "value_matches",
    "tokens_match",
    "contains_query",
    "group_duplicate_emails",
    "normalize_email",
    "MatchTier",
    "SearchQuery",
    "SearchResult",
]
