"""Data models for the matching engine."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from client_search.domain.models import Record

_NAME_SEPARATORS = re.compile(r"[\s\-]+")


class MatchTier(str, Enum):
    """Which rule produced a search result.

    Name searches walk the tiers in order and stop at the first one that
    applies; every other field always uses GENERIC.
    """

    EXACT = "exact"
    ALL_TOKENS = "all_tokens"
    WHOLE_WORD = "whole_word"
    FALLBACK = "fallback"
    GENERIC = "generic"


@dataclass(frozen=True)
class SearchQuery:
    """A normalized search query.

    Attributes:
        text: Trimmed, lower-cased query string
        parts: Whitespace-split, non-empty tokens of ``text``
    """

    text: str
    parts: Tuple[str, ...]

    @classmethod
    def parse(cls, raw: Optional[str]) -> "SearchQuery":
        """Normalize a user query. ``None`` is treated as an empty query."""
        text = "" if raw is None else str(raw).strip().lower()
        return cls(text=text, parts=tuple(text.split()))

    @property
    def is_empty(self) -> bool:
        return not self.parts

    @property
    def is_multi_word(self) -> bool:
        return len(self.parts) > 1

    @property
    def is_single_word(self) -> bool:
        return len(self.parts) == 1

    @property
    def collapsed(self) -> str:
        """Query with internal whitespace runs collapsed to single spaces."""
        return " ".join(self.parts)


def split_name(value: str) -> List[str]:
    """Split a lower-cased name into tokens on whitespace and hyphens."""
    return [token for token in _NAME_SEPARATORS.split(value) if token]


@dataclass
class SearchResult:
    """Outcome of one search over a record snapshot.

    Attributes:
        records: Matching records, in source order
        tier: Rule that produced the records
        field: Canonical field that was searched
        total_scanned: Number of records examined
    """

    records: List[Record] = field(default_factory=list)
    tier: MatchTier = MatchTier.GENERIC
    field: str = "full_name"
    total_scanned: int = 0

    def __len__(self) -> int:
        return len(self.records)

    def limited(self, limit: Optional[int]) -> List[Record]:
        """Records truncated to ``limit`` (None means all)."""
        if limit is None:
            return list(self.records)
        return self.records[:limit]
