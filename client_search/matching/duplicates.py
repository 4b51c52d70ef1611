"""Duplicate detection by normalized email address."""

import logging
from typing import Dict, Iterable, List, Optional

from client_search.domain.models import Record

logger = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> Optional[str]:
    """Trim and lower-case an email. Blank or None emails normalize to None."""
    if email is None:
        return None
    normalized = str(email).strip().lower()
    return normalized or None


def group_duplicate_emails(records: Iterable[Record]) -> Dict[str, List[Record]]:
    """Group records that share an email address.

    Records without an email are skipped. Keys keep first-seen order and each
    group keeps the order its records were seen in. Only groups with two or
    more members are returned.

    Args:
        records: Records to inspect

    Returns:
        Mapping of normalized email to the records that share it
    """
    groups: Dict[str, List[Record]] = {}
    skipped = 0

    for record in records:
        key = normalize_email(record.email)
        if key is None:
            skipped += 1
            continue
        groups.setdefault(key, []).append(record)

    duplicates = {email: group for email, group in groups.items() if len(group) > 1}

    logger.debug(
        f"Found {len(duplicates)} duplicate email group(s)",
        extra={
            "event": "matching.duplicates.grouped",
            "distinct_emails": len(groups),
            "duplicate_groups": len(duplicates),
            "skipped_without_email": skipped,
        },
    )

    return duplicates
