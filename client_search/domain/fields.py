"""Field resolution over raw client records.

Raw records come straight from JSON, so key naming is not consistent
("full_name", "Full Name", "e-mail", ...). This module maps a user-supplied
field name onto the key(s) to read and turns the value into a string.
"""

import re
from typing import Any, Mapping, Optional, Union

FULL_NAME_FIELD = "full_name"
EMAIL_FIELD = "email"

NAME_ALIASES = frozenset({"name", "full_name"})
EMAIL_ALIASES = frozenset({"email", "mail", "e-mail", "e_mail"})

_SYMBOL_SEPARATORS = re.compile(r"[\s\-]+")


class _Missing:
    """Sentinel for a field that no lookup produced (distinct from "")."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

FieldValue = Union[str, _Missing]


def canonical_field(field: Optional[str]) -> str:
    """Return the canonical name for a requested field.

    Name aliases map to ``full_name`` and email aliases to ``email``. Any
    other field is returned stripped but otherwise untouched so that
    case-sensitive keys can still be looked up as given. A blank field means
    ``full_name``.
    """
    if field is None:
        return FULL_NAME_FIELD

    stripped = str(field).strip()
    lowered = stripped.lower()

    if not lowered or lowered in NAME_ALIASES:
        return FULL_NAME_FIELD
    if lowered in EMAIL_ALIASES:
        return EMAIL_FIELD
    return stripped


def is_name_field(field: Optional[str]) -> bool:
    return canonical_field(field) == FULL_NAME_FIELD


def symbol_key(key: str) -> str:
    """Snake-case form of a key: ``"Phone Number"`` -> ``"phone_number"``."""
    return _SYMBOL_SEPARATORS.sub("_", key.strip().lower())


def synthesize_full_name(raw: Mapping[str, Any]) -> Optional[str]:
    """Best available full name for a raw record, or None.

    Prefers ``full_name``, then ``name``, then ``first_name`` + ``last_name``.
    """
    for key in ("full_name", "name"):
        value = raw.get(key)
        if value is not None:
            return stringify(value)

    parts = [
        stringify(raw[key]).strip()
        for key in ("first_name", "last_name")
        if raw.get(key) is not None
    ]
    parts = [part for part in parts if part]
    if parts:
        return " ".join(parts)
    return None


def stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_field(raw: Mapping[str, Any], field: Optional[str]) -> FieldValue:
    """Resolve ``field`` against a raw record.

    Args:
        raw: Raw record mapping
        field: Requested field name, in any case, possibly an alias

    Returns:
        The value as a string, or MISSING when no lookup found a non-null value
    """
    canonical = canonical_field(field)

    if canonical == FULL_NAME_FIELD:
        full_name = synthesize_full_name(raw)
        return MISSING if full_name is None else full_name

    if canonical == EMAIL_FIELD:
        value = raw.get(EMAIL_FIELD)
        return MISSING if value is None else stringify(value)

    for key in (canonical, canonical.lower(), symbol_key(canonical)):
        value = raw.get(key)
        if value is not None:
            return stringify(value)

    return MISSING
