"""Core domain model for client records.

Record wraps one raw record as delivered by a record source. The raw mapping
is kept as a read-only view (``data``) and the commonly used fields are
exposed through typed accessors instead of dynamic attribute lookup.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from .fields import MISSING, resolve_field, synthesize_full_name


class Record(BaseModel):
    """Immutable client record.

    Attributes:
        data: Read-only copy of the raw record, keys in source order
    """

    data: Mapping[str, Any] = Field(default_factory=dict, description="Raw record fields")

    @field_validator("data")
    @classmethod
    def freeze_data(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        """Copy the raw mapping behind a read-only proxy."""
        return MappingProxyType(dict(v))

    @field_serializer("data")
    def serialize_data(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(data)

    @classmethod
    def from_raw(cls, raw: Optional[Mapping[str, Any]]) -> "Record":
        """Wrap a raw record. ``None`` becomes an empty record."""
        return cls(data=dict(raw or {}))

    @property
    def id(self) -> Any:
        return self.data.get("id")

    @property
    def full_name(self) -> str:
        """Full name, synthesized from name parts if needed. Never None."""
        return synthesize_full_name(self.data) or ""

    @property
    def email(self) -> Optional[str]:
        value = self.data.get("email")
        return None if value is None else str(value)

    @property
    def name(self) -> str:
        """Display name: the full name, or the email when the name is blank."""
        name = self.full_name.strip()
        if not name and self.email:
            return self.email
        return name

    def field(self, name: str) -> Optional[str]:
        """Generic field accessor using the same aliasing rules as search.

        Returns None when the field is missing.
        """
        value = resolve_field(self.data, name)
        return None if value is MISSING else value

    def to_dict(self) -> Dict[str, Any]:
        """Serializable summary used by JSON output and the HTTP API."""
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
        }

    model_config = {
        "frozen": True,
        "validate_default": True,
        "json_schema_extra": {"example": {
            "data": {"id": 1, "full_name": "John Doe", "email": "john.doe@gmail.com"},
        }},
    }
