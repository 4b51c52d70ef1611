"""Domain models and field resolution for Client Search."""

from .fields import MISSING, canonical_field, resolve_field
from .models import Record

__all__ = ["Record", "MISSING", "canonical_field", "resolve_field"]
