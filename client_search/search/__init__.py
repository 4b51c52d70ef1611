"""Search service exposing record search and duplicate detection."""

from .service import ClientSearch

__all__ = ["ClientSearch"]
