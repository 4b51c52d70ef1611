"""Test helper utilities for Client Search tests."""

from .static_source import FailingRecordSource, StaticRecordSource

__all__ = ["StaticRecordSource", "FailingRecordSource"]
