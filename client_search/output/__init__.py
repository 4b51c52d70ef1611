"""Renderers for search results and duplicate groups."""

from .formatting import (
    NO_DUPLICATES_MESSAGE,
    NO_RESULTS_MESSAGE,
    determine_display_fields,
    format_headings,
    render_duplicates,
    render_records,
    render_table,
)

__all__ = [
    "render_records",
    "render_duplicates",
    "render_table",
    "determine_display_fields",
    "format_headings",
    "NO_RESULTS_MESSAGE",
    "NO_DUPLICATES_MESSAGE",
]
