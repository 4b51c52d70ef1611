"""Rendering of search results and duplicate groups.

Three formats are supported: an ASCII table for terminals, pretty-printed
JSON, and CSV. Every function returns a string; printing is up to the caller.
"""

import csv
import io
import json
from typing import Any, Dict, List, Sequence

from client_search.domain.models import Record

STANDARD_FIELDS = ["id", "full_name", "name", "email"]
FALLBACK_FIELDS = ["id", "full_name", "email"]
MAX_FALLBACK_COLUMNS = 5
NOT_AVAILABLE = "N/A"

NO_RESULTS_MESSAGE = "No results found."
NO_DUPLICATES_MESSAGE = "No duplicate emails found."

DuplicateGroups = Dict[str, List[Record]]


def determine_display_fields(record: Record) -> List[str]:
    """Pick the columns to display for a result set.

    Uses the standard fields present in ``record`` when at least three of
    them exist, otherwise its first five keys.
    """
    if not record.data:
        return list(FALLBACK_FIELDS)

    standard = [name for name in STANDARD_FIELDS if name in record.data]
    if len(standard) >= 3:
        return standard
    return list(record.data.keys())[:MAX_FALLBACK_COLUMNS]


def format_headings(fields: Sequence[str]) -> List[str]:
    """``"full_name"`` -> ``"Full name"``; ``"id"`` -> ``"Id"``."""
    return [field.replace("_", " ").capitalize() for field in fields]


def extract_values(record: Record, fields: Sequence[str]) -> List[str]:
    values = []
    for field in fields:
        value = record.data.get(field)
        values.append(NOT_AVAILABLE if value is None else str(value))
    return values


def render_table(headings: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render an ASCII table with a heading row.

    +----+----------+
    | Id | Full name|
    +----+----------+
    """
    widths = [len(heading) for heading in headings]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def line(cells: Sequence[str]) -> str:
        padded = [f" {cell.ljust(width)} " for cell, width in zip(cells, widths)]
        return "|" + "|".join(padded) + "|"

    lines = [border, line(headings), border]
    lines.extend(line(row) for row in rows)
    lines.append(border)
    return "\n".join(lines)


def format_records_table(records: Sequence[Record]) -> str:
    if not records:
        return NO_RESULTS_MESSAGE

    fields = determine_display_fields(records[0])
    rows = [extract_values(record, fields) for record in records]
    return render_table(format_headings(fields), rows)


def format_duplicates_table(duplicate_groups: DuplicateGroups) -> str:
    if not duplicate_groups:
        return NO_DUPLICATES_MESSAGE

    sections = []
    for email, records in duplicate_groups.items():
        rows = [
            [NOT_AVAILABLE if record.id is None else str(record.id), record.full_name]
            for record in records
        ]
        sections.append(f"Duplicate email: {email}\n" + render_table(["ID", "Full Name"], rows))
    return "\n\n".join(sections)


def format_records_json(records: Sequence[Record]) -> str:
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)


def format_duplicates_json(duplicate_groups: DuplicateGroups) -> str:
    payload = {
        email: [record.to_dict() for record in records]
        for email, records in duplicate_groups.items()
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def format_records_csv(records: Sequence[Record]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    fields = determine_display_fields(records[0]) if records else list(FALLBACK_FIELDS)
    writer.writerow(fields)
    for record in records:
        writer.writerow(_csv_values(record, fields))
    return buffer.getvalue().rstrip("\n")


def format_duplicates_csv(duplicate_groups: DuplicateGroups) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow(["email", *FALLBACK_FIELDS])
    for email, records in duplicate_groups.items():
        for record in records:
            writer.writerow([email, *_csv_values(record, FALLBACK_FIELDS)])
    return buffer.getvalue().rstrip("\n")


def _csv_values(record: Record, fields: Sequence[str]) -> List[Any]:
    return ["" if record.data.get(field) is None else record.data.get(field) for field in fields]


_RECORD_RENDERERS = {
    "table": format_records_table,
    "json": format_records_json,
    "csv": format_records_csv,
}

_DUPLICATE_RENDERERS = {
    "table": format_duplicates_table,
    "json": format_duplicates_json,
    "csv": format_duplicates_csv,
}


def render_records(records: Sequence[Record], output_format: str = "table") -> str:
    """Render search results in ``output_format`` (unknown formats fall back to table)."""
    renderer = _RECORD_RENDERERS.get(str(output_format).lower(), format_records_table)
    return renderer(records)


def render_duplicates(duplicate_groups: DuplicateGroups, output_format: str = "table") -> str:
    """Render duplicate groups in ``output_format`` (unknown formats fall back to table)."""
    renderer = _DUPLICATE_RENDERERS.get(str(output_format).lower(), format_duplicates_table)
    return renderer(duplicate_groups)
