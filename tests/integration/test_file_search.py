"""End-to-end tests over a JSON file source.

Exercises the path a real invocation takes: configuration -> source factory
-> ClientSearch -> rendering, without mocking any layer in between.
"""

import json

import pytest

from client_search.config.models import SourceConfig
from client_search.output import render_duplicates, render_records
from client_search.search import ClientSearch
from client_search.sources import FileRecordSource, get_source

CLIENTS = [
    {"id": 1, "full_name": "John Doe", "email": "john.doe@gmail.com"},
    {"id": 2, "full_name": "Jane Smith", "email": "jane.smith@yahoo.com"},
    {"id": 3, "first_name": "Mary", "last_name": "Jones", "email": "MARY@example.com"},
    {"id": 4, "name": "Mary Jones", "email": "mary@example.com "},
    {"id": 5, "full_name": "", "email": "anonymous@example.com", "phone": "555-0100"},
    "not a client",
    {"id": 6, "full_name": "Jane Smithers", "email": None, "Phone Number": "555-0199"},
]


@pytest.fixture
def service(tmp_path):
    path = tmp_path / "clients.json"
    path.write_text(json.dumps(CLIENTS), encoding="utf-8")
    source = get_source(SourceConfig(file=str(path)))
    assert isinstance(source, FileRecordSource)
    return ClientSearch(source)


def ids(records):
    return [record.id for record in records]


def test_heterogeneous_names(service):
    assert ids(service.search("mary jones")) == [3, 4]
    assert ids(service.search("smith")) == [2]
    assert ids(service.search("jane smith")) == [2]


def test_empty_query_lists_everyone_identifiable(service):
    assert ids(service.search("")) == [1, 2, 3, 4, 5, 6]


def test_generic_fields(service):
    assert ids(service.search("555-01", "phone")) == [5]
    assert ids(service.search("0199", "Phone Number")) == [6]


def test_duplicates_across_name_shapes(service):
    groups = service.find_duplicate_emails()

    assert list(groups) == ["mary@example.com"]
    assert ids(groups["mary@example.com"]) == [3, 4]


def test_rendered_output(service):
    table = render_records(service.search("mary jones"), "table")
    assert "First name" in table
    assert "N/A" in table

    duplicates = json.loads(render_duplicates(service.find_duplicate_emails(), "json"))
    assert [entry["full_name"] for entry in duplicates["mary@example.com"]] == [
        "Mary Jones",
        "Mary Jones",
    ]
