"""Shared fixtures for Client Search tests."""

import json

import pytest

from client_search.logging.context import clear_log_context


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep tests independent of the developer's environment variables."""
    for name in ("CLIENT_SEARCH_API_URL", "CLIENT_SEARCH_FILE", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def sample_records():
    """Raw client records resembling the clients API payload."""
    return [
        {"id": 1, "full_name": "John Doe", "email": "john.doe@gmail.com"},
        {"id": 2, "full_name": "Jane Smith", "email": "jane.smith@yahoo.com"},
        {"id": 3, "full_name": "Alex Johnson", "email": "alex.johnson@hotmail.com"},
        {"id": 4, "full_name": "Michael Williams", "email": "michael.williams@outlook.com"},
        {"id": 5, "full_name": "Another Jane Smith", "email": "jane.smith@yahoo.com"},
        {"id": 6, "full_name": "John-Paul Jones", "email": "jp@example.com"},
    ]


@pytest.fixture
def write_json(tmp_path):
    """Write a payload to a JSON file under tmp_path and return its path."""

    def _write(payload, name="clients.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
