"""Unit tests for record sources.

HTTP is exercised against a mocked requests session; files use tmp_path.
"""

from unittest.mock import MagicMock

import pytest
import requests

from client_search.config.models import SourceConfig
from client_search.sources import (
    FileRecordSource,
    HttpRecordSource,
    SourceConfigurationError,
    SourceError,
    SourceFileError,
    SourceHTTPError,
    SourceResponseError,
    SourceTimeoutError,
    get_source,
)
from client_search.sources.http import describe_status

API_URL = "https://api.example.com/clients.json"


def make_response(status_code=200, payload=None, reason="OK", invalid_json=False):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if invalid_json:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    mock_session = MagicMock(spec=requests.Session)
    mock_session.headers = {}
    return mock_session


def make_source(session, **kwargs):
    return HttpRecordSource(url=API_URL, session=session, **kwargs)


class TestHttpRecordSource:
    """Tests for HttpRecordSource."""

    def test_fetch_records(self, session, sample_records):
        session.get.return_value = make_response(payload=sample_records)

        records = make_source(session).fetch_records()

        assert records == sample_records
        session.get.assert_called_once_with(API_URL, timeout=30)

    def test_sets_headers(self, session):
        make_source(session, user_agent="Tester/2.0")

        assert session.headers["User-Agent"] == "Tester/2.0"
        assert session.headers["Accept"] == "application/json"

    def test_single_object_payload_is_wrapped(self, session):
        session.get.return_value = make_response(payload={"id": 1, "full_name": "John Doe"})

        assert make_source(session).fetch_records() == [{"id": 1, "full_name": "John Doe"}]

    def test_non_object_items_are_skipped(self, session):
        session.get.return_value = make_response(payload=[{"id": 1}, "junk", 3, None, {"id": 2}])

        assert make_source(session).fetch_records() == [{"id": 1}, {"id": 2}]

    def test_scalar_payload_is_rejected(self, session):
        session.get.return_value = make_response(payload="not a list")

        with pytest.raises(SourceResponseError):
            make_source(session).fetch_records()

    def test_max_records_truncates(self, session, sample_records):
        session.get.return_value = make_response(payload=sample_records)

        records = make_source(session, max_records=2).fetch_records()

        assert [record["id"] for record in records] == [1, 2]

    @pytest.mark.parametrize(
        "status_code, message",
        [
            (404, "Resource not found (404)"),
            (401, "Unauthorized access (401)"),
            (403, "Forbidden access (403)"),
            (500, "Server error (500)"),
        ],
    )
    def test_known_http_errors(self, session, status_code, message):
        session.get.return_value = make_response(status_code=status_code, reason="Nope")

        with pytest.raises(SourceHTTPError) as exc_info:
            make_source(session).fetch_records()

        assert str(exc_info.value) == message
        assert exc_info.value.status_code == status_code
        assert exc_info.value.url == API_URL

    @pytest.mark.parametrize("status_code", [404, 500, 503])
    def test_http_errors_are_logged_at_error(self, session, caplog, status_code):
        session.get.return_value = make_response(status_code=status_code, reason="Nope")

        with caplog.at_level("DEBUG", logger="client_search.sources.http"):
            with pytest.raises(SourceHTTPError):
                make_source(session).fetch_records()

        error_logs = [
            r for r in caplog.records
            if getattr(r, "event", None) == "source.fetch.error"
        ]
        assert [r.levelname for r in error_logs] == ["ERROR"]
        assert error_logs[0].status_code == status_code

    def test_other_http_error(self, session):
        session.get.return_value = make_response(status_code=418, reason="I'm a teapot")

        with pytest.raises(SourceHTTPError, match="API Error: 418 - I'm a teapot"):
            make_source(session).fetch_records()

    def test_timeout(self, session):
        session.get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(SourceTimeoutError, match="Network timeout"):
            make_source(session).fetch_records()

    def test_connection_refused(self, session):
        session.get.side_effect = requests.exceptions.ConnectionError()

        with pytest.raises(SourceHTTPError, match="Connection refused") as exc_info:
            make_source(session).fetch_records()

        assert exc_info.value.status_code == 0

    def test_other_request_failure(self, session):
        session.get.side_effect = requests.exceptions.TooManyRedirects("loop")

        with pytest.raises(SourceHTTPError, match="failed"):
            make_source(session).fetch_records()

    def test_invalid_json(self, session):
        session.get.return_value = make_response(invalid_json=True)

        with pytest.raises(SourceResponseError, match="API returned invalid data"):
            make_source(session).fetch_records()

    def test_all_failures_are_source_errors(self, session):
        session.get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(SourceError):
            make_source(session).fetch_records()

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"url": ""},
            {"url": API_URL, "timeout": 1},
            {"url": API_URL, "timeout": 301},
            {"url": API_URL, "user_agent": "  "},
            {"url": API_URL, "max_records": -1},
        ],
    )
    def test_invalid_configuration(self, session, kwargs):
        with pytest.raises(SourceConfigurationError):
            HttpRecordSource(session=session, **kwargs)

    def test_description_is_url(self, session):
        assert make_source(session).description == API_URL


def test_describe_status_without_reason():
    assert describe_status(502) == "API Error: 502 - Unknown error"


class TestFileRecordSource:
    """Tests for FileRecordSource."""

    def test_reads_records(self, write_json, sample_records):
        path = write_json(sample_records)

        assert FileRecordSource(path).fetch_records() == sample_records

    def test_accepts_string_path(self, write_json, sample_records):
        path = write_json(sample_records)

        assert len(FileRecordSource(str(path)).fetch_records()) == 6

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.json"

        with pytest.raises(SourceFileError, match="File not found") as exc_info:
            FileRecordSource(path).fetch_records()

        assert exc_info.value.path == str(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SourceResponseError, match="Invalid JSON format"):
            FileRecordSource(path).fetch_records()

    def test_rereads_on_every_fetch(self, write_json):
        path = write_json([{"id": 1}])
        source = FileRecordSource(path)
        assert source.fetch_records() == [{"id": 1}]

        write_json([{"id": 1}, {"id": 2}])
        assert source.fetch_records() == [{"id": 1}, {"id": 2}]

    def test_max_records(self, write_json, sample_records):
        path = write_json(sample_records)

        assert len(FileRecordSource(path, max_records=3).fetch_records()) == 3


class TestGetSource:
    """Tests for the source factory."""

    def test_http_by_default(self):
        source = get_source(SourceConfig())

        assert isinstance(source, HttpRecordSource)
        assert source.url == "https://appassets02.shiftcare.com/manual/clients.json"

    def test_custom_url(self):
        source = get_source(SourceConfig(base_url="https://api.example.com/", timeout=10))

        assert source.url == "https://api.example.com/clients.json"
        assert source.timeout == 10

    def test_file_takes_precedence(self, tmp_path):
        source = get_source(SourceConfig(file=str(tmp_path / "clients.json")))

        assert isinstance(source, FileRecordSource)
