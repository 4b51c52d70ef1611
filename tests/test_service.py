"""Tests for the ClientSearch service."""

import pytest

from client_search.matching import MatchTier
from client_search.search import ClientSearch
from client_search.sources.exceptions import SourceHTTPError, SourceTimeoutError
from tests.helpers import FailingRecordSource, StaticRecordSource


@pytest.fixture
def source(sample_records):
    return StaticRecordSource(sample_records)


@pytest.fixture
def service(source):
    return ClientSearch(source)


def ids(records):
    return [record.id for record in records]


class TestSearch:
    """Tests for ClientSearch.search()."""

    def test_default_field_is_full_name(self, service):
        assert ids(service.search("jane smith")) == [2]

    @pytest.mark.parametrize("field", [None, "", "  "])
    def test_blank_field_means_full_name(self, service, field):
        assert ids(service.search("john", field)) == [1, 6]

    def test_email_field(self, service):
        assert ids(service.search("yahoo", "email")) == [2, 5]

    def test_limit(self, service):
        assert ids(service.search("com", "email", limit=2)) == [1, 2]

    def test_invalid_limit(self, service):
        with pytest.raises(ValueError, match="at least 1"):
            service.search("john", limit=0)

    def test_invalid_limit_does_not_fetch(self, service, source):
        with pytest.raises(ValueError):
            service.search("john", limit=0)

        assert source.fetch_count == 0

    def test_exact(self, service):
        assert ids(service.search("john", exact=True)) == []
        assert ids(service.search("John Doe", exact=True)) == [1]

    def test_fetches_a_fresh_snapshot_every_call(self, service, source):
        assert ids(service.search("new")) == []

        source.records.append({"id": 7, "full_name": "New Client", "email": "new@example.com"})

        assert ids(service.search("new")) == [7]
        assert source.fetch_count == 2

    def test_search_detailed(self, service):
        result = service.search_detailed("smith jane")

        assert ids(result.records) == [2, 5]
        assert result.tier == MatchTier.ALL_TOKENS
        assert result.total_scanned == 6

    def test_logs_completion(self, service, caplog):
        with caplog.at_level("INFO", logger="client_search.search.service"):
            service.search("john")

        record = next(r for r in caplog.records if getattr(r, "event", None) == "search.completed")
        assert record.results == 2
        assert record.component == "search"
        assert record.scanned == 6


class TestFindDuplicateEmails:
    """Tests for ClientSearch.find_duplicate_emails()."""

    def test_groups(self, service):
        groups = service.find_duplicate_emails()

        assert list(groups) == ["jane.smith@yahoo.com"]
        assert ids(groups["jane.smith@yahoo.com"]) == [2, 5]

    def test_no_duplicates(self):
        service = ClientSearch(StaticRecordSource([{"id": 1, "email": "a@example.com"}]))
        assert service.find_duplicate_emails() == {}


class TestSourceFailures:
    """Retrieval failures degrade to empty results."""

    def test_search_returns_empty_list(self):
        service = ClientSearch(FailingRecordSource(SourceTimeoutError("Network timeout", url="x")))
        assert service.search("john") == []

    def test_duplicates_return_empty_mapping(self):
        service = ClientSearch(FailingRecordSource(SourceTimeoutError("Network timeout", url="x")))
        assert service.find_duplicate_emails() == {}

    def test_error_callback(self):
        error = SourceHTTPError("Resource not found (404)", status_code=404, url="x")
        received = []
        service = ClientSearch(FailingRecordSource(error), on_source_error=received.append)

        service.search("john")
        service.find_duplicate_emails()

        assert received == [error, error]

    def test_failure_is_logged(self, caplog):
        error = SourceHTTPError("Connection refused", status_code=0, url="x")
        service = ClientSearch(FailingRecordSource(error))

        with caplog.at_level("ERROR"):
            service.search("john")

        assert any(getattr(r, "event", None) == "source.fetch.failed" for r in caplog.records)
