"""HTTP record source for the clients JSON API."""

from __future__ import annotations

from typing import Dict, List, Optional

import requests

from client_search.logging import get_logger

from .base import RawRecord, RecordSource
from .exceptions import (
    SourceConfigurationError,
    SourceHTTPError,
    SourceResponseError,
    SourceTimeoutError,
)

logger = get_logger(__name__, component="source")

STATUS_MESSAGES: Dict[int, str] = {
    404: "Resource not found (404)",
    401: "Unauthorized access (401)",
    403: "Forbidden access (403)",
    500: "Server error (500)",
}


class HttpRecordSource(RecordSource):
    """Fetches client records with a GET request to a JSON endpoint.

    API Details:
        Endpoint: {base_url}/clients.json (configurable)
        Method: GET
        Authentication: None
        Response: JSON array of client objects

    Attributes:
        url: Full URL of the clients resource
        timeout: HTTP request timeout in seconds
        user_agent: User-Agent header for HTTP requests
    """

    SOURCE_NAME = "http"

    def __init__(
        self,
        url: str,
        timeout: int = 30,
        user_agent: str = "ClientSearch/1.0",
        max_records: int = 0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the HTTP source.

        Args:
            url: Full URL of the clients resource
            timeout: HTTP request timeout in seconds (range 5-300)
            user_agent: User-Agent header for requests
            max_records: Maximum records to return (0 = unlimited)
            session: Optional pre-built requests session

        Raises:
            SourceConfigurationError: If timeout is out of range or user_agent/url is empty
        """
        super().__init__(max_records=max_records)

        if not url or not url.strip():
            raise SourceConfigurationError("url cannot be empty")
        if not 5 <= timeout <= 300:
            raise SourceConfigurationError(
                f"Timeout must be between 5 and 300 seconds, got: {timeout}"
            )
        if not user_agent or not user_agent.strip():
            raise SourceConfigurationError("user_agent cannot be empty")

        self.url = url.strip()
        self.timeout = timeout
        self.user_agent = user_agent.strip()

        self._session = session or requests.Session()
        self._session.headers.update(
            {"User-Agent": self.user_agent, "Accept": "application/json"}
        )

    @property
    def description(self) -> str:
        return self.url

    def fetch_records(self) -> List[RawRecord]:
        """Fetch and decode all client records from the API.

        Returns:
            List of raw records

        Raises:
            SourceHTTPError: On 4xx/5xx status or connection failure
            SourceTimeoutError: On request timeout
            SourceResponseError: On invalid JSON or unexpected payload shape
        """
        logger.info(
            "Fetching client records",
            extra={"event": "source.fetch.started", "source": self.SOURCE_NAME, "url": self.url},
        )

        payload = self._make_request()
        records = self._coerce_records(payload)

        logger.info(
            "Fetched client records",
            extra={
                "event": "source.fetch.completed",
                "source": self.SOURCE_NAME,
                "url": self.url,
                "count": len(records),
            },
        )
        return records

    def _make_request(self):
        """GET the clients URL and return the decoded JSON body.

        Raises:
            SourceHTTPError: On 4xx or 5xx HTTP status, or connection failures
            SourceTimeoutError: On request timeout
            SourceResponseError: On invalid JSON
        """
        try:
            logger.debug(
                f"HTTP GET request to {self.url}",
                extra={
                    "event": "source.fetch.request",
                    "method": "GET",
                    "url": self.url,
                    "timeout": self.timeout,
                },
            )

            response = self._session.get(self.url, timeout=self.timeout)

        except requests.exceptions.Timeout as e:
            logger.warning(
                f"Request to {self.url} timed out after {self.timeout} seconds",
                extra={
                    "event": "source.fetch.error",
                    "error_type": "Timeout",
                    "url": self.url,
                    "timeout": self.timeout,
                },
            )
            raise SourceTimeoutError("Network timeout", url=self.url) from e
        except requests.exceptions.ConnectionError as e:
            logger.error(
                f"Connection to {self.url} failed",
                extra={
                    "event": "source.fetch.error",
                    "error_type": type(e).__name__,
                    "url": self.url,
                },
            )
            raise SourceHTTPError("Connection refused", status_code=0, url=self.url) from e
        except requests.exceptions.RequestException as e:
            logger.error(
                f"Request to {self.url} failed: {e}",
                extra={
                    "event": "source.fetch.error",
                    "error_type": type(e).__name__,
                    "url": self.url,
                },
            )
            raise SourceHTTPError(
                f"Request to {self.url} failed: {e}", status_code=0, url=self.url
            ) from e

        if response.status_code >= 400:
            logger.error(
                f"HTTP {response.status_code} error from {self.url}",
                extra={
                    "event": "source.fetch.error",
                    "status_code": response.status_code,
                    "url": self.url,
                },
            )
            raise SourceHTTPError(
                describe_status(response.status_code, response.reason),
                status_code=response.status_code,
                url=self.url,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                f"Failed to parse JSON response from {self.url}",
                extra={
                    "event": "source.fetch.error",
                    "error_type": "JSONDecodeError",
                    "url": self.url,
                },
            )
            raise SourceResponseError("API returned invalid data") from e

        logger.debug(
            "HTTP request succeeded",
            extra={
                "event": "source.fetch.succeeded",
                "status_code": response.status_code,
                "url": self.url,
            },
        )
        return data


def describe_status(status_code: int, reason: Optional[str] = None) -> str:
    """Friendly message for an HTTP error status."""
    if status_code in STATUS_MESSAGES:
        return STATUS_MESSAGES[status_code]
    return f"API Error: {status_code} - {reason or 'Unknown error'}"
