"""Custom exceptions for record sources."""


class SourceError(Exception):
    """Base exception for all record source errors.

    Catching this exception catches any retrieval failure. The search service
    turns it into an empty result and reports it through its error callback.
    """

    pass


class SourceHTTPError(SourceError):
    """HTTP request failed with a 4xx/5xx status or could not be sent.

    ``status_code`` is 0 when no response was received (e.g. connection refused).
    """

    def __init__(self, message: str, status_code: int, url: str) -> None:
        """Initialize HTTP error with status code and URL.

        Args:
            message: Human-readable error message
            status_code: HTTP status code (e.g., 404, 500), or 0
            url: URL that failed
        """
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class SourceTimeoutError(SourceError):
    """HTTP request did not complete within the configured timeout."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class SourceResponseError(SourceError):
    """Payload could not be parsed (invalid JSON, unexpected shape)."""

    pass


class SourceFileError(SourceError):
    """Local record file is missing or unreadable."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class SourceConfigurationError(SourceError):
    """Invalid source configuration (bad timeout, empty user agent, ...)."""

    pass
