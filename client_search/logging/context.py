"""Context propagation for structured logging.

Fields pushed here are injected into every log record emitted inside the
scope by ``ContextualFilter``. Backed by ``contextvars`` so concurrent API
requests do not see each other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active logging context."""
    return LogContextVar.get().copy()


def push_log_context(**kwargs) -> Token:
    """Merge fields into the logging context.

    Returns:
        Token to hand to pop_log_context() to restore the previous state

    Example:
        >>> token = push_log_context(operation="search", field="email")
        >>> pop_log_context(token)
    """
    current = LogContextVar.get()
    return LogContextVar.set({**current, **kwargs})


def pop_log_context(token: Token) -> None:
    """Restore the logging context captured by push_log_context()."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop all context fields. Mostly useful in tests."""
    LogContextVar.set({})


class log_context:
    """Context manager for scoped logging context.

    Example:
        >>> with log_context(operation="duplicates"):
        ...     logger.info("Grouping records")  # includes operation=duplicates
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
