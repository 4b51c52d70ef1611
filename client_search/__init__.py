"""Client Search: find client records by field and detect duplicate emails."""

__version__ = "0.1.0"
