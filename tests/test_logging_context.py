"""Tests for logging context propagation."""

from client_search.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


def test_empty_by_default():
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(operation="search", field="email")
    assert get_log_context() == {"operation": "search", "field": "email"}

    pop_log_context(token)
    assert get_log_context() == {}


def test_push_merges_with_existing_fields():
    outer = push_log_context(operation="search")
    inner = push_log_context(field="full_name")

    assert get_log_context() == {"operation": "search", "field": "full_name"}

    pop_log_context(inner)
    assert get_log_context() == {"operation": "search"}
    pop_log_context(outer)


def test_context_manager_restores_previous_state():
    with log_context(operation="duplicates"):
        assert get_log_context()["operation"] == "duplicates"

        with log_context(operation="search", field="email"):
            assert get_log_context() == {"operation": "search", "field": "email"}

        assert get_log_context() == {"operation": "duplicates"}

    assert get_log_context() == {}


def test_context_manager_restores_on_error():
    try:
        with log_context(operation="search"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert get_log_context() == {}


def test_get_returns_copy():
    with log_context(operation="search"):
        context = get_log_context()
        context["operation"] = "changed"

        assert get_log_context()["operation"] == "search"


def test_clear():
    push_log_context(operation="search")
    clear_log_context()

    assert get_log_context() == {}
