"""Unit tests for API dependency injection.

This module tests the session store and the dependency providers in
api/dependencies.py.

Test Organization:
- RangeSessionStore tests - create, lookup, delete and limits
- get_session_store tests - retrieval behavior and error handling
- initialize/shutdown tests - lifecycle of the shared store
"""

import pytest

import api.dependencies as deps
from api.dependencies import (
    RangeSessionStore,
    get_session_store,
    initialize_session_store,
    shutdown_session_store,
)
from api.exceptions import RangeSessionNotFoundError, SessionLimitReachedError
from models.range_editor import DateTimeRangeEditor
from tests.fixtures.ranges import at


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_store():
    """Reset the global store before and after each test."""
    original_store = deps._session_store
    deps._session_store = None

    yield

    deps._session_store = original_store


def editor_kwargs():
    return {
        "initial_start_date": at(13),
        "initial_start_time": at(13),
        "initial_end_time": at(14),
    }


# =============================================================================
# RangeSessionStore Tests
# =============================================================================


class TestRangeSessionStore:
    """Tests for RangeSessionStore."""

    def test_create_returns_editor(self):
        store = RangeSessionStore()

        session_id, editor = store.create(**editor_kwargs())

        assert isinstance(editor, DateTimeRangeEditor)
        assert store.get(session_id) is editor

    def test_session_ids_are_unique(self):
        store = RangeSessionStore()

        first, _ = store.create(**editor_kwargs())
        second, _ = store.create(**editor_kwargs())

        assert first != second
        assert store.session_ids() == [first, second]
        assert store.count() == 2

    def test_limit_enforced(self):
        store = RangeSessionStore(max_sessions=1)
        store.create(**editor_kwargs())

        with pytest.raises(SessionLimitReachedError) as exc_info:
            store.create(**editor_kwargs())

        assert exc_info.value.max_sessions == 1

    def test_delete_frees_a_slot(self):
        store = RangeSessionStore(max_sessions=1)
        session_id, _ = store.create(**editor_kwargs())

        store.delete(session_id)
        store.create(**editor_kwargs())

        assert store.count() == 1

    def test_get_unknown_raises(self):
        with pytest.raises(RangeSessionNotFoundError) as exc_info:
            RangeSessionStore().get("nope")

        assert exc_info.value.session_id == "nope"

    def test_delete_unknown_raises(self):
        with pytest.raises(RangeSessionNotFoundError):
            RangeSessionStore().delete("nope")

    def test_clear(self):
        store = RangeSessionStore()
        store.create(**editor_kwargs())

        store.clear()

        assert store.count() == 0


# =============================================================================
# Provider Tests
# =============================================================================


class TestGetSessionStore:
    """Tests for get_session_store()."""

    def test_raises_before_initialization(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            get_session_store()

    def test_returns_initialized_store(self):
        store = initialize_session_store(max_sessions=3)

        assert get_session_store() is store
        assert store.max_sessions == 3


class TestShutdownSessionStore:
    """Tests for shutdown_session_store()."""

    def test_discards_sessions(self):
        store = initialize_session_store()
        store.create(**editor_kwargs())

        shutdown_session_store()

        assert store.count() == 0
        with pytest.raises(RuntimeError):
            get_session_store()

    def test_safe_without_store(self):
        shutdown_session_store()

        assert deps._session_store is None
