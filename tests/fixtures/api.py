"""Shared fixtures for API testing.

These fixtures provide a TestClient wired to a fresh RangeSessionStore for
each test, ensuring test isolation.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import RangeSessionStore, get_session_store
from main import app


@pytest.fixture
def session_store():
    """Provide a fresh, empty RangeSessionStore."""
    return RangeSessionStore(max_sessions=5)


@pytest.fixture
def api_client(session_store):
    """Provide a TestClient whose routes use session_store.

    Uses FastAPI's dependency override system to inject the test store
    instead of the global one.

    Yields:
        A tuple of (TestClient, RangeSessionStore).
    """
    app.dependency_overrides[get_session_store] = lambda: session_store
    client = TestClient(app, raise_server_exceptions=False)

    yield client, session_store

    app.dependency_overrides.clear()


def session_payload(**overrides):
    """Build a create-session body for 13:00-14:00 on 2024-10-16."""
    payload = {
        "initial_start_date": "2024-10-16T00:00:00",
        "initial_start_time": "2024-10-16T13:00:00",
        "initial_end_time": "2024-10-16T14:00:00",
        "initial_is_all_day": False,
        "default_duration_minutes": None,
        "allow_past_start": True,
    }
    payload.update(overrides)
    return payload
