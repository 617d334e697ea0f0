"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the shared store of open range editing sessions.
"""

import logging
from typing import Annotated, Any, Optional
from uuid import uuid4

from fastapi import Depends

from api.exceptions import RangeSessionNotFoundError, SessionLimitReachedError
from models.range_editor import DateTimeRangeEditor

logger = logging.getLogger(__name__)


class RangeSessionStore:
    """In-memory registry of open range editing sessions.

    Each create/edit form that talks to the service gets its own
    DateTimeRangeEditor, addressed by a generated session id. Sessions are
    never persisted; they are discarded on delete or when the app shuts down.

    Attributes:
        max_sessions: Maximum number of sessions held at once.
    """

    def __init__(self, max_sessions: int = 1000) -> None:
        self.max_sessions = max_sessions
        self._sessions: dict[str, DateTimeRangeEditor] = {}

    def create(self, **editor_kwargs: Any) -> tuple[str, DateTimeRangeEditor]:
        """Open a new editing session.

        Args:
            **editor_kwargs: Arguments forwarded to DateTimeRangeEditor.

        Returns:
            A tuple of (session_id, editor).

        Raises:
            SessionLimitReachedError: If max_sessions sessions are already open.
        """
        if len(self._sessions) >= self.max_sessions:
            raise SessionLimitReachedError(self.max_sessions)

        editor = DateTimeRangeEditor(**editor_kwargs)
        session_id = str(uuid4())
        self._sessions[session_id] = editor
        logger.info("Opened range session %s (%d open)", session_id, len(self._sessions))
        return session_id, editor

    def get(self, session_id: str) -> DateTimeRangeEditor:
        """Look up an open session.

        Raises:
            RangeSessionNotFoundError: If no session has this id.
        """
        editor = self._sessions.get(session_id)
        if editor is None:
            raise RangeSessionNotFoundError(session_id)
        return editor

    def delete(self, session_id: str) -> None:
        """Discard a session.

        Raises:
            RangeSessionNotFoundError: If no session has this id.
        """
        if self._sessions.pop(session_id, None) is None:
            raise RangeSessionNotFoundError(session_id)
        logger.info("Closed range session %s", session_id)

    def session_ids(self) -> list[str]:
        """Return the ids of all open sessions, oldest first."""
        return list(self._sessions)

    def count(self) -> int:
        """Return the number of open sessions."""
        return len(self._sessions)

    def clear(self) -> None:
        """Discard every session."""
        self._sessions.clear()


# Global state
# A single shared store is created when the app starts
_session_store: Optional[RangeSessionStore] = None


def get_session_store() -> RangeSessionStore:
    """Get the shared RangeSessionStore instance.

    This function is a FastAPI dependency; tests replace it through
    app.dependency_overrides.

    Returns:
        The shared RangeSessionStore instance.

    Raises:
        RuntimeError: If the store hasn't been initialized yet.
    """
    if _session_store is None:
        raise RuntimeError(
            "RangeSessionStore not initialized. Call initialize_session_store() first."
        )
    return _session_store


def initialize_session_store(max_sessions: int = 1000) -> RangeSessionStore:
    """Initialize the shared RangeSessionStore instance.

    This should be called once when the FastAPI app starts up.

    Args:
        max_sessions: Maximum number of sessions held at once.

    Returns:
        The newly created store.
    """
    global _session_store
    _session_store = RangeSessionStore(max_sessions=max_sessions)
    return _session_store


def shutdown_session_store() -> None:
    """Discard all sessions and drop the shared store."""
    global _session_store

    if _session_store is not None:
        logger.info("Discarding %d open range sessions", _session_store.count())
        _session_store.clear()

    _session_store = None


# Type alias for dependency injection
SessionStoreDep = Annotated[RangeSessionStore, Depends(get_session_store)]
