"""Range session sub-client for the range editor API.

This module provides RangesClient for the /ranges endpoints.

This is an internal module. Import from `client` instead.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel

from client._base import BaseClient

if TYPE_CHECKING:
    from client._http import HTTPClient


# Response models for range endpoints


class RangeSnapshot(BaseModel):
    """Public view of a range.

    Attributes:
        start_date: Calendar day of the start.
        start_time: Time-of-day of the start.
        end_date: Calendar day of the end.
        end_time: Time-of-day of the end.
        is_all_day: Whether the range covers whole days.
    """

    start_date: datetime
    start_time: datetime
    end_date: datetime
    end_time: datetime
    is_all_day: bool


class RangeSession(BaseModel):
    """An editing session as returned by the server.

    Attributes:
        session_id: The session's identifier.
        snapshot: The public view of the range.
        end_manually_set: Whether the end has been edited by hand.
        update_count: Number of edits applied so far.
    """

    session_id: str
    snapshot: RangeSnapshot
    end_manually_set: bool
    update_count: int


class RangeSessionList(BaseModel):
    """Ids of all open sessions."""

    session_ids: list[str]
    count: int


class PickerBounds(BaseModel):
    """Selection limits for the start and end pickers.

    Attributes:
        start_min_date: Earliest selectable start date, if restricted.
        start_min_time: Earliest selectable start time, if restricted.
        end_min_date: Earliest selectable end date.
        end_min_time: Reference the end time picker validates against.
    """

    start_min_date: Optional[datetime] = None
    start_min_time: Optional[datetime] = None
    end_min_date: datetime
    end_min_time: datetime


class RangesClient(BaseClient):
    """Synchronous client for range editing sessions.

    Example:
        with RangeEditorClient() as client:
            session = client.ranges.create(
                initial_start_date=datetime(2024, 10, 16),
                initial_start_time=datetime(2024, 10, 16, 13, 0),
                initial_end_time=datetime(2024, 10, 16, 14, 0),
                default_duration_minutes=60,
            )
            session = client.ranges.set_start_time(
                session.session_id, datetime(2024, 10, 16, 15, 0)
            )
    """

    _BASE_PATH = "/ranges"

    def create(
        self,
        initial_start_date: datetime,
        initial_start_time: datetime,
        initial_end_time: datetime,
        initial_is_all_day: bool = False,
        default_duration_minutes: int | None = None,
        allow_past_start: bool = True,
    ) -> RangeSession:
        """Open a new editing session.

        Args:
            initial_start_date: Calendar day of the start.
            initial_start_time: Time-of-day of the start.
            initial_end_time: Day and time-of-day of the end.
            initial_is_all_day: Whether the range starts in all-day mode.
            default_duration_minutes: Duration for auto-adjusting the end; None disables it.
            allow_past_start: Whether pickers may offer past dates and times.

        Returns:
            The new session.

        Raises:
            ConflictError: If the server's session limit is reached.
            ValidationError: If the request is invalid.
        """
        data = self._post(
            self._BASE_PATH,
            json={
                "initial_start_date": initial_start_date.isoformat(),
                "initial_start_time": initial_start_time.isoformat(),
                "initial_end_time": initial_end_time.isoformat(),
                "initial_is_all_day": initial_is_all_day,
                "default_duration_minutes": default_duration_minutes,
                "allow_past_start": allow_past_start,
            },
        )
        return RangeSession(**data)

    def list(self) -> RangeSessionList:
        """List all open sessions."""
        data = self._get(self._BASE_PATH)
        return RangeSessionList(**data)

    def get(self, session_id: str) -> RangeSession:
        """Get the current state of a session.

        Raises:
            NotFoundError: If the session does not exist.
        """
        data = self._get(f"{self._BASE_PATH}/{session_id}")
        return RangeSession(**data)

    def delete(self, session_id: str) -> None:
        """Discard a session.

        Raises:
            NotFoundError: If the session does not exist.
        """
        self._delete(f"{self._BASE_PATH}/{session_id}")

    def bounds(self, session_id: str) -> PickerBounds:
        """Get the picker bounds of a session."""
        data = self._get(f"{self._BASE_PATH}/{session_id}/bounds")
        return PickerBounds(**data)

    def _set(self, session_id: str, field: str, value: datetime) -> RangeSession:
        data = self._post(
            f"{self._BASE_PATH}/{session_id}/{field}",
            json={"value": value.isoformat()},
        )
        return RangeSession(**data)

    def set_start_date(self, session_id: str, value: datetime) -> RangeSession:
        """Move the start to another day, keeping its time-of-day."""
        return self._set(session_id, "start-date", value)

    def set_start_time(self, session_id: str, value: datetime) -> RangeSession:
        """Change the start time-of-day."""
        return self._set(session_id, "start-time", value)

    def set_end_date(self, session_id: str, value: datetime) -> RangeSession:
        """Move the end to another day (cross-day inversions are ignored)."""
        return self._set(session_id, "end-date", value)

    def set_end_time(self, session_id: str, value: datetime) -> RangeSession:
        """Change the end time-of-day."""
        return self._set(session_id, "end-time", value)

    def toggle_all_day(self, session_id: str) -> RangeSession:
        """Switch all-day mode on or off."""
        data = self._post(f"{self._BASE_PATH}/{session_id}/all-day/toggle")
        return RangeSession(**data)

    def apply_edit(self, session_id: str, edit: dict[str, Any]) -> RangeSession:
        """Apply a raw edit payload.

        Args:
            session_id: The session to edit.
            edit: Edit body with an "edit_type" key, e.g.
                {"edit_type": "set_end_time", "value": "2024-10-16T15:00:00"}.

        Returns:
            The session after the edit.
        """
        data = self._post(f"{self._BASE_PATH}/{session_id}/edits", json={"edit": edit})
        return RangeSession(**data)
