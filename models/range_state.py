"""Range state model."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, NaiveDatetime

from models.datetime_parts import (
    combine,
    end_of_day,
    is_end_before_start,
    start_of_day,
)

# One year
MAX_DURATION_MINUTES = 365 * 24 * 60


class SavedTimes(BaseModel):
    """Start and end times captured right before switching into all-day mode.

    Args:
        start_time: Start time in effect before all-day was switched on.
        end_time: End time in effect before all-day was switched on.
    """

    model_config = ConfigDict(frozen=True)

    start_time: NaiveDatetime = Field(description="Start time before all-day was switched on")
    end_time: NaiveDatetime = Field(description="End time before all-day was switched on")


class RangeSnapshot(BaseModel):
    """The public view of a range, pushed to change listeners.

    The manual-set latch and the saved pre-all-day times are internal and are
    not part of the snapshot.

    Args:
        start_date: Calendar day of the start.
        start_time: Time-of-day of the start.
        end_date: Calendar day of the end.
        end_time: Time-of-day of the end.
        is_all_day: Whether the range covers whole days.
    """

    model_config = ConfigDict(frozen=True)

    start_date: datetime
    start_time: datetime
    end_date: datetime
    end_time: datetime
    is_all_day: bool


class RangeEditorConfig(BaseModel):
    """Per-session editing policy.

    Args:
        default_duration_minutes: Fixed duration used to auto-adjust the end on
            start edits, at most one year. None disables auto-adjust entirely.
        allow_past_start: Whether pickers may offer dates and times before now.
    """

    model_config = ConfigDict(frozen=True)

    default_duration_minutes: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_DURATION_MINUTES,
        description="Fixed duration for auto-adjust; None disables auto-adjust",
    )
    allow_past_start: bool = Field(
        default=True,
        description="Whether pickers may offer dates and times before now",
    )

    @property
    def auto_adjust_enabled(self) -> bool:
        """Return True if a duration is configured."""
        return self.default_duration_minutes is not None


class RangeState(BaseModel):
    """Current state of a date-time range being edited.

    The start and end are each stored as a (date, time) pair: the *_date fields
    contribute only their calendar day and the *_time fields only their
    time-of-day. Combined instants are derived on demand. All values are
    naive wall-clock datetimes.

    The state is immutable. Every edit produces a new RangeState through the
    functions in models.range_reducer.

    Args:
        start_date: Calendar day of the start.
        start_time: Time-of-day of the start.
        end_date: Calendar day of the end.
        end_time: Time-of-day of the end.
        is_all_day: Whether times are pinned to the whole day.
        end_manually_set: One-way latch set by any end-side edit.
        saved_pre_all_day_times: Times to restore when all-day is switched off.
    """

    model_config = ConfigDict(frozen=True)

    start_date: NaiveDatetime = Field(description="Calendar day of the start")
    start_time: NaiveDatetime = Field(description="Time-of-day of the start")
    end_date: NaiveDatetime = Field(description="Calendar day of the end")
    end_time: NaiveDatetime = Field(description="Time-of-day of the end")
    is_all_day: bool = Field(default=False, description="Whether times are pinned to the whole day")
    end_manually_set: bool = Field(
        default=False, description="One-way latch set by any end-side edit"
    )
    saved_pre_all_day_times: Optional[SavedTimes] = Field(
        default=None, description="Times to restore when all-day is switched off"
    )

    @property
    def start_instant(self) -> datetime:
        """Start date combined with start time."""
        return combine(self.start_date, self.start_time)

    @property
    def end_instant(self) -> datetime:
        """End date combined with end time."""
        return combine(self.end_date, self.end_time)

    @property
    def is_inverted(self) -> bool:
        """Return True if the end falls strictly before the start."""
        return is_end_before_start(self.start_instant, self.end_instant)

    def snapshot(self) -> RangeSnapshot:
        """Return the public view of this state."""
        return RangeSnapshot(
            start_date=self.start_date,
            start_time=self.start_time,
            end_date=self.end_date,
            end_time=self.end_time,
            is_all_day=self.is_all_day,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert this state to a JSON-friendly dictionary.

        Returns:
            Dictionary with ISO formatted datetimes, including internal fields.
        """
        saved = self.saved_pre_all_day_times
        return {
            "start_date": self.start_date.isoformat(),
            "start_time": self.start_time.isoformat(),
            "end_date": self.end_date.isoformat(),
            "end_time": self.end_time.isoformat(),
            "is_all_day": self.is_all_day,
            "end_manually_set": self.end_manually_set,
            "saved_pre_all_day_times": (
                {
                    "start_time": saved.start_time.isoformat(),
                    "end_time": saved.end_time.isoformat(),
                }
                if saved
                else None
            ),
        }

    def validate_state(self) -> list[str]:
        """Validate internal state consistency and return any issues.

        Checks for:
        - End instant not before start instant
        - All-day times pinned to the whole day with a saved snapshot
        - No saved snapshot lingering outside all-day mode

        Returns:
            List of validation error messages (empty list if valid).
        """
        issues = []

        if self.is_inverted:
            issues.append(
                f"End {self.end_instant.isoformat()} is before start "
                f"{self.start_instant.isoformat()}"
            )

        if self.is_all_day:
            if self.start_time.time() != start_of_day(self.start_date).time():
                issues.append("All-day start time is not the start of the day")
            if self.end_time.time() != end_of_day(self.start_date).time():
                issues.append("All-day end time is not the end of the day")
            if self.saved_pre_all_day_times is None:
                issues.append("All-day range has no saved pre-all-day times")
        elif self.saved_pre_all_day_times is not None:
            issues.append("Saved pre-all-day times present outside all-day mode")

        return issues
