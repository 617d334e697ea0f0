"""Shared request and response models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, NaiveDatetime

from models.range_editor import DateTimeRangeEditor
from models.range_input import RangeEdit
from models.range_state import MAX_DURATION_MINUTES, RangeSnapshot
from models.time_validation import TimeConstraintViolation, TimeValidationMessages


class CreateRangeSessionRequest(BaseModel):
    """Request model for opening a range editing session.

    Attributes:
        initial_start_date: Calendar day of the start.
        initial_start_time: Time-of-day of the start.
        initial_end_time: Day and time-of-day of the end.
        initial_is_all_day: Whether the range starts in all-day mode.
        default_duration_minutes: Duration used to auto-adjust the end; omit to disable.
        allow_past_start: Whether pickers may offer past dates and times.
    """

    initial_start_date: NaiveDatetime
    initial_start_time: NaiveDatetime
    initial_end_time: NaiveDatetime
    initial_is_all_day: bool = False
    default_duration_minutes: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_DURATION_MINUTES,
        description="Duration used to auto-adjust the end; omit to disable auto-adjust",
    )
    allow_past_start: bool = True


class RangeValueRequest(BaseModel):
    """Request model for the date and time setters.

    Attributes:
        value: The picked date (for date setters) or time (for time setters).
    """

    value: NaiveDatetime


class RangeEditRequest(BaseModel):
    """Request model for applying any single edit.

    Attributes:
        edit: The edit to apply, selected by its edit_type.
    """

    edit: RangeEdit


class RangeSessionResponse(BaseModel):
    """Response model describing an editing session.

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

    @classmethod
    def from_editor(cls, session_id: str, editor: DateTimeRangeEditor) -> "RangeSessionResponse":
        """Build the response for an editor."""
        return cls(
            session_id=session_id,
            snapshot=editor.snapshot(),
            end_manually_set=editor.state.end_manually_set,
            update_count=editor.update_count,
        )


class RangeSessionListResponse(BaseModel):
    """Response model listing open sessions.

    Attributes:
        session_ids: Ids of all open sessions, oldest first.
        count: Number of open sessions.
    """

    session_ids: list[str]
    count: int


class ValidateTimeRequest(BaseModel):
    """Request model for checking a candidate time.

    Attributes:
        candidate: The time being picked (with its date).
        min_ref: Earliest allowed time on the same day.
        max_ref: Latest allowed time on the same day.
        messages: Optional localized violation texts.
    """

    candidate: NaiveDatetime
    min_ref: Optional[NaiveDatetime] = None
    max_ref: Optional[NaiveDatetime] = None
    messages: Optional[TimeValidationMessages] = None


class ValidateTimeResponse(BaseModel):
    """Response model for a time check.

    Attributes:
        valid: True when the candidate passed.
        violation: The violation found, if any.
    """

    valid: bool
    violation: Optional[TimeConstraintViolation] = None
