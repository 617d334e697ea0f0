"""Date-time range editing session.

A DateTimeRangeEditor is created once per open create/edit form. It owns the
current RangeState, runs every edit through the pure reducer, and notifies its
listeners synchronously, exactly once per operation, with the resulting
RangeSnapshot.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from pydantic import BaseModel, Field

from models.base_input import RangeEditInput
from models.datetime_parts import same_day
from models.range_input import (
    SetEndDateInput,
    SetEndTimeInput,
    SetStartDateInput,
    SetStartTimeInput,
    ToggleAllDayInput,
)
from models.range_reducer import apply_edit, initial_state
from models.range_state import RangeEditorConfig, RangeSnapshot, RangeState
from models.time_validation import (
    TimeConstraintViolation,
    TimeValidationMessages,
    validate_time_constraints,
)

logger = logging.getLogger(__name__)

ChangeListener = Callable[[RangeSnapshot], None]


class PickerBounds(BaseModel):
    """Selection limits for the start and end pickers.

    Args:
        start_min_date: Earliest selectable start date (None when past starts are allowed).
        start_min_time: Earliest selectable start time (only set when the start date is today).
        end_min_date: Earliest selectable end date (always the start date).
        end_min_time: Reference the end time picker validates against (the start instant).
    """

    start_min_date: Optional[datetime] = Field(default=None)
    start_min_time: Optional[datetime] = Field(default=None)
    end_min_date: datetime
    end_min_time: datetime


class DateTimeRangeEditor:
    """Stateful editor for a start/end date-time range.

    Wraps an immutable RangeState and replaces it on every operation. All
    operations are synchronous. Invalid edits are snapped or rejected according
    to the reducer's rules; only timezone-aware values are refused outright,
    with pydantic.ValidationError, before the state changes.

    Attributes:
        config: The session's editing policy.
        update_count: Number of operations applied so far.

    Example:
        editor = DateTimeRangeEditor(
            initial_start_date=datetime(2024, 10, 16),
            initial_start_time=datetime(2024, 10, 16, 13, 0),
            initial_end_time=datetime(2024, 10, 16, 14, 0),
            default_duration_minutes=60,
            on_change=form.update,
        )
        editor.set_start_time(datetime(2024, 10, 16, 15, 0))  # end moves to 16:00
    """

    def __init__(
        self,
        initial_start_date: datetime,
        initial_start_time: datetime,
        initial_end_time: datetime,
        initial_is_all_day: bool = False,
        default_duration_minutes: Optional[int] = None,
        allow_past_start: bool = True,
        on_change: Optional[ChangeListener] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize the editor.

        Args:
            initial_start_date: Calendar day of the start.
            initial_start_time: Time-of-day of the start.
            initial_end_time: Day and time-of-day of the end.
            initial_is_all_day: Whether the range starts in all-day mode.
            default_duration_minutes: Duration for auto-adjusting the end on
                start edits. None disables auto-adjust.
            allow_past_start: Whether pickers may offer past dates and times.
            on_change: Listener called with the snapshot after every operation.
            clock: Returns the current time for picker bounds (defaults to datetime.now).

        Raises:
            pydantic.ValidationError: If default_duration_minutes is negative or
                longer than a year, or an initial value is timezone-aware.
        """
        self.config = RangeEditorConfig(
            default_duration_minutes=default_duration_minutes,
            allow_past_start=allow_past_start,
        )
        self._state = initial_state(
            initial_start_date,
            initial_start_time,
            initial_end_time,
            initial_is_all_day,
        )
        self._listeners: list[ChangeListener] = []
        if on_change is not None:
            self._listeners.append(on_change)
        self._clock = clock or datetime.now
        self.update_count = 0

    @property
    def state(self) -> RangeState:
        """The current range state."""
        return self._state

    def snapshot(self) -> RangeSnapshot:
        """Return the public view of the current state."""
        return self._state.snapshot()

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener.

        Args:
            listener: Called with the new snapshot after every operation.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def apply(self, edit: RangeEditInput) -> RangeState:
        """Apply an edit, store the result and notify listeners once.

        Args:
            edit: The edit to apply.

        Returns:
            The new range state.
        """
        previous = self._state
        self._state = apply_edit(previous, edit, self.config)
        self.update_count += 1

        if self._state == previous:
            logger.debug("%s left the range unchanged", edit.get_summary())
        else:
            logger.debug("%s -> %s", edit.get_summary(), self._state.to_dict())

        snapshot = self._state.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return self._state

    def set_start_date(self, new_date: datetime) -> RangeState:
        """Move the start to another day, keeping its time-of-day.

        Raises:
            pydantic.ValidationError: If new_date is timezone-aware.
        """
        return self.apply(SetStartDateInput(value=new_date))

    def set_start_time(self, new_time: datetime) -> RangeState:
        """Change the start time-of-day."""
        return self.apply(SetStartTimeInput(value=new_time))

    def set_end_date(self, new_date: datetime) -> RangeState:
        """Move the end to another day, keeping its time-of-day."""
        return self.apply(SetEndDateInput(value=new_date))

    def set_end_time(self, new_time: datetime) -> RangeState:
        """Change the end time-of-day."""
        return self.apply(SetEndTimeInput(value=new_time))

    def toggle_all_day(self) -> RangeState:
        """Switch all-day mode on or off."""
        return self.apply(ToggleAllDayInput())

    # Picker bounds

    def start_min_date(self) -> Optional[datetime]:
        """Earliest date the start picker may offer, or None if unrestricted."""
        if self.config.allow_past_start:
            return None
        return self._clock()

    def start_min_time(self) -> Optional[datetime]:
        """Earliest time the start picker may offer.

        Only restricted when past starts are disallowed and the selected start
        date is today.
        """
        if self.config.allow_past_start:
            return None
        now = self._clock()
        return now if same_day(self._state.start_date, now) else None

    def end_min_date(self) -> datetime:
        """Earliest date the end picker may offer: the start date."""
        return self._state.start_date

    def end_min_time(self) -> datetime:
        """Reference the end time picker validates candidates against."""
        return self._state.start_instant

    def bounds(self) -> PickerBounds:
        """Return all picker bounds for the current state."""
        return PickerBounds(
            start_min_date=self.start_min_date(),
            start_min_time=self.start_min_time(),
            end_min_date=self.end_min_date(),
            end_min_time=self.end_min_time(),
        )

    # Time picker validation

    def validate_start_time(
        self,
        candidate: datetime,
        messages: Optional[TimeValidationMessages] = None,
    ) -> Optional[TimeConstraintViolation]:
        """Check a start time candidate against the start picker's minimum time.

        Args:
            candidate: Start date combined with the time being picked.
            messages: Violation texts (defaults to English).

        Returns:
            A violation, or None if the candidate is acceptable.
        """
        return validate_time_constraints(
            candidate, min_ref=self.start_min_time(), messages=messages
        )

    def validate_end_time(
        self,
        candidate: datetime,
        messages: Optional[TimeValidationMessages] = None,
    ) -> Optional[TimeConstraintViolation]:
        """Check an end time candidate against the start of the range.

        Args:
            candidate: End date combined with the time being picked.
            messages: Violation texts (defaults to English).

        Returns:
            A violation, or None if the candidate is acceptable.
        """
        return validate_time_constraints(
            candidate, min_ref=self.end_min_time(), messages=messages
        )
