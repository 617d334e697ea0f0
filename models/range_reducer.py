"""Pure state transitions for date-time range editing.

Every public function here takes the current RangeState and returns the next
one; nothing is mutated in place. The editing rules are:

- Start-side edits never get rejected. If the new start would put the end
  before it, the end is snapped to the start. Otherwise, when a default
  duration is configured and the end was never edited by hand, the end is
  recomputed as start + duration.
- setStartTime gives auto-adjust priority over snapping; setStartDate checks
  for inversion first.
- End-date edits that would invert the range are snapped when they land on the
  start's calendar day and rejected (state unchanged) when they do not.
- Any end-side edit sets end_manually_set, and nothing ever clears it.
- Switching all-day on saves the current times and pins the day; switching it
  off restores the saved times.
"""

import logging
from datetime import datetime
from typing import Callable

from models.base_input import RangeEditInput
from models.datetime_parts import (
    auto_adjusted_end,
    combine,
    end_of_day,
    is_end_before_start,
    same_day,
    start_of_day,
)
from models.range_input import (
    SetEndDateInput,
    SetEndTimeInput,
    SetStartDateInput,
    SetStartTimeInput,
    ToggleAllDayInput,
)
from models.range_state import RangeEditorConfig, RangeState, SavedTimes

logger = logging.getLogger(__name__)


def _auto_adjust_applies(state: RangeState, config: RangeEditorConfig) -> bool:
    return config.auto_adjust_enabled and not state.end_manually_set


def _snap_end_to_start(state: RangeState) -> RangeState:
    start = state.start_instant
    return state.model_copy(update={"end_date": start, "end_time": start})


def _pin_all_day(state: RangeState) -> RangeState:
    """Re-pin times to whole days after a date edit made in all-day mode."""
    if not state.is_all_day:
        return state
    return state.model_copy(
        update={
            "start_time": start_of_day(state.start_date),
            "end_time": end_of_day(state.end_date),
        }
    )


def initial_state(
    initial_start_date: datetime,
    initial_start_time: datetime,
    initial_end_time: datetime,
    initial_is_all_day: bool = False,
) -> RangeState:
    """Build the first state of an editing session.

    The end date is taken from the calendar day of initial_end_time. An initial
    range whose end precedes its start is snapped. When the session opens in
    all-day mode, the supplied times become the pre-all-day snapshot so that
    switching all-day off restores them.

    Args:
        initial_start_date: Calendar day of the start.
        initial_start_time: Time-of-day of the start.
        initial_end_time: Day and time-of-day of the end.
        initial_is_all_day: Whether the session starts in all-day mode.

    Returns:
        A RangeState satisfying every range invariant.
    """
    state = RangeState(
        start_date=initial_start_date,
        start_time=initial_start_time,
        end_date=initial_end_time,
        end_time=initial_end_time,
    )
    if state.is_inverted:
        logger.info(
            "Initial end %s precedes start %s, snapping end to start",
            state.end_instant.isoformat(),
            state.start_instant.isoformat(),
        )
        state = _snap_end_to_start(state)
    if initial_is_all_day:
        state = toggle_all_day(state)
    return state


def set_start_date(
    state: RangeState, new_date: datetime, config: RangeEditorConfig
) -> RangeState:
    """Move the start to new_date, keeping its wall-clock time.

    Args:
        state: Current range state.
        new_date: Value whose calendar day becomes the start date.
        config: Session editing policy.

    Returns:
        The next range state.
    """
    new_start = combine(new_date, state.start_time)
    updated = state.model_copy(update={"start_date": new_date, "start_time": new_start})

    if is_end_before_start(new_start, state.end_instant):
        return _pin_all_day(_snap_end_to_start(updated))

    if _auto_adjust_applies(state, config):
        adjusted = auto_adjusted_end(new_start, config.default_duration_minutes)
        updated = updated.model_copy(
            update={"end_date": adjusted.end_date, "end_time": adjusted.end_time}
        )

    return _pin_all_day(updated)


def set_start_time(
    state: RangeState, new_time: datetime, config: RangeEditorConfig
) -> RangeState:
    """Change the start time-of-day on the current start date.

    Ignored while all-day mode is on.

    Args:
        state: Current range state.
        new_time: Value whose hour and minute become the start time.
        config: Session editing policy.

    Returns:
        The next range state.
    """
    if state.is_all_day:
        logger.debug("Ignoring start time edit while all-day is on")
        return state

    new_start = combine(state.start_date, new_time)
    updated = state.model_copy(update={"start_time": new_start})

    if _auto_adjust_applies(state, config):
        adjusted = auto_adjusted_end(new_start, config.default_duration_minutes)
        return updated.model_copy(
            update={"end_date": adjusted.end_date, "end_time": adjusted.end_time}
        )

    if is_end_before_start(new_start, state.end_instant):
        return updated.model_copy(
            update={"end_date": state.start_date, "end_time": new_start}
        )

    return updated


def set_end_date(
    state: RangeState, new_date: datetime, config: RangeEditorConfig
) -> RangeState:
    """Move the end to new_date, keeping its wall-clock time.

    Args:
        state: Current range state.
        new_date: Value whose calendar day becomes the end date.
        config: Session editing policy (unused; end edits never auto-adjust).

    Returns:
        The next range state, or state itself when the edit is rejected.
    """
    candidate = combine(new_date, state.end_time)

    if is_end_before_start(state.start_instant, candidate):
        if same_day(new_date, state.start_date):
            return state.model_copy(
                update={
                    "end_date": new_date,
                    "end_time": state.start_time,
                    "end_manually_set": True,
                }
            )
        logger.debug(
            "Rejecting end date %s before start date %s",
            new_date.date().isoformat(),
            state.start_date.date().isoformat(),
        )
        return state

    updated = state.model_copy(
        update={"end_date": new_date, "end_time": candidate, "end_manually_set": True}
    )
    return _pin_all_day(updated)


def set_end_time(
    state: RangeState, new_time: datetime, config: RangeEditorConfig
) -> RangeState:
    """Change the end time-of-day on the current end date.

    The value is committed as given; pickers are expected to have checked it
    with validate_time_constraints() first. Should a caller skip that check
    and invert the range, the end is snapped to the start. Ignored while
    all-day mode is on.

    Args:
        state: Current range state.
        new_time: Value whose hour and minute become the end time.
        config: Session editing policy (unused; end edits never auto-adjust).

    Returns:
        The next range state.
    """
    if state.is_all_day:
        logger.debug("Ignoring end time edit while all-day is on")
        return state

    updated = state.model_copy(
        update={
            "end_time": combine(state.end_date, new_time),
            "end_manually_set": True,
        }
    )
    if updated.is_inverted:
        logger.debug(
            "End time %s precedes start, snapping end to start", new_time.strftime("%H:%M")
        )
        return _snap_end_to_start(updated)
    return updated


def toggle_all_day(state: RangeState) -> RangeState:
    """Switch all-day mode on or off.

    Switching on saves the current times and pins them to the first and last
    instant of the start date. Switching off restores the saved times; if the
    dates moved in the meantime and the restored range would be inverted, the
    end is snapped to the start.

    Args:
        state: Current range state.

    Returns:
        The next range state.
    """
    if not state.is_all_day:
        return state.model_copy(
            update={
                "is_all_day": True,
                "saved_pre_all_day_times": SavedTimes(
                    start_time=state.start_time, end_time=state.end_time
                ),
                "start_time": start_of_day(state.start_date),
                "end_time": end_of_day(state.start_date),
            }
        )

    saved = state.saved_pre_all_day_times
    if saved is None:
        return state.model_copy(update={"is_all_day": False})

    restored = state.model_copy(
        update={
            "is_all_day": False,
            "start_time": saved.start_time,
            "end_time": saved.end_time,
            "saved_pre_all_day_times": None,
        }
    )
    if restored.is_inverted:
        return _snap_end_to_start(restored)
    return restored


_EDIT_HANDLERS: dict[type, Callable[[RangeState, datetime, RangeEditorConfig], RangeState]] = {
    SetStartDateInput: set_start_date,
    SetStartTimeInput: set_start_time,
    SetEndDateInput: set_end_date,
    SetEndTimeInput: set_end_time,
}


def apply_edit(
    state: RangeState, edit: RangeEditInput, config: RangeEditorConfig
) -> RangeState:
    """Apply a single edit and return the next state.

    Args:
        state: Current range state.
        edit: The edit to apply.
        config: Session editing policy.

    Returns:
        The next range state.

    Raises:
        ValueError: If edit is not one of the known range edits.
    """
    if isinstance(edit, ToggleAllDayInput):
        return toggle_all_day(state)

    handler = _EDIT_HANDLERS.get(type(edit))
    if handler is None:
        raise ValueError(f"Unsupported range edit: {type(edit).__name__}")
    return handler(state, edit.value, config)
