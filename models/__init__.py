"""Date-time range editor data models package.

This package contains the pure date/time helpers, the immutable range state and
its edits, the reducer applying those edits, and the stateful editing session
that notifies listeners after every change.
"""

from models.base_input import RangeEditInput
from models.datetime_parts import (
    AdjustedEnd,
    auto_adjusted_end,
    combine,
    compare_instants,
    end_of_day,
    is_crossing_midnight,
    is_end_before_start,
    minutes_since_midnight,
    same_day,
    start_of_day,
)
from models.range_editor import DateTimeRangeEditor, PickerBounds
from models.range_input import (
    RangeEdit,
    SetEndDateInput,
    SetEndTimeInput,
    SetStartDateInput,
    SetStartTimeInput,
    ToggleAllDayInput,
)
from models.range_state import RangeEditorConfig, RangeSnapshot, RangeState, SavedTimes
from models.time_validation import (
    TimeConstraintViolation,
    TimeValidationMessages,
    validate_time_constraints,
)

__all__ = [
    "AdjustedEnd",
    "auto_adjusted_end",
    "combine",
    "compare_instants",
    "end_of_day",
    "is_crossing_midnight",
    "is_end_before_start",
    "minutes_since_midnight",
    "same_day",
    "start_of_day",
    "RangeEditInput",
    "RangeEdit",
    "SetStartDateInput",
    "SetStartTimeInput",
    "SetEndDateInput",
    "SetEndTimeInput",
    "ToggleAllDayInput",
    "RangeEditorConfig",
    "RangeSnapshot",
    "RangeState",
    "SavedTimes",
    "DateTimeRangeEditor",
    "PickerBounds",
    "TimeConstraintViolation",
    "TimeValidationMessages",
    "validate_time_constraints",
]
