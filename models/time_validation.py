"""Same-day time constraint checks for individual time pickers.

A time picker validates a candidate time against a paired reference before it
hands the value to the range editor: the end picker uses the start as its
minimum, the start picker may use the end as its maximum. Times are only
compared when candidate and reference share a calendar day; across days any
time-of-day is acceptable here and ordering is left to the range reducer.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.datetime_parts import minutes_since_midnight, same_day

ViolationKind = Literal["end_before_start", "start_after_end"]


class TimeValidationMessages(BaseModel):
    """Texts returned for each kind of violation.

    Pickers pass localized strings here; the defaults are English.

    Args:
        end_before_start: Message when the candidate is earlier than the minimum.
        start_after_end: Message when the candidate is later than the maximum.
    """

    end_before_start: str = Field(
        default="End time must be after start time",
        description="Message when the candidate is earlier than the minimum",
    )
    start_after_end: str = Field(
        default="Start time must be before end time",
        description="Message when the candidate is later than the maximum",
    )


class TimeConstraintViolation(BaseModel):
    """A rejected candidate time.

    Args:
        kind: Which bound was crossed.
        message: Caller-facing description of the problem.
    """

    model_config = ConfigDict(frozen=True)

    kind: ViolationKind = Field(description="Which bound was crossed")
    message: str = Field(description="Caller-facing description of the problem")


def validate_time_constraints(
    candidate: datetime,
    min_ref: Optional[datetime] = None,
    max_ref: Optional[datetime] = None,
    messages: Optional[TimeValidationMessages] = None,
) -> Optional[TimeConstraintViolation]:
    """Check a candidate time against optional same-day bounds.

    The minimum is checked first. A bound on a different calendar day than the
    candidate is skipped entirely.

    Args:
        candidate: The time the user is about to select.
        min_ref: Earliest allowed time when on the same day.
        max_ref: Latest allowed time when on the same day.
        messages: Texts to use for violations (defaults to English).

    Returns:
        A TimeConstraintViolation, or None when the candidate is acceptable.

    Examples:
        >>> validate_time_constraints(
        ...     datetime(2024, 10, 16, 12, 0), min_ref=datetime(2024, 10, 16, 13, 0)
        ... ).kind
        'end_before_start'
        >>> validate_time_constraints(
        ...     datetime(2024, 10, 20, 9, 0), min_ref=datetime(2024, 10, 13, 13, 0)
        ... ) is None
        True
    """
    messages = messages or TimeValidationMessages()
    candidate_minutes = minutes_since_midnight(candidate)

    if min_ref is not None and same_day(candidate, min_ref):
        if candidate_minutes < minutes_since_midnight(min_ref):
            return TimeConstraintViolation(
                kind="end_before_start", message=messages.end_before_start
            )

    if max_ref is not None and same_day(candidate, max_ref):
        if candidate_minutes > minutes_since_midnight(max_ref):
            return TimeConstraintViolation(
                kind="start_after_end", message=messages.start_after_end
            )

    return None
