"""Date and time-of-day helpers for range editing.

This module holds the pure building blocks the range reducer is made of:
- combine(): merge the calendar day of one value with the clock time of another
- same_day() / minutes_since_midnight(): day and time-of-day comparisons
- is_end_before_start() / compare_instants(): chronological ordering
- auto_adjusted_end(): start + fixed duration, crossing midnight if needed

All values are naive wall-clock datetimes. No timezone conversion is performed.
"""

from datetime import datetime, timedelta
from typing import NamedTuple


class AdjustedEnd(NamedTuple):
    """End date and end time computed by the auto-adjust policy.

    Both fields carry the same instant; callers read the calendar day from
    end_date and the clock time from end_time.
    """

    end_date: datetime
    end_time: datetime


def combine(date_part: datetime, time_part: datetime) -> datetime:
    """Combine the calendar day of one value with the time-of-day of another.

    Seconds and microseconds are always normalized to zero.

    Args:
        date_part: Value providing year, month and day.
        time_part: Value providing hour and minute.

    Returns:
        A new datetime on date_part's day at time_part's hour and minute.

    Examples:
        >>> combine(datetime(2024, 10, 16), datetime(2024, 1, 1, 13, 0, 42))
        datetime.datetime(2024, 10, 16, 13, 0)
    """
    return date_part.replace(
        hour=time_part.hour,
        minute=time_part.minute,
        second=0,
        microsecond=0,
    )


def same_day(a: datetime, b: datetime) -> bool:
    """Return True if both values fall on the same calendar day."""
    return a.year == b.year and a.month == b.month and a.day == b.day


def minutes_since_midnight(value: datetime) -> int:
    """Return the time-of-day of value as minutes since midnight (0-1439)."""
    return value.hour * 60 + value.minute


def is_end_before_start(start_instant: datetime, end_instant: datetime) -> bool:
    """Return True if the end falls strictly before the start.

    Equal instants form a valid, zero-length range.
    """
    return end_instant < start_instant


def compare_instants(
    start_date: datetime,
    start_time: datetime,
    end_date: datetime,
    end_time: datetime,
) -> int:
    """Compare two date/time pairs chronologically.

    Args:
        start_date: Day of the first instant.
        start_time: Time-of-day of the first instant.
        end_date: Day of the second instant.
        end_time: Time-of-day of the second instant.

    Returns:
        Negative if the start is earlier, 0 if equal, positive if the start is later.
    """
    start = combine(start_date, start_time)
    end = combine(end_date, end_time)
    if start < end:
        return -1
    if start > end:
        return 1
    return 0


def is_crossing_midnight(start: datetime, end: datetime) -> bool:
    """Return True if start and end fall on different calendar days."""
    return not same_day(start, end)


def start_of_day(value: datetime) -> datetime:
    """Return the first instant of value's calendar day."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    """Return the last representable instant of value's calendar day."""
    return value.replace(hour=23, minute=59, second=59, microsecond=999999)


def auto_adjusted_end(start_instant: datetime, duration_minutes: int) -> AdjustedEnd:
    """Compute a new end from a start instant and a fixed duration.

    This is the only place a range deliberately crosses midnight: a 90 minute
    event starting at 23:00 ends at 00:30 on the following day.

    The result is clamped to datetime.max when start + duration is not
    representable.

    Args:
        start_instant: Combined start date and time.
        duration_minutes: Length of the range in minutes.

    Returns:
        AdjustedEnd whose end_date and end_time both hold start + duration.
    """
    try:
        end = start_instant + timedelta(minutes=duration_minutes)
    except OverflowError:
        end = datetime.max
    return AdjustedEnd(end_date=end, end_time=end)
