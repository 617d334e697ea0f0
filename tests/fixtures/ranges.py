"""Fixtures for range editing."""

from datetime import datetime, timedelta

import pytest

from models.range_editor import DateTimeRangeEditor
from models.range_reducer import initial_state
from models.range_state import RangeEditorConfig, RangeSnapshot, RangeState

# The reference day used throughout the range tests
DAY = datetime(2024, 10, 16)
NEXT_DAY = DAY + timedelta(days=1)
PREVIOUS_DAY = DAY - timedelta(days=1)


def at(hour: int, minute: int = 0, day: datetime = DAY) -> datetime:
    """Return day at hour:minute."""
    return day.replace(hour=hour, minute=minute, second=0, microsecond=0)


def create_range_state(
    start: datetime | None = None,
    end: datetime | None = None,
    is_all_day: bool = False,
) -> RangeState:
    """Create a RangeState from a start and end instant.

    Args:
        start: Start instant (default: 13:00 on DAY).
        end: End instant (default: 14:00 on DAY).
        is_all_day: Whether to open in all-day mode.

    Returns:
        RangeState built the same way an editing session builds it.
    """
    start = start or at(13)
    end = end or at(14)
    return initial_state(start, start, end, is_all_day)


def create_config(
    default_duration_minutes: int | None = None,
    allow_past_start: bool = True,
) -> RangeEditorConfig:
    """Create a RangeEditorConfig (auto-adjust disabled by default)."""
    return RangeEditorConfig(
        default_duration_minutes=default_duration_minutes,
        allow_past_start=allow_past_start,
    )


def create_editor(
    start: datetime | None = None,
    end: datetime | None = None,
    is_all_day: bool = False,
    default_duration_minutes: int | None = None,
    allow_past_start: bool = True,
    on_change=None,
    clock=None,
) -> DateTimeRangeEditor:
    """Create a DateTimeRangeEditor with sensible defaults.

    Args:
        start: Start instant (default: 13:00 on DAY).
        end: End instant (default: 14:00 on DAY).
        is_all_day: Whether to open in all-day mode.
        default_duration_minutes: Auto-adjust duration (default: disabled).
        allow_past_start: Whether past starts may be picked.
        on_change: Optional change listener.
        clock: Optional clock for picker bounds.

    Returns:
        DateTimeRangeEditor instance ready for testing.
    """
    start = start or at(13)
    end = end or at(14)
    return DateTimeRangeEditor(
        initial_start_date=start,
        initial_start_time=start,
        initial_end_time=end,
        initial_is_all_day=is_all_day,
        default_duration_minutes=default_duration_minutes,
        allow_past_start=allow_past_start,
        on_change=on_change,
        clock=clock,
    )


class SnapshotRecorder:
    """Change listener that records every snapshot it receives."""

    def __init__(self) -> None:
        self.snapshots: list[RangeSnapshot] = []

    def __call__(self, snapshot: RangeSnapshot) -> None:
        self.snapshots.append(snapshot)

    @property
    def last(self) -> RangeSnapshot:
        return self.snapshots[-1]


@pytest.fixture
def recorder() -> SnapshotRecorder:
    """Provide a fresh snapshot recorder."""
    return SnapshotRecorder()


@pytest.fixture
def editor(recorder) -> DateTimeRangeEditor:
    """Provide an editor for 13:00-14:00 on DAY without auto-adjust."""
    return create_editor(on_change=recorder)


@pytest.fixture
def auto_editor(recorder) -> DateTimeRangeEditor:
    """Provide an editor for 13:00-14:00 on DAY with a 60 minute default duration."""
    return create_editor(default_duration_minutes=60, on_change=recorder)
