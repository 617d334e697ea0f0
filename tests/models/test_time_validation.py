"""Unit tests for validate_time_constraints()."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from models.time_validation import (
    TimeConstraintViolation,
    TimeValidationMessages,
    validate_time_constraints,
)


DAY = datetime(2024, 10, 16)


def at(hour, minute=0, day=DAY):
    return day.replace(hour=hour, minute=minute)


class TestMinimumReference:
    """Test validation against a minimum (end picker checking against start)."""

    def test_same_day_earlier_is_rejected(self):
        violation = validate_time_constraints(at(13), min_ref=at(14))

        assert violation is not None
        assert violation.kind == "end_before_start"
        assert violation.message == "End time must be after start time"

    def test_different_day_earlier_is_accepted(self):
        """Test that times on different days are never compared."""
        next_day = datetime(2024, 10, 17)

        assert validate_time_constraints(at(13, day=next_day), min_ref=at(14)) is None

    def test_equal_time_is_accepted(self):
        assert validate_time_constraints(at(14), min_ref=at(14)) is None

    def test_seconds_are_ignored(self):
        """Test that only hours and minutes are compared."""
        candidate = datetime(2024, 10, 16, 14, 0, 0)
        min_ref = datetime(2024, 10, 16, 14, 0, 59)

        assert validate_time_constraints(candidate, min_ref=min_ref) is None

    def test_candidate_on_earlier_day_is_accepted(self):
        """Test that cross-day ordering is left to the range editor."""
        assert (
            validate_time_constraints(
                at(9, day=datetime(2024, 10, 20)), min_ref=at(13, day=datetime(2024, 10, 13))
            )
            is None
        )


class TestMaximumReference:
    """Test validation against a maximum (start picker checking against end)."""

    def test_same_day_later_is_rejected(self):
        violation = validate_time_constraints(at(15), max_ref=at(14))

        assert violation is not None
        assert violation.kind == "start_after_end"
        assert violation.message == "Start time must be before end time"

    def test_different_day_later_is_accepted(self):
        assert validate_time_constraints(at(15), max_ref=at(14, day=datetime(2024, 10, 17))) is None

    def test_within_both_bounds_is_accepted(self):
        assert validate_time_constraints(at(12), min_ref=at(9), max_ref=at(17)) is None

    def test_minimum_checked_first(self):
        """Test that a minimum violation is reported before a maximum check."""
        violation = validate_time_constraints(at(8), min_ref=at(9), max_ref=at(7))

        assert violation.kind == "end_before_start"

    def test_maximum_checked_when_minimum_on_other_day(self):
        violation = validate_time_constraints(
            at(18), min_ref=at(20, day=datetime(2024, 10, 15)), max_ref=at(17)
        )

        assert violation.kind == "start_after_end"


class TestMessages:
    """Test custom violation messages."""

    def test_no_references_is_accepted(self):
        assert validate_time_constraints(at(3)) is None

    def test_custom_messages(self):
        messages = TimeValidationMessages(
            end_before_start="La fin doit suivre le début",
            start_after_end="Le début doit précéder la fin",
        )

        low = validate_time_constraints(at(8), min_ref=at(9), messages=messages)
        high = validate_time_constraints(at(10), max_ref=at(9), messages=messages)

        assert low.message == "La fin doit suivre le début"
        assert high.message == "Le début doit précéder la fin"

    def test_violation_is_frozen(self):
        violation = TimeConstraintViolation(kind="end_before_start", message="x")

        with pytest.raises(ValidationError):
            violation.message = "y"

    def test_violation_kind_is_checked(self):
        with pytest.raises(ValidationError):
            TimeConstraintViolation(kind="too_late", message="x")
