"""Range edit input models."""

from typing import Annotated, Literal, Union

from pydantic import Field, NaiveDatetime

from models.base_input import RangeEditInput


class SetStartDateInput(RangeEditInput):
    """Move the start to another calendar day, keeping its time-of-day.

    Args:
        value: Value whose calendar day becomes the start date.
    """

    edit_type: Literal["set_start_date"] = Field(default="set_start_date", frozen=True)
    value: NaiveDatetime = Field(description="Value whose calendar day becomes the start date")

    def get_summary(self) -> str:
        return f"Set start date to {self.value:%Y-%m-%d}"


class SetStartTimeInput(RangeEditInput):
    """Change the start time-of-day on the current start date.

    Args:
        value: Value whose hour and minute become the start time.
    """

    edit_type: Literal["set_start_time"] = Field(default="set_start_time", frozen=True)
    value: NaiveDatetime = Field(description="Value whose hour and minute become the start time")

    def get_summary(self) -> str:
        return f"Set start time to {self.value:%H:%M}"


class SetEndDateInput(RangeEditInput):
    """Move the end to another calendar day, keeping its time-of-day.

    Args:
        value: Value whose calendar day becomes the end date.
    """

    edit_type: Literal["set_end_date"] = Field(default="set_end_date", frozen=True)
    value: NaiveDatetime = Field(description="Value whose calendar day becomes the end date")

    def get_summary(self) -> str:
        return f"Set end date to {self.value:%Y-%m-%d}"


class SetEndTimeInput(RangeEditInput):
    """Change the end time-of-day on the current end date.

    Args:
        value: Value whose hour and minute become the end time.
    """

    edit_type: Literal["set_end_time"] = Field(default="set_end_time", frozen=True)
    value: NaiveDatetime = Field(description="Value whose hour and minute become the end time")

    def get_summary(self) -> str:
        return f"Set end time to {self.value:%H:%M}"


class ToggleAllDayInput(RangeEditInput):
    """Switch all-day mode on or off."""

    edit_type: Literal["toggle_all_day"] = Field(default="toggle_all_day", frozen=True)

    def get_summary(self) -> str:
        return "Toggle all-day"


RangeEdit = Annotated[
    Union[
        SetStartDateInput,
        SetStartTimeInput,
        SetEndDateInput,
        SetEndTimeInput,
        ToggleAllDayInput,
    ],
    Field(discriminator="edit_type"),
]
"""Any single range edit, discriminated by edit_type."""
