"""Base class for all range edit models."""

from abc import abstractmethod
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class RangeEditInput(BaseModel):
    """Base class for a single user edit to a date-time range.

    Each subclass describes one of the editing operations a range picker can
    perform (e.g., SetStartDateInput, ToggleAllDayInput). Edits are handed to the
    range reducer, which computes the next RangeState from them.

    Edits are immutable value objects that describe a requested change, not its
    outcome: the reducer may snap, auto-adjust or reject the change.

    Args:
        edit_type: Identifies which operation this edit requests.
        edit_id: Unique identifier for this specific edit.
    """

    model_config = ConfigDict(frozen=True)

    edit_type: str = Field(description="Identifies which operation this edit requests")
    edit_id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Unique identifier for this specific edit",
    )

    @abstractmethod
    def get_summary(self) -> str:
        """Return human-readable one-line summary of this edit.

        Used in debug logging, one line per applied edit.

        Examples:
            - SetStartTimeInput: "Set start time to 13:00"
            - ToggleAllDayInput: "Toggle all-day"

        Returns:
            Brief, human-readable description for logging.
        """
        pass
