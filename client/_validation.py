"""Time validation sub-client for the range editor API.

This is an internal module. Import from `client` instead.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from client._base import BaseClient


class TimeConstraintViolation(BaseModel):
    """A rejected candidate time."""

    kind: Literal["end_before_start", "start_after_end"]
    message: str


class ValidateTimeResponse(BaseModel):
    """Result of a time check.

    Attributes:
        valid: True when the candidate passed.
        violation: The violation found, if any.
    """

    valid: bool
    violation: Optional[TimeConstraintViolation] = None


class ValidationClient(BaseClient):
    """Synchronous client for the /validation endpoints."""

    def validate_time(
        self,
        candidate: datetime,
        min_ref: datetime | None = None,
        max_ref: datetime | None = None,
        end_before_start_message: str | None = None,
        start_after_end_message: str | None = None,
    ) -> ValidateTimeResponse:
        """Check a candidate time against optional same-day bounds.

        Args:
            candidate: The time being picked, with its date.
            min_ref: Earliest allowed time on the same day.
            max_ref: Latest allowed time on the same day.
            end_before_start_message: Custom text for a minimum violation.
            start_after_end_message: Custom text for a maximum violation.

        Returns:
            Whether the candidate is valid, and the violation if not.
        """
        payload: dict = {
            "candidate": candidate.isoformat(),
            "min_ref": min_ref.isoformat() if min_ref else None,
            "max_ref": max_ref.isoformat() if max_ref else None,
        }
        messages = {
            key: text
            for key, text in (
                ("end_before_start", end_before_start_message),
                ("start_after_end", start_after_end_message),
            )
            if text is not None
        }
        if messages:
            payload["messages"] = messages
        data = self._post("/validation/time", json=payload)
        return ValidateTimeResponse(**data)
