"""Application settings loaded from the environment.

Values are read from environment variables after a .env file (if present) has
been loaded with python-dotenv:

- RANGE_EDITOR_LOG_LEVEL: Root log level (default: INFO).
- RANGE_EDITOR_MAX_SESSIONS: Maximum number of open editing sessions (default: 1000).
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseModel):
    """Service-wide settings.

    Args:
        log_level: Root log level for the service.
        max_sessions: Maximum number of editing sessions held in memory.
    """

    log_level: LogLevel = Field(default="INFO", description="Root log level")
    max_sessions: int = Field(
        default=1000, ge=1, description="Maximum number of open editing sessions"
    )

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from the process environment.

        Loads a .env file first; variables already set in the environment win.

        Returns:
            The parsed settings.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        load_dotenv()
        values: dict[str, str] = {}
        if "RANGE_EDITOR_LOG_LEVEL" in os.environ:
            values["log_level"] = os.environ["RANGE_EDITOR_LOG_LEVEL"].upper()
        if "RANGE_EDITOR_MAX_SESSIONS" in os.environ:
            values["max_sessions"] = os.environ["RANGE_EDITOR_MAX_SESSIONS"]
        return cls.model_validate(values)
