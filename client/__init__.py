"""Range editor API client library.

Example:
    from client import RangeEditorClient

    with RangeEditorClient(base_url="http://localhost:8000") as client:
        session = client.ranges.create(...)
        client.ranges.toggle_all_day(session.session_id)

Exports:
    RangeEditorClient: Synchronous client for the range editor REST API.

    Exceptions:
        RangeClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        ValidationError: Request validation failed (HTTP 422).
        NotFoundError: Session not found (HTTP 404).
        ConflictError: State conflict (HTTP 409).
        ServerError: Server-side error (HTTP 5xx).
"""

from client._ranges import (
    PickerBounds,
    RangeSession,
    RangeSessionList,
    RangeSnapshot,
    RangesClient,
)
from client._validation import (
    TimeConstraintViolation,
    ValidateTimeResponse,
    ValidationClient,
)
from client.client import RangeEditorClient
from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    RangeClientError,
    ServerError,
    TimeoutError,
    ValidationError,
)

__all__ = [
    "RangeEditorClient",
    "RangesClient",
    "ValidationClient",
    "RangeSession",
    "RangeSessionList",
    "RangeSnapshot",
    "PickerBounds",
    "TimeConstraintViolation",
    "ValidateTimeResponse",
    "RangeClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
]
