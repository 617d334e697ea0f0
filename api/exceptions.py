"""Exception handlers for the range editor FastAPI application.

This module defines custom exception handlers that convert Python exceptions
into consistent, user-friendly JSON responses.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


# Custom Exception Classes


class RangeSessionNotFoundError(Exception):
    """Raised when a requested editing session doesn't exist.

    Args:
        session_id: The id that was looked up.
    """

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Range session '{session_id}' not found")


class SessionLimitReachedError(Exception):
    """Raised when opening a session would exceed the configured limit.

    Args:
        max_sessions: The configured maximum number of open sessions.
    """

    def __init__(self, max_sessions: int):
        self.max_sessions = max_sessions
        super().__init__(f"Cannot open more than {max_sessions} range sessions")


# Exception Handlers


async def range_session_not_found_handler(request: Request, exc: RangeSessionNotFoundError):
    """Handle RangeSessionNotFoundError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The RangeSessionNotFoundError exception.

    Returns:
        JSONResponse with 404 status.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Range Session Not Found",
            "detail": str(exc),
            "session_id": exc.session_id,
        },
    )


async def session_limit_reached_handler(request: Request, exc: SessionLimitReachedError):
    """Handle SessionLimitReachedError exceptions.

    Returns a 409 (Conflict): the client should close a session first.

    Args:
        request: The incoming request that triggered the error.
        exc: The SessionLimitReachedError exception.

    Returns:
        JSONResponse with 409 status.
    """
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "error": "Session Limit Reached",
            "detail": str(exc),
            "max_sessions": exc.max_sessions,
            "suggestion": "Close an open session with DELETE /ranges/{session_id}",
        },
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors raised while building models.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with validation error details.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": exc.errors(include_url=False, include_context=False),
        },
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValueError exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid Value",
            "detail": str(exc),
            "type": "ValueError",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    Logs the full traceback and returns a generic message so stack traces
    are never exposed to clients.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with generic error message.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )
