"""Main entry point for the date-time range editor FastAPI application.

This module creates and configures the FastAPI app instance that serves range
editing sessions and time constraint checks to picker front ends.

To run the development server:
    uvicorn main:app --reload

To run in production:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_session_store, shutdown_session_store
from api.exceptions import (
    RangeSessionNotFoundError,
    SessionLimitReachedError,
    generic_exception_handler,
    range_session_not_found_handler,
    session_limit_reached_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.routes import ranges as ranges_routes
from api.routes import validation as validation_routes
from api.settings import AppSettings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Loads settings, configures logging and creates the session store at
    startup; discards all sessions at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    settings = AppSettings.from_env()
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting range editor (max %d sessions)", settings.max_sessions)
    initialize_session_store(max_sessions=settings.max_sessions)

    yield

    logger.info("Shutting down range editor")
    shutdown_session_store()


app = FastAPI(
    title="Date-Time Range Editor",
    description="Editing sessions for start/end date-time pickers",
    version="0.1.0",
    lifespan=lifespan,
)

# Register exception handlers
# Order matters: specific exceptions before general ones
app.add_exception_handler(RangeSessionNotFoundError, range_session_not_found_handler)
app.add_exception_handler(SessionLimitReachedError, session_limit_reached_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(ranges_routes.router)
app.include_router(validation_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message."""
    return {
        "message": "Welcome to the Date-Time Range Editor API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
