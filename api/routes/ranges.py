"""Range editing session endpoints.

Each session wraps one DateTimeRangeEditor. The setter endpoints map one-to-one
onto the editor operations and return the session after the edit has been
applied.
"""

from fastapi import APIRouter, status

from api.dependencies import SessionStoreDep
from api.models import (
    CreateRangeSessionRequest,
    RangeEditRequest,
    RangeSessionListResponse,
    RangeSessionResponse,
    RangeValueRequest,
)
from models.range_editor import PickerBounds


router = APIRouter(
    prefix="/ranges",
    tags=["ranges"],
)


@router.post("", response_model=RangeSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(request: CreateRangeSessionRequest, store: SessionStoreDep):
    """Open a new range editing session.

    Args:
        request: Initial values and editing policy for the session.
        store: The shared session store (injected by FastAPI).

    Returns:
        The new session with its initial snapshot.
    """
    session_id, editor = store.create(**request.model_dump())
    return RangeSessionResponse.from_editor(session_id, editor)


@router.get("", response_model=RangeSessionListResponse)
async def list_sessions(store: SessionStoreDep):
    """List the ids of all open sessions."""
    session_ids = store.session_ids()
    return RangeSessionListResponse(session_ids=session_ids, count=len(session_ids))


@router.get("/{session_id}", response_model=RangeSessionResponse)
async def get_session(session_id: str, store: SessionStoreDep):
    """Get the current state of a session."""
    return RangeSessionResponse.from_editor(session_id, store.get(session_id))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, store: SessionStoreDep):
    """Discard a session (the form was closed)."""
    store.delete(session_id)


@router.get("/{session_id}/bounds", response_model=PickerBounds)
async def get_bounds(session_id: str, store: SessionStoreDep):
    """Get the picker bounds for the current state of a session."""
    return store.get(session_id).bounds()


@router.post("/{session_id}/start-date", response_model=RangeSessionResponse)
async def set_start_date(session_id: str, request: RangeValueRequest, store: SessionStoreDep):
    """Move the start to another day, keeping its time-of-day."""
    editor = store.get(session_id)
    editor.set_start_date(request.value)
    return RangeSessionResponse.from_editor(session_id, editor)


@router.post("/{session_id}/start-time", response_model=RangeSessionResponse)
async def set_start_time(session_id: str, request: RangeValueRequest, store: SessionStoreDep):
    """Change the start time-of-day."""
    editor = store.get(session_id)
    editor.set_start_time(request.value)
    return RangeSessionResponse.from_editor(session_id, editor)


@router.post("/{session_id}/end-date", response_model=RangeSessionResponse)
async def set_end_date(session_id: str, request: RangeValueRequest, store: SessionStoreDep):
    """Move the end to another day.

    An end date that would put the end before the start on a different day
    is rejected silently: the session is returned unchanged.
    """
    editor = store.get(session_id)
    editor.set_end_date(request.value)
    return RangeSessionResponse.from_editor(session_id, editor)


@router.post("/{session_id}/end-time", response_model=RangeSessionResponse)
async def set_end_time(session_id: str, request: RangeValueRequest, store: SessionStoreDep):
    """Change the end time-of-day."""
    editor = store.get(session_id)
    editor.set_end_time(request.value)
    return RangeSessionResponse.from_editor(session_id, editor)


@router.post("/{session_id}/all-day/toggle", response_model=RangeSessionResponse)
async def toggle_all_day(session_id: str, store: SessionStoreDep):
    """Switch all-day mode on or off."""
    editor = store.get(session_id)
    editor.toggle_all_day()
    return RangeSessionResponse.from_editor(session_id, editor)


@router.post("/{session_id}/edits", response_model=RangeSessionResponse)
async def apply_edit(session_id: str, request: RangeEditRequest, store: SessionStoreDep):
    """Apply any single edit, selected by its edit_type."""
    editor = store.get(session_id)
    editor.apply(request.edit)
    return RangeSessionResponse.from_editor(session_id, editor)
