"""Time constraint validation endpoint.

Lets a time picker check a candidate time against its paired start/end before
it sends the value to a range session.
"""

from fastapi import APIRouter

from api.models import ValidateTimeRequest, ValidateTimeResponse
from models.time_validation import validate_time_constraints


router = APIRouter(
    prefix="/validation",
    tags=["validation"],
)


@router.post("/time", response_model=ValidateTimeResponse)
async def validate_time(request: ValidateTimeRequest):
    """Check a candidate time against optional same-day minimum and maximum.

    Args:
        request: The candidate, its references and optional localized messages.

    Returns:
        Whether the candidate is valid, and the violation if it is not.
    """
    violation = validate_time_constraints(
        request.candidate,
        min_ref=request.min_ref,
        max_ref=request.max_ref,
        messages=request.messages,
    )
    return ValidateTimeResponse(valid=violation is None, violation=violation)
