"""
API Router for season schedules.

Provides endpoints for:
- Generating a full season (regular season + preseason)
- Validating schedule rows read back from storage
"""

from fastapi import APIRouter, HTTPException

from courtside.api.schemas.schedule import (
    GenerateScheduleRequest,
    GenerateScheduleResponse,
    InsertionValidationResponse,
    ValidateScheduleRequest,
)
from courtside.api.services import schedule_service
from courtside.core.schedule.relationships import ScheduleError

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.post("/generate", response_model=GenerateScheduleResponse)
async def generate_schedule(request: GenerateScheduleRequest):
    """
    Generate a season schedule.

    Every team gets 82 regular season games (41 home) and 8 preseason games.
    Pass a seed to get the same pairings and game ids back.
    """
    try:
        return schedule_service.generate(request)
    except ScheduleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid league: {e}")


@router.post("/validate", response_model=InsertionValidationResponse)
async def validate_schedule(request: ValidateScheduleRequest):
    """Re-derive per-team counts from stored rows and report anything off."""
    try:
        return schedule_service.validate(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
