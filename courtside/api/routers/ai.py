"""API Router for CPU team strategy."""

from fastapi import APIRouter

from courtside.api.schemas.ai import StrategyRequest, StrategyResponse
from courtside.api.services import ai_service

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/strategy", response_model=StrategyResponse)
async def team_strategy(request: StrategyRequest):
    """Classify a team's strategy and list front office recommendations."""
    return ai_service.strategy(request)
