"""
API Router for free agency.

Provides endpoints for:
- Scoring a single offer (with validation warnings)
- Letting a free agent choose among competing offers
"""

from fastapi import APIRouter

from courtside.api.schemas.free_agency import (
    EvaluateOffersRequest,
    OfferEvaluationResponse,
    ScoreOfferRequest,
    ScoreOfferResponse,
)
from courtside.api.services import free_agency_service

router = APIRouter(prefix="/free-agency", tags=["free-agency"])


@router.post("/score", response_model=ScoreOfferResponse)
async def score_offer(request: ScoreOfferRequest):
    """Score an offer from the player's point of view."""
    return free_agency_service.score(request)


@router.post("/evaluate", response_model=OfferEvaluationResponse)
async def evaluate_offers(request: EvaluateOffersRequest):
    """
    Evaluate every offer on the table.

    The best offer is accepted only if it clears 50 + (overall - 70).
    """
    return free_agency_service.evaluate(request)
