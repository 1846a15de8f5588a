"""
API Router for trades.

Provides endpoints for:
- Validating a proposal (salary matching, restrictions, roster limits)
- Evaluating a proposal for one team, with an optional counter offer
"""

from fastapi import APIRouter, HTTPException

from courtside.api.schemas.trades import (
    EvaluateTradeRequest,
    TradeEvaluationResponse,
    TradeValidationResponse,
    ValidateTradeRequest,
)
from courtside.api.services import trade_service

router = APIRouter(prefix="/trades", tags=["trades"])


@router.post("/validate", response_model=TradeValidationResponse)
async def validate_trade(request: ValidateTradeRequest):
    """Check a proposal. Errors block the trade; warnings do not."""
    try:
        return trade_service.validate(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/evaluate", response_model=TradeEvaluationResponse)
async def evaluate_trade(request: EvaluateTradeRequest):
    """Score a proposal for one team and recommend accept, counter or reject."""
    try:
        return trade_service.evaluate(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
