"""Pydantic schemas for the trade API."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AssetTypeSchema(str, Enum):
    PLAYER = "player"
    DRAFT_PICK = "draft_pick"
    CASH = "cash"


class TradeAssetSchema(BaseModel):
    """
    One asset in a trade.

    Only the fields for the asset's type are read: player_id / overall /
    potential / age / salary for players, year / round for picks, amount
    for cash.
    """
    asset_type: AssetTypeSchema
    from_team_id: str
    to_team_id: str

    # Players
    player_id: Optional[str] = None
    overall: Optional[int] = None
    potential: Optional[int] = None
    age: Optional[int] = None
    salary: Optional[int] = None
    position: Optional[str] = None

    # Draft picks
    year: Optional[int] = None
    round: Optional[int] = Field(None, ge=1, le=2)
    original_team_id: Optional[str] = None
    original_team_wins: Optional[int] = None
    is_pick_swap: Optional[bool] = None

    # Cash
    amount: Optional[int] = None


class TradeProposalSchema(BaseModel):
    id: str
    teams: list[str] = Field(..., min_length=2)
    assets: list[TradeAssetSchema] = Field(default_factory=list)
    status: str = "pending"
    proposed_by: str = ""


class TeamTradeContextSchema(BaseModel):
    """Team snapshot; cap space and contender flags are derived when omitted."""
    team_id: str
    team_name: str = ""
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    payroll: int = Field(0, ge=0)
    roster_size: int = Field(13, ge=0)
    positional_needs: list[str] = Field(default_factory=list)
    cap_space: Optional[int] = None
    is_contender: Optional[bool] = None
    is_rebuilding: Optional[bool] = None


class PlayerTradeStatusSchema(BaseModel):
    player_id: str
    salary: int = 0
    signed_date: Optional[date] = None
    last_traded_at: Optional[date] = None
    no_trade_clause: bool = False


class ValidateTradeRequest(BaseModel):
    proposal: TradeProposalSchema
    teams: list[TeamTradeContextSchema]
    players: list[PlayerTradeStatusSchema] = Field(default_factory=list)
    today: Optional[date] = None


class EvaluateTradeRequest(BaseModel):
    team_id: str
    proposal: TradeProposalSchema
    context: TeamTradeContextSchema
    current_year: int
    available_assets: list[TradeAssetSchema] = Field(
        default_factory=list,
        description="Assets the other side could add if a counter is warranted"
    )


# === Response Schemas ===

class TradeValidationResponse(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class TradeEvaluationResponse(BaseModel):
    team_id: str
    value_score: int
    recommendation: str
    reasoning: list[str] = Field(default_factory=list)
    counter_offer: Optional[dict] = None
