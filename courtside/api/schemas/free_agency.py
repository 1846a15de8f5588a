"""Pydantic schemas for the free agency API."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from courtside.api.schemas.schedule import MarketSizeSchema


# === Enums ===

class FATypeSchema(str, Enum):
    UNRESTRICTED = "unrestricted"
    RESTRICTED = "restricted"


class FAStatusSchema(str, Enum):
    AVAILABLE = "available"
    NEGOTIATING = "negotiating"
    SIGNED = "signed"
    WITHDRAWN = "withdrawn"


# === Request Schemas ===

class FreeAgentSchema(BaseModel):
    """A free agent snapshot."""
    player_id: str
    player_name: str = ""
    position: str = ""
    overall: int = Field(..., ge=0, le=99)
    potential: int = Field(..., ge=0, le=99)
    age: int = Field(..., ge=16, le=50)
    years_pro: int = Field(0, ge=0)
    fa_type: FATypeSchema = FATypeSchema.UNRESTRICTED
    rights_team_id: Optional[str] = None
    money_priority: int = Field(50, ge=0, le=100)
    winning_priority: int = Field(50, ge=0, le=100)
    role_priority: int = Field(50, ge=0, le=100)
    market_size_priority: int = Field(50, ge=0, le=100)
    asking_salary: int = Field(..., ge=0)
    market_value: int = Field(..., ge=0)
    status: FAStatusSchema = FAStatusSchema.AVAILABLE


class ContractOfferSchema(BaseModel):
    """A contract offer to a free agent."""
    team_id: str
    player_id: str
    years: int
    salary_per_year: int = Field(..., ge=0)
    player_option: bool = False
    team_option: bool = False
    no_trade_clause: bool = False
    signing_bonus: int = 0
    incentive_bonus: int = 0
    is_offer_sheet: bool = False
    is_matching: bool = False


class TeamContextSchema(BaseModel):
    """What the free agent knows about an offering team."""
    team_id: str
    team_name: str = ""
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    market_size: MarketSizeSchema = MarketSizeSchema.MEDIUM
    roster_size: int = Field(13, ge=0)
    needs_position: bool = False
    star_count: int = Field(0, ge=0)
    payroll: int = Field(0, ge=0)


class ScoreOfferRequest(BaseModel):
    free_agent: FreeAgentSchema
    offer: ContractOfferSchema
    team: TeamContextSchema


class TeamOfferSchema(BaseModel):
    offer: ContractOfferSchema
    team: TeamContextSchema


class EvaluateOffersRequest(BaseModel):
    free_agent: FreeAgentSchema
    offers: list[TeamOfferSchema] = Field(default_factory=list)


# === Response Schemas ===

class OfferScoreResponse(BaseModel):
    total: int
    money_score: int
    winning_score: int
    role_score: int
    market_score: int


class OfferValidationResponse(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ScoreOfferResponse(BaseModel):
    score: OfferScoreResponse
    validation: OfferValidationResponse


class OfferEvaluationResponse(BaseModel):
    accepted_offer: Optional[dict] = None
    accepted_team_id: Optional[str] = None
    best_score: int
    threshold: int
    scores: dict[str, OfferScoreResponse] = Field(default_factory=dict)
