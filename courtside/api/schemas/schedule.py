"""Pydantic schemas for the schedule API."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# === Enums ===

class ConferenceSchema(str, Enum):
    EASTERN = "Eastern"
    WESTERN = "Western"


class DivisionSchema(str, Enum):
    ATLANTIC = "Atlantic"
    CENTRAL = "Central"
    SOUTHEAST = "Southeast"
    NORTHWEST = "Northwest"
    PACIFIC = "Pacific"
    SOUTHWEST = "Southwest"


class MarketSizeSchema(str, Enum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"


# === Request Schemas ===

class TeamSchema(BaseModel):
    """A team in the league structure."""
    id: str
    abbreviation: str
    conference: ConferenceSchema
    division: DivisionSchema
    name: str = ""
    city: str = ""
    market_size: MarketSizeSchema = MarketSizeSchema.MEDIUM


class GenerateScheduleRequest(BaseModel):
    """Request to build a season schedule."""
    season_id: str = Field(..., description="Season identifier, e.g. '2025-26'")
    teams: Optional[list[TeamSchema]] = Field(
        None,
        description="Exactly 30 teams; defaults to the built-in league"
    )
    seed: Optional[int] = Field(None, description="Seed for reproducible pairings and ids")
    season_start: Optional[date] = Field(None, description="Opening night (defaults to Oct 20)")
    include_games: bool = Field(True, description="Return every game, not just the summary")


class ScheduleRowSchema(BaseModel):
    """A schedule row as stored."""
    id: Optional[str] = None
    home_team_id: str
    away_team_id: str
    game_date: Optional[date] = None
    game_day: Optional[int] = None
    is_preseason: bool = False


class ValidateScheduleRequest(BaseModel):
    """Request to validate persisted schedule rows."""
    games: list[ScheduleRowSchema]
    teams: Optional[list[TeamSchema]] = Field(
        None,
        description="Teams the rows belong to; defaults to the built-in league"
    )


# === Response Schemas ===

class ScheduledGameResponse(BaseModel):
    id: str
    home_team_id: str
    away_team_id: str
    game_date: str
    game_day: int
    is_preseason: bool


class ScheduleValidationResponse(BaseModel):
    valid: bool
    issues: list[str] = Field(default_factory=list)


class GenerateScheduleResponse(BaseModel):
    season_id: str
    season_start: str
    regular_season_games: int
    preseason_games: int
    validation: ScheduleValidationResponse
    games: list[ScheduledGameResponse] = Field(default_factory=list)


class TeamGameCountResponse(BaseModel):
    team_id: str
    abbreviation: str
    games: int
    home_games: int


class InsertionValidationResponse(BaseModel):
    valid: bool
    regular_games: int
    teams_with_wrong_count: list[TeamGameCountResponse] = Field(default_factory=list)
    issues: list[str] = Field(default_factory=list)
