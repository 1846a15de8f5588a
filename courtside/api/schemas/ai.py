"""Pydantic schemas for the CPU AI API."""

from typing import Optional

from pydantic import BaseModel, Field


class RosterPlayerSchema(BaseModel):
    id: str
    position: str
    overall: int = Field(..., ge=0, le=99)
    age: int = Field(..., ge=16, le=50)
    potential: Optional[int] = Field(None, ge=0, le=99)
    salary: int = Field(0, ge=0)
    stamina: int = Field(100, ge=0, le=100)
    injured: bool = False


class StrategyRequest(BaseModel):
    """A CPU team's standings, payroll and roster."""
    team_id: str
    team_name: str = ""
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    payroll: int = Field(0, ge=0)
    roster: list[RosterPlayerSchema] = Field(default_factory=list)


class StrategyProfileResponse(BaseModel):
    player_multiplier: float
    pick_multiplier: float
    accept_threshold: int


class StrategyResponse(BaseModel):
    team_id: str
    strategy: str
    profile: StrategyProfileResponse
    context: dict
    recommendations: list[str] = Field(default_factory=list)
    starters: list[str] = Field(default_factory=list)
