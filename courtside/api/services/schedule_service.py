"""
Service layer for the schedule API.

Converts request schemas into league objects and runs generation or
validation. Nothing is stored; the caller persists what it gets back.
"""

import logging
from typing import Optional

from courtside.api.schemas.schedule import (
    GenerateScheduleRequest,
    TeamSchema,
    ValidateScheduleRequest,
)
from courtside.core.league.teams import Team, build_default_teams
from courtside.core.random_source import make_rng
from courtside.core.schedule.generator import ScheduleConfig, generate_schedule
from courtside.core.schedule.validation import (
    validate_schedule,
    validate_schedule_insertion,
)


logger = logging.getLogger(__name__)


def resolve_teams(teams: Optional[list[TeamSchema]]) -> list[Team]:
    """Teams from the request, or the built-in league when none are given."""
    if teams is None:
        return build_default_teams()
    return [Team.from_dict(t.model_dump(mode="json")) for t in teams]


def generate(request: GenerateScheduleRequest) -> dict:
    """
    Generate a season and validate it before handing it back.

    Raises:
        ScheduleError: if the teams cannot form a schedule
    """
    teams = resolve_teams(request.teams)
    rng = make_rng(request.seed) if request.seed is not None else None
    config = ScheduleConfig(season_start=request.season_start)

    games = generate_schedule(teams, request.season_id, config, rng)
    validation = validate_schedule(games, teams, check_pairs=True)
    if not validation.valid:
        logger.warning(f"Generated schedule for {request.season_id} has {len(validation.issues)} issue(s)")

    regular = [g for g in games if not g.is_preseason]
    preseason = [g for g in games if g.is_preseason]

    return {
        "season_id": request.season_id,
        "season_start": config.resolve_season_start(request.season_id).isoformat(),
        "regular_season_games": len(regular),
        "preseason_games": len(preseason),
        "validation": validation.to_dict(),
        "games": [g.to_dict() for g in games] if request.include_games else [],
    }


def validate(request: ValidateScheduleRequest) -> dict:
    """Validate rows as they would be read back from storage."""
    teams = resolve_teams(request.teams)
    rows = [row.model_dump() for row in request.games]
    return validate_schedule_insertion(rows, teams).to_dict()
