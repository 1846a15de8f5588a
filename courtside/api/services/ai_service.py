"""Service layer for the CPU AI API."""

from courtside.api.schemas.ai import StrategyRequest
from courtside.core.ai.cpu import (
    RosterPlayer,
    build_cpu_team_context,
    get_recommendations,
    select_starters,
)
from courtside.core.ai.strategy import determine_team_strategy, strategy_profile


def strategy(request: StrategyRequest) -> dict:
    """Classify a team and summarize what its front office should do."""
    roster = [RosterPlayer(**p.model_dump()) for p in request.roster]
    context = build_cpu_team_context(
        team_id=request.team_id,
        wins=request.wins,
        losses=request.losses,
        payroll=request.payroll,
        roster=roster,
        team_name=request.team_name,
    )
    team_strategy = determine_team_strategy(context)
    profile = strategy_profile(team_strategy)

    return {
        "team_id": request.team_id,
        "strategy": team_strategy.value,
        "profile": {
            "player_multiplier": profile.player_multiplier,
            "pick_multiplier": profile.pick_multiplier,
            "accept_threshold": profile.accept_threshold,
        },
        "context": context.to_dict(),
        "recommendations": get_recommendations(context, team_strategy),
        "starters": select_starters(roster).starters,
    }
