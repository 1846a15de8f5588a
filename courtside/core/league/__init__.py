"""League structure: conferences, divisions and teams."""

from courtside.core.league.teams import (
    Conference,
    Division,
    MarketSize,
    Team,
    LeagueTeamData,
    DEFAULT_TEAMS,
    DIVISIONS_BY_CONFERENCE,
    build_default_teams,
    teams_in_division,
    teams_in_conference,
    team_by_abbreviation,
)

__all__ = [
    "Conference",
    "Division",
    "MarketSize",
    "Team",
    "LeagueTeamData",
    "DEFAULT_TEAMS",
    "DIVISIONS_BY_CONFERENCE",
    "build_default_teams",
    "teams_in_division",
    "teams_in_conference",
    "team_by_abbreviation",
]
