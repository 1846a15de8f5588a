"""
Season Schedule Generator.

Builds the full season calendar for a 30-team league:
- 1230 regular season games (82 per team, 41 home)
- 120 preseason games (8 per team)

Matchups come from the pair relationships in ``relationships``; dates are
laid out end to end across a fixed season window. This is a bin-packing of
games onto days, not an arena or travel scheduler.
"""

import logging
import math
import random
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from courtside.core.league.teams import Team
from courtside.core.random_source import random_uuid, resolve_rng
from courtside.core.schedule.relationships import (
    Relationship,
    classify_relationships,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class ScheduleConfig:
    """Calendar settings for schedule generation."""

    # None means Oct 20 of the season year
    season_start: Optional[date] = None
    season_days: int = 180

    preseason_games: int = 8  # Per team
    preseason_rounds: int = 8

    games_per_team: int = 82

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.season_days < 1:
            errors.append("season_days must be positive")
        if self.preseason_games < 0:
            errors.append("preseason_games cannot be negative")
        if self.preseason_rounds < self.preseason_games:
            errors.append("preseason_rounds must be at least preseason_games")
        if self.games_per_team < 1:
            errors.append("games_per_team must be positive")
        return errors

    def resolve_season_start(self, season_id: str) -> date:
        """Season opener date, defaulting to Oct 20 of the season's year."""
        if self.season_start is not None:
            return self.season_start
        match = re.search(r"(\d{4})", str(season_id))
        year = int(match.group(1)) if match else date.today().year
        return date(year, 10, 20)


# =============================================================================
# Schedule Records
# =============================================================================

@dataclass(frozen=True)
class Matchup:
    """One game between two teams, home side first."""
    home_team_id: str
    away_team_id: str


@dataclass(frozen=True)
class ScheduledGame:
    """A matchup placed on the calendar."""
    id: str
    home_team_id: str
    away_team_id: str
    game_date: date
    game_day: int
    is_preseason: bool = False

    def involves(self, team_id: str) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def to_dict(self) -> dict:
        """Row shape written to the schedule store."""
        return {
            "id": self.id,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "game_date": self.game_date.isoformat(),
            "game_day": self.game_day,
            "is_preseason": self.is_preseason,
        }


# =============================================================================
# Matchup Generation
# =============================================================================

def matchups_for(relationship: Relationship) -> list[Matchup]:
    """Expand a relationship into one matchup per game, alternating hosts."""
    a_home = [Matchup(relationship.team_a_id, relationship.team_b_id)] * relationship.team_a_home
    b_home = [Matchup(relationship.team_b_id, relationship.team_a_id)] * relationship.team_b_home

    matchups = []
    for i in range(max(len(a_home), len(b_home))):
        if i < len(a_home):
            matchups.append(a_home[i])
        if i < len(b_home):
            matchups.append(b_home[i])
    return matchups


def generate_matchups(teams: list[Team]) -> list[Matchup]:
    """
    Generate every regular season matchup.

    Raises:
        ScheduleError: if the teams do not form a 30-team, six-division league
    """
    relationships = classify_relationships(teams)

    matchups: list[Matchup] = []
    for key in sorted(relationships):
        matchups.extend(matchups_for(relationships[key]))

    if logger.isEnabledFor(logging.DEBUG):
        counts: dict[str, int] = {}
        for rel in relationships.values():
            label = f"{rel.kind.value}:{rel.games}"
            counts[label] = counts.get(label, 0) + 1
        logger.debug(f"Relationship counts: {counts}")

    return matchups


# =============================================================================
# Calendar Assignment
# =============================================================================

def _assign_regular_season_dates(
    matchups: list[Matchup],
    season_start: date,
    config: ScheduleConfig,
    rng: random.Random,
) -> list[ScheduledGame]:
    games_per_day = max(1, math.ceil(len(matchups) / config.season_days))

    games = []
    for index, matchup in enumerate(matchups):
        game_day = index // games_per_day + 1
        games.append(ScheduledGame(
            id=random_uuid(rng),
            home_team_id=matchup.home_team_id,
            away_team_id=matchup.away_team_id,
            game_date=season_start + timedelta(days=game_day - 1),
            game_day=game_day,
            is_preseason=False,
        ))
    return games


def generate_preseason(
    teams: list[Team],
    season_start: date,
    config: Optional[ScheduleConfig] = None,
    rng: Optional[random.Random] = None,
) -> list[ScheduledGame]:
    """
    Generate preseason games from shuffled pairings.

    Each round shuffles the teams and pairs neighbours, so every team plays at
    most once per round. A pairing is skipped when either side already has its
    full preseason allotment. Round r is placed on game day r - rounds, i.e.
    counting back from the regular season opener.
    """
    config = config or ScheduleConfig()
    rng = resolve_rng(rng)

    team_ids = sorted(t.id for t in teams)
    played: dict[str, int] = {team_id: 0 for team_id in team_ids}
    games: list[ScheduledGame] = []

    for round_num in range(1, config.preseason_rounds + 1):
        order = list(team_ids)
        rng.shuffle(order)
        game_day = round_num - config.preseason_rounds - 1

        for home_id, away_id in zip(order[0::2], order[1::2]):
            if played[home_id] >= config.preseason_games or played[away_id] >= config.preseason_games:
                continue
            games.append(ScheduledGame(
                id=random_uuid(rng),
                home_team_id=home_id,
                away_team_id=away_id,
                game_date=season_start + timedelta(days=game_day),
                game_day=game_day,
                is_preseason=True,
            ))
            played[home_id] += 1
            played[away_id] += 1

    short = [team_id for team_id, count in played.items() if count < config.preseason_games]
    if short:
        logger.warning(f"Preseason incomplete for {len(short)} teams: {', '.join(short)}")

    return games


def generate_schedule(
    teams: list[Team],
    season_id: str,
    config: Optional[ScheduleConfig] = None,
    rng: Optional[random.Random] = None,
) -> list[ScheduledGame]:
    """
    Generate the full season schedule (preseason first, then regular season).

    Args:
        teams: exactly 30 teams, 5 per division
        season_id: season identifier; its first 4-digit number is the year
        config: calendar settings
        rng: random source for preseason pairings and game ids

    Raises:
        ScheduleError: if the teams do not form a 30-team, six-division league
        ValueError: if the config is invalid
    """
    config = config or ScheduleConfig()
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid schedule config: {'; '.join(errors)}")
    rng = resolve_rng(rng)

    matchups = generate_matchups(teams)
    season_start = config.resolve_season_start(season_id)

    preseason = generate_preseason(teams, season_start, config, rng)
    regular = _assign_regular_season_dates(matchups, season_start, config, rng)

    last_day = regular[-1].game_day if regular else 0
    logger.info(
        f"Generated schedule for season {season_id}: {len(regular)} regular season games "
        f"over {last_day} days, {len(preseason)} preseason games, starting {season_start.isoformat()}"
    )
    return preseason + regular
