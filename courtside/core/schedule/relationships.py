"""
Team pair relationships.

Every unordered pair of teams is classified exactly once:
- DIVISION: 4 games, 2 home each
- CONFERENCE: 3 or 4 games (three-game opponents host 2/1)
- INTER_CONFERENCE: 2 games, 1 home each

The generator turns relationships into matchups and the pair-level
validator checks a schedule against the same table.
"""

from dataclasses import dataclass
from enum import Enum
from itertools import combinations

from courtside.core.league.teams import (
    Conference,
    DIVISIONS_BY_CONFERENCE,
    Team,
)


TEAMS_PER_LEAGUE = 30
TEAMS_PER_DIVISION = 5

DIVISION_GAMES = 4
CONFERENCE_GAMES = 4
THREE_GAME_SERIES = 3
INTER_CONFERENCE_GAMES = 2
THREE_GAME_OPPONENTS_PER_TEAM = 4


class ScheduleError(ValueError):
    """Raised when a schedule cannot be built from the given teams."""
    pass


class RelationshipKind(Enum):
    """How two teams are related in the league structure."""
    DIVISION = "division"
    CONFERENCE = "conference"
    INTER_CONFERENCE = "inter_conference"


@dataclass(frozen=True)
class Relationship:
    """
    The season series between two teams.

    ``team_a_id`` always sorts before ``team_b_id``. ``team_a_home`` is the
    number of games team A hosts; team B hosts the rest.
    """
    kind: RelationshipKind
    team_a_id: str
    team_b_id: str
    games: int
    team_a_home: int

    @property
    def team_b_home(self) -> int:
        return self.games - self.team_a_home

    @property
    def is_three_game(self) -> bool:
        return self.kind == RelationshipKind.CONFERENCE and self.games == THREE_GAME_SERIES

    def home_games_for(self, team_id: str) -> int:
        if team_id == self.team_a_id:
            return self.team_a_home
        if team_id == self.team_b_id:
            return self.team_b_home
        raise KeyError(f"Team {team_id} is not part of this relationship")

    def opponent_of(self, team_id: str) -> str:
        if team_id == self.team_a_id:
            return self.team_b_id
        if team_id == self.team_b_id:
            return self.team_a_id
        raise KeyError(f"Team {team_id} is not part of this relationship")


def pair_key(team1_id: str, team2_id: str) -> tuple[str, str]:
    """Canonical (sorted) key for an unordered team pair."""
    return (team1_id, team2_id) if team1_id < team2_id else (team2_id, team1_id)


def check_league_shape(teams: list[Team]) -> None:
    """Raise ScheduleError unless teams form 2 conferences x 3 divisions x 5 teams."""
    if len(teams) != TEAMS_PER_LEAGUE:
        raise ScheduleError(f"Expected {TEAMS_PER_LEAGUE} teams, got {len(teams)}")

    ids = [t.id for t in teams]
    if len(set(ids)) != len(ids):
        raise ScheduleError("Team ids must be unique")

    for conference, divisions in DIVISIONS_BY_CONFERENCE.items():
        for division in divisions:
            count = sum(1 for t in teams if t.division == division)
            if count != TEAMS_PER_DIVISION:
                raise ScheduleError(
                    f"{conference.value} {division.value} division has {count} teams, "
                    f"expected {TEAMS_PER_DIVISION}"
                )


def _three_game_hosts(teams: list[Team]) -> dict[tuple[str, str], str]:
    """
    Assign three-game opponents within each conference.

    For each pair of divisions (A, B) in a conference, with teams ordered by
    id, A[i] and B[k] meet three times iff (k - i) mod 5 is 0 or 1. A[i] hosts
    the extra game when k == i, B[k] otherwise. Every team ends up with two
    such opponents in each other division and hosts the extra game in exactly
    two of its four three-game series.

    Returns a map of pair key -> id of the team hosting twice.
    """
    hosts: dict[tuple[str, str], str] = {}
    for conference in (Conference.EASTERN, Conference.WESTERN):
        divisions = DIVISIONS_BY_CONFERENCE[conference]
        by_division = {
            division: sorted((t for t in teams if t.division == division), key=lambda t: t.id)
            for division in divisions
        }
        for div_a, div_b in combinations(divisions, 2):
            teams_a = by_division[div_a]
            teams_b = by_division[div_b]
            for i, team_a in enumerate(teams_a):
                for k, team_b in enumerate(teams_b):
                    offset = (k - i) % TEAMS_PER_DIVISION
                    if offset not in (0, 1):
                        continue
                    host = team_a.id if offset == 0 else team_b.id
                    hosts[pair_key(team_a.id, team_b.id)] = host
    return hosts


def classify_relationships(teams: list[Team]) -> dict[tuple[str, str], Relationship]:
    """
    Classify every unordered team pair.

    Raises:
        ScheduleError: if the teams do not form a 30-team, six-division league
    """
    check_league_shape(teams)

    ordered = sorted(teams, key=lambda t: t.id)
    three_game_hosts = _three_game_hosts(ordered)
    relationships: dict[tuple[str, str], Relationship] = {}

    for team_a, team_b in combinations(ordered, 2):
        key = (team_a.id, team_b.id)
        if team_a.division == team_b.division:
            rel = Relationship(
                RelationshipKind.DIVISION, team_a.id, team_b.id,
                games=DIVISION_GAMES, team_a_home=DIVISION_GAMES // 2,
            )
        elif team_a.conference == team_b.conference:
            host = three_game_hosts.get(key)
            if host is None:
                rel = Relationship(
                    RelationshipKind.CONFERENCE, team_a.id, team_b.id,
                    games=CONFERENCE_GAMES, team_a_home=CONFERENCE_GAMES // 2,
                )
            else:
                rel = Relationship(
                    RelationshipKind.CONFERENCE, team_a.id, team_b.id,
                    games=THREE_GAME_SERIES, team_a_home=2 if host == team_a.id else 1,
                )
        else:
            rel = Relationship(
                RelationshipKind.INTER_CONFERENCE, team_a.id, team_b.id,
                games=INTER_CONFERENCE_GAMES, team_a_home=1,
            )
        relationships[key] = rel

    return relationships


def three_game_opponents(
    relationships: dict[tuple[str, str], Relationship],
    team_id: str,
) -> list[str]:
    """Ids of the conference rivals a team plays only three times."""
    return sorted(
        rel.opponent_of(team_id)
        for rel in relationships.values()
        if rel.is_three_game and team_id in (rel.team_a_id, rel.team_b_id)
    )
