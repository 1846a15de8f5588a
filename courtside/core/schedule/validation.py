"""
Schedule Validation.

Independently re-derives game counts from a schedule and reports violations:
- validate_schedule: generated (in-memory) games, optionally pair by pair
- validate_schedule_insertion: rows read back from the schedule store
- assert_valid_schedule: hard gate that raises on any issue

Run the insertion check directly after any write that touches the schedule.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import pandas as pd

from courtside.core.league.teams import Team
from courtside.core.schedule.generator import ScheduledGame
from courtside.core.schedule.relationships import (
    RelationshipKind,
    ScheduleError,
    THREE_GAME_OPPONENTS_PER_TEAM,
    classify_relationships,
    pair_key,
)


logger = logging.getLogger(__name__)


GAMES_PER_TEAM = 82
HOME_GAMES_PER_TEAM = 41
TOTAL_REGULAR_SEASON_GAMES = 1230
PRESEASON_GAMES_PER_TEAM = 8
TOTAL_PRESEASON_GAMES = 120


class ScheduleValidationError(ValueError):
    """Raised when a persisted schedule fails validation."""

    def __init__(self, issues: list[str]):
        self.issues = issues
        super().__init__("Schedule validation failed: " + "; ".join(issues))


@dataclass
class ScheduleValidation:
    """Result of validating a generated schedule."""
    valid: bool
    issues: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"valid": self.valid, "issues": list(self.issues)}


@dataclass(frozen=True)
class TeamGameCount:
    """A team whose persisted regular season counts are off."""
    team_id: str
    abbreviation: str
    games: int
    home_games: int

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "abbreviation": self.abbreviation,
            "games": self.games,
            "home_games": self.home_games,
        }


@dataclass
class InsertionValidation:
    """Result of validating persisted schedule rows."""
    valid: bool
    regular_games: int
    teams_with_wrong_count: list[TeamGameCount] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "regular_games": self.regular_games,
            "teams_with_wrong_count": [t.to_dict() for t in self.teams_with_wrong_count],
            "issues": list(self.issues),
        }


# =============================================================================
# In-memory Validation
# =============================================================================

def _pair_issues(
    regular: list[ScheduledGame],
    teams: list[Team],
    abbrs: dict[str, str],
) -> list[str]:
    """Check each pair's series against its relationship."""
    try:
        relationships = classify_relationships(teams)
    except ScheduleError as exc:
        return [f"Cannot check pairings: {exc}"]

    games_by_pair: Counter = Counter()
    home_by_pair: Counter = Counter()
    for game in regular:
        key = pair_key(game.home_team_id, game.away_team_id)
        games_by_pair[key] += 1
        home_by_pair[(key, game.home_team_id)] += 1

    issues = []
    three_game_counts: Counter = Counter()

    for key, rel in sorted(relationships.items()):
        a, b = abbrs[rel.team_a_id], abbrs[rel.team_b_id]
        played = games_by_pair.get(key, 0)
        a_home = home_by_pair.get((key, rel.team_a_id), 0)
        b_home = home_by_pair.get((key, rel.team_b_id), 0)

        if rel.kind == RelationshipKind.DIVISION:
            if played != 4 or a_home != 2:
                issues.append(f"{a} vs {b}: expected 4 division games split 2/2, found {a_home}/{b_home}")
        elif rel.kind == RelationshipKind.CONFERENCE:
            if played not in (3, 4):
                issues.append(f"{a} vs {b}: expected 3 or 4 conference games, found {played}")
            if played == 3:
                three_game_counts[rel.team_a_id] += 1
                three_game_counts[rel.team_b_id] += 1
        else:
            if played != 2 or a_home != 1:
                issues.append(
                    f"{a} vs {b}: expected 2 inter-conference games split 1/1, found {a_home}/{b_home}"
                )

    for team in sorted(teams, key=lambda t: t.id):
        count = three_game_counts.get(team.id, 0)
        if count != THREE_GAME_OPPONENTS_PER_TEAM:
            issues.append(
                f"{team.abbreviation} has {count} three-game opponents "
                f"instead of {THREE_GAME_OPPONENTS_PER_TEAM}"
            )

    return issues


def _preseason_issues(preseason: list[ScheduledGame], teams: list[Team]) -> list[str]:
    counts: Counter = Counter()
    for game in preseason:
        counts[game.home_team_id] += 1
        counts[game.away_team_id] += 1

    issues = []
    for team in sorted(teams, key=lambda t: t.id):
        count = counts.get(team.id, 0)
        if count != PRESEASON_GAMES_PER_TEAM:
            issues.append(
                f"{team.abbreviation} has {count} preseason games instead of {PRESEASON_GAMES_PER_TEAM}"
            )
    if len(preseason) != TOTAL_PRESEASON_GAMES:
        issues.append(f"Expected {TOTAL_PRESEASON_GAMES} preseason games, got {len(preseason)}")
    return issues


def validate_schedule(
    games: list[ScheduledGame],
    teams: list[Team],
    check_pairs: bool = False,
) -> ScheduleValidation:
    """
    Validate a generated schedule.

    Every team must have 82 regular season games with 41 at home, and the
    league must have 1230 in total. With ``check_pairs`` each pair's series
    length and the preseason allotment are checked as well.
    """
    regular = [g for g in games if not g.is_preseason]
    abbrs = {t.id: t.abbreviation for t in teams}

    totals: Counter = Counter()
    homes: Counter = Counter()
    for game in regular:
        totals[game.home_team_id] += 1
        totals[game.away_team_id] += 1
        homes[game.home_team_id] += 1

    issues = []
    for team in teams:
        total = totals.get(team.id, 0)
        home = homes.get(team.id, 0)
        if total != GAMES_PER_TEAM:
            issues.append(f"{team.abbreviation} has {total} games instead of {GAMES_PER_TEAM}")
        if home != HOME_GAMES_PER_TEAM:
            issues.append(f"{team.abbreviation} has {home} home games instead of {HOME_GAMES_PER_TEAM}")

    if len(regular) != TOTAL_REGULAR_SEASON_GAMES:
        issues.append(f"Expected {TOTAL_REGULAR_SEASON_GAMES} regular season games, got {len(regular)}")

    if check_pairs:
        issues.extend(_pair_issues(regular, teams, abbrs))
        issues.extend(_preseason_issues([g for g in games if g.is_preseason], teams))

    return ScheduleValidation(valid=not issues, issues=issues)


# =============================================================================
# Persisted Row Validation
# =============================================================================

# Text spellings of booleans as CSV files and some drivers return them
TEXT_FLAGS = {
    "true": True,
    "t": True,
    "yes": True,
    "1": True,
    "false": False,
    "f": False,
    "no": False,
    "0": False,
    "": False,
}


def _preseason_flag(value: Any) -> bool:
    if isinstance(value, str):
        key = value.strip().lower()
        if key not in TEXT_FLAGS:
            raise ValueError(f"Unrecognized is_preseason value: {value!r}")
        return TEXT_FLAGS[key]
    if pd.isna(value):
        return False
    return bool(value)


def _rows_frame(rows: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    frame = pd.DataFrame(
        [dict(row) for row in rows],
        columns=["home_team_id", "away_team_id", "is_preseason"],
    )
    frame["is_preseason"] = frame["is_preseason"].map(_preseason_flag).astype(bool)
    return frame


def validate_schedule_insertion(
    rows: Iterable[Mapping[str, Any]],
    teams: list[Team],
) -> InsertionValidation:
    """
    Validate schedule rows as read back from storage.

    The aggregation mirrors the group-by the store itself would run, so a
    partial or duplicated write shows up as wrong per-team counts.
    """
    frame = _rows_frame(rows)
    regular = frame[~frame["is_preseason"]]
    team_ids = [t.id for t in teams]

    home = regular.groupby("home_team_id").size().reindex(team_ids, fill_value=0)
    away = regular.groupby("away_team_id").size().reindex(team_ids, fill_value=0)
    counts = pd.DataFrame({"games": home + away, "home_games": home})
    counts["abbreviation"] = [t.abbreviation for t in teams]

    issues = []
    regular_games = int(len(regular))
    if regular_games != TOTAL_REGULAR_SEASON_GAMES:
        issues.append(f"Expected {TOTAL_REGULAR_SEASON_GAMES} regular season games, found {regular_games}")

    wrong_total = counts[counts["games"] != GAMES_PER_TEAM].sort_values(["games", "abbreviation"])
    wrong_home = counts[counts["home_games"] != HOME_GAMES_PER_TEAM].sort_values(["home_games", "abbreviation"])

    if not wrong_total.empty:
        listed = ", ".join(f"{r.abbreviation}({r.games})" for r in wrong_total.itertuples())
        issues.append(f"Teams with incorrect game counts: {listed}")
    if not wrong_home.empty:
        listed = ", ".join(f"{r.abbreviation}({r.home_games})" for r in wrong_home.itertuples())
        issues.append(f"Teams with incorrect home game counts: {listed}")

    wrong = [
        TeamGameCount(
            team_id=str(team_id),
            abbreviation=row.abbreviation,
            games=int(row.games),
            home_games=int(row.home_games),
        )
        for team_id, row in wrong_total.iterrows()
    ]

    return InsertionValidation(
        valid=not issues,
        regular_games=regular_games,
        teams_with_wrong_count=wrong,
        issues=issues,
    )


def assert_valid_schedule(
    rows: Iterable[Mapping[str, Any]],
    teams: list[Team],
) -> InsertionValidation:
    """
    Validate persisted rows and raise if anything is off.

    Raises:
        ScheduleValidationError: with every issue joined by "; "
    """
    result = validate_schedule_insertion(rows, teams)
    if not result.valid:
        logger.error(f"Schedule validation failed with {len(result.issues)} issue(s)")
        raise ScheduleValidationError(result.issues)
    return result
