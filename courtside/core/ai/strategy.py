"""
Team Strategy.

Classifies a CPU team from its competitive snapshot into one of four
strategies and maps each strategy to the trade weights and accept
threshold it uses.

Strategy    | Player x | Pick x | Accept at
contending  |   1.3    |  0.6   |    5
competing   |   1.0    |  1.0   |    8
retooling   |   1.0    |  1.0   |    8
rebuilding  |   0.7    |  1.5   |   10
"""

from dataclasses import dataclass, field
from enum import Enum

from courtside.core.trading.valuation import StrategyWeights


class TeamStrategy(Enum):
    """Where a team is in its competitive cycle."""
    CONTENDING = "contending"
    COMPETING = "competing"
    RETOOLING = "retooling"
    REBUILDING = "rebuilding"


@dataclass
class CPUTeamContext:
    """Point-in-time snapshot of a CPU team, supplied by the caller."""
    team_id: str
    team_name: str = ""
    wins: int = 0
    losses: int = 0
    win_pct: float = 0.5
    payroll: int = 0
    cap_space: int = 0
    roster_size: int = 13
    avg_age: float = 25.0
    avg_overall: float = 70.0
    star_count: int = 0  # Players 80+ OVR
    young_talent: int = 0  # Players under 25 with 75+ potential
    championship_window: bool = False
    positional_needs: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "team_name": self.team_name,
            "wins": self.wins,
            "losses": self.losses,
            "win_pct": self.win_pct,
            "payroll": self.payroll,
            "cap_space": self.cap_space,
            "roster_size": self.roster_size,
            "avg_age": self.avg_age,
            "avg_overall": self.avg_overall,
            "star_count": self.star_count,
            "young_talent": self.young_talent,
            "championship_window": self.championship_window,
            "positional_needs": list(self.positional_needs),
        }


@dataclass(frozen=True)
class StrategyProfile:
    """Trade weights and decision threshold for a strategy."""
    strategy: TeamStrategy
    player_multiplier: float
    pick_multiplier: float
    accept_threshold: int
    values_like_contender: bool

    @property
    def weights(self) -> StrategyWeights:
        return StrategyWeights(
            player_multiplier=self.player_multiplier,
            pick_multiplier=self.pick_multiplier,
            for_contender=self.values_like_contender,
        )


STRATEGY_PROFILES: dict[TeamStrategy, StrategyProfile] = {
    TeamStrategy.CONTENDING: StrategyProfile(TeamStrategy.CONTENDING, 1.3, 0.6, 5, True),
    TeamStrategy.COMPETING: StrategyProfile(TeamStrategy.COMPETING, 1.0, 1.0, 8, True),
    TeamStrategy.RETOOLING: StrategyProfile(TeamStrategy.RETOOLING, 1.0, 1.0, 8, False),
    TeamStrategy.REBUILDING: StrategyProfile(TeamStrategy.REBUILDING, 0.7, 1.5, 10, False),
}


def determine_team_strategy(context: CPUTeamContext) -> TeamStrategy:
    """
    Classify a team.

    - contending: win% >= .600, 2+ stars and an open championship window
    - rebuilding: win% < .350, average age under 26 and 3+ young talents
    - middle of the pack (.350 to .550): retooling with young talent and
      fewer than 2 stars, competing otherwise
    - everyone else is competing
    """
    if context.win_pct >= 0.6 and context.star_count >= 2 and context.championship_window:
        return TeamStrategy.CONTENDING

    if context.win_pct < 0.35 and context.avg_age < 26 and context.young_talent >= 3:
        return TeamStrategy.REBUILDING

    if 0.35 <= context.win_pct < 0.55:
        if context.young_talent >= 2 and context.star_count < 2:
            return TeamStrategy.RETOOLING
        return TeamStrategy.COMPETING

    return TeamStrategy.COMPETING


def strategy_profile(strategy: TeamStrategy) -> StrategyProfile:
    return STRATEGY_PROFILES[strategy]
