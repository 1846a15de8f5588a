"""
Free Agents.

A free agent is a player-in-market snapshot:
- Identity and ratings (overall, potential, age, position, years pro)
- A 4-axis preference vector (money / winning / role / market), each 0-100
- Derived asking salary and market value
- Market status (available -> negotiating -> signed / withdrawn)

Preferences are independent importance weights; they are normalized only
when an offer is scored.
"""

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from courtside.core.contracts.salary import calculate_market_value, round_half_up, round_to_unit
from courtside.core.random_source import make_rng, resolve_rng


PREFERENCE_NOISE = 10


class FAType(Enum):
    """Free agent type."""
    UNRESTRICTED = "unrestricted"
    RESTRICTED = "restricted"  # Original team may match any offer


class FAStatus(Enum):
    """Where a free agent is in the market."""
    AVAILABLE = "available"
    NEGOTIATING = "negotiating"
    SIGNED = "signed"
    WITHDRAWN = "withdrawn"


ALLOWED_STATUS_TRANSITIONS: dict[FAStatus, set[FAStatus]] = {
    FAStatus.AVAILABLE: {FAStatus.NEGOTIATING, FAStatus.SIGNED, FAStatus.WITHDRAWN},
    FAStatus.NEGOTIATING: {FAStatus.AVAILABLE, FAStatus.SIGNED, FAStatus.WITHDRAWN},
    FAStatus.SIGNED: set(),
    FAStatus.WITHDRAWN: set(),
}


class InvalidStatusTransition(Exception):
    """Raised when a free agent is moved to a status it cannot reach."""

    def __init__(self, current: FAStatus, target: FAStatus):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move free agent from {current.value} to {target.value}")


@dataclass(frozen=True)
class PlayerTraits:
    """Hidden personality traits that drive market preferences (0-100)."""
    greed: int = 50
    ego: int = 50
    loyalty: int = 50


@dataclass(frozen=True)
class FAPreferences:
    """How much a free agent cares about each aspect of an offer (0-100 each)."""
    money: int
    winning: int
    role: int
    market: int

    def normalized(self) -> tuple[float, float, float, float]:
        """Weights summing to 1; equal weights when every priority is 0."""
        total = self.money + self.winning + self.role + self.market
        if total <= 0:
            return (0.25, 0.25, 0.25, 0.25)
        return (
            self.money / total,
            self.winning / total,
            self.role / total,
            self.market / total,
        )

    def to_dict(self) -> dict:
        return {
            "money": self.money,
            "winning": self.winning,
            "role": self.role,
            "market": self.market,
        }


@dataclass(frozen=True)
class FreeAgent:
    """
    A player on the open market.

    Frozen: status changes go through ``with_status`` which returns a new
    snapshot and rejects illegal moves.
    """
    player_id: str
    player_name: str
    position: str
    overall: int
    potential: int
    age: int
    years_pro: int

    preferences: FAPreferences
    asking_salary: int
    market_value: int

    fa_type: FAType = FAType.UNRESTRICTED
    rights_team_id: Optional[str] = None
    status: FAStatus = FAStatus.AVAILABLE

    @property
    def is_restricted(self) -> bool:
        return self.fa_type == FAType.RESTRICTED

    @property
    def acceptance_threshold(self) -> int:
        """Minimum offer score this player will accept. Better players demand more."""
        return 50 + (self.overall - 70)

    def with_status(self, status: FAStatus) -> "FreeAgent":
        """Return a copy in the new status, or raise InvalidStatusTransition."""
        if status == self.status:
            return self
        if status not in ALLOWED_STATUS_TRANSITIONS[self.status]:
            raise InvalidStatusTransition(self.status, status)
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "position": self.position,
            "overall": self.overall,
            "potential": self.potential,
            "age": self.age,
            "years_pro": self.years_pro,
            "fa_type": self.fa_type.value,
            "rights_team_id": self.rights_team_id,
            "money_priority": self.preferences.money,
            "winning_priority": self.preferences.winning,
            "role_priority": self.preferences.role,
            "market_size_priority": self.preferences.market,
            "asking_salary": self.asking_salary,
            "market_value": self.market_value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FreeAgent":
        return cls(
            player_id=str(data["player_id"]),
            player_name=data.get("player_name", ""),
            position=data.get("position", ""),
            overall=int(data["overall"]),
            potential=int(data.get("potential", data["overall"])),
            age=int(data["age"]),
            years_pro=int(data.get("years_pro", 0)),
            preferences=FAPreferences(
                money=int(data.get("money_priority", 50)),
                winning=int(data.get("winning_priority", 50)),
                role=int(data.get("role_priority", 50)),
                market=int(data.get("market_size_priority", 50)),
            ),
            asking_salary=int(data["asking_salary"]),
            market_value=int(data["market_value"]),
            fa_type=FAType(data.get("fa_type", "unrestricted")),
            rights_team_id=data.get("rights_team_id"),
            status=FAStatus(data.get("status", "available")),
        )


@dataclass
class FreeAgentProfile:
    """A player whose contract lapsed or who was waived, before entering the market."""
    player_id: str
    player_name: str
    position: str
    overall: int
    potential: int
    age: int
    years_pro: int
    traits: PlayerTraits = field(default_factory=PlayerTraits)
    previous_team_id: Optional[str] = None


# =============================================================================
# Preferences and Asking Price
# =============================================================================

def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _age_bonus(age: int) -> int:
    if age > 32:
        return 20
    if age > 30:
        return 10
    return 0


def _star_bonus(overall: int) -> int:
    if overall > 85:
        return 20
    if overall > 80:
        return 10
    return 0


def generate_fa_preferences(
    traits: PlayerTraits,
    age: int,
    overall: int,
    rng: Optional[random.Random] = None,
) -> FAPreferences:
    """
    Derive a preference vector from hidden traits plus +/-10 noise.

    - money follows greed
    - winning rises with age (veterans chase rings)
    - role follows ego
    - market matters more to stars
    """
    rng = resolve_rng(rng)

    def noise() -> float:
        return rng.uniform(-PREFERENCE_NOISE, PREFERENCE_NOISE)

    money = _clamp(traits.greed + noise(), 20, 100)
    winning = _clamp(50 + _age_bonus(age) + noise(), 20, 100)
    role = _clamp(traits.ego * 0.7 + 30 + noise(), 20, 100)
    market = _clamp(30 + _star_bonus(overall) + noise(), 10, 100)

    return FAPreferences(
        money=round_half_up(money),
        winning=round_half_up(winning),
        role=round_half_up(role),
        market=round_half_up(market),
    )


def calculate_asking_salary(market_value: int, greed: int) -> int:
    """Market value scaled by greed (0.9x to 1.2x), rounded to $100K."""
    greed_multiplier = 0.9 + (greed / 100) * 0.3
    return round_to_unit(round_half_up(market_value * greed_multiplier))


def create_free_agent(
    profile: FreeAgentProfile,
    season_id: str,
    fa_type: FAType = FAType.UNRESTRICTED,
    rng: Optional[random.Random] = None,
) -> FreeAgent:
    """
    Put a player on the market.

    Without an explicit ``rng`` the preference noise is seeded from the
    season and player, so the same player enters the same market the same way.
    """
    if rng is None:
        rng = make_rng(f"{season_id}:{profile.player_id}")

    market_value = calculate_market_value(
        profile.overall, profile.age, profile.years_pro, profile.potential
    )
    preferences = generate_fa_preferences(profile.traits, profile.age, profile.overall, rng)

    return FreeAgent(
        player_id=profile.player_id,
        player_name=profile.player_name,
        position=profile.position,
        overall=profile.overall,
        potential=profile.potential,
        age=profile.age,
        years_pro=profile.years_pro,
        preferences=preferences,
        asking_salary=calculate_asking_salary(market_value, profile.traits.greed),
        market_value=market_value,
        fa_type=fa_type,
        rights_team_id=profile.previous_team_id if fa_type == FAType.RESTRICTED else None,
        status=FAStatus.AVAILABLE,
    )
