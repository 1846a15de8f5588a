"""
Trade Assets and Proposals.

A trade asset is one of three tagged shapes, each carrying only its own
fields plus the teams it moves between:
- PlayerAsset: overall / potential / age / salary
- DraftPickAsset: year / round / original team
- CashAsset: amount

A TradeProposal partitions assets across two or more teams. The evaluation
engine treats proposals as read-only input.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Optional, Union

from courtside.core.contracts.salary import SALARY_CAP, SalaryCap


class AssetType(Enum):
    """Kind of asset changing hands."""
    PLAYER = "player"
    DRAFT_PICK = "draft_pick"
    CASH = "cash"


@dataclass(frozen=True)
class PlayerAsset:
    """A player moving between teams."""
    asset_type: ClassVar[AssetType] = AssetType.PLAYER

    from_team_id: str
    to_team_id: str
    player_id: str
    overall: int
    potential: Optional[int] = None  # Defaults to overall
    age: int = 27
    salary: int = 0
    position: str = ""

    @property
    def effective_potential(self) -> int:
        return self.potential if self.potential is not None else self.overall

    def to_dict(self) -> dict:
        return {
            "asset_type": self.asset_type.value,
            "from_team_id": self.from_team_id,
            "to_team_id": self.to_team_id,
            "player_id": self.player_id,
            "overall": self.overall,
            "potential": self.potential,
            "age": self.age,
            "salary": self.salary,
            "position": self.position,
        }


@dataclass(frozen=True)
class DraftPickAsset:
    """A draft pick moving between teams."""
    asset_type: ClassVar[AssetType] = AssetType.DRAFT_PICK

    from_team_id: str
    to_team_id: str
    year: int
    round: int
    original_team_id: Optional[str] = None
    # Win total of the team whose pick this is, when known
    original_team_wins: Optional[int] = None
    is_pick_swap: bool = False

    def to_dict(self) -> dict:
        return {
            "asset_type": self.asset_type.value,
            "from_team_id": self.from_team_id,
            "to_team_id": self.to_team_id,
            "year": self.year,
            "round": self.round,
            "original_team_id": self.original_team_id,
            "original_team_wins": self.original_team_wins,
            "is_pick_swap": self.is_pick_swap,
        }


@dataclass(frozen=True)
class CashAsset:
    """Cash considerations."""
    asset_type: ClassVar[AssetType] = AssetType.CASH

    from_team_id: str
    to_team_id: str
    amount: int

    def to_dict(self) -> dict:
        return {
            "asset_type": self.asset_type.value,
            "from_team_id": self.from_team_id,
            "to_team_id": self.to_team_id,
            "amount": self.amount,
        }


TradeAsset = Union[PlayerAsset, DraftPickAsset, CashAsset]


def asset_from_dict(data: dict) -> TradeAsset:
    """Build the right asset shape from its ``asset_type`` tag."""
    asset_type = AssetType(data["asset_type"])
    common = {"from_team_id": str(data["from_team_id"]), "to_team_id": str(data["to_team_id"])}

    if asset_type == AssetType.PLAYER:
        return PlayerAsset(
            **common,
            player_id=str(data["player_id"]),
            overall=int(data["overall"]),
            potential=data.get("potential"),
            age=data.get("age", 27),
            salary=data.get("salary", 0),
            position=data.get("position", ""),
        )
    if asset_type == AssetType.DRAFT_PICK:
        return DraftPickAsset(
            **common,
            year=int(data["year"]),
            round=int(data["round"]),
            original_team_id=data.get("original_team_id"),
            original_team_wins=data.get("original_team_wins"),
            is_pick_swap=data.get("is_pick_swap", False),
        )
    return CashAsset(**common, amount=int(data["amount"]))


# =============================================================================
# Proposals
# =============================================================================

class TradeStatus(Enum):
    """Lifecycle of a trade proposal."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COUNTERED = "countered"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


@dataclass
class TradeProposal:
    """A set of assets exchanged between two or more teams."""
    id: str
    teams: list[str]
    assets: list[TradeAsset] = field(default_factory=list)
    status: TradeStatus = TradeStatus.PENDING
    proposed_by: str = ""

    def incoming_for(self, team_id: str) -> list[TradeAsset]:
        return [a for a in self.assets if a.to_team_id == team_id]

    def outgoing_for(self, team_id: str) -> list[TradeAsset]:
        return [a for a in self.assets if a.from_team_id == team_id]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "teams": list(self.teams),
            "assets": [a.to_dict() for a in self.assets],
            "status": self.status.value,
            "proposed_by": self.proposed_by,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TradeProposal":
        return cls(
            id=str(data["id"]),
            teams=[str(t) for t in data["teams"]],
            assets=[asset_from_dict(a) for a in data.get("assets", [])],
            status=TradeStatus(data.get("status", "pending")),
            proposed_by=str(data.get("proposed_by", "")),
        )


# =============================================================================
# Team and Player Snapshots
# =============================================================================

@dataclass
class TeamTradeContext:
    """A team's competitive and financial state at the time of a trade."""
    team_id: str
    team_name: str
    wins: int
    losses: int
    payroll: int
    cap_space: int
    roster_size: int
    is_contender: bool = False
    is_rebuilding: bool = False
    positional_needs: list[str] = field(default_factory=list)

    @classmethod
    def from_record(
        cls,
        team_id: str,
        team_name: str,
        wins: int,
        losses: int,
        payroll: int,
        roster_size: int,
        positional_needs: Optional[list[str]] = None,
        cap: SalaryCap = SALARY_CAP,
    ) -> "TeamTradeContext":
        """Derive cap space and contender / rebuilding flags from raw standings."""
        return cls(
            team_id=team_id,
            team_name=team_name,
            wins=wins,
            losses=losses,
            payroll=payroll,
            cap_space=cap.cap - payroll,
            roster_size=roster_size,
            is_contender=wins > 41,
            is_rebuilding=wins < 30,
            positional_needs=list(positional_needs or []),
        )


@dataclass(frozen=True)
class PlayerTradeStatus:
    """Transaction history that restricts when a player can be moved."""
    player_id: str
    salary: int = 0
    signed_date: Optional[date] = None
    last_traded_at: Optional[date] = None
    no_trade_clause: bool = False


@dataclass
class TradeRules:
    """Salary matching, restriction windows and roster limits."""
    over_cap_percentage: float = 1.25
    over_cap_flat: int = 100_000
    newly_signed_days: int = 60
    retrade_days: int = 30
    min_roster: int = 12
    max_roster: int = 15

    def validate(self) -> list[str]:
        """Validate rules, return list of errors."""
        errors = []
        if self.over_cap_percentage < 1.0:
            errors.append("over_cap_percentage must be at least 1.0")
        if self.min_roster > self.max_roster:
            errors.append("min_roster cannot exceed max_roster")
        return errors


DEFAULT_TRADE_RULES = TradeRules()
