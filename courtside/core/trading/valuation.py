"""
Trade Asset Valuation.

One scorer for every trade decision. Proposal evaluation and the CPU's
incoming-offer evaluation both call ``score_trade_side``; they differ only in
the StrategyWeights they pass and in the thresholds they apply to the result.
"""

from dataclasses import dataclass, field

from courtside.core.contracts.salary import round_half_up
from courtside.core.trading.assets import (
    CashAsset,
    DraftPickAsset,
    PlayerAsset,
    TradeAsset,
)


AVERAGE_TEAM_WINS = 41
WINS_PER_DRAFT_SLOT = 2.73


@dataclass(frozen=True)
class StrategyWeights:
    """How a team weighs players against picks."""
    player_multiplier: float = 1.0
    pick_multiplier: float = 1.0
    for_contender: bool = False


NEUTRAL_WEIGHTS = StrategyWeights()


@dataclass
class TradeScore:
    """Net value of one side of a trade, with one reasoning line per asset."""
    total: float = 0.0
    lines: list[str] = field(default_factory=list)

    @property
    def rounded(self) -> int:
        return round_half_up(self.total)


def calculate_player_value(
    overall: int,
    potential: int,
    age: int,
    salary: int,
    for_contender: bool,
) -> int:
    """
    Trade value of a player.

    - base: overall x 1.5
    - age: young players gain from potential, prime years +10, decline after 30
    - contract: underpaid players are worth more, overpaid less
    - contenders pay up for proven veterans, rebuilders for young upside
    """
    value = overall * 1.5

    if age < 25:
        value += max(0, 30 - age) * 2
        value += potential * 0.5
    elif age <= 30:
        value += 10
    else:
        value -= (age - 30) * 3

    expected_salary = (overall / 100) * 30_000_000
    value += (expected_salary - salary) / 1_000_000 * 2

    if for_contender:
        if age >= 28 and overall >= 75:
            value *= 1.2
    elif age <= 24 and potential >= 80:
        value *= 1.3

    return round_half_up(value)


def expected_draft_position(team_wins: int) -> int:
    """Rough draft slot (1-30) from a team's win total."""
    return max(1, min(30, round_half_up(team_wins / WINS_PER_DRAFT_SLOT)))


def estimate_pick_value(
    year: int,
    round: int,
    original_team_wins: int,
    current_year: int,
    is_contender: bool,
) -> int:
    """
    Trade value of a draft pick.

    First rounders start at 40 plus a lottery bonus by expected slot, second
    rounders at 15. Future picks lose 10% a year; non-contenders add 20%.
    """
    value = 40.0 if round == 1 else 15.0

    if round == 1:
        position = expected_draft_position(original_team_wins)
        if position <= 4:
            value += 50
        elif position <= 14:
            value += 30
        else:
            value += 20 - position / 2

    years_away = year - current_year
    if years_away > 0:
        value *= 0.9 ** years_away

    if not is_contender:
        value *= 1.2

    return round_half_up(value)


def cash_value(amount: int) -> float:
    """One point per $1M."""
    return amount / 1_000_000


def asset_value(
    asset: TradeAsset,
    weights: StrategyWeights,
    current_year: int,
    pick_wins: int = AVERAGE_TEAM_WINS,
) -> float:
    """Value of a single asset under the given weights. Picks are valued off ``pick_wins``."""
    if isinstance(asset, PlayerAsset):
        value = calculate_player_value(
            asset.overall,
            asset.effective_potential,
            asset.age,
            asset.salary,
            weights.for_contender,
        )
        return round_half_up(value * weights.player_multiplier)
    if isinstance(asset, DraftPickAsset):
        value = estimate_pick_value(
            asset.year,
            asset.round,
            pick_wins,
            current_year,
            weights.for_contender,
        )
        return round_half_up(value * weights.pick_multiplier)
    return cash_value(asset.amount)


def incoming_asset_value(asset: TradeAsset, weights: StrategyWeights, current_year: int) -> float:
    """Value of an asset being received. Picks use the original team's wins when known."""
    wins = AVERAGE_TEAM_WINS
    if isinstance(asset, DraftPickAsset) and asset.original_team_wins is not None:
        wins = asset.original_team_wins
    return asset_value(asset, weights, current_year, wins)


def score_trade_side(
    incoming: list[TradeAsset],
    outgoing: list[TradeAsset],
    weights: StrategyWeights,
    current_year: int,
    own_wins: int,
) -> TradeScore:
    """
    Value everything a team receives minus everything it gives up.

    Incoming picks use the original team's wins when known, otherwise an
    average team. Outgoing picks are valued off the team's own record.
    """
    score = TradeScore()

    for asset in incoming:
        value = incoming_asset_value(asset, weights, current_year)
        score.total += value

        if isinstance(asset, PlayerAsset):
            score.lines.append(f"+{round_half_up(value)}: Acquiring player (OVR {asset.overall})")
        elif isinstance(asset, DraftPickAsset):
            score.lines.append(f"+{round_half_up(value)}: Acquiring {asset.year} Round {asset.round} pick")
        elif isinstance(asset, CashAsset):
            score.lines.append(f"+{round_half_up(value)}: Cash consideration")

    for asset in outgoing:
        value = asset_value(asset, weights, current_year, own_wins)
        score.total -= value

        if isinstance(asset, PlayerAsset):
            score.lines.append(f"-{round_half_up(value)}: Losing player (OVR {asset.overall})")
        elif isinstance(asset, DraftPickAsset):
            score.lines.append(f"-{round_half_up(value)}: Losing {asset.year} Round {asset.round} pick")
        elif isinstance(asset, CashAsset):
            score.lines.append(f"-{round_half_up(value)}: Sending cash")

    return score
