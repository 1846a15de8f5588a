"""
Trade Validation and Evaluation.

- validate_trade: salary matching, player restrictions and roster limits
  for every team in a proposal (errors block, warnings advise)
- evaluate_trade_for_team: net value from one team's side, thresholded into
  accept / counter / reject with a reasoning trail
- generate_counter_offer: for a near-even trade, ask for the cheapest extra
  asset that would make it worth accepting
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Optional

from courtside.core.contracts.salary import round_half_up
from courtside.core.trading.assets import (
    DEFAULT_TRADE_RULES,
    PlayerAsset,
    PlayerTradeStatus,
    TeamTradeContext,
    TradeAsset,
    TradeProposal,
    TradeRules,
    TradeStatus,
)
from courtside.core.trading.valuation import (
    StrategyWeights,
    incoming_asset_value,
    score_trade_side,
)


logger = logging.getLogger(__name__)


ACCEPT_ABOVE = 10
COUNTER_ABOVE = -5


@dataclass
class TradeValidation:
    """Errors block the trade; warnings are advisory."""
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"valid": self.valid, "errors": list(self.errors), "warnings": list(self.warnings)}


class Recommendation(Enum):
    """What a team should do with a proposal."""
    ACCEPT = "accept"
    COUNTER = "counter"
    REJECT = "reject"


@dataclass
class TradeEvaluation:
    """A proposal scored from one team's side."""
    team_id: str
    value_score: int
    recommendation: Recommendation
    reasoning: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "value_score": self.value_score,
            "recommendation": self.recommendation.value,
            "reasoning": list(self.reasoning),
        }


@dataclass
class CounterOffer:
    """A revised proposal asking for one more asset."""
    proposal: TradeProposal
    requested_asset: TradeAsset
    value_gap: int

    def to_dict(self) -> dict:
        return {
            "proposal": self.proposal.to_dict(),
            "requested_asset": self.requested_asset.to_dict(),
            "value_gap": self.value_gap,
        }


# =============================================================================
# Validation
# =============================================================================

def _as_date(value) -> date:
    return value.date() if isinstance(value, datetime) else value


def _player_salary(assets: list[TradeAsset]) -> int:
    return sum(a.salary for a in assets if isinstance(a, PlayerAsset))


def _player_count(assets: list[TradeAsset]) -> int:
    return sum(1 for a in assets if isinstance(a, PlayerAsset))


def validate_trade(
    proposal: TradeProposal,
    teams: dict[str, TeamTradeContext],
    players: dict[str, PlayerTradeStatus],
    today: Optional[date] = None,
    rules: TradeRules = DEFAULT_TRADE_RULES,
) -> TradeValidation:
    """
    Check a proposal against salary matching, restriction and roster rules.

    Teams missing from ``teams`` and players missing from ``players`` are
    not checked.
    """
    today = today or date.today()
    errors = []
    warnings = []

    # 1. Salary matching
    for team_id in proposal.teams:
        team = teams.get(team_id)
        if team is None:
            continue

        outgoing_salary = _player_salary(proposal.outgoing_for(team_id))
        incoming_salary = _player_salary(proposal.incoming_for(team_id))

        if team.cap_space <= 0:
            max_incoming = outgoing_salary * rules.over_cap_percentage + rules.over_cap_flat
            if incoming_salary > max_incoming:
                errors.append(
                    f"{team.team_name}: Incoming salary (${incoming_salary / 1_000_000:.1f}M) "
                    f"exceeds 125% + $100K of outgoing (${outgoing_salary / 1_000_000:.1f}M)"
                )
        elif incoming_salary > team.cap_space + outgoing_salary:
            errors.append(f"{team.team_name}: Insufficient cap space to absorb incoming salary")

    # 2. Player restrictions
    for asset in proposal.assets:
        if not isinstance(asset, PlayerAsset):
            continue
        player = players.get(asset.player_id)
        if player is None:
            continue

        if player.signed_date is not None:
            days_since_signed = (today - _as_date(player.signed_date)).days
            if days_since_signed < rules.newly_signed_days:
                errors.append(
                    f"Player cannot be traded within {rules.newly_signed_days} days of signing "
                    f"({rules.newly_signed_days - days_since_signed} days remaining)"
                )

        if player.last_traded_at is not None:
            days_since_traded = (today - _as_date(player.last_traded_at)).days
            if days_since_traded < rules.retrade_days:
                warnings.append(
                    f"Player was recently traded "
                    f"({rules.retrade_days - days_since_traded} days until tradeable)"
                )

        if player.no_trade_clause:
            warnings.append("Player has no-trade clause - needs approval")

    # 3. Roster sizes
    for team_id in proposal.teams:
        team = teams.get(team_id)
        if team is None:
            continue

        new_size = (
            team.roster_size
            - _player_count(proposal.outgoing_for(team_id))
            + _player_count(proposal.incoming_for(team_id))
        )
        if new_size > rules.max_roster:
            errors.append(f"{team.team_name}: Would exceed {rules.max_roster}-man roster ({new_size} players)")
        if new_size < rules.min_roster:
            errors.append(f"{team.team_name}: Would fall below {rules.min_roster}-man minimum ({new_size} players)")

    return TradeValidation(valid=not errors, errors=errors, warnings=warnings)


# =============================================================================
# Evaluation
# =============================================================================

def proposal_weights(context: TeamTradeContext) -> StrategyWeights:
    """Neutral player / pick weights; only the contender flag varies."""
    return StrategyWeights(for_contender=context.is_contender)


def recommend(value_score: float) -> tuple[Recommendation, str]:
    if value_score > ACCEPT_ABOVE:
        return Recommendation.ACCEPT, "Trade favors us significantly"
    if value_score > COUNTER_ABOVE:
        return Recommendation.COUNTER, "Trade is roughly even - may counter for better terms"
    return Recommendation.REJECT, "Trade does not favor us"


def evaluate_trade_for_team(
    team_id: str,
    proposal: TradeProposal,
    context: TeamTradeContext,
    current_year: int,
) -> TradeEvaluation:
    """Score a proposal from one team's side and recommend a response."""
    score = score_trade_side(
        proposal.incoming_for(team_id),
        proposal.outgoing_for(team_id),
        proposal_weights(context),
        current_year,
        context.wins,
    )
    recommendation, summary = recommend(score.total)

    logger.debug(f"Trade {proposal.id} for {team_id}: {score.total:.1f} -> {recommendation.value}")
    return TradeEvaluation(
        team_id=team_id,
        value_score=round_half_up(score.total),
        recommendation=recommendation,
        reasoning=score.lines + [summary],
    )


def generate_counter_offer(
    proposal: TradeProposal,
    team_id: str,
    evaluation: TradeEvaluation,
    available_assets: list[TradeAsset],
    context: TeamTradeContext,
    current_year: int,
) -> Optional[CounterOffer]:
    """
    Ask for the cheapest additional asset that turns a counter into an accept.

    ``available_assets`` are assets the other teams in the proposal could add;
    any not owned by a counterparty, or already in the trade, are ignored.
    Returns None unless the evaluation recommends countering and some asset
    closes the gap.
    """
    if evaluation.recommendation != Recommendation.COUNTER:
        return None

    gap = ACCEPT_ABOVE + 1 - evaluation.value_score
    weights = proposal_weights(context)

    candidates = []
    for asset in available_assets:
        if asset.from_team_id == team_id or asset.from_team_id not in proposal.teams:
            continue
        requested = replace(asset, to_team_id=team_id)
        if requested in proposal.assets:
            continue
        value = incoming_asset_value(requested, weights, current_year)
        if value >= gap:
            candidates.append((value, requested))

    if not candidates:
        logger.debug(f"No asset closes the {gap} point gap on trade {proposal.id}")
        return None

    value, requested = min(candidates, key=lambda c: c[0])
    counter = TradeProposal(
        id=f"{proposal.id}-counter",
        teams=list(proposal.teams),
        assets=list(proposal.assets) + [requested],
        status=TradeStatus.PENDING,
        proposed_by=team_id,
    )
    return CounterOffer(proposal=counter, requested_asset=requested, value_gap=gap)
