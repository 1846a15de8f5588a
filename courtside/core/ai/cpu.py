"""
CPU Team AI.

Autonomous decisions for computer-controlled teams:
- Team context from roster and standings
- Positional needs
- Incoming trade offers (through the shared trade scorer)
- Free agent targeting
- Draft selection (best available blended with need and strategy)
- Starting lineup
- Front office recommendations
- Prioritized action list
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional

from courtside.core.contracts.salary import SALARY_CAP, SalaryCap, round_half_up
from courtside.core.freeagency.free_agent import FreeAgent
from courtside.core.ai.strategy import (
    CPUTeamContext,
    TeamStrategy,
    determine_team_strategy,
    strategy_profile,
)
from courtside.core.trading.assets import DraftPickAsset, PlayerAsset
from courtside.core.trading.valuation import score_trade_side


logger = logging.getLogger(__name__)


POSITIONS = ["PG", "SG", "SF", "PF", "C"]

STARTER_OVERALL = 75
STAR_OVERALL = 80
YOUNG_TALENT_AGE = 25
YOUNG_TALENT_POTENTIAL = 75

MAX_ROSTER_SIZE = 15
MIN_ROSTER_SIZE = 12

OVER_CAP_PENALTY = 20
FREE_AGENTS_CONSIDERED = 10


@dataclass
class RosterPlayer:
    """A rostered player, as the CPU AI sees the roster."""
    id: str
    position: str
    overall: int
    age: int
    potential: Optional[int] = None
    salary: int = 0
    stamina: int = 100
    injured: bool = False


# =============================================================================
# Team Context
# =============================================================================

def build_cpu_team_context(
    team_id: str,
    wins: int,
    losses: int,
    payroll: int,
    roster: list[RosterPlayer],
    team_name: str = "",
    cap: SalaryCap = SALARY_CAP,
) -> CPUTeamContext:
    """Derive a CPU team snapshot from standings, payroll and roster."""
    games = wins + losses
    win_pct = wins / games if games > 0 else 0.5

    avg_age = sum(p.age for p in roster) / len(roster) if roster else 25.0
    avg_overall = sum(p.overall for p in roster) / len(roster) if roster else 70.0
    star_count = sum(1 for p in roster if p.overall >= STAR_OVERALL)
    young_talent = sum(
        1 for p in roster
        if p.age < YOUNG_TALENT_AGE and (p.potential or p.overall) >= YOUNG_TALENT_POTENTIAL
    )

    return CPUTeamContext(
        team_id=team_id,
        team_name=team_name,
        wins=wins,
        losses=losses,
        win_pct=win_pct,
        payroll=payroll,
        cap_space=cap.cap - payroll,
        roster_size=len(roster),
        avg_age=avg_age,
        avg_overall=avg_overall,
        star_count=star_count,
        young_talent=young_talent,
        championship_window=star_count >= 2 and avg_age <= 30,
        positional_needs=analyze_positional_needs(roster),
    )


def analyze_positional_needs(roster: list[RosterPlayer]) -> list[str]:
    """
    Positions lacking a starter ("C"), or lacking depth ("C_depth").

    A position needs a starter when nobody there is 75+ OVR; otherwise it
    needs depth when fewer than two players play it.
    """
    needs = []
    for position in POSITIONS:
        at_position = [p for p in roster if p.position == position]
        starters = [p for p in at_position if p.overall >= STARTER_OVERALL]
        if not starters:
            needs.append(position)
        elif len(at_position) < 2:
            needs.append(f"{position}_depth")
    return needs


# =============================================================================
# Trades
# =============================================================================

@dataclass
class IncomingTradeEvaluation:
    """CPU verdict on a trade offer."""
    accept: bool
    score: int
    strategy: TeamStrategy
    reasoning: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "accept": self.accept,
            "score": self.score,
            "strategy": self.strategy.value,
            "reasoning": list(self.reasoning),
        }


def evaluate_incoming_trade(
    context: CPUTeamContext,
    incoming: list[PlayerAsset],
    outgoing: list[PlayerAsset],
    incoming_picks: list[DraftPickAsset],
    outgoing_picks: list[DraftPickAsset],
    current_year: Optional[int] = None,
) -> IncomingTradeEvaluation:
    """
    Decide on an incoming offer using the team's strategy weights.

    Taking on net salary beyond the team's cap space costs 20 points. The
    offer is accepted when the score reaches the strategy's threshold.
    """
    current_year = current_year or date.today().year
    strategy = determine_team_strategy(context)
    profile = strategy_profile(strategy)

    side = score_trade_side(
        list(incoming) + list(incoming_picks),
        list(outgoing) + list(outgoing_picks),
        profile.weights,
        current_year,
        context.wins,
    )
    score = side.total
    reasoning = list(side.lines)

    net_salary = sum(p.salary for p in incoming) - sum(p.salary for p in outgoing)
    if net_salary > 0 and context.cap_space < net_salary:
        reasoning.append("Trade would put team over cap")
        score -= OVER_CAP_PENALTY

    return IncomingTradeEvaluation(
        accept=score >= profile.accept_threshold,
        score=round_half_up(score),
        strategy=strategy,
        reasoning=reasoning,
    )


# =============================================================================
# Free Agency
# =============================================================================

@dataclass
class FreeAgentTarget:
    """How much a CPU team wants a free agent and what it would pay."""
    interested: bool
    max_offer: int
    interest: int = 0
    reasoning: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "interested": self.interested,
            "max_offer": self.max_offer,
            "interest": self.interest,
            "reasoning": list(self.reasoning),
        }


def evaluate_free_agent_target(context: CPUTeamContext, fa: FreeAgent) -> FreeAgentTarget:
    """Score a CPU team's interest in a free agent, starting from 50."""
    if fa.asking_salary > context.cap_space:
        return FreeAgentTarget(False, 0, 0, ["Cannot afford asking salary"])
    if context.roster_size >= MAX_ROSTER_SIZE:
        return FreeAgentTarget(False, 0, 0, ["Roster is full"])

    strategy = determine_team_strategy(context)
    fills_need = fa.position in context.positional_needs
    reasoning = []
    interest = 50

    if strategy == TeamStrategy.CONTENDING:
        if fa.overall >= 75 and fa.age >= 27:
            interest += 30
            reasoning.append("Veteran who can help contend now")
        elif fa.overall < 70:
            interest -= 20
            reasoning.append("Not good enough for a contender")
    elif strategy == TeamStrategy.REBUILDING:
        if fa.age < 26 and fa.potential >= 80:
            interest += 40
            reasoning.append("Young player with high potential")
        elif fa.age >= 30:
            interest -= 30
            reasoning.append("Too old for a rebuilding team")

    if fills_need:
        interest += 20
        reasoning.append(f"Fills need at {fa.position}")

    if fa.asking_salary < fa.overall * 300_000:
        interest += 15
        reasoning.append("Good value contract")

    max_offer = fa.asking_salary
    if interest >= 70 and fills_need:
        max_offer = round_half_up(fa.asking_salary * 1.1)
    elif interest < 50:
        max_offer = round_half_up(fa.asking_salary * 0.85)
    max_offer = min(max_offer, context.cap_space)

    return FreeAgentTarget(interest >= 50, max_offer, interest, reasoning)


# =============================================================================
# Draft
# =============================================================================

@dataclass(frozen=True)
class DraftProspect:
    """A draft-eligible player."""
    id: str
    position: str
    overall: int
    potential: int
    mock_draft_position: int
    big_board_rank: int = 0


@dataclass
class DraftSelection:
    prospect_id: str
    reasoning: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"prospect_id": self.prospect_id, "reasoning": list(self.reasoning)}


def _prospect_score(
    prospect: DraftProspect,
    pick_number: int,
    needs: list[str],
    strategy: TeamStrategy,
) -> float:
    score = prospect.overall + prospect.potential * 0.5

    value_over_slot = prospect.mock_draft_position - pick_number
    if value_over_slot > 5:
        score += 20
    elif value_over_slot > 0:
        score += 10

    if prospect.position in needs:
        score += 15

    if strategy == TeamStrategy.CONTENDING:
        score += prospect.overall * 0.3
    elif strategy == TeamStrategy.REBUILDING:
        score += prospect.potential * 0.4

    return score


def select_draft_pick(
    context: CPUTeamContext,
    prospects: list[DraftProspect],
    pick_number: int,
) -> DraftSelection:
    """Pick the best prospect by talent, value over slot, need and strategy."""
    if not prospects:
        return DraftSelection("", ["No prospects available"])

    strategy = determine_team_strategy(context)
    selected = max(
        prospects,
        key=lambda p: _prospect_score(p, pick_number, context.positional_needs, strategy),
    )

    reasoning = [f"Selected {selected.position} with {selected.overall} OVR, {selected.potential} POT"]
    if selected.position in context.positional_needs:
        reasoning.append(f"Fills positional need at {selected.position}")

    return DraftSelection(selected.id, reasoning)


# =============================================================================
# Lineup
# =============================================================================

@dataclass
class StarterSelection:
    starters: list[str] = field(default_factory=list)
    reasoning: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"starters": list(self.starters), "reasoning": list(self.reasoning)}


def select_starters(roster: list[RosterPlayer]) -> StarterSelection:
    """Best healthy player at each position, PG through C."""
    available = [p for p in roster if not p.injured]
    selection = StarterSelection()

    for position in POSITIONS:
        at_position = [p for p in available if p.position == position]
        if not at_position:
            continue
        starter = max(at_position, key=lambda p: p.overall)
        selection.starters.append(starter.id)
        selection.reasoning.append(f"Starting {position}: {starter.overall} OVR")

    return selection


# =============================================================================
# Recommendations and Actions
# =============================================================================

def get_recommendations(context: CPUTeamContext, strategy: TeamStrategy) -> list[str]:
    """Front office advice for a team's current strategy."""
    recs = []

    if context.positional_needs:
        recs.append(f"Target players at: {', '.join(context.positional_needs)}")

    if strategy == TeamStrategy.CONTENDING:
        recs.append("Focus on adding veteran contributors")
        if context.cap_space > 10_000_000:
            recs.append("Use cap space to add talent for playoff push")
    elif strategy == TeamStrategy.REBUILDING:
        recs.append("Prioritize draft picks and young players")
        recs.append("Consider trading veterans for future assets")
        if context.star_count >= 1:
            recs.append("Consider trading star for haul of picks")

    if context.roster_size < MIN_ROSTER_SIZE:
        recs.append("Need to add players - roster below minimum")
    elif context.roster_size > 14:
        recs.append("Roster nearly full - be selective with additions")

    return recs


class DecisionType(Enum):
    """Kind of action the CPU wants to take."""
    TRADE = "trade"
    SIGNING = "signing"
    RELEASE = "release"
    DRAFT = "draft"
    LINEUP = "lineup"


@dataclass
class AIDecision:
    """One CPU action. Priority runs 1-10, higher is more urgent."""
    type: DecisionType
    priority: int
    reasoning: list[str] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "priority": self.priority,
            "reasoning": list(self.reasoning),
            "details": dict(self.details),
        }


@dataclass
class IncomingTradeOffer:
    """A trade offer waiting on a CPU team's answer."""
    id: str
    incoming: list[PlayerAsset] = field(default_factory=list)
    outgoing: list[PlayerAsset] = field(default_factory=list)
    incoming_picks: list[DraftPickAsset] = field(default_factory=list)
    outgoing_picks: list[DraftPickAsset] = field(default_factory=list)


def generate_cpu_actions(
    context: CPUTeamContext,
    can_trade: bool = True,
    can_sign_fa: bool = True,
    can_draft: bool = False,
    free_agents: Optional[list[FreeAgent]] = None,
    trade_offers: Optional[list[IncomingTradeOffer]] = None,
    prospects: Optional[list[DraftProspect]] = None,
    pick_number: Optional[int] = None,
    current_year: Optional[int] = None,
) -> list[AIDecision]:
    """
    Everything a CPU team wants to do this phase, most urgent first.

    - accepted trade offers (priority 8)
    - free agents it is interested in, top 10 considered (priority 6)
    - a draft selection when it is on the clock (priority 7)
    - a forced release when over the roster limit (priority 10)
    """
    decisions = []

    if can_trade and trade_offers:
        for trade in trade_offers:
            evaluation = evaluate_incoming_trade(
                context,
                trade.incoming,
                trade.outgoing,
                trade.incoming_picks,
                trade.outgoing_picks,
                current_year,
            )
            if evaluation.accept:
                decisions.append(AIDecision(
                    type=DecisionType.TRADE,
                    priority=8,
                    reasoning=evaluation.reasoning,
                    details={"trade_id": trade.id, "action": "accept"},
                ))

    if can_sign_fa and free_agents and context.roster_size < MAX_ROSTER_SIZE:
        for fa in free_agents[:FREE_AGENTS_CONSIDERED]:
            target = evaluate_free_agent_target(context, fa)
            if target.interested:
                decisions.append(AIDecision(
                    type=DecisionType.SIGNING,
                    priority=6,
                    reasoning=target.reasoning,
                    details={"player_id": fa.player_id, "max_offer": target.max_offer},
                ))

    if can_draft and prospects and pick_number is not None:
        selection = select_draft_pick(context, prospects, pick_number)
        decisions.append(AIDecision(
            type=DecisionType.DRAFT,
            priority=7,
            reasoning=selection.reasoning,
            details={"prospect_id": selection.prospect_id, "pick_number": pick_number},
        ))

    if context.roster_size > MAX_ROSTER_SIZE:
        decisions.append(AIDecision(
            type=DecisionType.RELEASE,
            priority=10,
            reasoning=["Roster over limit, must release player"],
            details={"target": "lowest_overall"},
        ))

    decisions.sort(key=lambda d: d.priority, reverse=True)
    logger.debug(f"{context.team_id}: {len(decisions)} CPU action(s)")
    return decisions
