"""
Free Agent Signing.

Scores offers from the player's point of view and decides acceptance:
- score_offer: weighted money / winning / role / market sub-scores
- evaluate_offers: best offer wins if it clears the player's threshold
- generate_cpu_offers: competing offers from interested CPU teams
- validate_offer: hard errors and soft warnings for a user offer
- can_match_offer: restricted free agent matching
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from courtside.core.contracts.contract import ContractOffer, MAX_CONTRACT_YEARS
from courtside.core.contracts.salary import (
    can_afford_contract,
    round_half_up,
    round_to_unit,
)
from courtside.core.freeagency.free_agent import FreeAgent
from courtside.core.league.teams import MarketSize
from courtside.core.random_source import resolve_rng


logger = logging.getLogger(__name__)


MAX_ROSTER_SIZE = 15
MIN_ROSTER_SIZE = 12
SEASON_GAMES = 82

MARKET_SCORES = {
    MarketSize.LARGE: 100,
    MarketSize.MEDIUM: 65,
    MarketSize.SMALL: 35,
}


@dataclass
class TeamContext:
    """What a free agent knows about a team making an offer."""
    team_id: str
    team_name: str = ""
    wins: int = 0
    losses: int = 0
    market_size: MarketSize = MarketSize.MEDIUM
    roster_size: int = 13
    needs_position: bool = False
    star_count: int = 0  # Players over 80 OVR
    payroll: int = 0

    @property
    def win_pct(self) -> float:
        return self.wins / (self.wins + self.losses + 0.001)


@dataclass(frozen=True)
class OfferScore:
    """An offer as the player sees it. Every component is 0-100ish and rounded."""
    total: int
    money_score: int
    winning_score: int
    role_score: int
    market_score: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "money_score": self.money_score,
            "winning_score": self.winning_score,
            "role_score": self.role_score,
            "market_score": self.market_score,
        }


@dataclass(frozen=True)
class TeamOffer:
    """An offer paired with the team context it came from."""
    offer: ContractOffer
    team: TeamContext


@dataclass
class OfferEvaluation:
    """Outcome of a free agent weighing every offer on the table."""
    accepted_offer: Optional[ContractOffer]
    best_score: int
    threshold: int
    scores: dict[str, OfferScore] = field(default_factory=dict)

    @property
    def accepted_team_id(self) -> Optional[str]:
        return self.accepted_offer.team_id if self.accepted_offer else None

    def to_dict(self) -> dict:
        return {
            "accepted_offer": self.accepted_offer.to_dict() if self.accepted_offer else None,
            "accepted_team_id": self.accepted_team_id,
            "best_score": self.best_score,
            "threshold": self.threshold,
            "scores": {team_id: s.to_dict() for team_id, s in self.scores.items()},
        }


@dataclass
class OfferValidation:
    """Errors block the offer; warnings are advisory."""
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"valid": self.valid, "errors": list(self.errors), "warnings": list(self.warnings)}


# =============================================================================
# Offer Scoring
# =============================================================================

def _money_score(salary: int, asking: int, years: int) -> float:
    if asking <= 0 or salary >= asking:
        score = 100.0
    elif salary >= asking * 0.9:
        score = 80 + (salary - asking * 0.9) / (asking * 0.1) * 20
    elif salary >= asking * 0.75:
        score = 50 + (salary - asking * 0.75) / (asking * 0.15) * 30
    else:
        score = salary / (asking * 0.75) * 50

    # Longer deals mean more security
    return score + years * 3


def _role_score(overall: int, team: TeamContext) -> int:
    if overall >= 85 and team.star_count <= 1:
        return 100  # Be the man
    if overall >= 80 and team.star_count <= 2:
        return 80  # Be a star
    if team.needs_position:
        return 70  # Immediate starter
    if team.roster_size < MIN_ROSTER_SIZE:
        return 60  # Rotation player
    return 40  # Bench role


def score_offer(fa: FreeAgent, offer: ContractOffer, team: TeamContext) -> OfferScore:
    """Score an offer against the free agent's normalized preferences."""
    money_weight, winning_weight, role_weight, market_weight = fa.preferences.normalized()

    money_score = _money_score(offer.salary_per_year, fa.asking_salary, offer.years)
    winning_score = min(100.0, team.win_pct * 100 + team.star_count * 5)
    role_score = _role_score(fa.overall, team)
    market_score = MARKET_SCORES[team.market_size]

    total = (
        money_score * money_weight
        + winning_score * winning_weight
        + role_score * role_weight
        + market_score * market_weight
    )

    return OfferScore(
        total=round_half_up(total),
        money_score=round_half_up(money_score),
        winning_score=round_half_up(winning_score),
        role_score=role_score,
        market_score=market_score,
    )


def evaluate_offers(fa: FreeAgent, offers: list[TeamOffer]) -> OfferEvaluation:
    """
    Score every offer and accept the best one if it clears the threshold.

    Ties keep the earlier offer. The threshold is 50 + (overall - 70), so
    better players turn down offers that would satisfy role players.
    """
    threshold = fa.acceptance_threshold
    scores: dict[str, OfferScore] = {}
    best_offer: Optional[ContractOffer] = None
    best_score = 0

    for team_offer in offers:
        score = score_offer(fa, team_offer.offer, team_offer.team)
        scores[team_offer.team.team_id] = score
        if score.total > best_score:
            best_score = score.total
            best_offer = team_offer.offer

    if best_offer is None or best_score < threshold:
        logger.debug(
            f"{fa.player_name or fa.player_id} rejected {len(offers)} offer(s): "
            f"best {best_score} < threshold {threshold}"
        )
        return OfferEvaluation(None, best_score, threshold, scores)

    logger.debug(
        f"{fa.player_name or fa.player_id} accepts offer from {best_offer.team_id} "
        f"(score {best_score}, threshold {threshold})"
    )
    return OfferEvaluation(best_offer, best_score, threshold, scores)


# =============================================================================
# CPU Offers
# =============================================================================

def _team_need_score(team: TeamContext) -> float:
    return (30 if team.needs_position else 0) + (MAX_ROSTER_SIZE - team.roster_size) * 2 + (SEASON_GAMES - team.wins) / 2


def _offer_years(age: int, rng: random.Random) -> int:
    if age <= 27:
        return rng.randint(2, 4)
    if age <= 32:
        return rng.randint(2, 3)
    return rng.randint(1, 2)


def generate_cpu_offers(
    fa: FreeAgent,
    interested_teams: list[TeamContext],
    max_offers: int = 3,
    rng: Optional[random.Random] = None,
) -> list[TeamOffer]:
    """
    Build offers from the CPU teams that need the player most.

    Need ranks position need first, then open roster spots, then how bad the
    team was. Teams that need the position pay 110% of market value, others 95%.
    """
    rng = resolve_rng(rng)
    ranked = sorted(interested_teams, key=_team_need_score, reverse=True)

    offers = []
    for team in ranked[:max_offers]:
        need_multiplier = 1.1 if team.needs_position else 0.95
        salary = round_to_unit(round_half_up(fa.market_value * need_multiplier))
        offers.append(TeamOffer(
            offer=ContractOffer(
                team_id=team.team_id,
                player_id=fa.player_id,
                years=_offer_years(fa.age, rng),
                salary_per_year=salary,
            ),
            team=team,
        ))
    return offers


# =============================================================================
# Validation and Matching
# =============================================================================

def validate_offer(team: TeamContext, offer: ContractOffer, fa: FreeAgent) -> OfferValidation:
    """Check a user offer for hard errors and advisory warnings."""
    errors = []
    warnings = []

    if team.roster_size >= MAX_ROSTER_SIZE:
        errors.append(f"Roster is full ({MAX_ROSTER_SIZE} players max)")

    affordability = can_afford_contract(team.payroll, offer.salary_per_year)
    if not affordability.can_sign:
        errors.append("Cannot afford this contract")

    if not 1 <= offer.years <= MAX_CONTRACT_YEARS:
        errors.append(f"Contract must be 1-{MAX_CONTRACT_YEARS} years")

    if offer.salary_per_year < fa.market_value * 0.5:
        warnings.append("Offer significantly below market value - unlikely to be accepted")
    if offer.salary_per_year > fa.market_value * 1.5:
        warnings.append("Offer significantly above market value")

    if affordability.tax_implication > 0:
        warnings.append(
            f"This signing will incur ${affordability.tax_implication / 1_000_000:.1f}M in luxury tax"
        )

    return OfferValidation(valid=not errors, errors=errors, warnings=warnings)


def can_match_offer(rights_team: TeamContext, offer: ContractOffer) -> bool:
    """Whether the team holding a restricted free agent's rights can match an offer sheet."""
    return can_afford_contract(rights_team.payroll, offer.salary_per_year).can_sign
