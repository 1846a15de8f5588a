"""Service layer for the free agency API."""

from courtside.api.schemas.free_agency import (
    ContractOfferSchema,
    EvaluateOffersRequest,
    FreeAgentSchema,
    ScoreOfferRequest,
    TeamContextSchema,
)
from courtside.core.contracts.contract import ContractOffer
from courtside.core.freeagency.free_agent import FreeAgent
from courtside.core.freeagency.signing import (
    TeamContext,
    TeamOffer,
    evaluate_offers,
    score_offer,
    validate_offer,
)
from courtside.core.league.teams import MarketSize


def to_free_agent(schema: FreeAgentSchema) -> FreeAgent:
    return FreeAgent.from_dict(schema.model_dump(mode="json"))


def to_offer(schema: ContractOfferSchema) -> ContractOffer:
    return ContractOffer.from_dict(schema.model_dump(mode="json"))


def to_team_context(schema: TeamContextSchema) -> TeamContext:
    data = schema.model_dump(mode="json")
    data["market_size"] = MarketSize(data["market_size"])
    return TeamContext(**data)


def score(request: ScoreOfferRequest) -> dict:
    """Score one offer and check it for errors and warnings."""
    fa = to_free_agent(request.free_agent)
    offer = to_offer(request.offer)
    team = to_team_context(request.team)

    return {
        "score": score_offer(fa, offer, team).to_dict(),
        "validation": validate_offer(team, offer, fa).to_dict(),
    }


def evaluate(request: EvaluateOffersRequest) -> dict:
    """Let the free agent choose among every offer on the table."""
    fa = to_free_agent(request.free_agent)
    offers = [
        TeamOffer(offer=to_offer(o.offer), team=to_team_context(o.team))
        for o in request.offers
    ]
    return evaluate_offers(fa, offers).to_dict()
