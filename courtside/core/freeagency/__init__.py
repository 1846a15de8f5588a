"""Free agency: preferences, asking salaries, offer scoring and signing."""

from courtside.core.freeagency.free_agent import (
    FAType,
    FAStatus,
    InvalidStatusTransition,
    PlayerTraits,
    FAPreferences,
    FreeAgent,
    FreeAgentProfile,
    generate_fa_preferences,
    calculate_asking_salary,
    create_free_agent,
)
from courtside.core.freeagency.signing import (
    TeamContext,
    OfferScore,
    TeamOffer,
    OfferEvaluation,
    OfferValidation,
    score_offer,
    evaluate_offers,
    generate_cpu_offers,
    validate_offer,
    can_match_offer,
)

__all__ = [
    "FAType",
    "FAStatus",
    "InvalidStatusTransition",
    "PlayerTraits",
    "FAPreferences",
    "FreeAgent",
    "FreeAgentProfile",
    "generate_fa_preferences",
    "calculate_asking_salary",
    "create_free_agent",
    "TeamContext",
    "OfferScore",
    "TeamOffer",
    "OfferEvaluation",
    "OfferValidation",
    "score_offer",
    "evaluate_offers",
    "generate_cpu_offers",
    "validate_offer",
    "can_match_offer",
]
