"""CPU team AI: strategy classification and autonomous decisions."""

from courtside.core.ai.strategy import (
    TeamStrategy,
    CPUTeamContext,
    StrategyProfile,
    STRATEGY_PROFILES,
    determine_team_strategy,
    strategy_profile,
)
from courtside.core.ai.cpu import (
    RosterPlayer,
    IncomingTradeEvaluation,
    FreeAgentTarget,
    DraftProspect,
    DraftSelection,
    StarterSelection,
    DecisionType,
    AIDecision,
    IncomingTradeOffer,
    build_cpu_team_context,
    analyze_positional_needs,
    evaluate_incoming_trade,
    evaluate_free_agent_target,
    select_draft_pick,
    select_starters,
    get_recommendations,
    generate_cpu_actions,
)

__all__ = [
    "TeamStrategy",
    "CPUTeamContext",
    "StrategyProfile",
    "STRATEGY_PROFILES",
    "determine_team_strategy",
    "strategy_profile",
    "RosterPlayer",
    "IncomingTradeEvaluation",
    "FreeAgentTarget",
    "DraftProspect",
    "DraftSelection",
    "StarterSelection",
    "DecisionType",
    "AIDecision",
    "IncomingTradeOffer",
    "build_cpu_team_context",
    "analyze_positional_needs",
    "evaluate_incoming_trade",
    "evaluate_free_agent_target",
    "select_draft_pick",
    "select_starters",
    "get_recommendations",
    "generate_cpu_actions",
]
