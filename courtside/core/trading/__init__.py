"""Trading: asset valuation, proposal validation and evaluation."""

from courtside.core.trading.assets import (
    AssetType,
    PlayerAsset,
    DraftPickAsset,
    CashAsset,
    TradeAsset,
    asset_from_dict,
    TradeStatus,
    TradeProposal,
    TeamTradeContext,
    PlayerTradeStatus,
    TradeRules,
    DEFAULT_TRADE_RULES,
)
from courtside.core.trading.valuation import (
    StrategyWeights,
    NEUTRAL_WEIGHTS,
    TradeScore,
    calculate_player_value,
    estimate_pick_value,
    expected_draft_position,
    cash_value,
    asset_value,
    incoming_asset_value,
    score_trade_side,
)
from courtside.core.trading.evaluation import (
    TradeValidation,
    Recommendation,
    TradeEvaluation,
    CounterOffer,
    validate_trade,
    evaluate_trade_for_team,
    generate_counter_offer,
)

__all__ = [
    "AssetType",
    "PlayerAsset",
    "DraftPickAsset",
    "CashAsset",
    "TradeAsset",
    "asset_from_dict",
    "TradeStatus",
    "TradeProposal",
    "TeamTradeContext",
    "PlayerTradeStatus",
    "TradeRules",
    "DEFAULT_TRADE_RULES",
    "StrategyWeights",
    "NEUTRAL_WEIGHTS",
    "TradeScore",
    "calculate_player_value",
    "estimate_pick_value",
    "expected_draft_position",
    "cash_value",
    "asset_value",
    "incoming_asset_value",
    "score_trade_side",
    "TradeValidation",
    "Recommendation",
    "TradeEvaluation",
    "CounterOffer",
    "validate_trade",
    "evaluate_trade_for_team",
    "generate_counter_offer",
]
