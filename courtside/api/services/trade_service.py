"""Service layer for the trade API."""

from courtside.api.schemas.trades import (
    EvaluateTradeRequest,
    PlayerTradeStatusSchema,
    TeamTradeContextSchema,
    TradeAssetSchema,
    TradeProposalSchema,
    ValidateTradeRequest,
)
from courtside.core.trading.assets import (
    PlayerTradeStatus,
    TeamTradeContext,
    TradeAsset,
    TradeProposal,
    TradeStatus,
    asset_from_dict,
)
from courtside.core.trading.evaluation import (
    evaluate_trade_for_team,
    generate_counter_offer,
    validate_trade,
)


def to_asset(schema: TradeAssetSchema) -> TradeAsset:
    """
    Build a typed asset from the flat request shape.

    Raises:
        ValueError: if a field the asset type needs is missing
    """
    data = schema.model_dump(mode="json", exclude_none=True)
    try:
        return asset_from_dict(data)
    except KeyError as e:
        raise ValueError(f"{schema.asset_type.value} asset is missing {e.args[0]!r}") from e


def to_proposal(schema: TradeProposalSchema) -> TradeProposal:
    return TradeProposal(
        id=schema.id,
        teams=list(schema.teams),
        assets=[to_asset(a) for a in schema.assets],
        status=TradeStatus(schema.status),
        proposed_by=schema.proposed_by,
    )


def to_context(schema: TeamTradeContextSchema) -> TeamTradeContext:
    context = TeamTradeContext.from_record(
        team_id=schema.team_id,
        team_name=schema.team_name or schema.team_id,
        wins=schema.wins,
        losses=schema.losses,
        payroll=schema.payroll,
        roster_size=schema.roster_size,
        positional_needs=schema.positional_needs,
    )
    if schema.cap_space is not None:
        context.cap_space = schema.cap_space
    if schema.is_contender is not None:
        context.is_contender = schema.is_contender
    if schema.is_rebuilding is not None:
        context.is_rebuilding = schema.is_rebuilding
    return context


def to_player_status(schema: PlayerTradeStatusSchema) -> PlayerTradeStatus:
    return PlayerTradeStatus(**schema.model_dump())


def validate(request: ValidateTradeRequest) -> dict:
    proposal = to_proposal(request.proposal)
    teams = {t.team_id: to_context(t) for t in request.teams}
    players = {p.player_id: to_player_status(p) for p in request.players}
    return validate_trade(proposal, teams, players, today=request.today).to_dict()


def evaluate(request: EvaluateTradeRequest) -> dict:
    """Evaluate for one team, with a counter offer when the trade is close."""
    proposal = to_proposal(request.proposal)
    context = to_context(request.context)

    evaluation = evaluate_trade_for_team(request.team_id, proposal, context, request.current_year)
    counter = generate_counter_offer(
        proposal,
        request.team_id,
        evaluation,
        [to_asset(a) for a in request.available_assets],
        context,
        request.current_year,
    )

    result = evaluation.to_dict()
    result["counter_offer"] = counter.to_dict() if counter else None
    return result
