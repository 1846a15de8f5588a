"""Tests for trade assets, valuation, validation and evaluation."""

from datetime import date, datetime, timedelta

import pytest

from courtside.core.trading.assets import (
    CashAsset,
    DraftPickAsset,
    PlayerAsset,
    PlayerTradeStatus,
    TeamTradeContext,
    TradeProposal,
    asset_from_dict,
)
from courtside.core.trading.evaluation import (
    Recommendation,
    evaluate_trade_for_team,
    generate_counter_offer,
    recommend,
    validate_trade,
)
from courtside.core.trading.valuation import (
    NEUTRAL_WEIGHTS,
    calculate_player_value,
    estimate_pick_value,
    expected_draft_position,
    score_trade_side,
)


TODAY = date(2026, 1, 15)


def _player(player_id, from_team, to_team, salary, overall=75, age=27):
    return PlayerAsset(
        from_team_id=from_team,
        to_team_id=to_team,
        player_id=player_id,
        overall=overall,
        age=age,
        salary=salary,
    )


def _teams(*contexts):
    return {c.team_id: c for c in contexts}


class TestAssets:
    """Tests for asset records."""

    def test_asset_from_dict_dispatch(self):
        pick = asset_from_dict({
            "asset_type": "draft_pick",
            "from_team_id": "BOS",
            "to_team_id": "CHI",
            "year": 2027,
            "round": 1,
        })
        assert isinstance(pick, DraftPickAsset)
        assert pick.round == 1

    def test_proposal_round_trip(self):
        proposal = TradeProposal(
            id="t1",
            teams=["BOS", "CHI"],
            assets=[_player("p1", "BOS", "CHI", 5_000_000), CashAsset("CHI", "BOS", 2_000_000)],
        )
        assert TradeProposal.from_dict(proposal.to_dict()) == proposal

    def test_context_from_record(self):
        """Cap space and flags come from payroll and wins."""
        context = TeamTradeContext.from_record("BOS", "Boston", 50, 32, 150_000_000, 14)
        assert context.cap_space == -10_000_000
        assert context.is_contender
        assert not context.is_rebuilding

    def test_potential_defaults_to_overall(self):
        assert _player("p1", "A", "B", 0, overall=81).effective_potential == 81


class TestValuation:
    """Tests for player and pick values."""

    def test_young_high_potential_player(self):
        """Rebuilders pay 30% more for young upside."""
        assert calculate_player_value(70, 85, 21, 5_000_000, for_contender=False) == 257

    def test_contender_values_veterans(self):
        """Contenders pay 20% more for proven 28+ players."""
        base = calculate_player_value(80, 80, 29, 24_000_000, for_contender=False)
        contender = calculate_player_value(80, 80, 29, 24_000_000, for_contender=True)
        assert contender == round(base * 1.2)

    def test_overpaid_player_worth_less(self):
        fair = calculate_player_value(75, 75, 27, 22_500_000, False)
        overpaid = calculate_player_value(75, 75, 27, 40_000_000, False)
        assert overpaid < fair

    def test_draft_position_clamped(self):
        assert expected_draft_position(0) == 1
        assert expected_draft_position(82) == 30

    def test_lottery_pick(self):
        """Bad team's first: 40 + 50, plus 20% for a non-contender."""
        assert estimate_pick_value(2026, 1, 10, 2026, is_contender=True) == 90
        assert estimate_pick_value(2026, 1, 10, 2026, is_contender=False) == 108

    def test_late_first(self):
        assert estimate_pick_value(2026, 1, 60, 2026, is_contender=True) == 49

    def test_future_discount(self):
        """10% off per year out."""
        assert estimate_pick_value(2028, 1, 10, 2026, is_contender=True) == 73

    def test_second_rounder(self):
        assert estimate_pick_value(2026, 2, 41, 2026, is_contender=True) == 15

    def test_outgoing_cash_subtracted(self):
        score = score_trade_side([], [CashAsset("BOS", "CHI", 5_000_000)], NEUTRAL_WEIGHTS, 2026, 41)
        assert score.total == -5
        assert score.lines == ["-5: Sending cash"]

    def test_incoming_pick_uses_original_wins(self):
        """A pick from a bad team is worth more than an average team's."""
        bad = DraftPickAsset("CHI", "BOS", 2026, 1, original_team_id="DET", original_team_wins=15)
        average = DraftPickAsset("CHI", "BOS", 2026, 1)
        bad_score = score_trade_side([bad], [], NEUTRAL_WEIGHTS, 2026, 50)
        average_score = score_trade_side([average], [], NEUTRAL_WEIGHTS, 2026, 50)
        assert bad_score.total > average_score.total
        assert bad_score.lines == [f"+{bad_score.rounded}: Acquiring 2026 Round 1 pick"]


class TestValidateTrade:
    """Tests for validate_trade."""

    def test_over_cap_salary_matching_fails(self, capped_out_team, partner_team):
        """Over the cap, $10M in for $5M out exceeds 125% + $100K."""
        proposal = TradeProposal(
            id="t1",
            teams=["BOS", "CHI"],
            assets=[
                _player("p-out", "BOS", "CHI", 5_000_000),
                _player("p-in", "CHI", "BOS", 10_000_000),
            ],
        )
        result = validate_trade(proposal, _teams(capped_out_team, partner_team), {}, TODAY)

        assert not result.valid
        assert result.errors == [
            "Boston Shamrocks: Incoming salary ($10.0M) exceeds 125% + $100K of outgoing ($5.0M)"
        ]

    def test_over_cap_salary_matching_passes(self, capped_out_team, partner_team):
        """$6M in for $5M out is within 125% + $100K."""
        proposal = TradeProposal(
            id="t1",
            teams=["BOS", "CHI"],
            assets=[
                _player("p-out", "BOS", "CHI", 5_000_000),
                _player("p-in", "CHI", "BOS", 6_000_000),
            ],
        )
        result = validate_trade(proposal, _teams(capped_out_team, partner_team), {}, TODAY)
        assert result.valid

    def test_under_cap_absorbs_into_space(self, partner_team, capped_out_team):
        """Under the cap, incoming may not exceed space plus outgoing."""
        proposal = TradeProposal(
            id="t1",
            teams=["BOS", "CHI"],
            assets=[_player("p-in", "BOS", "CHI", 45_000_000), _player("p-out", "CHI", "BOS", 1_000_000)],
        )
        result = validate_trade(proposal, _teams(partner_team), {}, TODAY)
        assert "Chicago Wind: Insufficient cap space to absorb incoming salary" in result.errors

    def test_newly_signed_player(self, capped_out_team, partner_team):
        proposal = TradeProposal(
            id="t1",
            teams=["BOS", "CHI"],
            assets=[_player("p1", "BOS", "CHI", 5_000_000), _player("p2", "CHI", "BOS", 5_000_000)],
        )
        players = {"p1": PlayerTradeStatus("p1", 5_000_000, signed_date=TODAY - timedelta(days=30))}
        result = validate_trade(proposal, _teams(capped_out_team, partner_team), players, TODAY)

        assert not result.valid
        assert "Player cannot be traded within 60 days of signing (30 days remaining)" in result.errors

    def test_recent_trade_and_no_trade_clause_warn(self, capped_out_team, partner_team):
        proposal = TradeProposal(
            id="t1",
            teams=["BOS", "CHI"],
            assets=[_player("p1", "BOS", "CHI", 5_000_000), _player("p2", "CHI", "BOS", 5_000_000)],
        )
        players = {
            "p1": PlayerTradeStatus(
                "p1",
                last_traded_at=datetime(2026, 1, 5, 12, 0),
                no_trade_clause=True,
            ),
        }
        result = validate_trade(proposal, _teams(capped_out_team, partner_team), players, TODAY)

        assert result.valid
        assert "Player was recently traded (20 days until tradeable)" in result.warnings
        assert "Player has no-trade clause - needs approval" in result.warnings

    def test_roster_limits(self, capped_out_team, partner_team):
        capped_out_team.roster_size = 15
        proposal = TradeProposal(
            id="t1",
            teams=["BOS", "CHI"],
            assets=[
                _player("p1", "CHI", "BOS", 1_000_000),
                _player("p2", "CHI", "BOS", 1_000_000),
                _player("p3", "BOS", "CHI", 2_000_000),
            ],
        )
        result = validate_trade(proposal, _teams(capped_out_team, partner_team), {}, TODAY)
        assert "Boston Shamrocks: Would exceed 15-man roster (16 players)" in result.errors

    def test_unknown_teams_skipped(self):
        proposal = TradeProposal(id="t1", teams=["X", "Y"], assets=[_player("p1", "X", "Y", 50_000_000)])
        assert validate_trade(proposal, {}, {}, TODAY).valid


class TestEvaluateTrade:
    """Tests for per-team evaluation and counter offers."""

    def test_lopsided_gain_accepted(self, capped_out_team):
        proposal = TradeProposal(id="t1", teams=["BOS", "CHI"], assets=[_player("p1", "CHI", "BOS", 20_000_000, overall=80)])
        evaluation = evaluate_trade_for_team("BOS", proposal, capped_out_team, 2026)

        assert evaluation.recommendation == Recommendation.ACCEPT
        assert evaluation.reasoning[0].startswith("+")
        assert evaluation.reasoning[-1] == "Trade favors us significantly"

    def test_giving_away_rejected(self, capped_out_team):
        proposal = TradeProposal(id="t1", teams=["BOS", "CHI"], assets=[_player("p1", "BOS", "CHI", 20_000_000, overall=80)])
        evaluation = evaluate_trade_for_team("BOS", proposal, capped_out_team, 2026)

        assert evaluation.recommendation == Recommendation.REJECT
        assert evaluation.value_score < -5

    def test_near_even_countered(self, capped_out_team):
        proposal = TradeProposal(id="t1", teams=["BOS", "CHI"], assets=[CashAsset("CHI", "BOS", 3_000_000)])
        evaluation = evaluate_trade_for_team("BOS", proposal, capped_out_team, 2026)

        assert evaluation.recommendation == Recommendation.COUNTER
        assert evaluation.value_score == 3
        assert evaluation.reasoning == [
            "+3: Cash consideration",
            "Trade is roughly even - may counter for better terms",
        ]

    def test_counter_requests_cheapest_sufficient_asset(self, capped_out_team):
        proposal = TradeProposal(id="t1", teams=["BOS", "CHI"], assets=[CashAsset("CHI", "BOS", 3_000_000)])
        evaluation = evaluate_trade_for_team("BOS", proposal, capped_out_team, 2026)
        available = [
            CashAsset("CHI", "NYT", 5_000_000),  # Too small
            CashAsset("CHI", "NYT", 20_000_000),
            CashAsset("CHI", "NYT", 10_000_000),
            CashAsset("BOS", "CHI", 50_000_000),  # Own asset
            CashAsset("MIA", "BOS", 15_000_000),  # Not in the trade
        ]
        counter = generate_counter_offer(proposal, "BOS", evaluation, available, capped_out_team, 2026)

        assert counter is not None
        assert counter.value_gap == 8
        assert counter.requested_asset == CashAsset("CHI", "BOS", 10_000_000)
        assert counter.proposal.id == "t1-counter"
        assert counter.proposal.proposed_by == "BOS"
        assert len(counter.proposal.assets) == 2
        assert proposal.assets == [CashAsset("CHI", "BOS", 3_000_000)]

    def test_counter_values_picks_like_the_evaluator(self, capped_out_team):
        """
        A far-off pick from an 82-win team is worth 14, not the 16 an average
        team's pick would be, so the $20M cash is the asset that closes a
        15 point gap.
        """
        proposal = TradeProposal(id="t1", teams=["BOS", "CHI"], assets=[CashAsset("BOS", "CHI", 4_000_000)])
        evaluation = evaluate_trade_for_team("BOS", proposal, capped_out_team, 2026)
        assert evaluation.value_score == -4

        late_pick = DraftPickAsset("CHI", "BOS", 2039, 1, original_team_id="CHI", original_team_wins=82)
        cash = CashAsset("CHI", "BOS", 20_000_000)
        counter = generate_counter_offer(proposal, "BOS", evaluation, [late_pick, cash], capped_out_team, 2026)

        assert counter is not None
        assert counter.value_gap == 15
        assert counter.requested_asset == cash

        revised = evaluate_trade_for_team("BOS", counter.proposal, capped_out_team, 2026)
        assert revised.recommendation == Recommendation.ACCEPT
        assert revised.value_score == 16

    def test_no_counter_when_only_pick_falls_short(self, capped_out_team):
        proposal = TradeProposal(id="t1", teams=["BOS", "CHI"], assets=[CashAsset("BOS", "CHI", 4_000_000)])
        evaluation = evaluate_trade_for_team("BOS", proposal, capped_out_team, 2026)
        late_pick = DraftPickAsset("CHI", "BOS", 2039, 1, original_team_id="CHI", original_team_wins=82)

        assert generate_counter_offer(proposal, "BOS", evaluation, [late_pick], capped_out_team, 2026) is None

    def test_no_counter_when_accepting(self, capped_out_team):
        proposal = TradeProposal(id="t1", teams=["BOS", "CHI"], assets=[_player("p1", "CHI", "BOS", 20_000_000, overall=80)])
        evaluation = evaluate_trade_for_team("BOS", proposal, capped_out_team, 2026)
        assert generate_counter_offer(proposal, "BOS", evaluation, [CashAsset("CHI", "BOS", 1)], capped_out_team, 2026) is None

    def test_no_counter_when_nothing_closes_gap(self, capped_out_team):
        proposal = TradeProposal(id="t1", teams=["BOS", "CHI"], assets=[CashAsset("CHI", "BOS", 3_000_000)])
        evaluation = evaluate_trade_for_team("BOS", proposal, capped_out_team, 2026)
        assert generate_counter_offer(
            proposal, "BOS", evaluation, [CashAsset("CHI", "BOS", 1_000_000)], capped_out_team, 2026
        ) is None


@pytest.mark.parametrize("value,expected", [
    (11, Recommendation.ACCEPT),
    (10, Recommendation.COUNTER),
    (-4, Recommendation.COUNTER),
    (-5, Recommendation.REJECT),
])
def test_recommendation_thresholds(value, expected):
    assert recommend(value)[0] == expected
