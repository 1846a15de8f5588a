"""Tests for free agents, offer scoring and signing decisions."""

import pytest

from courtside.core.freeagency import signing
from courtside.core.freeagency.free_agent import (
    FAPreferences,
    FAStatus,
    FAType,
    FreeAgentProfile,
    InvalidStatusTransition,
    PlayerTraits,
    calculate_asking_salary,
    create_free_agent,
    generate_fa_preferences,
)
from courtside.core.freeagency.signing import (
    OfferScore,
    TeamContext,
    TeamOffer,
    can_match_offer,
    evaluate_offers,
    generate_cpu_offers,
    score_offer,
    validate_offer,
)
from courtside.core.league.teams import MarketSize
from courtside.core.random_source import make_rng


def _fixed_score(total):
    def _score(fa, offer, team):
        return OfferScore(total=total, money_score=0, winning_score=0, role_score=0, market_score=0)
    return _score


class TestPreferences:
    """Tests for preference generation."""

    def test_bounds(self, rng):
        """Every axis stays inside its clamp range."""
        for greed in (0, 50, 100):
            prefs = generate_fa_preferences(PlayerTraits(greed=greed, ego=greed), 34, 88, rng)
            assert 20 <= prefs.money <= 100
            assert 20 <= prefs.winning <= 100
            assert 20 <= prefs.role <= 100
            assert 10 <= prefs.market <= 100

    def test_veterans_chase_rings(self):
        """Older players care more about winning, noise aside."""
        young = generate_fa_preferences(PlayerTraits(), 24, 70, make_rng(1))
        old = generate_fa_preferences(PlayerTraits(), 34, 70, make_rng(1))
        assert old.winning > young.winning

    def test_normalized_sums_to_one(self):
        weights = FAPreferences(money=80, winning=40, role=60, market=20).normalized()
        assert sum(weights) == pytest.approx(1.0)

    def test_all_zero_priorities(self):
        """No stated priorities means equal weights."""
        assert FAPreferences(0, 0, 0, 0).normalized() == (0.25, 0.25, 0.25, 0.25)


class TestCreateFreeAgent:
    """Tests for putting a player on the market."""

    @pytest.fixture
    def profile(self):
        return FreeAgentProfile(
            player_id="p9",
            player_name="Veteran Guard",
            position="SG",
            overall=78,
            potential=78,
            age=30,
            years_pro=8,
            traits=PlayerTraits(greed=80, ego=40, loyalty=60),
            previous_team_id="PHI",
        )

    def test_seeded_by_season_and_player(self, profile):
        """The same player enters the same market the same way."""
        first = create_free_agent(profile, "2025-26")
        second = create_free_agent(profile, "2025-26")
        assert first == second

    def test_asking_follows_greed(self, profile):
        fa = create_free_agent(profile, "2025-26")
        assert fa.asking_salary == calculate_asking_salary(fa.market_value, 80)
        assert fa.asking_salary > fa.market_value

    def test_restricted_keeps_rights(self, profile):
        fa = create_free_agent(profile, "2025-26", FAType.RESTRICTED)
        assert fa.is_restricted
        assert fa.rights_team_id == "PHI"

    def test_unrestricted_has_no_rights(self, profile):
        fa = create_free_agent(profile, "2025-26")
        assert fa.rights_team_id is None
        assert fa.status == FAStatus.AVAILABLE


class TestStatusTransitions:
    """Tests for market status changes."""

    def test_available_to_negotiating(self, star_free_agent):
        moved = star_free_agent.with_status(FAStatus.NEGOTIATING)
        assert moved.status == FAStatus.NEGOTIATING
        assert star_free_agent.status == FAStatus.AVAILABLE

    def test_signed_is_terminal(self, star_free_agent):
        signed = star_free_agent.with_status(FAStatus.SIGNED)
        with pytest.raises(InvalidStatusTransition):
            signed.with_status(FAStatus.AVAILABLE)

    def test_same_status_is_noop(self, star_free_agent):
        assert star_free_agent.with_status(FAStatus.AVAILABLE) is star_free_agent


class TestScoreOffer:
    """Tests for offer scoring."""

    def test_full_asking_on_winner(self, star_free_agent, team_context, offer_factory):
        """Meeting the asking price on a winning large-market team scores high."""
        offer = offer_factory(salary=40_000_000, years=3)
        score = score_offer(star_free_agent, offer, team_context)

        assert score.money_score == 109
        assert score.winning_score == 66
        assert score.role_score == 100
        assert score.market_score == 100
        assert score.total == 94

    def test_more_money_scores_higher(self, star_free_agent, team_context, offer_factory):
        low = score_offer(star_free_agent, offer_factory(salary=20_000_000), team_context)
        high = score_offer(star_free_agent, offer_factory(salary=38_000_000), team_context)
        assert high.money_score > low.money_score
        assert high.total > low.total

    def test_small_market_scores_lower(self, role_free_agent, team_context, offer_factory):
        small = TeamContext(team_id="NSH", market_size=MarketSize.SMALL)
        large = TeamContext(team_id="NYT", market_size=MarketSize.LARGE)
        offer = offer_factory(player_id="p-role", salary=10_000_000)
        assert score_offer(role_free_agent, offer, small).market_score < score_offer(role_free_agent, offer, large).market_score


class TestEvaluateOffers:
    """Tests for the accept / reject decision."""

    def test_threshold_scales_with_overall(self, star_free_agent, role_free_agent):
        assert star_free_agent.acceptance_threshold == 70
        assert role_free_agent.acceptance_threshold == 52

    def test_just_below_threshold_rejected(self, monkeypatch, star_free_agent, team_context, offer_factory):
        """A 90 OVR player turns down a 69."""
        monkeypatch.setattr(signing, "score_offer", _fixed_score(69))
        result = evaluate_offers(star_free_agent, [TeamOffer(offer_factory(), team_context)])

        assert result.accepted_offer is None
        assert result.best_score == 69
        assert result.threshold == 70

    def test_at_threshold_accepted(self, monkeypatch, star_free_agent, team_context, offer_factory):
        """A 90 OVR player takes a 70."""
        monkeypatch.setattr(signing, "score_offer", _fixed_score(70))
        offer = offer_factory()
        result = evaluate_offers(star_free_agent, [TeamOffer(offer, team_context)])

        assert result.accepted_offer == offer
        assert result.accepted_team_id == "NYT"

    def test_scored_half_point_rounds_up_to_threshold(self, star_free_agent, offer_factory):
        """
        Money 103, winning 15, role 60 and market 100 average to 69.5, which
        rounds up to the 90 OVR player's threshold of 70.
        """
        crowded = TeamContext(team_id="LAS", market_size=MarketSize.LARGE, roster_size=11, star_count=3)
        offer = offer_factory(team_id="LAS", salary=40_000_000, years=1)

        score = score_offer(star_free_agent, offer, crowded)
        assert (score.money_score, score.winning_score, score.role_score, score.market_score) == (103, 15, 60, 100)
        assert score.total == 70

        result = evaluate_offers(star_free_agent, [TeamOffer(offer, crowded)])
        assert result.accepted_team_id == "LAS"
        assert result.best_score == result.threshold == 70

    def test_scored_just_below_threshold(self, star_free_agent, offer_factory):
        """Shaving the salary to $39.8M drops the average to 69.25."""
        crowded = TeamContext(team_id="LAS", market_size=MarketSize.LARGE, roster_size=11, star_count=3)
        offer = offer_factory(team_id="LAS", salary=39_800_000, years=1)

        result = evaluate_offers(star_free_agent, [TeamOffer(offer, crowded)])
        assert result.scores["LAS"].money_score == 102
        assert result.best_score == 69
        assert result.accepted_offer is None

    def test_best_offer_wins(self, star_free_agent, team_context, offer_factory):
        losing_team = TeamContext(team_id="DET", wins=20, losses=62, market_size=MarketSize.SMALL, star_count=3)
        offers = [
            TeamOffer(offer_factory(team_id="DET", salary=25_000_000), losing_team),
            TeamOffer(offer_factory(team_id="NYT", salary=40_000_000), team_context),
        ]
        result = evaluate_offers(star_free_agent, offers)

        assert result.accepted_team_id == "NYT"
        assert set(result.scores) == {"DET", "NYT"}

    def test_no_offers(self, star_free_agent):
        result = evaluate_offers(star_free_agent, [])
        assert result.accepted_offer is None
        assert result.best_score == 0


class TestCPUOffers:
    """Tests for competing CPU offers."""

    def test_neediest_teams_offer(self, role_free_agent, rng):
        teams = [
            TeamContext(team_id="A", wins=60, losses=22, roster_size=15),
            TeamContext(team_id="B", wins=20, losses=62, needs_position=True, roster_size=12),
            TeamContext(team_id="C", wins=40, losses=42, roster_size=13),
            TeamContext(team_id="D", wins=30, losses=52, roster_size=14),
        ]
        offers = generate_cpu_offers(role_free_agent, teams, max_offers=2, rng=rng)

        assert [o.team.team_id for o in offers] == ["B", "D"]

    def test_need_pays_premium(self, role_free_agent, rng):
        teams = [
            TeamContext(team_id="B", needs_position=True),
            TeamContext(team_id="C"),
        ]
        offers = {o.team.team_id: o.offer for o in generate_cpu_offers(role_free_agent, teams, rng=rng)}

        assert offers["B"].salary_per_year == 10_500_000
        assert offers["C"].salary_per_year == 9_000_000

    def test_years_by_age(self, role_free_agent, rng):
        """A 29-year-old gets two or three years."""
        for offer in generate_cpu_offers(role_free_agent, [TeamContext(team_id="B")], rng=rng):
            assert offer.offer.years in (2, 3)


class TestValidateOffer:
    """Tests for user offer validation."""

    def test_full_roster(self, role_free_agent, offer_factory):
        team = TeamContext(team_id="NYT", roster_size=15)
        result = validate_offer(team, offer_factory(player_id="p-role", salary=9_000_000), role_free_agent)
        assert not result.valid
        assert "Roster is full (15 players max)" in result.errors

    def test_bad_length(self, role_free_agent, team_context, offer_factory):
        result = validate_offer(team_context, offer_factory(years=6, salary=9_000_000), role_free_agent)
        assert "Contract must be 1-5 years" in result.errors

    def test_lowball_warning(self, role_free_agent, team_context, offer_factory):
        result = validate_offer(team_context, offer_factory(salary=4_000_000), role_free_agent)
        assert result.valid
        assert any("below market value" in w for w in result.warnings)

    def test_tax_warning(self, role_free_agent, offer_factory):
        team = TeamContext(team_id="NYT", payroll=160_000_000)
        result = validate_offer(team, offer_factory(salary=15_000_000), role_free_agent)
        assert "This signing will incur $7.5M in luxury tax" in result.warnings

    def test_rights_team_can_always_match(self, offer_factory):
        team = TeamContext(team_id="PHI", payroll=200_000_000)
        assert can_match_offer(team, offer_factory(salary=30_000_000))
