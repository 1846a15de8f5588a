"""Shared pytest fixtures for Courtside tests."""

import random

import pytest

from courtside.core.ai.cpu import RosterPlayer
from courtside.core.contracts.contract import ContractOffer
from courtside.core.freeagency.free_agent import FAPreferences, FreeAgent
from courtside.core.freeagency.signing import TeamContext
from courtside.core.league.teams import MarketSize, build_default_teams
from courtside.core.random_source import make_rng
from courtside.core.schedule.generator import generate_schedule
from courtside.core.trading.assets import TeamTradeContext


# =============================================================================
# League Fixtures
# =============================================================================


@pytest.fixture
def teams():
    """The default 30-team league."""
    return build_default_teams()


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source."""
    return make_rng(42)


@pytest.fixture(scope="module")
def season_games():
    """A seeded 2025-26 schedule, shared across a test module."""
    return generate_schedule(build_default_teams(), "2025-26", rng=make_rng(7))


@pytest.fixture
def schedule_rows(season_games):
    """Schedule rows as they would be read back from storage."""
    return [g.to_dict() for g in season_games]


# =============================================================================
# Free Agency Fixtures
# =============================================================================


@pytest.fixture
def star_free_agent() -> FreeAgent:
    """A 90 OVR unrestricted free agent."""
    return FreeAgent(
        player_id="p-star",
        player_name="Star Player",
        position="SF",
        overall=90,
        potential=92,
        age=27,
        years_pro=6,
        preferences=FAPreferences(money=50, winning=50, role=50, market=50),
        asking_salary=40_000_000,
        market_value=38_000_000,
    )


@pytest.fixture
def role_free_agent() -> FreeAgent:
    """A 72 OVR free agent with modest demands."""
    return FreeAgent(
        player_id="p-role",
        player_name="Role Player",
        position="PG",
        overall=72,
        potential=74,
        age=29,
        years_pro=7,
        preferences=FAPreferences(money=70, winning=40, role=30, market=20),
        asking_salary=10_000_000,
        market_value=9_500_000,
    )


@pytest.fixture
def team_context() -> TeamContext:
    """A winning, large-market team with room on the roster."""
    return TeamContext(
        team_id="NYT",
        team_name="New York Titans",
        wins=50,
        losses=32,
        market_size=MarketSize.LARGE,
        roster_size=13,
        needs_position=True,
        star_count=1,
        payroll=120_000_000,
    )


@pytest.fixture
def offer_factory():
    """Build a ContractOffer with sensible defaults."""
    def _make(team_id="NYT", player_id="p-star", years=3, salary=20_000_000, **kwargs):
        return ContractOffer(
            team_id=team_id,
            player_id=player_id,
            years=years,
            salary_per_year=salary,
            **kwargs,
        )
    return _make


# =============================================================================
# Trade Fixtures
# =============================================================================


@pytest.fixture
def capped_out_team() -> TeamTradeContext:
    """A team at the cap with a 13-man roster."""
    return TeamTradeContext(
        team_id="BOS",
        team_name="Boston Shamrocks",
        wins=45,
        losses=37,
        payroll=140_000_000,
        cap_space=0,
        roster_size=13,
    )


@pytest.fixture
def partner_team() -> TeamTradeContext:
    """A trading partner with plenty of cap room."""
    return TeamTradeContext(
        team_id="CHI",
        team_name="Chicago Wind",
        wins=30,
        losses=52,
        payroll=100_000_000,
        cap_space=40_000_000,
        roster_size=13,
    )


# =============================================================================
# CPU AI Fixtures
# =============================================================================


@pytest.fixture
def full_roster() -> list[RosterPlayer]:
    """A 13-man roster with a 75+ starter at every position except C."""
    return [
        RosterPlayer(id="pg1", position="PG", overall=82, age=28, salary=30_000_000),
        RosterPlayer(id="pg2", position="PG", overall=68, age=24),
        RosterPlayer(id="sg1", position="SG", overall=78, age=27),
        RosterPlayer(id="sg2", position="SG", overall=70, age=31),
        RosterPlayer(id="sf1", position="SF", overall=84, age=29, salary=35_000_000),
        RosterPlayer(id="sf2", position="SF", overall=65, age=22, potential=80),
        RosterPlayer(id="pf1", position="PF", overall=76, age=26),
        RosterPlayer(id="pf2", position="PF", overall=66, age=23, potential=77),
        RosterPlayer(id="c1", position="C", overall=72, age=30),
        RosterPlayer(id="c2", position="C", overall=64, age=21, potential=79),
        RosterPlayer(id="b1", position="SG", overall=60, age=33),
        RosterPlayer(id="b2", position="SF", overall=62, age=25),
        RosterPlayer(id="b3", position="PF", overall=63, age=34),
    ]
