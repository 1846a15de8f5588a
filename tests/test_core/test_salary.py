"""Tests for the salary model and contracts."""

from datetime import date

import pytest

from courtside.core.contracts.contract import (
    Contract,
    ContractOffer,
    create_contract_from_offer,
)
from courtside.core.contracts.salary import (
    SALARY_CAP,
    SalaryCap,
    SigningMethod,
    calculate_luxury_tax,
    calculate_market_value,
    can_afford_contract,
    generate_yearly_salaries,
    get_max_salary,
    get_min_salary,
    round_half_up,
)
from courtside.core.random_source import make_rng


class TestRounding:
    """Tests for half-up rounding."""

    def test_halves_round_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2

    def test_non_halves(self):
        assert round_half_up(2.49) == 2
        assert round_half_up(2.51) == 3


class TestSalaryBounds:
    """Tests for min and max salaries."""

    def test_max_salary_tiers(self):
        """25% of the cap, 30% at 6 years, 35% at 10."""
        assert get_max_salary(0) == 35_000_000
        assert get_max_salary(5) == 35_000_000
        assert get_max_salary(6) == 42_000_000
        assert get_max_salary(10) == 49_000_000

    def test_min_salary_table(self):
        """Minimums follow the service table."""
        assert get_min_salary(0) == 1_100_000
        assert get_min_salary(1) == 1_800_000
        assert get_min_salary(9) == 3_100_000

    def test_min_salary_clamped(self):
        """Out-of-range service years clamp to the table ends."""
        assert get_min_salary(15) == 3_100_000
        assert get_min_salary(-1) == 1_100_000

    def test_cap_validation(self):
        """Thresholds out of order are reported."""
        assert SALARY_CAP.validate() == []
        assert SalaryCap(cap=200_000_000).validate()


class TestMarketValue:
    """Tests for calculate_market_value."""

    def test_elite_player_gets_max(self):
        """90+ OVR in their prime commands the max."""
        assert calculate_market_value(92, 27, 6, 92) == get_max_salary(6)

    def test_scrub_near_minimum(self):
        """Sub-65 players get 5% of the range."""
        assert calculate_market_value(60, 27, 0, 60) == 2_800_000

    @pytest.mark.parametrize("years", [0, 3, 7, 12])
    def test_within_bounds(self, years):
        """Value always lies between the player's min and max."""
        for overall in range(40, 100, 3):
            for age in (19, 23, 28, 34, 38):
                value = calculate_market_value(overall, age, years, 85)
                assert get_min_salary(years) <= value <= get_max_salary(years)

    def test_monotonic_in_overall(self):
        """Better players are never worth less, all else equal."""
        values = [calculate_market_value(overall, 27, 5, 80) for overall in range(50, 100)]
        assert values == sorted(values)

    def test_aging_veteran_discount(self):
        """Past 32, value drops with age."""
        assert calculate_market_value(85, 36, 14, 85) < calculate_market_value(85, 30, 14, 85)

    def test_rounded_to_100k(self):
        """Values land on $100K increments."""
        assert calculate_market_value(77, 26, 4, 80) % 100_000 == 0


class TestYearlySalaries:
    """Tests for multi-year salary curves."""

    def test_raises_compound(self):
        """8% raises, rounded to $100K."""
        assert generate_yearly_salaries(10_000_000, 3) == [10_000_000, 10_800_000, 11_700_000]

    def test_zero_years(self):
        assert generate_yearly_salaries(10_000_000, 0) == []


class TestLuxuryTax:
    """Tests for the progressive luxury tax."""

    def test_under_line(self):
        assert calculate_luxury_tax(170_000_000) == 0
        assert calculate_luxury_tax(100_000_000) == 0

    def test_first_bracket(self):
        """$5M over at 1.5x."""
        assert calculate_luxury_tax(175_000_000) == 7_500_000

    def test_second_bracket(self):
        """$5M at 1.5x plus $5M at 1.75x."""
        assert calculate_luxury_tax(180_000_000) == 16_250_000

    def test_top_bracket(self):
        """Everything past $20M over is taxed at 4x."""
        assert calculate_luxury_tax(195_000_000) == 65_000_000


class TestAffordability:
    """Tests for can_afford_contract."""

    def test_cap_space(self):
        result = can_afford_contract(120_000_000, 15_000_000)
        assert result.method == SigningMethod.CAP_SPACE
        assert result.tax_implication == 0

    def test_exception(self):
        result = can_afford_contract(135_000_000, 10_000_000)
        assert result.method == SigningMethod.EXCEPTION
        assert result.tax_implication == 0

    def test_luxury_tax(self):
        result = can_afford_contract(160_000_000, 15_000_000)
        assert result.method == SigningMethod.LUXURY_TAX
        assert result.tax_implication == 7_500_000

    def test_first_apron(self):
        result = can_afford_contract(170_000_000, 10_000_000)
        assert result.method == SigningMethod.FIRST_APRON
        assert result.tax_implication == 25_000_000

    def test_second_apron(self):
        result = can_afford_contract(185_000_000, 10_000_000)
        assert result.method == SigningMethod.SECOND_APRON
        assert result.tax_implication == 100_000_000

    def test_never_blocks(self):
        """Every payroll can sign; only the method changes."""
        for payroll in range(100_000_000, 220_000_000, 10_000_000):
            assert can_afford_contract(payroll, 20_000_000).can_sign


class TestContracts:
    """Tests for contract creation."""

    def test_from_offer(self):
        """An accepted offer becomes a contract with rising salaries."""
        offer = ContractOffer(
            team_id="NYT",
            player_id="p1",
            years=3,
            salary_per_year=10_000_000,
            player_option=True,
        )
        contract = create_contract_from_offer(offer, "2025-26", date(2025, 7, 1), make_rng(5))

        assert contract.yearly_salaries == [10_000_000, 10_800_000, 11_700_000]
        assert contract.years_remaining == 3
        assert contract.current_year == 1
        assert contract.current_salary() == 10_000_000
        assert contract.player_option_year == 3
        assert contract.team_option_year is None
        assert contract.signed_date == date(2025, 7, 1)

    def test_offer_years_out_of_range(self):
        offer = ContractOffer(team_id="NYT", player_id="p1", years=6, salary_per_year=1_000_000)
        with pytest.raises(ValueError):
            create_contract_from_offer(offer, "2025-26")

    def test_store_row_round_trip(self):
        """year_N_salary columns restore the salary curve."""
        contract = Contract(
            id="c1",
            player_id="p1",
            team_id="NYT",
            season_id="2025-26",
            yearly_salaries=[5_000_000, 5_400_000],
            years_remaining=1,
        )
        row = contract.to_dict()
        assert row["year_3_salary"] is None

        restored = Contract.from_dict(row)
        assert restored.yearly_salaries == [5_000_000, 5_400_000]
        assert restored.current_year == 2
        assert restored.current_salary() == 5_400_000

    def test_too_many_years(self):
        with pytest.raises(ValueError):
            Contract(id="c1", player_id="p1", team_id="NYT", season_id="s", yearly_salaries=[1] * 6)
