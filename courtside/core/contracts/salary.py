"""
Salary Cap Model.

Pure functions over the league's payroll thresholds:
- Max / min salary by years in the league
- Market value from overall, age and potential
- Multi-year salary curves with compounding raises
- Progressive luxury tax
- Affordability classification (cap space, exception, tax, aprons)

All money is whole dollars.
"""

import math
from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Cap Thresholds
# =============================================================================

@dataclass(frozen=True)
class SalaryCap:
    """League payroll thresholds for a season."""
    cap: int = 140_000_000
    luxury_tax: int = 170_000_000
    first_apron: int = 178_000_000
    second_apron: int = 189_000_000
    minimum: int = 126_000_000

    def validate(self) -> list[str]:
        """Validate thresholds, return list of errors."""
        errors = []
        if not self.minimum <= self.cap:
            errors.append("minimum payroll must not exceed the cap")
        if not self.cap <= self.luxury_tax <= self.first_apron <= self.second_apron:
            errors.append("thresholds must satisfy cap <= luxury_tax <= first_apron <= second_apron")
        return errors


SALARY_CAP = SalaryCap()

SALARY_ROUNDING = 100_000

# Minimum salary by years of service (0-9); later years stay at the 9-year value
MIN_SALARY_BY_YEARS = [
    1_100_000,
    1_800_000,
    2_000_000,
    2_200_000,
    2_400_000,
    2_600_000,
    2_800_000,
    2_900_000,
    3_000_000,
    3_100_000,
]

VETERAN_MIN_SALARY = 3_200_000

# (bracket width, tax rate) applied to payroll above the luxury tax line
LUXURY_TAX_BRACKETS = [
    (5_000_000, 1.5),
    (5_000_000, 1.75),
    (5_000_000, 2.5),
    (5_000_000, 3.25),
    (math.inf, 4.0),
]

DEFAULT_RAISE_PERCENT = 0.08


# =============================================================================
# Rounding
# =============================================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def round_to_unit(value: float, unit: int = SALARY_ROUNDING) -> int:
    """Round a dollar amount to the nearest unit (default $100K), halves going up."""
    return round_half_up(value / unit) * unit


# =============================================================================
# Salary Bounds and Market Value
# =============================================================================

def get_max_salary(years_in_league: int, cap: SalaryCap = SALARY_CAP) -> int:
    """Max salary: 25% of the cap, 30% at 6+ years, 35% at 10+ years."""
    if years_in_league >= 10:
        pct = 0.35
    elif years_in_league >= 6:
        pct = 0.30
    else:
        pct = 0.25
    return round_half_up(cap.cap * pct)


def get_min_salary(years_in_league: int) -> int:
    """Minimum salary from the service table; flat after 9 years."""
    index = max(0, min(years_in_league, len(MIN_SALARY_BY_YEARS) - 1))
    return MIN_SALARY_BY_YEARS[index]


def _value_percent(overall: int) -> float:
    if overall >= 90:
        return 1.0
    if overall >= 85:
        return 0.85 + (overall - 85) / 5 * 0.15
    if overall >= 80:
        return 0.65 + (overall - 80) / 5 * 0.20
    if overall >= 75:
        return 0.45 + (overall - 75) / 5 * 0.20
    if overall >= 70:
        return 0.25 + (overall - 70) / 5 * 0.20
    if overall >= 65:
        return 0.10 + (overall - 65) / 5 * 0.15
    return 0.05


def _age_multiplier(age: int, potential: int) -> float:
    if age < 24:
        multiplier = 0.9 + (potential - 70) / 100
    elif age > 32:
        multiplier = 1 - (age - 32) * 0.08
    else:
        multiplier = 1.0
    return max(0.5, multiplier)


def calculate_market_value(
    overall: int,
    age: int,
    years_in_league: int,
    potential: int,
    cap: SalaryCap = SALARY_CAP,
) -> int:
    """
    Estimate what a player would command on the open market.

    A value percent over ``overall`` (0.05 below 65 up to 1.0 at 90+) times an
    age multiplier (young players scaled by potential, veterans past 32 lose
    8% a year, never below 0.5) is interpolated between the player's min and
    max salary, rounded to $100K and clamped to that range.
    """
    min_salary = get_min_salary(years_in_league)
    max_salary = get_max_salary(years_in_league, cap)

    pct = _value_percent(overall) * _age_multiplier(age, potential)
    value = round_to_unit(min_salary + (max_salary - min_salary) * pct)
    return max(min_salary, min(max_salary, value))


def generate_yearly_salaries(
    base_salary: int,
    years: int,
    raise_percent: float = DEFAULT_RAISE_PERCENT,
) -> list[int]:
    """Salary per contract year, compounding ``raise_percent`` each year."""
    if years <= 0:
        return []
    salaries = [base_salary]
    for _ in range(1, years):
        salaries.append(round_to_unit(round_half_up(salaries[-1] * (1 + raise_percent))))
    return salaries


# =============================================================================
# Luxury Tax and Affordability
# =============================================================================

def calculate_luxury_tax(payroll: int, cap: SalaryCap = SALARY_CAP) -> int:
    """Progressive tax on payroll above the luxury tax line."""
    over = payroll - cap.luxury_tax
    if over <= 0:
        return 0

    tax = 0.0
    remaining = over
    for width, rate in LUXURY_TAX_BRACKETS:
        taxed = min(remaining, width)
        tax += taxed * rate
        remaining -= taxed
        if remaining <= 0:
            break
    return round_half_up(tax)


class SigningMethod(Enum):
    """How a signing fits under the payroll thresholds."""
    CAP_SPACE = "cap_space"
    EXCEPTION = "exception"
    LUXURY_TAX = "luxury_tax"
    FIRST_APRON = "first_apron"
    SECOND_APRON = "second_apron"


@dataclass(frozen=True)
class Affordability:
    """
    Result of an affordability check.

    ``can_sign`` is always True: the check reports tax implications, it does
    not block signings. Callers that want a hard gate use ``method``.
    """
    can_sign: bool
    method: SigningMethod
    tax_implication: int

    @property
    def uses_cap_space(self) -> bool:
        return self.method == SigningMethod.CAP_SPACE

    def to_dict(self) -> dict:
        return {
            "can_sign": self.can_sign,
            "method": self.method.value,
            "tax_implication": self.tax_implication,
        }


def can_afford_contract(
    current_payroll: int,
    new_salary: int,
    cap: SalaryCap = SALARY_CAP,
) -> Affordability:
    """Classify a signing by the combined post-signing payroll."""
    total = current_payroll + new_salary
    cap_space = cap.cap - current_payroll

    if current_payroll < cap.cap and new_salary <= cap_space:
        return Affordability(True, SigningMethod.CAP_SPACE, 0)
    if total <= cap.luxury_tax:
        return Affordability(True, SigningMethod.EXCEPTION, 0)

    over = total - cap.luxury_tax
    if total <= cap.first_apron:
        return Affordability(True, SigningMethod.LUXURY_TAX, round_half_up(over * 1.5))
    if total <= cap.second_apron:
        return Affordability(True, SigningMethod.FIRST_APRON, round_half_up(over * 2.5))
    return Affordability(True, SigningMethod.SECOND_APRON, round_half_up(over * 4.0))
