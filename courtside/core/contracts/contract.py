"""
Contract Offers and Contracts.

An offer is an immutable proposal from a team to a player. When a player
accepts, the offer becomes a Contract:
- Per-year salary breakdown (up to 5 years, 8% raises)
- Player / team option on the final year
- No-trade clause, signing and incentive bonuses

The trade, waive and buyout flows that later change a contract's status
live outside this package; the shape and the salary curve are defined here.
"""

import random
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from courtside.core.contracts.salary import generate_yearly_salaries
from courtside.core.random_source import random_uuid, resolve_rng


MAX_CONTRACT_YEARS = 5


class ContractType(Enum):
    """Type of contract."""
    STANDARD = "standard"
    ROOKIE_SCALE = "rookie_scale"
    VETERAN_MINIMUM = "veteran_minimum"
    MID_LEVEL = "mid_level"
    BI_ANNUAL = "bi_annual"
    TWO_WAY = "two_way"
    TEN_DAY = "10_day"


class ContractStatus(Enum):
    """Current status of the contract."""
    ACTIVE = "active"
    EXPIRED = "expired"
    BOUGHT_OUT = "bought_out"
    WAIVED = "waived"
    TRADED = "traded"


@dataclass(frozen=True)
class ContractOffer:
    """A team's proposal to a player. Never mutated once made."""
    team_id: str
    player_id: str
    years: int
    salary_per_year: int

    player_option: bool = False
    team_option: bool = False
    no_trade_clause: bool = False
    signing_bonus: int = 0
    incentive_bonus: int = 0

    # Restricted free agency
    is_offer_sheet: bool = False
    is_matching: bool = False

    @property
    def total_value(self) -> int:
        return self.years * self.salary_per_year

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "player_id": self.player_id,
            "years": self.years,
            "salary_per_year": self.salary_per_year,
            "total_value": self.total_value,
            "player_option": self.player_option,
            "team_option": self.team_option,
            "no_trade_clause": self.no_trade_clause,
            "signing_bonus": self.signing_bonus,
            "incentive_bonus": self.incentive_bonus,
            "is_offer_sheet": self.is_offer_sheet,
            "is_matching": self.is_matching,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContractOffer":
        return cls(
            team_id=str(data["team_id"]),
            player_id=str(data["player_id"]),
            years=int(data["years"]),
            salary_per_year=int(data["salary_per_year"]),
            player_option=data.get("player_option", False),
            team_option=data.get("team_option", False),
            no_trade_clause=data.get("no_trade_clause", False),
            signing_bonus=data.get("signing_bonus", 0),
            incentive_bonus=data.get("incentive_bonus", 0),
            is_offer_sheet=data.get("is_offer_sheet", False),
            is_matching=data.get("is_matching", False),
        )


@dataclass
class Contract:
    """
    A signed player contract.

    ``yearly_salaries[0]`` is the first season's salary. Option years are
    1-indexed contract years.
    """
    id: str
    player_id: str
    team_id: str
    season_id: str

    yearly_salaries: list[int] = field(default_factory=list)
    years_remaining: Optional[int] = None

    player_option_year: Optional[int] = None
    team_option_year: Optional[int] = None
    no_trade_clause: bool = False

    signing_bonus: int = 0
    trade_bonus: int = 0
    incentive_bonus: int = 0

    contract_type: ContractType = ContractType.STANDARD
    status: ContractStatus = ContractStatus.ACTIVE
    signed_date: Optional[date] = None

    def __post_init__(self):
        if len(self.yearly_salaries) > MAX_CONTRACT_YEARS:
            raise ValueError(f"Contracts run at most {MAX_CONTRACT_YEARS} years")
        if self.years_remaining is None:
            self.years_remaining = len(self.yearly_salaries)

    @property
    def total_years(self) -> int:
        return len(self.yearly_salaries)

    @property
    def base_salary(self) -> int:
        return self.yearly_salaries[0] if self.yearly_salaries else 0

    @property
    def current_year(self) -> int:
        """1-indexed contract year currently being paid."""
        return self.total_years - self.years_remaining + 1

    @property
    def total_salary(self) -> int:
        return sum(self.yearly_salaries)

    @property
    def is_active(self) -> bool:
        return self.status == ContractStatus.ACTIVE

    def salary_for_year(self, year: int) -> int:
        """Salary for a 1-indexed contract year, 0 outside the contract."""
        if 1 <= year <= self.total_years:
            return self.yearly_salaries[year - 1]
        return 0

    def current_salary(self) -> int:
        return self.salary_for_year(self.current_year)

    def to_dict(self) -> dict:
        """Row shape used by the contract store (year_1 .. year_5 columns)."""
        data = {
            "id": self.id,
            "player_id": self.player_id,
            "team_id": self.team_id,
            "season_id": self.season_id,
            "total_years": self.total_years,
            "years_remaining": self.years_remaining,
            "base_salary": self.base_salary,
            "player_option_year": self.player_option_year,
            "team_option_year": self.team_option_year,
            "no_trade_clause": self.no_trade_clause,
            "signing_bonus": self.signing_bonus,
            "trade_bonus": self.trade_bonus,
            "incentive_bonus": self.incentive_bonus,
            "contract_type": self.contract_type.value,
            "status": self.status.value,
            "signed_date": self.signed_date.isoformat() if self.signed_date else None,
        }
        for year in range(1, MAX_CONTRACT_YEARS + 1):
            salary = self.salary_for_year(year)
            data[f"year_{year}_salary"] = salary if salary else None
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Contract":
        salaries = []
        for year in range(1, MAX_CONTRACT_YEARS + 1):
            salary = data.get(f"year_{year}_salary")
            if not salary:
                break
            salaries.append(int(salary))

        return cls(
            id=str(data["id"]),
            player_id=str(data["player_id"]),
            team_id=str(data["team_id"]),
            season_id=str(data.get("season_id", "")),
            yearly_salaries=salaries,
            years_remaining=data.get("years_remaining", len(salaries)),
            player_option_year=data.get("player_option_year"),
            team_option_year=data.get("team_option_year"),
            no_trade_clause=data.get("no_trade_clause", False),
            signing_bonus=data.get("signing_bonus", 0),
            trade_bonus=data.get("trade_bonus", 0),
            incentive_bonus=data.get("incentive_bonus", 0),
            contract_type=ContractType(data.get("contract_type", "standard")),
            status=ContractStatus(data.get("status", "active")),
            signed_date=date.fromisoformat(data["signed_date"]) if data.get("signed_date") else None,
        )


def create_contract_from_offer(
    offer: ContractOffer,
    season_id: str,
    signed_date: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> Contract:
    """
    Turn an accepted offer into a contract.

    Salaries rise 8% a year from the offered salary. A player or team option
    applies to the final contract year.
    """
    if not 1 <= offer.years <= MAX_CONTRACT_YEARS:
        raise ValueError(f"Contract must be 1-{MAX_CONTRACT_YEARS} years")

    return Contract(
        id=random_uuid(resolve_rng(rng)),
        player_id=offer.player_id,
        team_id=offer.team_id,
        season_id=season_id,
        yearly_salaries=generate_yearly_salaries(offer.salary_per_year, offer.years),
        years_remaining=offer.years,
        player_option_year=offer.years if offer.player_option else None,
        team_option_year=offer.years if offer.team_option else None,
        no_trade_clause=offer.no_trade_clause,
        signing_bonus=offer.signing_bonus,
        incentive_bonus=offer.incentive_bonus,
        contract_type=ContractType.STANDARD,
        status=ContractStatus.ACTIVE,
        signed_date=signed_date or date.today(),
    )
