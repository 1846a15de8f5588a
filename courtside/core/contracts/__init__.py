"""
Contract and salary cap model.

Consumed by both the free agency and trade engines.
"""

from courtside.core.contracts.salary import (
    SalaryCap,
    SALARY_CAP,
    VETERAN_MIN_SALARY,
    SigningMethod,
    Affordability,
    round_half_up,
    round_to_unit,
    get_max_salary,
    get_min_salary,
    calculate_market_value,
    generate_yearly_salaries,
    calculate_luxury_tax,
    can_afford_contract,
)
from courtside.core.contracts.contract import (
    ContractType,
    ContractStatus,
    ContractOffer,
    Contract,
    MAX_CONTRACT_YEARS,
    create_contract_from_offer,
)

__all__ = [
    "SalaryCap",
    "SALARY_CAP",
    "VETERAN_MIN_SALARY",
    "SigningMethod",
    "Affordability",
    "round_half_up",
    "round_to_unit",
    "get_max_salary",
    "get_min_salary",
    "calculate_market_value",
    "generate_yearly_salaries",
    "calculate_luxury_tax",
    "can_afford_contract",
    "ContractType",
    "ContractStatus",
    "ContractOffer",
    "Contract",
    "MAX_CONTRACT_YEARS",
    "create_contract_from_offer",
]
