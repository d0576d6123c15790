"""Social Security taxation, thresholds, and heirs tax."""

from retirement_engine.tax.heirs import calculate_heirs_tax
from retirement_engine.tax.provisional_income import (
    ProvisionalIncomeResult,
    calculate_benefit_taxation,
    calculate_provisional_income,
    calculate_taxable_benefit,
)
from retirement_engine.tax.thresholds import (
    MARRIED_JOINT_THRESHOLDS,
    PROVISIONAL_INCOME_THRESHOLDS,
    SINGLE_THRESHOLDS,
    ProvisionalIncomeThresholds,
    get_thresholds,
)

__all__ = [
    "ProvisionalIncomeThresholds",
    "SINGLE_THRESHOLDS",
    "MARRIED_JOINT_THRESHOLDS",
    "PROVISIONAL_INCOME_THRESHOLDS",
    "get_thresholds",
    "ProvisionalIncomeResult",
    "calculate_provisional_income",
    "calculate_taxable_benefit",
    "calculate_benefit_taxation",
    "calculate_heirs_tax",
]
