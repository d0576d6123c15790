"""Social Security benefit taxation using provisional income.

Provisional income is half the annual benefit plus other ordinary income. It
is compared against two filing-status thresholds:

1. At or below ``base``: nothing is taxable.
2. Between ``base`` and ``upper``: up to 50% of the benefit is taxable.
3. Above ``upper``: the capped first-tier amount plus 85% of the excess, never
   more than 85% of the benefit.

All arithmetic uses Decimal.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from retirement_engine.models.inputs import FilingStatus
from retirement_engine.tax.thresholds import ProvisionalIncomeThresholds, get_thresholds

ZERO = Decimal("0")
HUNDRED = Decimal("100")
BENEFIT_INCLUSION_RATE = Decimal("0.5")


@dataclass(frozen=True)
class ProvisionalIncomeResult:
    """Taxable portion of a Social Security benefit.

    Attributes:
        provisional_income: Half the benefit plus other income.
        taxable_benefit: Portion of the benefit subject to ordinary tax.
        taxability_percent: taxable_benefit as a percentage of the benefit.
        thresholds: Thresholds used for the calculation.
    """

    provisional_income: Decimal
    taxable_benefit: Decimal
    taxability_percent: Decimal
    thresholds: ProvisionalIncomeThresholds


def calculate_provisional_income(benefit: Decimal, other_income: Decimal) -> Decimal:
    """Half the benefit plus other ordinary income."""
    return BENEFIT_INCLUSION_RATE * benefit + other_income


def calculate_taxable_benefit(
    benefit: Decimal,
    provisional_income: Decimal,
    thresholds: ProvisionalIncomeThresholds,
) -> Decimal:
    """Apply the three-tier rule to a provisional income figure.

    Args:
        benefit: Annual Social Security benefit (>= 0).
        provisional_income: Result of calculate_provisional_income.
        thresholds: Tier boundaries for the filing status.

    Returns:
        Taxable portion of the benefit, at most 85% of the benefit.
    """
    tier_one_max = thresholds.tier_one_rate * benefit

    if provisional_income <= thresholds.base:
        return ZERO

    if provisional_income <= thresholds.upper:
        return min(
            tier_one_max,
            thresholds.tier_one_rate * (provisional_income - thresholds.base),
        )

    tier_one_taxable = min(tier_one_max, thresholds.tier_one_cap)
    excess = provisional_income - thresholds.upper
    return min(
        thresholds.tier_two_rate * benefit,
        tier_one_taxable + thresholds.tier_two_rate * excess,
    )


def calculate_benefit_taxation(
    benefit: Decimal,
    other_income: Decimal,
    filing_status: FilingStatus | str,
) -> ProvisionalIncomeResult:
    """Compute how much of a Social Security benefit is taxable.

    Args:
        benefit: Annual benefit (>= 0).
        other_income: Other ordinary income, such as pre-tax plan distributions.
        filing_status: Filing status selecting the thresholds.

    Returns:
        ProvisionalIncomeResult with the taxable benefit and its percentage.

    Example:
        >>> result = calculate_benefit_taxation(Decimal("20000"), Decimal("0"), "single")
        >>> result.taxable_benefit
        Decimal('0')
    """
    thresholds = get_thresholds(filing_status)
    provisional_income = calculate_provisional_income(benefit, other_income)
    taxable_benefit = calculate_taxable_benefit(benefit, provisional_income, thresholds)

    if benefit > ZERO:
        taxability_percent = taxable_benefit / benefit * HUNDRED
    else:
        taxability_percent = ZERO

    return ProvisionalIncomeResult(
        provisional_income=provisional_income,
        taxable_benefit=taxable_benefit,
        taxability_percent=taxability_percent,
        thresholds=thresholds,
    )
