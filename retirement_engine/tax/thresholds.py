"""Provisional income thresholds by filing status.

This module centralizes the Social Security taxability thresholds so the
provisional income model never hardcodes them. Thresholds are statutory
constants and are not exposed through settings.

Example:
    >>> from retirement_engine.tax.thresholds import get_thresholds
    >>> thresholds = get_thresholds("married_joint")
    >>> print(thresholds.base, thresholds.upper)
    32000 44000
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from retirement_engine.models.inputs import FilingStatus, normalize_filing_status


@dataclass(frozen=True)
class ProvisionalIncomeThresholds:
    """Provisional income tier boundaries for one filing status.

    Frozen to prevent accidental modification of shared constants.

    Attributes:
        filing_status: Filing status these thresholds apply to.
        base: Provisional income above which up to 50% of the benefit is taxable.
        upper: Provisional income above which up to 85% of the benefit is taxable.
    """

    filing_status: FilingStatus
    base: Decimal
    upper: Decimal

    # Share of the benefit taxable in each tier
    tier_one_rate: Decimal = Decimal("0.5")
    tier_two_rate: Decimal = Decimal("0.85")

    @property
    def tier_one_cap(self) -> Decimal:
        """Largest provisional-income-driven amount taxable in the first tier."""
        return self.tier_one_rate * (self.upper - self.base)


SINGLE_THRESHOLDS = ProvisionalIncomeThresholds(
    filing_status=FilingStatus.SINGLE,
    base=Decimal("25000"),
    upper=Decimal("34000"),
)

MARRIED_JOINT_THRESHOLDS = ProvisionalIncomeThresholds(
    filing_status=FilingStatus.MARRIED_JOINT,
    base=Decimal("32000"),
    upper=Decimal("44000"),
)

# Registry of thresholds keyed by filing status
PROVISIONAL_INCOME_THRESHOLDS: dict[FilingStatus, ProvisionalIncomeThresholds] = {
    FilingStatus.SINGLE: SINGLE_THRESHOLDS,
    FilingStatus.MARRIED_JOINT: MARRIED_JOINT_THRESHOLDS,
}


def get_thresholds(filing_status: FilingStatus | str) -> ProvisionalIncomeThresholds:
    """Get provisional income thresholds for a filing status.

    Args:
        filing_status: FilingStatus or its string value ("mfj" is accepted).

    Returns:
        ProvisionalIncomeThresholds for the filing status.

    Raises:
        ValueError: If the filing status is not recognized.
    """
    try:
        status = FilingStatus(normalize_filing_status(filing_status))
    except ValueError:
        available = sorted(s.value for s in PROVISIONAL_INCOME_THRESHOLDS)
        raise ValueError(
            f"No provisional income thresholds for filing status {filing_status!r}. "
            f"Available: {available}"
        ) from None
    return PROVISIONAL_INCOME_THRESHOLDS[status]
