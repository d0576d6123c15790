"""Tests for Social Security provisional income taxation.

These tests cover:
- The three provisional income tiers for both filing statuses
- The 85% cap on the taxable benefit
- Monotonicity in other income
- Taxability percentage reporting
"""

from decimal import Decimal

import pytest

from retirement_engine.models.inputs import FilingStatus
from retirement_engine.tax.provisional_income import (
    calculate_benefit_taxation,
    calculate_provisional_income,
    calculate_taxable_benefit,
)
from retirement_engine.tax.thresholds import MARRIED_JOINT_THRESHOLDS, SINGLE_THRESHOLDS


class TestProvisionalIncome:
    """Tests for the provisional income base."""

    def test_half_benefit_plus_other_income(self) -> None:
        """Provisional income counts half the benefit."""
        result = calculate_provisional_income(Decimal("20000"), Decimal("40000"))

        assert result == Decimal("50000")


class TestTaxableBenefitTiers:
    """Tests for the three-tier rule."""

    def test_below_base_is_not_taxable(self) -> None:
        """$20k benefit and no other income stays under the single base."""
        result = calculate_benefit_taxation(Decimal("20000"), Decimal("0"), FilingStatus.SINGLE)

        assert result.provisional_income == Decimal("10000")
        assert result.taxable_benefit == Decimal("0")
        assert result.taxability_percent == Decimal("0")

    def test_exactly_at_base_is_not_taxable(self) -> None:
        """The base threshold itself is still in the untaxed tier."""
        result = calculate_taxable_benefit(
            Decimal("20000"), Decimal("25000"), SINGLE_THRESHOLDS
        )

        assert result == Decimal("0")

    def test_middle_tier_taxes_half_the_excess(self) -> None:
        """Between base and upper, half of the excess over base is taxable."""
        # PI = 10,000 + 20,000 = 30,000; excess over 25,000 = 5,000
        result = calculate_benefit_taxation(
            Decimal("20000"), Decimal("20000"), FilingStatus.SINGLE
        )

        assert result.provisional_income == Decimal("30000")
        assert result.taxable_benefit == Decimal("2500")

    def test_middle_tier_capped_at_half_the_benefit(self) -> None:
        """A small benefit caps the middle tier at 50% of the benefit."""
        result = calculate_taxable_benefit(
            Decimal("2000"), Decimal("33000"), SINGLE_THRESHOLDS
        )

        assert result == Decimal("1000")

    def test_upper_tier_capped_at_85_percent(self) -> None:
        """$20k benefit with $40k other income hits the 85% cap of $17,000."""
        result = calculate_benefit_taxation(
            Decimal("20000"), Decimal("40000"), FilingStatus.SINGLE
        )

        # tier one = min(10,000, 0.5 * 9,000) = 4,500; 4,500 + 0.85 * 16,000 = 18,100
        assert result.provisional_income == Decimal("50000")
        assert result.taxable_benefit == Decimal("17000")
        assert result.taxability_percent == Decimal("85")

    def test_upper_tier_below_cap(self) -> None:
        """Just over the joint upper threshold, tier one plus 85% of the excess."""
        # PI = 15,000 + 31,000 = 46,000; tier one = min(15,000, 6,000) = 6,000
        result = calculate_benefit_taxation(
            Decimal("30000"), Decimal("31000"), FilingStatus.MARRIED_JOINT
        )

        assert result.taxable_benefit == Decimal("6000") + Decimal("0.85") * Decimal("2000")
        assert result.thresholds is MARRIED_JOINT_THRESHOLDS

    def test_joint_thresholds_are_higher(self) -> None:
        """The same income can be untaxed for joint filers and taxed for single."""
        single = calculate_benefit_taxation(Decimal("20000"), Decimal("20000"), "single")
        joint = calculate_benefit_taxation(Decimal("20000"), Decimal("20000"), "married_joint")

        assert single.taxable_benefit > Decimal("0")
        assert joint.taxable_benefit == Decimal("0")

    def test_zero_benefit_reports_zero_percent(self) -> None:
        """No benefit means nothing taxable and a 0% taxability."""
        result = calculate_benefit_taxation(Decimal("0"), Decimal("250000"), "single")

        assert result.taxable_benefit == Decimal("0")
        assert result.taxability_percent == Decimal("0")


class TestTaxableBenefitProperties:
    """Property checks across a grid of incomes."""

    @pytest.mark.parametrize("status", [FilingStatus.SINGLE, FilingStatus.MARRIED_JOINT])
    @pytest.mark.parametrize("benefit", ["0", "8000", "24000", "45000"])
    def test_monotonic_and_capped(self, status: FilingStatus, benefit: str) -> None:
        """Taxable benefit never decreases with income and never exceeds 85%."""
        benefit_amount = Decimal(benefit)
        previous = Decimal("0")

        for other in range(0, 120001, 2500):
            result = calculate_benefit_taxation(benefit_amount, Decimal(other), status)

            assert result.taxable_benefit >= previous
            assert result.taxable_benefit <= Decimal("0.85") * benefit_amount
            previous = result.taxable_benefit
