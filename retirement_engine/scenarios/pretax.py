"""Pre-tax (401(k)-style) vehicle scenario.

Builds on the shared projection to add the front-end savings analysis:
- Up-front deduction value over the accumulation years
- Payback period: years of retirement tax that repay that deduction
- Cumulative tax over 20 and 30 retirement years
- Effective rate including the Social Security tax impact

The sensitivity sweep is attached to every result.
"""

from __future__ import annotations

from decimal import Decimal

from retirement_engine.core.logging import get_logger
from retirement_engine.models.inputs import ScenarioInputsPretax
from retirement_engine.models.results import ScenarioResultPretax
from retirement_engine.scenarios.base import project_pretax
from retirement_engine.scenarios.sensitivity import run_sensitivity

logger = get_logger(__name__)

ZERO = Decimal("0")
PAYBACK_NEVER = Decimal("Infinity")
CUMULATIVE_HORIZONS = (20, 30)


def calculate_front_end_savings(inputs: ScenarioInputsPretax) -> Decimal:
    """Total tax deducted on contributions over the accumulation years."""
    return inputs.annual_contribution * inputs.current_tax_rate * inputs.years


def calculate_payback_years(front_end_savings: Decimal, total_annual_tax: Decimal) -> Decimal:
    """Years of retirement tax needed to repay the up-front deduction.

    Returns Decimal("Infinity") when no tax is due in retirement: the savings
    never need to be paid back. This is a valid result, not an error.
    """
    if total_annual_tax > ZERO:
        return front_end_savings / total_annual_tax
    return PAYBACK_NEVER


def run_pretax_scenario(inputs: ScenarioInputsPretax) -> ScenarioResultPretax:
    """Compute the full pre-tax vehicle scenario.

    Args:
        inputs: Validated pre-tax request.

    Returns:
        ScenarioResultPretax with annual taxes, payback analysis, lifetime
        tax, effective rate, and the sensitivity sweep.

    Example:
        >>> inputs = ScenarioInputsPretax(
        ...     annual_contribution=Decimal("20000"), years=20,
        ...     current_tax_rate=Decimal("0.32"), growth_rate=Decimal("0.07"),
        ...     distribution_mode="swr", swr_rate=Decimal("0.04"),
        ...     retirement_tax_rate=Decimal("0.24"),
        ...     annual_benefit=Decimal("30000"), filing_status="married_joint")
        >>> round(run_pretax_scenario(inputs).balance_at_retirement)
        819910
    """
    projection = project_pretax(inputs)
    total_annual_tax = projection.total_annual_tax

    front_end_savings = calculate_front_end_savings(inputs)
    twenty, thirty = CUMULATIVE_HORIZONS

    if projection.gross_income > ZERO:
        effective_rate = total_annual_tax / projection.gross_income
    else:
        effective_rate = ZERO

    result = ScenarioResultPretax(
        balance_at_retirement=projection.balance_at_retirement,
        gross_income=projection.gross_income,
        tax_on_distribution=projection.tax_on_distribution,
        taxable_benefit=projection.benefit.taxable_benefit,
        benefit_tax_due=projection.benefit_tax_due,
        total_annual_tax=total_annual_tax,
        net_income=projection.net_income,
        front_end_savings_total=front_end_savings,
        payback_years=calculate_payback_years(front_end_savings, total_annual_tax),
        cumulative_tax_20=total_annual_tax * twenty,
        cumulative_tax_30=total_annual_tax * thirty,
        effective_rate=effective_rate,
        sensitivity=run_sensitivity(inputs),
    )

    logger.info(
        "pretax_scenario_computed",
        distribution_mode=inputs.distribution_mode.value,
        filing_status=inputs.filing_status.value,
        balance_at_retirement=result.balance_at_retirement,
        total_annual_tax=result.total_annual_tax,
        payback_years=result.payback_years,
    )
    return result
