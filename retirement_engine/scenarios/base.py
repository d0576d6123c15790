"""Shared scenario composition: accumulate, draw, and tax a pre-tax vehicle.

``project_pretax`` is the single place the pre-tax arithmetic lives. The full
scenario engine and every sensitivity case call it, so a perturbed run can
never drift from the base run's formulas.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from retirement_engine.models.inputs import ScenarioInputsPosttax, ScenarioInputsPretax
from retirement_engine.projection.accumulation import future_value_of_contributions
from retirement_engine.projection.distribution import annual_distribution, draw_params_for
from retirement_engine.tax.provisional_income import (
    ProvisionalIncomeResult,
    calculate_benefit_taxation,
)


@dataclass(frozen=True)
class VehicleProjection:
    """Balance at retirement and the annual income it supports.

    Attributes:
        balance_at_retirement: Accumulated balance after the final contribution.
        annual_income: Gross annual draw under the requested mode.
    """

    balance_at_retirement: Decimal
    annual_income: Decimal


@dataclass(frozen=True)
class PretaxProjection:
    """Annual retirement taxes for a pre-tax vehicle.

    Attributes:
        balance_at_retirement: Accumulated balance.
        gross_income: Annual distribution before tax.
        tax_on_distribution: Ordinary tax on the distribution.
        benefit: Social Security taxation with the distribution as other income.
        benefit_tax_due: Tax on the taxable benefit.
        total_annual_tax: tax_on_distribution + benefit_tax_due.
        net_income: Distribution plus benefit, less benefit tax.
    """

    balance_at_retirement: Decimal
    gross_income: Decimal
    tax_on_distribution: Decimal
    benefit: ProvisionalIncomeResult
    benefit_tax_due: Decimal
    total_annual_tax: Decimal
    net_income: Decimal


def project_vehicle(
    inputs: ScenarioInputsPretax | ScenarioInputsPosttax, contribution: Decimal
) -> VehicleProjection:
    """Accumulate contributions and convert the balance to annual income.

    Args:
        inputs: Either vehicle's request (only the shared fields are read).
        contribution: Annual contribution for this vehicle.

    Returns:
        VehicleProjection with balance and gross annual income.
    """
    balance = future_value_of_contributions(contribution, inputs.growth_rate, inputs.years)
    params = draw_params_for(
        inputs.distribution_mode,
        retirement_return=inputs.retirement_return,
        swr_rate=inputs.swr_rate,
        fixed_years=inputs.fixed_years,
    )
    return VehicleProjection(
        balance_at_retirement=balance,
        annual_income=annual_distribution(balance, params),
    )


def project_pretax(inputs: ScenarioInputsPretax) -> PretaxProjection:
    """Run the pre-tax vehicle through accumulation, draw, and taxation.

    The distribution counts as other income for provisional income, so a
    larger draw can pull more of the Social Security benefit into tax.

    Args:
        inputs: Pre-tax request.

    Returns:
        PretaxProjection with annual tax components and net income.
    """
    vehicle = project_vehicle(inputs, inputs.annual_contribution)
    gross_income = vehicle.annual_income

    tax_on_distribution = gross_income * inputs.retirement_tax_rate
    benefit = calculate_benefit_taxation(
        inputs.annual_benefit, gross_income, inputs.filing_status
    )
    benefit_tax_due = benefit.taxable_benefit * inputs.retirement_tax_rate
    total_annual_tax = tax_on_distribution + benefit_tax_due
    net_income = gross_income + (inputs.annual_benefit - benefit_tax_due)

    return PretaxProjection(
        balance_at_retirement=vehicle.balance_at_retirement,
        gross_income=gross_income,
        tax_on_distribution=tax_on_distribution,
        benefit=benefit,
        benefit_tax_due=benefit_tax_due,
        total_annual_tax=total_annual_tax,
        net_income=net_income,
    )
