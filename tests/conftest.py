"""Pytest configuration and shared fixtures for tests."""

from decimal import Decimal

import pytest

from retirement_engine.models.inputs import (
    DistributionMode,
    FilingStatus,
    ScenarioInputsPosttax,
    ScenarioInputsPretax,
)


@pytest.fixture
def pretax_inputs() -> ScenarioInputsPretax:
    """Pre-tax request: $20k/yr for 20 years at 7%, 4% SWR, joint filers.

    Returns:
        ScenarioInputsPretax for the reference scenario.
    """
    return ScenarioInputsPretax(
        annual_contribution=Decimal("20000"),
        years=20,
        current_tax_rate=Decimal("0.32"),
        growth_rate=Decimal("0.07"),
        distribution_mode=DistributionMode.SWR,
        swr_rate=Decimal("0.04"),
        retirement_tax_rate=Decimal("0.24"),
        annual_benefit=Decimal("30000"),
        filing_status=FilingStatus.MARRIED_JOINT,
    )


@pytest.fixture
def posttax_inputs() -> ScenarioInputsPosttax:
    """After-tax request matching the pre-tax contribution stream net of tax.

    Returns:
        ScenarioInputsPosttax with $13,600/yr after tax.
    """
    return ScenarioInputsPosttax(
        annual_contribution_after_tax=Decimal("13600"),
        years=20,
        growth_rate=Decimal("0.07"),
        distribution_mode=DistributionMode.SWR,
        swr_rate=Decimal("0.04"),
        annual_benefit=Decimal("30000"),
    )


@pytest.fixture
def pretax_payload() -> dict:
    """camelCase JSON payload for the reference pre-tax request.

    Returns:
        Dict as a transport layer would deliver it.
    """
    return {
        "annualContribution": 20000,
        "years": 20,
        "currentTaxRate": 0.32,
        "growthRate": 0.07,
        "distributionMode": "swr",
        "swrRate": 0.04,
        "retirementTaxRate": 0.24,
        "annualBenefit": 30000,
        "filingStatus": "married_joint",
    }
