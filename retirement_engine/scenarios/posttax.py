"""After-tax (Roth/LIRP) vehicle scenario.

Distributions are tax free and are not counted as other income for
provisional income, so the full Social Security benefit is retained.
"""

from __future__ import annotations

from retirement_engine.core.logging import get_logger
from retirement_engine.models.inputs import ScenarioInputsPosttax
from retirement_engine.models.results import ScenarioResultPosttax
from retirement_engine.scenarios.base import project_vehicle

logger = get_logger(__name__)


def run_posttax_scenario(inputs: ScenarioInputsPosttax) -> ScenarioResultPosttax:
    """Compute the after-tax vehicle scenario.

    Args:
        inputs: Validated after-tax request.

    Returns:
        ScenarioResultPosttax with zero tax and the full benefit retained.
    """
    vehicle = project_vehicle(inputs, inputs.annual_contribution_after_tax)

    result = ScenarioResultPosttax(
        balance_at_retirement=vehicle.balance_at_retirement,
        annual_tax_free_income=vehicle.annual_income,
        net_income=vehicle.annual_income + inputs.annual_benefit,
        benefit_retained=inputs.annual_benefit,
    )

    logger.info(
        "posttax_scenario_computed",
        distribution_mode=inputs.distribution_mode.value,
        balance_at_retirement=result.balance_at_retirement,
        annual_tax_free_income=result.annual_tax_free_income,
    )
    return result
