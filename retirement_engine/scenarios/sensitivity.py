"""Single-parameter stress cases for the pre-tax vehicle.

The sweep is a declarative menu of (label, transform) pairs. Each transform
returns the field overrides for one case; the case runs on its own copy of
the base request, so cases are independent and order-insensitive.

Tax-rate cases scale the retirement rate multiplicatively; growth cases shift
the accumulation rate by whole percentage points.
"""

from __future__ import annotations

from collections.abc import Callable
import contextvars
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any

from retirement_engine.core.config import settings
from retirement_engine.core.logging import get_logger
from retirement_engine.models.inputs import ScenarioInputsPretax
from retirement_engine.models.results import SensitivityCase
from retirement_engine.scenarios.base import project_pretax

logger = get_logger(__name__)


@dataclass(frozen=True)
class SensitivityPerturbation:
    """One entry in the sensitivity menu.

    Attributes:
        label: Key the case is reported under.
        transform: Returns field overrides for the perturbed request.
    """

    label: str
    transform: Callable[[ScenarioInputsPretax], dict[str, Any]]

    def apply(self, inputs: ScenarioInputsPretax) -> ScenarioInputsPretax:
        """Copy the base request with this case's overrides.

        Overrides skip input bounds: a stressed rate may legitimately sit
        outside what a caller is allowed to request.
        """
        return inputs.model_copy(update=self.transform(inputs))


def _scale_tax_rate(factor: str) -> Callable[[ScenarioInputsPretax], dict[str, Any]]:
    multiplier = Decimal(factor)
    return lambda inputs: {"retirement_tax_rate": inputs.retirement_tax_rate * multiplier}


def _shift_growth_rate(delta: str) -> Callable[[ScenarioInputsPretax], dict[str, Any]]:
    shift = Decimal(delta)
    return lambda inputs: {"growth_rate": inputs.growth_rate + shift}


SENSITIVITY_CASES: tuple[SensitivityPerturbation, ...] = (
    SensitivityPerturbation("tax_up_5pct", _scale_tax_rate("1.05")),
    SensitivityPerturbation("tax_down_5pct", _scale_tax_rate("0.95")),
    SensitivityPerturbation("return_up_2pct", _shift_growth_rate("0.02")),
    SensitivityPerturbation("return_down_2pct", _shift_growth_rate("-0.02")),
    # Policy-change stress: ordinary rates revert to a higher bracket
    SensitivityPerturbation("elevated_bracket", _scale_tax_rate("1.15")),
)


def run_sensitivity_case(
    inputs: ScenarioInputsPretax, perturbation: SensitivityPerturbation
) -> SensitivityCase:
    """Run the pre-tax projection for one perturbation.

    Args:
        inputs: Base pre-tax request.
        perturbation: Case to apply.

    Returns:
        SensitivityCase with the headline figures for the perturbed run.
    """
    projection = project_pretax(perturbation.apply(inputs))
    return SensitivityCase(
        label=perturbation.label,
        balance_at_retirement=projection.balance_at_retirement,
        gross_income=projection.gross_income,
        total_annual_tax=projection.total_annual_tax,
        net_income=projection.net_income,
    )


def _run_case_isolated(
    inputs: ScenarioInputsPretax, perturbation: SensitivityPerturbation
) -> SensitivityCase:
    # Private decimal context so concurrent cases never share signal flags
    with localcontext():
        return run_sensitivity_case(inputs, perturbation)


def run_sensitivity(
    inputs: ScenarioInputsPretax,
    cases: tuple[SensitivityPerturbation, ...] = SENSITIVITY_CASES,
    max_workers: int | None = None,
) -> dict[str, SensitivityCase]:
    """Run every perturbation against the base request.

    Args:
        inputs: Base pre-tax request.
        cases: Perturbation menu (defaults to SENSITIVITY_CASES).
        max_workers: Thread count; defaults to settings.sensitivity_workers.
            1 runs the cases sequentially.

    Returns:
        Mapping of label to SensitivityCase, in menu order.
    """
    workers = max_workers if max_workers is not None else settings.sensitivity_workers

    if workers > 1:
        # Each worker runs in a copy of the caller's context: decimal precision
        # and the scenario id carry over
        contexts = [contextvars.copy_context() for _ in cases]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(
                executor.map(
                    lambda ctx, case: ctx.run(_run_case_isolated, inputs, case),
                    contexts,
                    cases,
                )
            )
    else:
        results = [run_sensitivity_case(inputs, case) for case in cases]

    logger.debug(
        "sensitivity_sweep_complete",
        cases=[case.label for case in results],
        workers=workers,
    )
    return {case.label: case for case in results}
