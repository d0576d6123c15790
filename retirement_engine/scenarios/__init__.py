"""Scenario engines for the pre-tax and after-tax vehicles."""

from retirement_engine.scenarios.base import (
    PretaxProjection,
    VehicleProjection,
    project_pretax,
    project_vehicle,
)
from retirement_engine.scenarios.posttax import run_posttax_scenario
from retirement_engine.scenarios.pretax import (
    PAYBACK_NEVER,
    calculate_front_end_savings,
    calculate_payback_years,
    run_pretax_scenario,
)
from retirement_engine.scenarios.sensitivity import (
    SENSITIVITY_CASES,
    SensitivityPerturbation,
    run_sensitivity,
    run_sensitivity_case,
)

__all__ = [
    # Shared projection
    "VehicleProjection",
    "PretaxProjection",
    "project_vehicle",
    "project_pretax",
    # Pre-tax
    "PAYBACK_NEVER",
    "calculate_front_end_savings",
    "calculate_payback_years",
    "run_pretax_scenario",
    # After-tax
    "run_posttax_scenario",
    # Sensitivity
    "SENSITIVITY_CASES",
    "SensitivityPerturbation",
    "run_sensitivity",
    "run_sensitivity_case",
]
