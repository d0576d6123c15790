"""Deterministic retirement vehicle comparison engine.

Compares a pre-tax (401(k)-style) vehicle against an after-tax (Roth/LIRP)
vehicle, including Social Security provisional income taxation, heirs tax,
and a sensitivity sweep.

Components:
- engine: Validated boundary operations returning result models
- scenarios: Pre-tax and after-tax scenario engines and the sensitivity sweep
- projection: Accumulation and distribution math
- tax: Provisional income thresholds, benefit taxation, heirs tax
- comparison: KPI map, narrative, and chart series
"""

from retirement_engine.engine import (
    compare_vehicles,
    compute_benefit_taxation,
    compute_heirs_tax,
    compute_posttax_scenario,
    compute_pretax_scenario,
    synthesize_comparison,
)
from retirement_engine.errors import FieldError, ValidationError
from retirement_engine.serialization import from_json, to_json, to_payload

__all__ = [
    # Boundary operations
    "compute_pretax_scenario",
    "compute_posttax_scenario",
    "compute_benefit_taxation",
    "compute_heirs_tax",
    "synthesize_comparison",
    "compare_vehicles",
    # Errors
    "ValidationError",
    "FieldError",
    # Serialization
    "to_payload",
    "to_json",
    "from_json",
]
