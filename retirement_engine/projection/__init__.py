"""Accumulation and distribution math shared by both vehicles."""

from retirement_engine.projection.accumulation import future_value_of_contributions
from retirement_engine.projection.distribution import (
    DrawParams,
    FixedPeriodDraw,
    InterestDraw,
    SafeWithdrawalDraw,
    amortization_factor,
    annual_distribution,
    draw_params_for,
)

__all__ = [
    "future_value_of_contributions",
    "DrawParams",
    "InterestDraw",
    "SafeWithdrawalDraw",
    "FixedPeriodDraw",
    "amortization_factor",
    "annual_distribution",
    "draw_params_for",
]
