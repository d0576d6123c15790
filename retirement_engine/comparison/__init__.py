"""Comparison synthesis: KPIs, narrative, and chart series."""

from retirement_engine.comparison.narrative import build_narrative, format_currency
from retirement_engine.comparison.synthesizer import (
    CUMULATIVE_CHECKPOINTS,
    build_chart_series,
    build_kpis,
    synthesize_comparison,
)

__all__ = [
    "CUMULATIVE_CHECKPOINTS",
    "build_kpis",
    "build_chart_series",
    "build_narrative",
    "format_currency",
    "synthesize_comparison",
]
