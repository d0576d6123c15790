"""Request and response models for the engine boundary."""

from retirement_engine.models.inputs import (
    BenefitTaxationInputs,
    DistributionMode,
    FilingStatus,
    HeirsInputs,
    HeirsMode,
    ScenarioInputsPosttax,
    ScenarioInputsPretax,
)
from retirement_engine.models.results import (
    AnnualChartRow,
    BenefitTaxationResult,
    ChartSeries,
    ComparisonResult,
    CumulativeChartPoint,
    HeirsResult,
    ScenarioResultPosttax,
    ScenarioResultPretax,
    SensitivityCase,
    ThresholdPair,
)

__all__ = [
    # Enums
    "FilingStatus",
    "DistributionMode",
    "HeirsMode",
    # Requests
    "ScenarioInputsPretax",
    "ScenarioInputsPosttax",
    "BenefitTaxationInputs",
    "HeirsInputs",
    # Responses
    "ScenarioResultPretax",
    "ScenarioResultPosttax",
    "SensitivityCase",
    "BenefitTaxationResult",
    "ThresholdPair",
    "HeirsResult",
    "ComparisonResult",
    "ChartSeries",
    "AnnualChartRow",
    "CumulativeChartPoint",
]
