"""Pydantic models for engine responses.

Every engine operation returns one of these frozen models. They serialize to
JSON through ``model_dump(mode="json")``: Decimals become strings and the
infinite payback sentinel becomes "Infinity" rather than null.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from retirement_engine.models.inputs import FilingStatus, HeirsMode

ZERO = Decimal("0")

# Decimal that may hold Decimal("Infinity") (payback sentinel)
ExtendedDecimal = Annotated[Decimal, AllowInfNan()]


class _EngineResult(BaseModel):
    """Shared configuration for response models."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SensitivityCase(_EngineResult):
    """Outcome of one perturbed pre-tax run.

    Carries only the headline figures; perturbed runs never nest their own
    sensitivity sweep.
    """

    label: str
    balance_at_retirement: Decimal
    gross_income: Decimal
    total_annual_tax: Decimal
    net_income: Decimal


class ScenarioResultPretax(_EngineResult):
    """Full pre-tax vehicle projection.

    Invariants:
        total_annual_tax == tax_on_distribution + benefit_tax_due
        taxable_benefit <= 0.85 * annual_benefit
    """

    balance_at_retirement: Decimal
    gross_income: Decimal
    tax_on_distribution: Decimal
    taxable_benefit: Decimal
    benefit_tax_due: Decimal
    total_annual_tax: Decimal
    net_income: Decimal
    front_end_savings_total: Decimal
    payback_years: ExtendedDecimal = Field(
        description="Years of retirement tax that repay the up-front deduction; "
        "Infinity when no tax is ever due"
    )
    cumulative_tax_20: Decimal
    cumulative_tax_30: Decimal
    effective_rate: Decimal
    sensitivity: dict[str, SensitivityCase] = Field(default_factory=dict)


class ScenarioResultPosttax(_EngineResult):
    """After-tax vehicle projection. Tax fields are zero by construction."""

    balance_at_retirement: Decimal
    annual_tax_free_income: Decimal
    total_annual_tax: Decimal = ZERO
    net_income: Decimal
    benefit_retained: Decimal
    taxable_benefit: Decimal = ZERO
    benefit_tax_due: Decimal = ZERO
    effective_rate: Decimal = ZERO
    cumulative_tax_20: Decimal = ZERO
    cumulative_tax_30: Decimal = ZERO


class ThresholdPair(_EngineResult):
    """Provisional income thresholds echoed back to the caller."""

    base: Decimal
    upper: Decimal


class BenefitTaxationResult(_EngineResult):
    """Standalone Social Security taxation result."""

    filing_status: FilingStatus
    provisional_income: Decimal
    taxable_benefit: Decimal
    tax_due: Decimal
    taxability_percent: Decimal
    thresholds: ThresholdPair


class HeirsResult(_EngineResult):
    """Tax on an inherited pre-tax balance.

    Invariant: net_to_heirs == pretax_balance - tax_due >= 0.
    """

    mode: HeirsMode
    tax_due: Decimal
    annual_tax_ten_year: Decimal | None = None
    net_to_heirs: Decimal


class AnnualChartRow(_EngineResult):
    """One vehicle's annual retirement figures for a side-by-side chart."""

    category: str
    gross: Decimal
    taxes: Decimal
    net: Decimal
    benefit_tax: Decimal


class CumulativeChartPoint(_EngineResult):
    """Cumulative tax paid by each vehicle after a number of retirement years."""

    year: int
    tax_pretax: Decimal
    tax_posttax: Decimal


class ChartSeries(_EngineResult):
    """Chart-ready series for the comparison view."""

    annual: list[AnnualChartRow]
    cumulative: list[CumulativeChartPoint]


class ComparisonResult(_EngineResult):
    """Merged comparison of both vehicles."""

    kpis: dict[str, ExtendedDecimal]
    narrative: list[str]
    chart_series: ChartSeries
