"""Comparison synthesis for the two retirement vehicles.

Merges the pre-tax and after-tax scenario results (and optional heirs
results) into:
- A flat KPI map
- Ordered narrative sentences templated from the KPIs
- Chart series: an annual side-by-side row per vehicle and cumulative tax at
  fixed retirement-year checkpoints

Pure aggregation: the only arithmetic is differences between existing
figures and the linear cumulative-tax extrapolation for charts.
"""

from __future__ import annotations

from decimal import Decimal

from retirement_engine.comparison.narrative import (
    POSTTAX_LABEL,
    PRETAX_LABEL,
    build_narrative,
)
from retirement_engine.core.logging import get_logger
from retirement_engine.models.inputs import ScenarioInputsPretax
from retirement_engine.models.results import (
    AnnualChartRow,
    ChartSeries,
    ComparisonResult,
    CumulativeChartPoint,
    HeirsResult,
    ScenarioResultPosttax,
    ScenarioResultPretax,
)

logger = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CUMULATIVE_CHECKPOINTS = (5, 10, 15, 20, 25, 30)


def build_kpis(
    pretax: ScenarioResultPretax,
    posttax: ScenarioResultPosttax,
    pretax_inputs: ScenarioInputsPretax,
    heirs_pretax: HeirsResult | None = None,
    heirs_posttax: HeirsResult | None = None,
) -> dict[str, Decimal]:
    """Build the flat KPI map.

    Missing heirs results count as zero tax.

    Args:
        pretax: Pre-tax scenario result.
        posttax: After-tax scenario result.
        pretax_inputs: Pre-tax request, for the benefit amount.
        heirs_pretax: Heirs result on the pre-tax balance.
        heirs_posttax: Heirs result on the after-tax balance.

    Returns:
        KPI name to value.
    """
    heirs_tax_pretax = heirs_pretax.tax_due if heirs_pretax is not None else ZERO
    heirs_tax_posttax = heirs_posttax.tax_due if heirs_posttax is not None else ZERO

    if pretax_inputs.annual_benefit > ZERO:
        taxability_percent = pretax.taxable_benefit / pretax_inputs.annual_benefit * HUNDRED
    else:
        taxability_percent = ZERO

    return {
        "net_income_pretax": pretax.net_income,
        "net_income_posttax": posttax.net_income,
        "net_income_diff": posttax.net_income - pretax.net_income,
        "total_tax_pretax": pretax.total_annual_tax,
        "total_tax_posttax": posttax.total_annual_tax,
        "annual_tax_savings": pretax.total_annual_tax - posttax.total_annual_tax,
        "payback_years": pretax.payback_years,
        "front_end_savings": pretax.front_end_savings_total,
        "cumulative_tax_20_pretax": pretax.cumulative_tax_20,
        "cumulative_tax_20_posttax": posttax.cumulative_tax_20,
        "lifetime_tax_diff_20": pretax.cumulative_tax_20 - posttax.cumulative_tax_20,
        "cumulative_tax_30_pretax": pretax.cumulative_tax_30,
        "cumulative_tax_30_posttax": posttax.cumulative_tax_30,
        "lifetime_tax_diff_30": pretax.cumulative_tax_30 - posttax.cumulative_tax_30,
        "heirs_tax_pretax": heirs_tax_pretax,
        "heirs_tax_posttax": heirs_tax_posttax,
        "heirs_tax_savings": heirs_tax_pretax - heirs_tax_posttax,
        "benefit_preserved_posttax": posttax.benefit_retained,
        "benefit_taxed_pretax": pretax.taxable_benefit,
        "benefit_tax_impact": pretax.benefit_tax_due,
        "benefit_taxability_percent": taxability_percent,
    }


def build_chart_series(
    pretax: ScenarioResultPretax, posttax: ScenarioResultPosttax
) -> ChartSeries:
    """Build the annual and cumulative chart series.

    Cumulative tax is the annual tax times the checkpoint year, not
    compounded.
    """
    annual = [
        AnnualChartRow(
            category=PRETAX_LABEL,
            gross=pretax.gross_income,
            taxes=pretax.total_annual_tax,
            net=pretax.net_income,
            benefit_tax=pretax.benefit_tax_due,
        ),
        AnnualChartRow(
            category=POSTTAX_LABEL,
            gross=posttax.annual_tax_free_income,
            taxes=posttax.total_annual_tax,
            net=posttax.net_income,
            benefit_tax=posttax.benefit_tax_due,
        ),
    ]
    cumulative = [
        CumulativeChartPoint(
            year=year,
            tax_pretax=pretax.total_annual_tax * year,
            tax_posttax=posttax.total_annual_tax * year,
        )
        for year in CUMULATIVE_CHECKPOINTS
    ]
    return ChartSeries(annual=annual, cumulative=cumulative)


def synthesize_comparison(
    pretax_result: ScenarioResultPretax,
    posttax_result: ScenarioResultPosttax,
    pretax_inputs: ScenarioInputsPretax,
    heirs_pretax: HeirsResult | None = None,
    heirs_posttax: HeirsResult | None = None,
) -> ComparisonResult:
    """Merge both scenario results into KPIs, narrative, and chart series.

    Args:
        pretax_result: Pre-tax scenario result.
        posttax_result: After-tax scenario result.
        pretax_inputs: Pre-tax request (accumulation years, benefit amount).
        heirs_pretax: Optional heirs result on the pre-tax balance.
        heirs_posttax: Optional heirs result on the after-tax balance.

    Returns:
        ComparisonResult.
    """
    kpis = build_kpis(
        pretax_result, posttax_result, pretax_inputs, heirs_pretax, heirs_posttax
    )
    narrative = build_narrative(
        kpis,
        years=pretax_inputs.years,
        include_heirs=heirs_pretax is not None,
        include_benefit_insight=pretax_inputs.annual_benefit > ZERO,
    )

    logger.info(
        "comparison_synthesized",
        net_income_diff=kpis["net_income_diff"],
        narrative_sentences=len(narrative),
        heirs_included=heirs_pretax is not None,
    )
    return ComparisonResult(
        kpis=kpis,
        narrative=narrative,
        chart_series=build_chart_series(pretax_result, posttax_result),
    )
