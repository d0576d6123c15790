"""Educational narrative for a vehicle comparison.

Sentences are templated from the KPI map only; nothing here recomputes a
figure. Currency is shown as whole dollars with thousands separators.
"""

from __future__ import annotations

from decimal import Decimal

ZERO = Decimal("0")

PRETAX_LABEL = "401(k)"
POSTTAX_LABEL = "Roth/LIRP"


def format_currency(amount: Decimal) -> str:
    """Format an amount as whole dollars, sign dropped.

    Example:
        >>> format_currency(Decimal("-128000.4"))
        '128,000'
    """
    return f"{abs(amount):,.0f}"


def _advantage_label(net_income_diff: Decimal) -> str:
    if net_income_diff > ZERO:
        return f"{POSTTAX_LABEL} advantage"
    if net_income_diff < ZERO:
        return f"{PRETAX_LABEL} advantage"
    return "no difference"


def _payback_sentence(payback_years: Decimal) -> str:
    if payback_years.is_infinite():
        return (
            "No tax is due on your retirement distributions, so your front-end "
            "tax savings never need to be paid back."
        )
    return (
        f'The "payback period" for your accumulated tax savings is approximately '
        f"{payback_years:.1f} years of retirement distributions."
    )


def build_narrative(
    kpis: dict[str, Decimal],
    years: int,
    include_heirs: bool,
    include_benefit_insight: bool,
) -> list[str]:
    """Build ordered narrative sentences from the KPI map.

    Args:
        kpis: KPI map from the synthesizer.
        years: Accumulation years of the pre-tax request.
        include_heirs: Add the estate-planning sentence.
        include_benefit_insight: Add the Social Security taxability sentence.

    Returns:
        Sentences in presentation order.
    """
    narrative = [
        f"Your {PRETAX_LABEL} provides ${format_currency(kpis['front_end_savings'])} "
        f"in front-end tax savings over {years} years by allowing pre-tax contributions.",
        f"However, retirement distributions trigger ${format_currency(kpis['total_tax_pretax'])} "
        f"in annual taxes, including ${format_currency(kpis['benefit_tax_impact'])} on "
        "Social Security due to Provisional Income calculations.",
        _payback_sentence(kpis["payback_years"]),
        f"By contrast, {POSTTAX_LABEL} distributions are tax-free and preserve your full "
        f"${format_currency(kpis['benefit_preserved_posttax'])} Social Security benefit annually.",
        f"Your net annual retirement income differs by "
        f"${format_currency(kpis['net_income_diff'])} "
        f"({_advantage_label(kpis['net_income_diff'])}).",
        f"Over 20 years, the {PRETAX_LABEL} results in "
        f"${format_currency(kpis['lifetime_tax_diff_20'])} more in lifetime taxes "
        f"compared to {POSTTAX_LABEL}.",
        f"Over 30 years, the difference grows to "
        f"${format_currency(kpis['lifetime_tax_diff_30'])} in additional taxes.",
    ]

    if include_heirs:
        narrative.append(
            "For estate planning: Your heirs would face approximately "
            f"${format_currency(kpis['heirs_tax_pretax'])} in taxes on the {PRETAX_LABEL} "
            f"balance vs ${format_currency(kpis['heirs_tax_posttax'])} on {POSTTAX_LABEL} "
            "(assuming rules are met)."
        )

    if include_benefit_insight:
        narrative.append(
            f"Key insight: Up to {kpis['benefit_taxability_percent']:.0f}% of your Social "
            f"Security becomes taxable when you have {PRETAX_LABEL} income, significantly "
            "increasing your effective tax rate."
        )

    return narrative
