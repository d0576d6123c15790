"""Tax on an inherited pre-tax balance.

Two payout schedules are supported:

- lump: the whole balance is recognized in a single year.
- ten_year: the balance is spread evenly over ten annual distributions.

Neither schedule discounts deferred tax, so with a flat beneficiary rate both
produce the same total tax. Present-value treatment of the ten-year schedule
is not modeled.
"""

from __future__ import annotations

from decimal import Decimal

from retirement_engine.models.inputs import HeirsInputs, HeirsMode
from retirement_engine.models.results import HeirsResult

TEN_YEAR_PERIODS = 10


def calculate_heirs_tax(inputs: HeirsInputs) -> HeirsResult:
    """Calculate the beneficiary's tax on an inherited pre-tax balance.

    Args:
        inputs: Validated heirs request.

    Returns:
        HeirsResult with total tax, the annual tax for the ten-year schedule
        (None for lump), and the amount left to heirs.

    Example:
        >>> inputs = HeirsInputs(pretax_balance=Decimal("500000"),
        ...                      beneficiary_tax_rate=Decimal("0.22"))
        >>> calculate_heirs_tax(inputs).tax_due
        Decimal('110000.00')
    """
    balance = inputs.pretax_balance
    rate = inputs.beneficiary_tax_rate

    match inputs.mode:
        case HeirsMode.LUMP:
            tax_due = balance * rate
            annual_tax = None
        case HeirsMode.TEN_YEAR:
            annual_distribution = balance / TEN_YEAR_PERIODS
            annual_tax = annual_distribution * rate
            tax_due = annual_tax * TEN_YEAR_PERIODS

    return HeirsResult(
        mode=inputs.mode,
        tax_due=tax_due,
        annual_tax_ten_year=annual_tax,
        net_to_heirs=balance - tax_due,
    )
