"""Annual retirement income drawn from an accumulated balance.

Three draw strategies are modeled as a small tagged union:

- InterestDraw: spend only the return on the balance
- SafeWithdrawalDraw: spend a fixed percentage of the starting balance
- FixedPeriodDraw: amortize the balance to zero over a number of years

``annual_distribution`` dispatches on the variant with a single match
statement. All arithmetic uses Decimal.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from retirement_engine.models.inputs import DistributionMode

ZERO = Decimal("0")
ONE = Decimal("1")


@dataclass(frozen=True)
class InterestDraw:
    """Withdraw the annual return and leave principal intact."""

    retirement_return: Decimal


@dataclass(frozen=True)
class SafeWithdrawalDraw:
    """Withdraw a constant share of the balance each year."""

    swr_rate: Decimal


@dataclass(frozen=True)
class FixedPeriodDraw:
    """Level payment that depletes the balance over ``fixed_years``."""

    retirement_return: Decimal
    fixed_years: int


DrawParams = Union[InterestDraw, SafeWithdrawalDraw, FixedPeriodDraw]


def amortization_factor(rate: Decimal, periods: int) -> Decimal:
    """Standard loan payment factor r(1+r)^n / ((1+r)^n - 1).

    Args:
        rate: Per-period rate (>= 0 for valid requests).
        periods: Number of payments (>= 1).

    Returns:
        Payment per unit of principal. 1 / periods when the rate is zero.
    """
    if rate == ZERO:
        return ONE / Decimal(periods)
    growth = (ONE + rate) ** periods
    return rate * growth / (growth - ONE)


def annual_distribution(balance: Decimal, params: DrawParams) -> Decimal:
    """Annual income produced by a balance under a draw strategy.

    Args:
        balance: Balance at retirement (>= 0).
        params: One of InterestDraw, SafeWithdrawalDraw, FixedPeriodDraw.

    Returns:
        Gross annual income (>= 0 for valid inputs).

    Raises:
        TypeError: If params is not a known draw variant.
    """
    match params:
        case InterestDraw(retirement_return=rate):
            return balance * rate
        case SafeWithdrawalDraw(swr_rate=rate):
            return balance * rate
        case FixedPeriodDraw(retirement_return=rate, fixed_years=years):
            return balance * amortization_factor(rate, years)
        case _:
            raise TypeError(f"Unknown draw strategy: {type(params).__name__}")


def draw_params_for(
    mode: DistributionMode,
    retirement_return: Decimal,
    swr_rate: Decimal,
    fixed_years: int,
) -> DrawParams:
    """Build the draw variant selected by a request's distribution mode.

    Args:
        mode: Requested distribution mode.
        retirement_return: Return during retirement (interest, fixed_period).
        swr_rate: Safe withdrawal rate (swr).
        fixed_years: Depletion horizon (fixed_period).

    Returns:
        The matching draw variant carrying only the parameters it uses.
    """
    match DistributionMode(mode):
        case DistributionMode.INTEREST:
            return InterestDraw(retirement_return=retirement_return)
        case DistributionMode.SWR:
            return SafeWithdrawalDraw(swr_rate=swr_rate)
        case DistributionMode.FIXED_PERIOD:
            return FixedPeriodDraw(
                retirement_return=retirement_return, fixed_years=fixed_years
            )
