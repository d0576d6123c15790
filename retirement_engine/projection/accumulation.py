"""Future value of a level stream of annual contributions."""

from __future__ import annotations

from decimal import Decimal

ZERO = Decimal("0")
ONE = Decimal("1")


def future_value_of_contributions(
    contribution: Decimal, rate: Decimal, years: int
) -> Decimal:
    """Future value of an ordinary annuity (end-of-year contributions).

    FV = contribution * ((1 + rate) ** years - 1) / rate

    The closed form is undefined at a zero rate, where the balance is simply
    the sum of contributions.

    Args:
        contribution: Amount contributed each year (> 0).
        rate: Annual growth rate as a fraction (may be 0 or negative).
        years: Number of contributions (>= 1).

    Returns:
        Balance at the end of the final year.

    Example:
        >>> future_value_of_contributions(Decimal("1000"), Decimal("0"), 10)
        Decimal('10000')
    """
    if rate == ZERO:
        return contribution * years
    return contribution * (((ONE + rate) ** years - ONE) / rate)
