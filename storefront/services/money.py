"""Decimal helpers for currency amounts.

Amounts stay unrounded through every calculation; rounding to cents only
happens when a figure is displayed.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, str, Decimal]

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_money(value: Number) -> Decimal:
    """Convert a number to Decimal, going through str for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def add_money(*amounts: Number) -> Decimal:
    """Exact sum of amounts."""
    return sum((to_money(a) for a in amounts), ZERO)


def percent_of(amount: Number, percent: Number) -> Decimal:
    """``percent`` percent of ``amount``, unrounded."""
    return to_money(amount) * to_money(percent) / HUNDRED


def round_money(amount: Number, places: int = 2) -> Decimal:
    """Round half-up to the given number of decimal places."""
    quantum = Decimal(1).scaleb(-places)
    return to_money(amount).quantize(quantum, rounding=ROUND_HALF_UP)


def format_money(amount: Number, symbol: str = "$") -> str:
    """Display form of an amount, e.g. ``$261.01`` or ``-$1.50``."""
    rounded = round_money(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):.2f}"


def format_price(amount: Number, symbol: str = "$") -> str:
    """Like format_money, but a zero price reads ``Free``."""
    if to_money(amount) == ZERO:
        return "Free"
    return format_money(amount, symbol)
