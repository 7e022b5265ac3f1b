"""Mini README: Display helpers registered as Jinja2 filters.

Values are rendered in the Brazilian convention used by the dashboard:
``.`` groups thousands, ``,`` separates cents and dates read day/month/year.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

Number = Union[Decimal, float, int]


def format_currency(value: Number, symbol: str = "R$") -> str:
    """Format a monetary value, e.g. ``R$ 4.500,00`` or ``-R$ 12,50``."""

    amount = Decimal(str(value))
    with localcontext() as context:
        # quantize needs room for every integer digit plus the two cents digits
        context.prec = max(28, amount.adjusted() + 3)
        amount = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        grouped = f"{abs(amount):,.2f}"
    localised = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {localised}"


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def format_percent(value: float) -> str:
    return f"{value:.0f}%"
