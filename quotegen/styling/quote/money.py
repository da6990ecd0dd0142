# quotegen/styling/quote/money.py
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from quotegen.config import CurrencyFormat

CENT = Decimal("0.01")


def to_decimal(x: Any) -> Decimal:
    if isinstance(x, Decimal):
        return x
    if isinstance(x, float):
        return Decimal(str(x))
    return Decimal(x)


def quantize(x: Any) -> Decimal:
    return to_decimal(x).quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Any, currency: CurrencyFormat) -> str:
    """
    1234.5 -> 'Q1,234.50' with the currency's own separators.
    """
    q = quantize(amount)
    sign = "-" if q < 0 else ""

    # 1,234.50 -> placeholders -> locale separators
    s = f"{abs(q):,.2f}"
    s = s.replace(",", "\x00").replace(".", currency.decimal_sep).replace("\x00", currency.group_sep)
    return f"{sign}{currency.symbol}{s}"


def format_percentage(pct: Any) -> str:
    """10.00 -> '10', 12.50 -> '12.5'."""
    d = to_decimal(pct)
    if d == d.to_integral_value():
        return str(d.quantize(Decimal("1")))
    return f"{d.normalize():f}"
