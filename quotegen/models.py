# quotegen/models.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class LineItem:
    description: str
    price: Decimal


@dataclass(frozen=True)
class QuoteData:
    """
    Validated quote record handed to the renderer.

    Narrative fields are drawn verbatim; an empty one renders as a dash.
    `discount_percentage` only matters when `include_discount` is set.
    """
    client_name: str
    contact: str
    quote_number: str
    quote_date: date
    items: Tuple[LineItem, ...]

    include_discount: bool = False
    discount_percentage: Decimal = Decimal("0")

    quote_title: str = ""
    work_duration: str = ""
    method: str = ""
    provider: str = ""
    service_goal: str = ""
    service_includes: str = ""
    delivery_time: str = ""
    included_bonus: str = ""
    rationale: str = ""


@dataclass(frozen=True)
class Totals:
    subtotal: Decimal
    discount_percentage: Decimal
    discount_amount: Decimal
    after_discount: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal

    @property
    def has_discount(self) -> bool:
        return self.discount_amount > 0


@dataclass(frozen=True)
class TotalsRow:
    label: str
    value: str
    emphasize: bool = False
