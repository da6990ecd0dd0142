# quotegen/styling/quote/totals.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, List, Sequence

from quotegen.config import QuoteProfile
from quotegen.models import LineItem, Totals, TotalsRow
from quotegen.styling.quote.anchors import (
    DISCOUNT_NOTE,
    DISCOUNT_NOTE_FS,
    NOTE_GRAY,
    TOTALS,
    TOTALS_TEXT,
    TotalsGeometry,
)
from quotegen.styling.quote.fonts import FontSet
from quotegen.styling.quote.money import format_currency, format_percentage, to_decimal
from quotegen.styling.quote.pages import OverlayPage

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_totals(
    items: Sequence[LineItem],
    include_discount: bool,
    discount_percentage: Any,
    tax_rate: Any,
) -> Totals:
    """
    subtotal -> discount -> tax -> total, unrounded.
    Rounding happens only when amounts are formatted.
    """
    rate = to_decimal(tax_rate)
    pct = to_decimal(discount_percentage or 0) if include_discount else ZERO
    pct = min(max(pct, ZERO), HUNDRED)

    subtotal = sum((to_decimal(it.price) for it in items), ZERO)
    discount_amount = subtotal * pct / HUNDRED if pct > 0 else ZERO
    after_discount = subtotal - discount_amount
    tax = after_discount * rate
    total = after_discount + tax

    return Totals(
        subtotal=subtotal,
        discount_percentage=pct,
        discount_amount=discount_amount,
        after_discount=after_discount,
        tax_rate=rate,
        tax=tax,
        total=total,
    )


def build_totals_rows(totals: Totals, profile: QuoteProfile) -> List[TotalsRow]:
    """
    Subtotal, tax and total always; the discount pair only when a discount
    actually applies, so a zero discount never prints a "- Q0.00" line.
    """
    money = profile.currency
    rows = [TotalsRow(profile.subtotal_label, format_currency(totals.subtotal, money))]

    if totals.has_discount:
        pct = format_percentage(totals.discount_percentage)
        rows.append(
            TotalsRow(
                profile.discount_label.format(pct=pct),
                f"- {format_currency(totals.discount_amount, money)}",
            )
        )
        rows.append(TotalsRow(profile.after_discount_label, format_currency(totals.after_discount, money)))

    rate = format_percentage(totals.tax_rate * HUNDRED)
    rows.append(TotalsRow(profile.tax_label.format(rate=rate), format_currency(totals.tax, money)))
    rows.append(TotalsRow(profile.total_label, format_currency(totals.total, money), emphasize=True))
    return rows


def discount_note(totals: Totals, profile: QuoteProfile) -> str:
    if not totals.has_discount:
        return ""
    return profile.discount_note.format(
        pct=format_percentage(totals.discount_percentage),
        amount=format_currency(totals.discount_amount, profile.currency),
    )


def draw_totals(
    page: OverlayPage,
    fonts: FontSet,
    rows: Sequence[TotalsRow],
    geometry: TotalsGeometry = TOTALS,
) -> float:
    """
    Label column on the left, values right-aligned; returns y after the
    last row.
    """
    c = page.canvas
    y = geometry.start_y
    c.setFillColor(TOTALS_TEXT)

    for row in rows:
        font = fonts.bold if row.emphasize else fonts.regular
        size = geometry.emphasize_fs if row.emphasize else geometry.fs

        c.setFont(font, size)
        if row.label:
            c.drawString(geometry.label_x, y, row.label)
        c.drawRightString(geometry.value_x, y, row.value)

        y -= geometry.line_gap

    return y


def draw_discount_note(page: OverlayPage, fonts: FontSet, note: str) -> None:
    if not note:
        return
    c = page.canvas
    c.setFillColor(NOTE_GRAY)
    c.setFont(fonts.regular, DISCOUNT_NOTE_FS)
    c.drawString(DISCOUNT_NOTE.x, DISCOUNT_NOTE.resolve_y(page.height), note)
