# quotegen/services/quote_editor.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List

from quotegen.config import QuoteProfile
from quotegen.exceptions import QuoteDataError
from quotegen.models import LineItem, QuoteData, Totals
from quotegen.styling.quote.money import format_currency, quantize
from quotegen.styling.quote.totals import build_totals_rows

REQUIRED_TEXT = ("client_name", "contact")
NARRATIVE_FIELDS = (
    "quote_title",
    "work_duration",
    "method",
    "provider",
    "service_goal",
    "service_includes",
    "delivery_time",
    "included_bonus",
    "rationale",
)
DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


def _dec(s: Any, field_name: str) -> Decimal:
    t = str(s if s is not None else "").replace("$", "").replace("Q", "").replace(",", "").strip()
    if not t:
        raise QuoteDataError(f"{field_name}: a number is required")
    try:
        d = Decimal(t)
    except InvalidOperation:
        raise QuoteDataError(f"{field_name}: {s!r} is not a number")
    # Decimal() also parses "NaN" / "Infinity"
    if not d.is_finite():
        raise QuoteDataError(f"{field_name}: {s!r} is not a number")
    return d


def _text(j: dict, key: str) -> str:
    return str(j.get(key) or "").strip()


def _parse_date(v: Any) -> date:
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v

    s = str(v or "").strip()
    if not s:
        raise QuoteDataError("quote_date: the date is required")

    # accept full ISO timestamps coming from browsers
    s = s.split("T", 1)[0]
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise QuoteDataError(f"quote_date: unrecognised date {v!r}")


def _parse_items(raw: Any) -> List[LineItem]:
    if raw is None:
        raw = []
    if not isinstance(raw, list):
        raise QuoteDataError("items: expected a list of {description, price} objects")

    items: List[LineItem] = []
    for i, x in enumerate(raw):
        if not isinstance(x, dict):
            raise QuoteDataError(f"items[{i}]: expected an object with description and price")
        desc = str(x.get("description") or "").strip()
        if not desc:
            raise QuoteDataError(f"items[{i}].description: the description is required")

        price = _dec(x.get("price"), f"items[{i}].price")
        if price <= 0:
            raise QuoteDataError(f"items[{i}].price: the price must be a positive number")

        items.append(LineItem(description=desc, price=price))

    if not items:
        raise QuoteDataError("items: add at least one item")
    return items


def json_to_quote(j: dict) -> QuoteData:
    """
    Validate a form payload into QuoteData. This is the only place input is
    checked; the renderer trusts what it gets.
    """
    if not isinstance(j, dict):
        raise QuoteDataError("payload must be a JSON object")

    for key in REQUIRED_TEXT:
        if not _text(j, key):
            raise QuoteDataError(f"{key}: this field is required")

    include_discount = bool(j.get("include_discount"))
    pct = Decimal("0")
    if include_discount and j.get("discount_percentage") not in (None, ""):
        pct = _dec(j.get("discount_percentage"), "discount_percentage")
        pct = min(max(pct, Decimal("0")), Decimal("100"))

    return QuoteData(
        client_name=_text(j, "client_name"),
        contact=_text(j, "contact"),
        quote_number=_text(j, "quote_number"),
        quote_date=_parse_date(j.get("quote_date")),
        items=tuple(_parse_items(j.get("items"))),
        include_discount=include_discount,
        discount_percentage=pct,
        **{k: _text(j, k) for k in NARRATIVE_FIELDS},
    )


def quote_to_json(doc: QuoteData) -> dict:
    out = {
        "client_name": doc.client_name,
        "contact": doc.contact,
        "quote_number": doc.quote_number,
        "quote_date": doc.quote_date.isoformat(),
        "items": [{"description": it.description, "price": str(it.price)} for it in doc.items],
        "include_discount": doc.include_discount,
        "discount_percentage": str(doc.discount_percentage),
    }
    for k in NARRATIVE_FIELDS:
        out[k] = getattr(doc, k)
    return out


def totals_to_json(totals: Totals, profile: QuoteProfile) -> dict:
    """
    Totals for the form's live preview, rounded to cents, plus the exact
    rows the PDF will print.
    """
    return {
        "currency": profile.currency.code,
        "subtotal": str(quantize(totals.subtotal)),
        "discount_percentage": str(totals.discount_percentage),
        "discount_amount": str(quantize(totals.discount_amount)),
        "after_discount": str(quantize(totals.after_discount)),
        "tax_rate": str(totals.tax_rate),
        "tax": str(quantize(totals.tax)),
        "total": str(quantize(totals.total)),
        "formatted_total": format_currency(totals.total, profile.currency),
        "rows": [
            {"label": r.label, "value": r.value, "emphasize": r.emphasize}
            for r in build_totals_rows(totals, profile)
        ],
    }
