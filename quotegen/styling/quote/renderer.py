# quotegen/styling/quote/renderer.py
from __future__ import annotations

import logging
from typing import Dict

from quotegen.config import QuoteProfile
from quotegen.exceptions import QuoteDataError
from quotegen.models import QuoteData
from quotegen.styling.common.template_source import PdfTemplate
from quotegen.styling.quote.anchors import (
    DETAILS_CHAIN,
    DETAILS_PLACED,
    DETAILS_TOP_OFFSET,
    DETAILS_WIDTH,
    DETAILS_X,
    ITEMS_HEADER,
    NARRATIVE_PLACED,
    NARRATIVE_WIDTH,
    PAGE_ROLES,
    PRIMARY,
    ROLE_DETAILS,
    ROLE_ITEMS,
    ROLE_NARRATIVE,
    TABLE,
    TEMPLATE_PAGE_INDEX,
    TOTALS,
    WHITE,
    ItemsHeaderGeometry,
    TableGeometry,
    TotalsGeometry,
)
from quotegen.styling.quote.fields import FieldOptions, draw_field
from quotegen.styling.quote.fonts import FontSet
from quotegen.styling.quote.pages import OverlayPage, QuoteDocument
from quotegen.styling.quote.table import layout_items
from quotegen.styling.quote.totals import (
    build_totals_rows,
    compute_totals,
    discount_note,
    draw_discount_note,
    draw_totals,
)

logger = logging.getLogger(__name__)


# =========================
# Basics
# =========================

def _field_values(data: QuoteData, profile: QuoteProfile) -> Dict[str, str]:
    return {
        "client_name": data.client_name,
        "contact": data.contact,
        "work_duration": data.work_duration,
        "method": data.method,
        "provider": data.provider,
        "quote_date": format_quote_date(data, profile),
        "service_goal": data.service_goal,
        "service_includes": data.service_includes,
        "delivery_time": data.delivery_time,
        "included_bonus": data.included_bonus,
        "rationale": data.rationale,
    }


def format_quote_date(data: QuoteData, profile: QuoteProfile) -> str:
    return data.quote_date.strftime(profile.date_format) if data.quote_date else ""


def template_index_for(template: PdfTemplate, role: str) -> int:
    """
    Template page for a role; short templates repeat their last page.
    """
    return min(TEMPLATE_PAGE_INDEX[role], template.page_count - 1)


# =========================
# Fixed-position pages
# =========================

def _draw_details_page(page: OverlayPage, fonts: FontSet, values: Dict[str, str]) -> None:
    y = page.height - DETAILS_TOP_OFFSET
    for f in DETAILS_CHAIN:
        y = draw_field(page, fonts, "", values[f.name], DETAILS_X + f.dx, y + f.dy, DETAILS_WIDTH)

    for f in DETAILS_PLACED:
        draw_field(
            page,
            fonts,
            "",
            values[f.name],
            f.anchor.x,
            f.anchor.resolve_y(page.height),
            DETAILS_WIDTH,
            FieldOptions(line_gap=f.line_gap),
        )


def _draw_narrative_page(page: OverlayPage, fonts: FontSet, values: Dict[str, str]) -> None:
    for f in NARRATIVE_PLACED:
        draw_field(
            page,
            fonts,
            "",
            values[f.name],
            f.anchor.x,
            f.anchor.resolve_y(page.height),
            NARRATIVE_WIDTH,
            FieldOptions(line_gap=f.line_gap),
        )


def _draw_items_header(
    page: OverlayPage,
    fonts: FontSet,
    data: QuoteData,
    profile: QuoteProfile,
    geometry: ItemsHeaderGeometry = ITEMS_HEADER,
) -> None:
    c = page.canvas
    left_x = geometry.left_x
    right_x = page.width - geometry.right_inset
    base_y = page.height - geometry.base_top_offset

    c.setFillColor(PRIMARY)
    c.setFont(fonts.bold, geometry.text_fs)
    c.drawString(left_x, base_y + geometry.title_rise, data.client_name)
    c.setFont(fonts.regular, geometry.text_fs)
    c.drawString(left_x, base_y - geometry.line_h, data.contact)

    c.setFillColor(WHITE)
    c.setFont(fonts.bold, geometry.number_fs)
    c.drawString(right_x + geometry.number_dx, base_y + geometry.title_rise, data.quote_number)
    c.setFont(fonts.regular, geometry.text_fs)
    c.drawString(right_x, base_y - geometry.line_h, format_quote_date(data, profile))


# =========================
# Main render
# =========================

def render_quote(
    template: PdfTemplate,
    data: QuoteData,
    profile: QuoteProfile,
    fonts: FontSet | None = None,
    table: TableGeometry = TABLE,
    totals_geometry: TotalsGeometry = TOTALS,
) -> bytes:
    """
    Render one quote on top of `template` and return the finished PDF.

    Everything here is synchronous and local to the call: the template and
    fonts are already loaded, and the page set and cursor die with it.
    """
    if not data.items:
        raise QuoteDataError("A quote needs at least one line item")

    fonts = fonts or FontSet()
    values = _field_values(data, profile)

    doc = QuoteDocument()
    seeded = {role: doc.add_template_page(template, template_index_for(template, role)) for role in PAGE_ROLES}

    _draw_details_page(seeded[ROLE_DETAILS], fonts, values)
    _draw_narrative_page(seeded[ROLE_NARRATIVE], fonts, values)

    items_page = seeded[ROLE_ITEMS]
    _draw_items_header(items_page, fonts, data, profile)

    page_height = seeded[ROLE_DETAILS].height
    cursor = layout_items(
        doc,
        template,
        items_page,
        fonts,
        data.items,
        page_height,
        profile,
        geometry=table,
        template_page_index=items_page.template_page_index,
    )

    totals = compute_totals(data.items, data.include_discount, data.discount_percentage, profile.tax_rate)
    logger.debug(
        "Quote %s: subtotal=%s discount=%s tax=%s total=%s",
        data.quote_number,
        totals.subtotal,
        totals.discount_amount,
        totals.tax,
        totals.total,
    )

    draw_totals(cursor.page, fonts, build_totals_rows(totals, profile), totals_geometry)
    draw_discount_note(cursor.page, fonts, discount_note(totals, profile))

    out = doc.to_bytes()
    logger.info("Rendered quote %s: %d pages, %d items", data.quote_number, doc.page_count, len(data.items))
    return out
