# quotegen/styling/quote/table.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from quotegen.config import QuoteProfile
from quotegen.exceptions import QuoteDataError
from quotegen.models import LineItem
from quotegen.styling.common.template_source import PdfTemplate
from quotegen.styling.quote.anchors import TABLE, TABLE_TEXT, TEMPLATE_PAGE_INDEX, ROLE_ITEMS, TableGeometry
from quotegen.styling.quote.fonts import FontSet
from quotegen.styling.quote.money import format_currency
from quotegen.styling.quote.pages import OverlayPage, QuoteDocument, ensure_page
from quotegen.styling.quote.text_wrap import wrap_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    page: OverlayPage
    y: float

    @property
    def page_index(self) -> int:
        return self.page.index


@dataclass(frozen=True)
class RowPlacement:
    item: LineItem
    page_offset: int        # 0 = the page the table starts on
    y: float                # baseline of the first description line
    lines: Tuple[str, ...]
    height: float           # vertical advance consumed, spacing included


# =========================
# Pagination helpers (no drawing)
# =========================

def rows_per_page(page_height: float, geometry: TableGeometry = TABLE) -> int:
    """
    Capacity estimate that assumes single-line rows. Wrapped descriptions
    take more room than budgeted here and may run past the bottom limit.
    """
    return max(1, math.floor(geometry.available_height(page_height) / geometry.row_gap))


def paginate(count: int, per_page: int) -> List[int]:
    """Row counts per page, e.g. paginate(12, 5) -> [5, 5, 2]."""
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    return [min(per_page, count - start) for start in range(0, count, per_page)]


def plan_rows(
    items: Sequence[LineItem],
    fonts: FontSet,
    page_height: float,
    geometry: TableGeometry = TABLE,
) -> Tuple[List[RowPlacement], float]:
    """
    Decide where every row goes. Returns the placements and the cursor y
    after the last row (clamped to the bottom limit).
    """
    if not items:
        raise QuoteDataError("A quote needs at least one line item")

    table_start_y = geometry.start_y(page_height)
    per_page = rows_per_page(page_height, geometry)

    placements: List[RowPlacement] = []
    page_offset = 0
    y = table_start_y

    for index, item in enumerate(items):
        if index > 0 and index % per_page == 0:
            page_offset += 1
            y = table_start_y

        lines = wrap_text(item.description, fonts.regular, geometry.measure_fs, geometry.description_w)
        block_h = max(geometry.line_h * len(lines), geometry.row_gap)
        advance = block_h + geometry.row_spacing

        placements.append(
            RowPlacement(item=item, page_offset=page_offset, y=y, lines=tuple(lines), height=advance)
        )
        y -= advance

    return placements, max(y, geometry.bottom_limit)


# =========================
# Drawing
# =========================

def _draw_row(page: OverlayPage, fonts: FontSet, row: RowPlacement, price: str, geometry: TableGeometry) -> None:
    c = page.canvas
    c.setFillColor(TABLE_TEXT)

    c.setFont(fonts.regular, geometry.text_fs)
    for i, ln in enumerate(row.lines):
        c.drawString(geometry.description_x, row.y - i * geometry.line_h, ln)

    c.setFont(fonts.bold, geometry.price_fs)
    c.drawRightString(geometry.price_x, row.y, price)


def layout_items(
    document: QuoteDocument,
    template: PdfTemplate,
    start_page: OverlayPage,
    fonts: FontSet,
    items: Sequence[LineItem],
    page_height: float,
    profile: QuoteProfile,
    geometry: TableGeometry = TABLE,
    template_page_index: int = TEMPLATE_PAGE_INDEX[ROLE_ITEMS],
) -> Cursor:
    """
    Draw the line-item table starting on `start_page`, copying
    `template_page_index` for every continuation page.
    """
    placements, final_y = plan_rows(items, fonts, page_height, geometry)

    page = start_page
    for row in placements:
        target = start_page.index + row.page_offset
        if target != page.index:
            page = ensure_page(document, template, target, template_page_index)
            logger.debug("Items table continues on page %d", target)

        _draw_row(page, fonts, row, format_currency(row.item.price, profile.currency), geometry)

    return Cursor(page=page, y=final_y)
