# quotegen/styling/quote/anchors.py
"""
Named anchor tables for the quote template.

Every dynamic value has one entry here, keyed by the page role it lands on.
`from_top=True` anchors are offsets below the top edge of the page; the rest
are absolute PDF coordinates (origin bottom-left). A new template only needs
this file updated.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from reportlab.lib import colors


# =========================
# Page roles (template page index per role)
# =========================

ROLE_DETAILS = "details"
ROLE_NARRATIVE = "narrative"
ROLE_ITEMS = "items"

PAGE_ROLES: Tuple[str, ...] = (ROLE_DETAILS, ROLE_NARRATIVE, ROLE_ITEMS)
TEMPLATE_PAGE_INDEX: Dict[str, int] = {role: i for i, role in enumerate(PAGE_ROLES)}


# =========================
# Colors
# =========================

PRIMARY = colors.Color(43 / 255, 42 / 255, 76 / 255)
LABEL_COLOR = PRIMARY
FIELD_TEXT = colors.Color(38 / 255, 38 / 255, 38 / 255)
TABLE_TEXT = colors.Color(32 / 255, 32 / 255, 32 / 255)
TOTALS_TEXT = colors.Color(35 / 255, 35 / 255, 35 / 255)
NOTE_GRAY = colors.Color(90 / 255, 90 / 255, 90 / 255)
WHITE = colors.white


@dataclass(frozen=True)
class Anchor:
    x: float
    y: float
    from_top: bool = False

    def resolve_y(self, page_height: float) -> float:
        return page_height - self.y if self.from_top else self.y


@dataclass(frozen=True)
class ChainedField:
    """A field placed relative to the previous field's returned y."""
    name: str
    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True)
class PlacedField:
    name: str
    anchor: Anchor
    line_gap: float = 16


# =========================
# Details page (role "details")
# =========================

DETAILS_X = 95
DETAILS_TOP_OFFSET = 167
DETAILS_WIDTH = 440

# Each entry nudges x/y from the running cursor to sit on the template's blanks.
DETAILS_CHAIN: Tuple[ChainedField, ...] = (
    ChainedField("client_name", dx=0, dy=4),
    ChainedField("work_duration", dx=80, dy=5),
    ChainedField("method", dx=0, dy=5),
    ChainedField("provider", dx=20, dy=5),
    ChainedField("quote_date", dx=-5, dy=6),
)

DETAILS_PLACED: Tuple[PlacedField, ...] = (
    PlacedField("service_goal", Anchor(40, 460), line_gap=20),
    PlacedField("service_includes", Anchor(40, 280), line_gap=0),
)


# =========================
# Narrative page (role "narrative")
# =========================

NARRATIVE_WIDTH = 440

NARRATIVE_PLACED: Tuple[PlacedField, ...] = (
    PlacedField("delivery_time", Anchor(40, 165, from_top=True)),
    PlacedField("included_bonus", Anchor(40, 246, from_top=True)),
    PlacedField("rationale", Anchor(40, 355, from_top=True), line_gap=0),
)


# =========================
# Items page header (role "items")
# =========================

@dataclass(frozen=True)
class ItemsHeaderGeometry:
    left_x: float = 140
    right_inset: float = 130       # right column x = page width - right_inset
    base_top_offset: float = 158   # base y = page height - base_top_offset
    line_h: float = 18
    title_rise: float = 20
    number_dx: float = 5
    text_fs: float = 10
    number_fs: float = 8


ITEMS_HEADER = ItemsHeaderGeometry()


# =========================
# Items table + totals
# =========================

@dataclass(frozen=True)
class TableGeometry:
    description_x: float = 85
    price_x: float = 505            # right edge of the price column
    description_w: float = 360
    row_gap: float = 18             # minimum height reserved per row
    start_offset: float = 340       # table top = page height - start_offset
    bottom_limit: float = 210       # nothing drawn below this y
    line_h: float = 13
    row_spacing: float = 5
    measure_fs: float = 11          # descriptions are measured at 11pt ...
    text_fs: float = 10             # ... and drawn at 10pt
    price_fs: float = 11

    def start_y(self, page_height: float) -> float:
        return page_height - self.start_offset

    def available_height(self, page_height: float) -> float:
        return self.start_y(page_height) - self.bottom_limit


@dataclass(frozen=True)
class TotalsGeometry:
    start_y: float = 201
    label_x: float = 310
    value_x: float = 520            # right edge of the value column
    line_gap: float = 18
    fs: float = 11
    emphasize_fs: float = 13


TABLE = TableGeometry()
TOTALS = TotalsGeometry()

DISCOUNT_NOTE = Anchor(85, 125)
DISCOUNT_NOTE_FS = 9
