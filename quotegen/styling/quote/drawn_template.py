# quotegen/styling/quote/drawn_template.py
"""
Programmatically drawn stand-in for the designed template asset.

Draws the same three page roles (details, narrative, items) with static
captions laid out around the anchors in anchors.py, so the renderer's
dynamic content lands in the right blanks without any PDF asset on disk.
"""
from __future__ import annotations

import io
from typing import Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from quotegen.styling.quote.anchors import (
    DETAILS_PLACED,
    DETAILS_TOP_OFFSET,
    DETAILS_X,
    ITEMS_HEADER,
    NARRATIVE_PLACED,
    PRIMARY,
    TABLE,
    TOTALS,
)

BAND_H = 90
CAPTION_FS = 11
SECTION_FS = 13
FOOTER_FS = 8
LIGHT_RULE = colors.HexColor("#D9D9E3")
FOOTER_GRAY = colors.HexColor("#6F6A67")

DETAILS_CAPTIONS = ("Cliente:", "Duración:", "Método:", "Proveedor:", "Fecha:")
DETAILS_SECTIONS = {
    "service_goal": "Objetivo del servicio",
    "service_includes": "El servicio incluye",
}
NARRATIVE_SECTIONS = {
    "delivery_time": "Tiempo de entrega",
    "included_bonus": "Bonus incluido",
    "rationale": "¿Por qué trabajar con nosotros?",
}


def _draw_band(c: canvas.Canvas, w: float, h: float, title: str, company: str) -> None:
    c.setFillColor(PRIMARY)
    c.rect(0, h - BAND_H, w, BAND_H, stroke=0, fill=1)
    c.setFillColor(colors.white)
    c.setFont("Helvetica-Bold", 20)
    c.drawString(40, h - 52, title)
    c.setFont("Helvetica", 9)
    c.drawRightString(w - 40, h - 52, company)


def _draw_footer(c: canvas.Canvas, w: float, company: str) -> None:
    c.setStrokeColor(LIGHT_RULE)
    c.setLineWidth(0.8)
    c.line(40, 60, w - 40, 60)
    c.setFillColor(FOOTER_GRAY)
    c.setFont("Helvetica", FOOTER_FS)
    c.drawString(40, 46, company)


def _section_title(c: canvas.Canvas, x: float, y: float, title: str) -> None:
    # sits just above the anchor's first value line
    c.setFillColor(PRIMARY)
    c.setFont("Helvetica-Bold", SECTION_FS)
    c.drawString(x, y + 8, title)


def _details_page(c: canvas.Canvas, w: float, h: float, company: str) -> None:
    _draw_band(c, w, h, "COTIZACIÓN", company)

    # captions sit on the baselines of the chained single-line values
    y = h - DETAILS_TOP_OFFSET - 11
    c.setFont("Helvetica-Bold", CAPTION_FS)
    c.setFillColor(PRIMARY)
    for caption in DETAILS_CAPTIONS:
        c.drawRightString(DETAILS_X - 8, y, caption)
        y -= 26

    for f in DETAILS_PLACED:
        _section_title(c, f.anchor.x, f.anchor.resolve_y(h), DETAILS_SECTIONS[f.name])

    _draw_footer(c, w, company)


def _narrative_page(c: canvas.Canvas, w: float, h: float, company: str) -> None:
    _draw_band(c, w, h, "DETALLES DEL SERVICIO", company)
    for f in NARRATIVE_PLACED:
        _section_title(c, f.anchor.x, f.anchor.resolve_y(h), NARRATIVE_SECTIONS[f.name])
    _draw_footer(c, w, company)


def _items_page(c: canvas.Canvas, w: float, h: float, company: str) -> None:
    _draw_band(c, w, h, "PROPUESTA ECONÓMICA", company)

    geo = ITEMS_HEADER
    base_y = h - geo.base_top_offset
    right_x = w - geo.right_inset

    # dark box behind the white quote number/date
    c.setFillColor(PRIMARY)
    c.rect(right_x - 10, base_y - geo.line_h - 8, geo.right_inset - 30, geo.title_rise + geo.line_h + 24, stroke=0, fill=1)

    c.setFillColor(PRIMARY)
    c.setFont("Helvetica-Bold", CAPTION_FS)
    c.drawRightString(geo.left_x - 8, base_y + geo.title_rise, "Cliente:")
    c.drawRightString(geo.left_x - 8, base_y - geo.line_h, "Contacto:")
    c.drawRightString(right_x - 16, base_y + geo.title_rise, "No.")
    c.drawRightString(right_x - 16, base_y - geo.line_h, "Fecha")

    # table header just above the first row
    head_y = h - TABLE.start_offset + 24
    c.drawString(TABLE.description_x, head_y, "Descripción")
    c.drawRightString(TABLE.price_x, head_y, "Precio")
    c.setStrokeColor(LIGHT_RULE)
    c.setLineWidth(0.8)
    c.line(TABLE.description_x - 10, head_y - 8, TOTALS.value_x + 10, head_y - 8)
    c.line(TABLE.description_x - 10, TABLE.bottom_limit + 4, TOTALS.value_x + 10, TABLE.bottom_limit + 4)

    _draw_footer(c, w, company)


def build_drawn_template(page_size: Tuple[float, float] = letter, company: str = "Quote") -> bytes:
    w, h = page_size
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(w, h), invariant=1)

    for draw in (_details_page, _narrative_page, _items_page):
        draw(c, w, h, company)
        c.showPage()

    c.save()
    return buf.getvalue()
