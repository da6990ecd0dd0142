# quotegen/styling/quote/fields.py
from __future__ import annotations

from dataclasses import dataclass

from quotegen.styling.quote.anchors import FIELD_TEXT, LABEL_COLOR
from quotegen.styling.quote.fonts import FontSet
from quotegen.styling.quote.pages import OverlayPage
from quotegen.styling.quote.text_wrap import wrap_text

PLACEHOLDER = "-"
FIELD_LINE_H = 14
LABEL_GAP = 4


@dataclass(frozen=True)
class FieldOptions:
    label_size: float = 11
    value_size: float = 11
    line_gap: float = 16


def draw_field(
    page: OverlayPage,
    fonts: FontSet,
    label: str,
    value: str,
    x: float,
    y: float,
    width: float,
    options: FieldOptions | None = None,
) -> float:
    """
    Label at (x, y), wrapped value underneath.

    Returns the y for the next field so calls can be chained; pass
    line_gap=0 for fields placed at an absolute position.
    """
    opts = options or FieldOptions()
    c = page.canvas

    content = value if (value or "").strip() else PLACEHOLDER

    if label:
        c.setFillColor(LABEL_COLOR)
        c.setFont(fonts.bold, opts.label_size)
        c.drawString(x, y, label)

    wrapped = wrap_text(content, fonts.regular, opts.value_size, width)

    c.setFillColor(FIELD_TEXT)
    c.setFont(fonts.regular, opts.value_size)
    first_y = y - opts.label_size - LABEL_GAP
    for i, ln in enumerate(wrapped):
        c.drawString(x, first_y - i * FIELD_LINE_H, ln)

    used_h = opts.label_size + LABEL_GAP + (len(wrapped) - 1) * FIELD_LINE_H
    return y - used_h - opts.line_gap
