# quotegen/styling/quote/text_wrap.py
from __future__ import annotations

from typing import List

from reportlab.pdfbase.pdfmetrics import stringWidth


def _clean(s: str) -> str:
    return (s or "").replace("\u00a0", " ").replace("\x00", "").strip()


def measure(text: str, font: str, size: float) -> float:
    return stringWidth(text, font, size)


def wrap_text(text: str, font: str, size: float, max_w: float) -> List[str]:
    """
    Greedy word wrap. Empty input gives no lines.

    A word wider than max_w is never broken; it gets a line of its own and
    is allowed to overflow the box.
    """
    text = _clean(text)
    if not text:
        return []

    lines: List[str] = []
    cur = ""

    for w in text.split():
        test = f"{cur} {w}" if cur else w
        if measure(test, font, size) <= max_w:
            cur = test
            continue

        if cur:
            lines.append(cur)
        cur = w

    if cur:
        lines.append(cur)
    return lines
