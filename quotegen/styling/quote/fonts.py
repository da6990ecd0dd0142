# quotegen/styling/quote/fonts.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from quotegen.exceptions import FontEmbeddingError

logger = logging.getLogger(__name__)

REGULAR_FILE = "Quote-Regular.ttf"
BOLD_FILE = "Quote-Bold.ttf"


@dataclass(frozen=True)
class FontSet:
    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"


# faces already registered with reportlab, by resolved file path
_REGISTERED: Dict[Path, str] = {}


def _register(base_name: str, path: Path) -> str:
    """
    Registered once per file. reportlab keys its registry by name, so a face
    from a different file gets a suffixed name.
    """
    path = path.resolve()
    if path in _REGISTERED:
        return _REGISTERED[path]

    name = base_name
    taken = set(pdfmetrics.getRegisteredFontNames())
    n = 1
    while name in taken:
        n += 1
        name = f"{base_name}-{n}"

    try:
        pdfmetrics.registerFont(TTFont(name, str(path)))
    except Exception as e:
        raise FontEmbeddingError(f"Could not register font {path}: {e}") from e
    _REGISTERED[path] = name
    logger.info("Registered font %s from %s", name, path)
    return name


def register_fonts(fonts_dir: Path | None = None) -> FontSet:
    """
    Brand fonts are optional: missing files keep the standard Helvetica pair.
    A file that is present but unreadable is fatal.
    """
    if fonts_dir is None:
        return FontSet()

    reg_font = fonts_dir / REGULAR_FILE
    bold_font = fonts_dir / BOLD_FILE

    font_regular = "Helvetica"
    font_bold = "Helvetica-Bold"

    if reg_font.exists():
        font_regular = _register("Quote-Regular", reg_font)
    if bold_font.exists():
        font_bold = _register("Quote-Bold", bold_font)

    return FontSet(regular=font_regular, bold=font_bold)
