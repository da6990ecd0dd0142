# quotegen/styling/common/template_source.py
from __future__ import annotations

import io
import logging
from typing import Tuple

from pypdf import PdfReader
from pypdf._page import PageObject

from quotegen.exceptions import TemplatePageMissingError, TemplateUnavailableError

logger = logging.getLogger(__name__)


class PdfTemplate:
    """
    Read-only view over the template PDF.

    Loaded once per generation; pages handed out here are never mutated,
    they are merged into fresh output pages (see compose_page).
    """

    def __init__(self, reader: PdfReader, name: str = "<bytes>"):
        self.reader = reader
        self.name = name

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "<bytes>") -> "PdfTemplate":
        if not data:
            raise TemplateUnavailableError(f"Template {name} is empty")
        try:
            reader = PdfReader(io.BytesIO(data))
            count = len(reader.pages)
        except Exception as e:
            raise TemplateUnavailableError(f"Template {name} is not a readable PDF: {e}") from e

        if count == 0:
            raise TemplateUnavailableError(f"Template {name} has no pages")

        logger.info("Loaded template %s (%d pages)", name, count)
        return cls(reader, name=name)

    @property
    def page_count(self) -> int:
        return len(self.reader.pages)

    def page(self, index: int) -> PageObject:
        if index < 0 or index >= self.page_count:
            raise TemplatePageMissingError(
                f"Template {self.name} has {self.page_count} pages; page {index} requested"
            )
        return self.reader.pages[index]

    def page_size(self, index: int = 0) -> Tuple[float, float]:
        p = self.page(index)
        return float(p.mediabox.width), float(p.mediabox.height)


def compose_page(tpl_page: PageObject, overlay: PageObject) -> PageObject:
    """
    base <- template <- overlay, sized to the template page.
    """
    out_w = float(tpl_page.mediabox.width)
    out_h = float(tpl_page.mediabox.height)

    base = PageObject.create_blank_page(width=out_w, height=out_h)
    base.merge_page(tpl_page)
    base.merge_page(overlay)
    return base
