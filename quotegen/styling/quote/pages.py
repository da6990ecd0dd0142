# quotegen/styling/quote/pages.py
from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import List

from pypdf import PdfReader, PdfWriter
from pypdf._page import PageObject
from reportlab.pdfgen import canvas

from quotegen.styling.common.template_source import PdfTemplate, compose_page

logger = logging.getLogger(__name__)


@dataclass
class OverlayPage:
    """
    One output page: a copy of a template page plus a reportlab canvas
    holding everything drawn on top of it.
    """
    index: int
    template_page_index: int
    template_page: PageObject
    width: float
    height: float
    canvas: canvas.Canvas
    _buf: io.BytesIO = field(repr=False, default_factory=io.BytesIO)

    def finish(self) -> PageObject:
        self.canvas.showPage()
        self.canvas.save()
        overlay = PdfReader(io.BytesIO(self._buf.getvalue())).pages[0]
        return compose_page(self.template_page, overlay)


class QuoteDocument:
    """
    Ordered, append-only page set under construction.

    Nothing is written until to_bytes(); a generation that fails midway
    leaves no output behind.
    """

    def __init__(self) -> None:
        self.pages: List[OverlayPage] = []
        self._result: bytes | None = None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def add_template_page(self, template: PdfTemplate, template_page_index: int) -> OverlayPage:
        if self._result is not None:
            raise RuntimeError("Document already finalized")

        tpl_page = template.page(template_page_index)
        w = float(tpl_page.mediabox.width)
        h = float(tpl_page.mediabox.height)

        buf = io.BytesIO()
        # invariant=1 keeps output free of timestamps/random ids
        c = canvas.Canvas(buf, pagesize=(w, h), invariant=1)

        page = OverlayPage(
            index=len(self.pages),
            template_page_index=template_page_index,
            template_page=tpl_page,
            width=w,
            height=h,
            canvas=c,
            _buf=buf,
        )
        self.pages.append(page)
        logger.debug("Added page %d from template page %d", page.index, template_page_index)
        return page

    def to_bytes(self) -> bytes:
        if self._result is not None:
            return self._result

        writer = PdfWriter()
        for p in self.pages:
            writer.add_page(p.finish())

        out = io.BytesIO()
        writer.write(out)
        self._result = out.getvalue()
        return self._result


def ensure_page(
    document: QuoteDocument,
    template: PdfTemplate,
    target_index: int,
    template_page_index: int = 0,
) -> OverlayPage:
    """
    Grow the document with copies of `template_page_index` until
    `target_index` exists. Already-present pages are returned untouched.
    """
    while document.page_count <= target_index:
        document.add_template_page(template, template_page_index)
    return document.pages[target_index]
