"""End-to-end rendering onto the drawn template."""

from __future__ import annotations

import io
from decimal import Decimal

import pytest
from pypdf import PdfReader

from quotegen.config import PROFILES
from quotegen.exceptions import QuoteDataError, TemplatePageMissingError
from quotegen.models import LineItem
from quotegen.styling.common.template_source import PdfTemplate
from quotegen.styling.quote.renderer import render_quote, template_index_for
from quotegen.styling.quote.styler import QuoteStyler
from quotegen.styling.quote.table import rows_per_page
from quotegen.styling.quote.text_wrap import wrap_text
from reportlab.pdfgen import canvas


def _items(n: int) -> tuple[LineItem, ...]:
    return tuple(LineItem(description=f"Service line {i}", price=Decimal("100")) for i in range(n))


def _one_page_template() -> PdfTemplate:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, invariant=1)
    c.drawString(72, 72, "single page template")
    c.showPage()
    c.save()
    return PdfTemplate.from_bytes(buf.getvalue())


class TestRenderQuote:
    def test_three_pages_for_short_quote(self, template, make_quote, profile, page_texts) -> None:
        out = render_quote(template, make_quote(), profile)
        assert out.startswith(b"%PDF")

        texts = page_texts(out)
        assert len(texts) == 3
        assert "Comercial Los Alamos" in texts[0]
        assert "17/10/2026" in texts[0]
        assert "One month of support" in texts[1]
        assert "C261234" in texts[2]
        assert "Maria Lopez" in texts[2]

    def test_totals_on_items_page(self, template, make_quote, profile, page_texts) -> None:
        texts = page_texts(render_quote(template, make_quote(), profile))
        items_page = texts[2]
        for expected in ("Q100.00", "Q50.00", "Q150.00", "IVA (12%):", "Q18.00", "Q168.00"):
            assert expected in items_page
        assert "Descuento" not in items_page

    def test_discount_rows_and_note(self, template, make_quote, profile, page_texts) -> None:
        quote = make_quote(include_discount=True, discount_percentage=Decimal("10"))
        items_page = page_texts(render_quote(template, quote, profile))[2]
        for expected in ("Descuento (10%):", "- Q15.00", "Q135.00", "Q16.20", "Q151.20", "Descuento aplicado: 10% (Q15.00)."):
            assert expected in items_page

    def test_mx_profile(self, template, make_quote, page_texts) -> None:
        items_page = page_texts(render_quote(template, make_quote(), PROFILES["mx"]))[2]
        assert "IVA (16%):" in items_page
        assert "$174.00" in items_page

    def test_empty_fields_render_placeholder(self, template, make_quote, profile, page_texts) -> None:
        texts = page_texts(render_quote(template, make_quote(delivery_time="", included_bonus="", rationale=""), profile))
        assert texts[1].count("-") >= 3

    def test_items_overflow_onto_copied_pages(self, template, make_quote, profile, page_texts) -> None:
        per_page = rows_per_page(792)
        n = per_page * 2 + 3
        out = render_quote(template, make_quote(items=_items(n)), profile)

        texts = page_texts(out)
        assert len(texts) == 5
        # continuation pages are copies of the items template page
        assert all("Precio" in t for t in texts[2:])
        assert "Service line 0" in texts[2]
        assert f"Service line {per_page}" in texts[3]
        assert f"Service line {n - 1}" in texts[4]
        # totals land on the last table page only
        total = f"Q{n * 112:,}.00"
        assert total in texts[4]
        assert total not in texts[2]

    def test_long_description_keeps_every_line(self, template, fonts, make_quote, profile, page_texts) -> None:
        description = " ".join(f"alpha{i}" for i in range(120))
        quote = make_quote(items=(LineItem(description=description, price=Decimal("5")),))

        items_page = page_texts(render_quote(template, quote, profile))[2]
        for line in wrap_text(description, fonts.regular, 11, 360):
            assert line in items_page

    def test_deterministic(self, template, make_quote, profile, page_texts) -> None:
        quote = make_quote(items=_items(20), include_discount=True, discount_percentage=Decimal("5"))
        assert page_texts(render_quote(template, quote, profile)) == page_texts(render_quote(template, quote, profile))

    def test_empty_items_rejected(self, template, make_quote, profile) -> None:
        with pytest.raises(QuoteDataError):
            render_quote(template, make_quote(items=()), profile)

    def test_short_template_repeats_last_page(self, make_quote, profile) -> None:
        tpl = _one_page_template()
        assert template_index_for(tpl, "items") == 0

        out = render_quote(tpl, make_quote(), profile)
        assert len(PdfReader(io.BytesIO(out)).pages) == 3

    def test_missing_template_page(self, make_quote, profile) -> None:
        tpl = _one_page_template()
        with pytest.raises(TemplatePageMissingError):
            tpl.page(2)


class TestQuoteStyler:
    def test_style_with_drawn_template(self, make_quote, profile, page_texts) -> None:
        out = QuoteStyler("drawn", profile).style(make_quote())
        assert len(page_texts(out)) == 3

    def test_style_from_file(self, tmp_path, template_bytes, make_quote, profile) -> None:
        p = tmp_path / "template.pdf"
        p.write_bytes(template_bytes)
        out = QuoteStyler(p, profile).style(make_quote())
        assert out.startswith(b"%PDF")
