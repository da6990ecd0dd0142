"""Tests for the labeled-field renderer."""

from __future__ import annotations

from quotegen.styling.quote.fields import FIELD_LINE_H, PLACEHOLDER, FieldOptions, draw_field
from quotegen.styling.quote.text_wrap import wrap_text
from tests.fakes.fake_canvas import FakePage

LONG = "word " * 60


class TestDrawField:
    def test_empty_value_draws_placeholder(self, fonts) -> None:
        for value in ("", "   ", None):
            page = FakePage()
            draw_field(page, fonts, "", value, 40, 500, 200)
            assert page.canvas.strings() == [PLACEHOLDER]

    def test_single_line_advance(self, fonts) -> None:
        page = FakePage()
        next_y = draw_field(page, fonts, "", "Six weeks", 40, 500, 440)
        # label size 11 + gap 4, default line gap 16
        assert next_y == 500 - 15 - 16
        assert page.canvas.texts[0].y == 500 - 15

    def test_label_drawn_bold_at_anchor(self, fonts) -> None:
        page = FakePage()
        draw_field(page, fonts, "Client:", "ACME", 40, 500, 440)
        label, value = page.canvas.texts
        assert (label.text, label.x, label.y, label.font) == ("Client:", 40, 500, fonts.bold)
        assert (value.text, value.font) == ("ACME", fonts.regular)

    def test_wrapped_lines_step_down(self, fonts) -> None:
        page = FakePage()
        expected = wrap_text(LONG, fonts.regular, 11, 200)
        assert len(expected) > 2

        next_y = draw_field(page, fonts, "", LONG, 40, 500, 200)

        assert page.canvas.strings() == expected
        ys = [t.y for t in page.canvas.texts]
        assert ys == [485 - i * FIELD_LINE_H for i in range(len(expected))]
        assert next_y == 500 - (15 + (len(expected) - 1) * FIELD_LINE_H) - 16

    def test_line_gap_option(self, fonts) -> None:
        page = FakePage()
        next_y = draw_field(page, fonts, "", "x", 40, 500, 440, FieldOptions(line_gap=0))
        assert next_y == 485

    def test_chaining(self, fonts) -> None:
        page = FakePage()
        y = draw_field(page, fonts, "", "first", 40, 500, 440)
        draw_field(page, fonts, "", "second", 40, y, 440)
        first, second = page.canvas.texts
        assert first.y - second.y == 31
