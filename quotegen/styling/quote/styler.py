# quotegen/styling/quote/styler.py
from __future__ import annotations

from pathlib import Path

from quotegen.config import QuoteProfile
from quotegen.models import QuoteData
from quotegen.storage.template_loader import load_template
from quotegen.styling.quote.fonts import register_fonts
from quotegen.styling.quote.renderer import render_quote


class QuoteStyler:
    """
    One call = one document: the template is fetched fresh and fonts are
    registered before any drawing starts, so a missing asset fails early.
    """

    def __init__(self, template_source: str | Path, profile: QuoteProfile, fonts_dir: Path | None = None):
        self.template_source = template_source
        self.profile = profile
        self.fonts_dir = fonts_dir

    def style(self, data: QuoteData) -> bytes:
        template = load_template(self.template_source)
        fonts = register_fonts(self.fonts_dir)
        return render_quote(template, data, self.profile, fonts)
