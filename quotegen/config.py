# quotegen/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv


@dataclass(frozen=True)
class CurrencyFormat:
    code: str
    symbol: str
    group_sep: str = ","
    decimal_sep: str = "."


@dataclass(frozen=True)
class QuoteProfile:
    """
    Everything that differs between deployments of the same quote layout:
    tax rate, currency and the wording of the totals block.

    Empty labels are left blank on purpose; the asset templates print their
    own "Subtotal"/"Total" captions next to the value column.
    """
    code: str
    tax_rate: Decimal
    currency: CurrencyFormat
    tax_label: str = "IVA ({rate}%):"
    discount_label: str = "Descuento ({pct}%):"
    subtotal_label: str = ""
    after_discount_label: str = ""
    total_label: str = ""
    discount_note: str = "Descuento aplicado: {pct}% ({amount})."
    date_format: str = "%d/%m/%Y"


GTQ = CurrencyFormat(code="GTQ", symbol="Q")
MXN = CurrencyFormat(code="MXN", symbol="$")

PROFILES: Dict[str, QuoteProfile] = {
    "gt": QuoteProfile(code="gt", tax_rate=Decimal("0.12"), currency=GTQ),
    "mx": QuoteProfile(code="mx", tax_rate=Decimal("0.16"), currency=MXN),
}

DEFAULT_PROFILE = "gt"
DRAWN_TEMPLATE = "drawn"


def get_profile(code: str | None = None, tax_rate: str | None = None) -> QuoteProfile:
    k = (code or DEFAULT_PROFILE).strip().lower()
    if k not in PROFILES:
        raise ValueError(f"Unknown quote profile: {code!r} (expected one of {sorted(PROFILES)})")

    profile = PROFILES[k]
    if tax_rate:
        try:
            profile = replace(profile, tax_rate=Decimal(tax_rate.strip()))
        except InvalidOperation:
            raise ValueError(f"QUOTE_TAX_RATE is not a number: {tax_rate!r}")
    return profile


@dataclass(frozen=True)
class Settings:
    template: str = DRAWN_TEMPLATE
    profile: QuoteProfile = field(default_factory=lambda: PROFILES[DEFAULT_PROFILE])
    fonts_dir: Path | None = None
    output_dir: Path = Path("tmp")


def load_settings() -> Settings:
    # Local dev convenience: loads from .env if present.
    load_dotenv()

    fonts_dir = os.getenv("QUOTE_FONTS_DIR")
    return Settings(
        template=os.getenv("QUOTE_TEMPLATE") or DRAWN_TEMPLATE,
        profile=get_profile(os.getenv("QUOTE_PROFILE"), os.getenv("QUOTE_TAX_RATE")),
        fonts_dir=Path(fonts_dir) if fonts_dir else None,
        output_dir=Path(os.getenv("QUOTE_OUTPUT_DIR") or "tmp"),
    )
