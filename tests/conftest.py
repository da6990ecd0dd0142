"""Shared fixtures for quotegen tests."""

from __future__ import annotations

import io
from datetime import date
from decimal import Decimal
from typing import Callable

import pytest
from pypdf import PdfReader

from quotegen.config import PROFILES, QuoteProfile
from quotegen.models import LineItem, QuoteData
from quotegen.styling.common.template_source import PdfTemplate
from quotegen.styling.quote.drawn_template import build_drawn_template
from quotegen.styling.quote.fonts import FontSet


@pytest.fixture
def profile() -> QuoteProfile:
    """Guatemala profile: 12% IVA, quetzales."""
    return PROFILES["gt"]


@pytest.fixture
def fonts() -> FontSet:
    return FontSet()


@pytest.fixture(scope="session")
def template_bytes() -> bytes:
    return build_drawn_template()


@pytest.fixture
def template(template_bytes: bytes) -> PdfTemplate:
    return PdfTemplate.from_bytes(template_bytes, name="drawn")


@pytest.fixture
def make_quote() -> Callable[..., QuoteData]:
    """Factory for QuoteData with sensible defaults; override any field."""

    def _make(**overrides) -> QuoteData:
        fields = dict(
            client_name="Comercial Los Alamos",
            contact="Maria Lopez",
            quote_number="C261234",
            quote_date=date(2026, 10, 17),
            items=(
                LineItem(description="Brand identity design", price=Decimal("100")),
                LineItem(description="Product photography session", price=Decimal("50")),
            ),
            work_duration="6 weeks",
            method="Weekly sprints",
            provider="Studio",
            service_goal="Refresh the brand",
            service_includes="Brand manual and website",
            delivery_time="Six weeks",
            included_bonus="One month of support",
            rationale="Experienced team",
        )
        fields.update(overrides)
        return QuoteData(**fields)

    return _make


@pytest.fixture
def page_texts() -> Callable[[bytes], list[str]]:
    """Extracted text per page of a rendered PDF."""

    def _texts(data: bytes) -> list[str]:
        return [p.extract_text() or "" for p in PdfReader(io.BytesIO(data)).pages]

    return _texts
