# scripts/render_sample_quote.py
from __future__ import annotations

import argparse
from datetime import date
from decimal import Decimal
from pathlib import Path

from pypdf import PdfReader

from quotegen.config import load_settings, get_profile
from quotegen.models import LineItem, QuoteData
from quotegen.services.delivery import save_quote_pdf
from quotegen.services.quote_numbers import generate_quote_number
from quotegen.styling.quote.styler import QuoteStyler
from quotegen.styling.quote.totals import build_totals_rows, compute_totals


def _sample_items(count: int) -> tuple[LineItem, ...]:
    base = [
        ("Diseño de identidad visual", "4500"),
        ("Desarrollo de sitio web corporativo con cinco secciones, formulario de contacto "
         "y panel de administración para publicar noticias", "12500"),
        ("Sesión de fotografía de producto", "2800.50"),
        ("Gestión de redes sociales (mensual)", "3200"),
    ]
    items = []
    for i in range(count):
        desc, price = base[i % len(base)]
        items.append(LineItem(description=f"{i + 1}. {desc}", price=Decimal(price)))
    return tuple(items)


def main() -> None:
    settings = load_settings()

    ap = argparse.ArgumentParser(description="Render a sample quote PDF.")
    ap.add_argument("--template", default=settings.template, help="path, s3://bucket/key or 'drawn'")
    ap.add_argument("--profile", default=settings.profile.code)
    ap.add_argument("--items", type=int, default=8)
    ap.add_argument("--discount", type=str, default="", help="discount percentage, e.g. 10")
    ap.add_argument("--out", type=Path, default=settings.output_dir)
    args = ap.parse_args()

    profile = get_profile(args.profile)

    data = QuoteData(
        client_name="Comercial Los Álamos, S.A.",
        contact="María López · maria@losalamos.com",
        quote_number=generate_quote_number(),
        quote_date=date.today(),
        items=_sample_items(args.items),
        include_discount=bool(args.discount),
        discount_percentage=Decimal(args.discount or "0"),
        quote_title="Renovación de marca",
        work_duration="6 semanas",
        method="Sprints semanales con revisión",
        provider="Estudio Creativo",
        service_goal="Renovar la identidad de la marca y su presencia digital para atraer clientes nuevos.",
        service_includes="Manual de marca, sitio web, fotografía y plan de contenidos.",
        delivery_time="Entrega final en seis semanas a partir de la firma.",
        included_bonus="Un mes de soporte técnico sin costo.",
        rationale="Equipo con experiencia en marcas del sector comercio.",
    )

    out_bytes = QuoteStyler(args.template, profile, settings.fonts_dir).style(data)
    out_path = save_quote_pdf(args.out, data.quote_number, out_bytes)

    print("Template :", args.template)
    print("Profile  :", profile.code, f"(tax {profile.tax_rate}, {profile.currency.code})")
    print("✅ Draft created:", out_path.resolve())
    print("Pages    :", len(PdfReader(str(out_path)).pages))

    totals = compute_totals(data.items, data.include_discount, data.discount_percentage, profile.tax_rate)
    print("\n--- Totals rows ---")
    for row in build_totals_rows(totals, profile):
        print(f"{row.label or '(template label)':28} {row.value:>16}{'  *' if row.emphasize else ''}")


if __name__ == "__main__":
    main()
