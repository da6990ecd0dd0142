# quotegen/api_main.py
from __future__ import annotations

import logging

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from quotegen.config import load_settings
from quotegen.exceptions import FontEmbeddingError, QuoteDataError, TemplateUnavailableError
from quotegen.models import QuoteData
from quotegen.services.delivery import quote_filename, upload_quote_pdf
from quotegen.services.quote_editor import json_to_quote, totals_to_json
from quotegen.services.quote_numbers import generate_quote_number
from quotegen.storage.s3_storage import default_storage
from quotegen.styling.quote.styler import QuoteStyler
from quotegen.styling.quote.totals import compute_totals

logger = logging.getLogger(__name__)

settings = load_settings()

app = FastAPI(title="Quote PDF API")

# CORS for local frontend dev (React/Vite/etc.)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _parse(body: dict) -> QuoteData:
    try:
        return json_to_quote(body)
    except QuoteDataError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _render(data: QuoteData) -> bytes:
    styler = QuoteStyler(settings.template, settings.profile, settings.fonts_dir)
    try:
        return styler.style(data)
    except TemplateUnavailableError as e:
        logger.error("Template unavailable: %s", e)
        raise HTTPException(status_code=503, detail=f"Quote template unavailable: {e}")
    except FontEmbeddingError as e:
        logger.error("Font embedding failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/")
def root():
    return {"ok": True, "try": ["/docs", "/api/health", "/api/quote-number"]}


@app.get("/api/health")
def health():
    return {"ok": True, "profile": settings.profile.code}


@app.get("/api/quote-number")
def new_quote_number():
    return {"quote_number": generate_quote_number()}


@app.post("/api/quotes/totals")
def preview_totals(body: dict = Body(...)):
    """
    Live preview for the form: same math and rows the PDF prints.
    """
    data = _parse(body)
    totals = compute_totals(data.items, data.include_discount, data.discount_percentage, settings.profile.tax_rate)
    return totals_to_json(totals, settings.profile)


@app.post("/api/quotes/pdf")
def quote_pdf(body: dict = Body(...), inline: bool = Query(default=False)):
    data = _parse(body)
    pdf = _render(data)

    disp = "inline" if inline else "attachment"
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'{disp}; filename="{quote_filename(data.quote_number)}"'},
    )


@app.post("/api/quotes/upload")
def quote_upload(body: dict = Body(...), expires_seconds: int = Query(default=3600, ge=60, le=7 * 24 * 3600)):
    """
    Render, store in S3 under quotes/, return a presigned download link.
    """
    data = _parse(body)
    pdf = _render(data)

    storage = default_storage()
    key = upload_quote_pdf(storage, data.quote_number, pdf)
    url = storage.download_url(key, quote_filename(data.quote_number), expires_seconds=expires_seconds)
    return {"ok": True, "key": key, "url": url, "expires_seconds": expires_seconds}
