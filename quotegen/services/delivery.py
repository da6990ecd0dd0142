# quotegen/services/delivery.py
from __future__ import annotations

import logging
import re
from pathlib import Path

from quotegen.storage.s3_storage import S3Storage

logger = logging.getLogger(__name__)

QUOTES_PREFIX = "quotes"


def quote_filename(quote_number: str) -> str:
    # quote number is opaque; only strip what would break a path or header
    safe = re.sub(r"[\\/\r\n\"]+", "-", (quote_number or "").strip())
    return f"quote-{safe}.pdf"


def save_quote_pdf(out_dir: Path, quote_number: str, data: bytes) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / quote_filename(quote_number)
    out_path.write_bytes(data)
    logger.info("Saved %s (%d bytes)", out_path, len(data))
    return out_path


def upload_quote_pdf(storage: S3Storage, quote_number: str, data: bytes) -> str:
    key = f"{QUOTES_PREFIX}/{quote_filename(quote_number)}"
    storage.put_pdf(key, data)
    logger.info("Uploaded s3://%s/%s", storage.bucket, key)
    return key
