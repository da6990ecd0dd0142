# quotegen/storage/template_loader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from botocore.exceptions import BotoCoreError, ClientError

from quotegen.config import DRAWN_TEMPLATE
from quotegen.exceptions import TemplateUnavailableError
from quotegen.storage.s3_storage import S3Storage
from quotegen.styling.common.template_source import PdfTemplate
from quotegen.styling.quote.drawn_template import build_drawn_template

logger = logging.getLogger(__name__)


def _split_s3_uri(uri: str) -> Tuple[str, str]:
    rest = uri[len("s3://"):]
    bucket, _, key = rest.partition("/")
    if not bucket or not key:
        raise TemplateUnavailableError(f"Bad S3 template URI: {uri!r} (expected s3://bucket/key)")
    return bucket, key


def load_template_bytes(source: str | Path) -> bytes:
    """
    Fetch raw template bytes from one of:
      - "drawn"            -> built in memory, no asset needed
      - "s3://bucket/key"  -> S3 object
      - anything else      -> filesystem path
    """
    s = str(source).strip()

    if s == DRAWN_TEMPLATE:
        return build_drawn_template()

    if s.startswith("s3://"):
        bucket, key = _split_s3_uri(s)
        try:
            data = S3Storage(bucket=bucket).get_bytes(key)
        except (BotoCoreError, ClientError) as e:
            raise TemplateUnavailableError(f"Could not fetch template {s}: {e}") from e
        logger.info("Fetched template %s (%d bytes)", s, len(data))
        return data

    path = Path(s)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise TemplateUnavailableError(f"Template not found: {path.resolve()}") from e
    logger.info("Read template %s (%d bytes)", path, len(data))
    return data


def load_template(source: str | Path) -> PdfTemplate:
    return PdfTemplate.from_bytes(load_template_bytes(source), name=str(source))
