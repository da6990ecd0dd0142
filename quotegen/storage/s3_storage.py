# quotegen/storage/s3_storage.py
from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Optional
from urllib.parse import quote

import boto3
from botocore.client import Config
from dotenv import load_dotenv

PDF_TYPE = "application/pdf"


def _s3_client() -> Any:
    region = os.getenv("AWS_REGION") or "us-east-1"
    profile = os.getenv("AWS_PROFILE")
    session = boto3.Session(profile_name=profile) if profile else boto3.Session()
    return session.client("s3", region_name=region, config=Config(signature_version="s3v4"))


class S3Storage:
    """
    One bucket of quote assets: rendered PDFs under quotes/ and, when the
    template source is an s3:// URI, the template itself.
    """

    def __init__(self, bucket: Optional[str] = None, client: Any = None):
        load_dotenv()

        self.bucket = bucket or os.getenv("S3_BUCKET")
        if not self.bucket:
            raise RuntimeError("S3_BUCKET not set in .env")
        self.s3 = client if client is not None else _s3_client()

    def put_pdf(self, key: str, data: bytes) -> None:
        self.s3.put_object(Bucket=self.bucket, Key=key, Body=data, ContentType=PDF_TYPE)

    def get_bytes(self, key: str) -> bytes:
        return self.s3.get_object(Bucket=self.bucket, Key=key)["Body"].read()

    def download_url(
        self,
        key: str,
        filename: str,
        expires_seconds: int = 3600,
        inline: bool = False,
    ) -> str:
        """
        Presigned GET. `filename` is used as-is in Content-Disposition, so
        callers pass an already safe name (see delivery.quote_filename).
        """
        disp = "inline" if inline else "attachment"
        params = {
            "Bucket": self.bucket,
            "Key": key,
            "ResponseContentDisposition": f"{disp}; filename*=UTF-8''{quote(filename)}",
            "ResponseContentType": PDF_TYPE,
        }
        return self.s3.generate_presigned_url(
            ClientMethod="get_object",
            Params=params,
            ExpiresIn=int(expires_seconds),
        )


@lru_cache(maxsize=1)
def default_storage() -> S3Storage:
    """Bucket from S3_BUCKET; built on first upload so the API starts without AWS config."""
    return S3Storage()
