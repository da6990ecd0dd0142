"""Tests for the S3 quote bucket wrapper (client injected, no AWS calls)."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest

from quotegen.storage.s3_storage import S3Storage


@pytest.fixture
def client() -> MagicMock:
    return MagicMock()


def test_requires_bucket(monkeypatch: pytest.MonkeyPatch, client: MagicMock) -> None:
    monkeypatch.setattr("quotegen.storage.s3_storage.load_dotenv", lambda: None)
    monkeypatch.delenv("S3_BUCKET", raising=False)
    with pytest.raises(RuntimeError, match="S3_BUCKET"):
        S3Storage(client=client)


def test_bucket_from_env(monkeypatch: pytest.MonkeyPatch, client: MagicMock) -> None:
    monkeypatch.setenv("S3_BUCKET", "env-bucket")
    assert S3Storage(client=client).bucket == "env-bucket"


def test_put_and_get(client: MagicMock) -> None:
    client.get_object.return_value = {"Body": io.BytesIO(b"%PDF-tpl")}
    store = S3Storage(bucket="assets", client=client)

    store.put_pdf("quotes/quote-1.pdf", b"%PDF-data")
    client.put_object.assert_called_once_with(
        Bucket="assets", Key="quotes/quote-1.pdf", Body=b"%PDF-data", ContentType="application/pdf"
    )
    assert store.get_bytes("templates/quote.pdf") == b"%PDF-tpl"
    client.get_object.assert_called_once_with(Bucket="assets", Key="templates/quote.pdf")


@pytest.mark.parametrize("inline, disp", [(False, "attachment"), (True, "inline")])
def test_download_url(client: MagicMock, inline: bool, disp: str) -> None:
    client.generate_presigned_url.return_value = "https://signed"
    store = S3Storage(bucket="assets", client=client)

    assert store.download_url("quotes/q.pdf", "quote-C26 1.pdf", expires_seconds=600, inline=inline) == "https://signed"

    kwargs = client.generate_presigned_url.call_args.kwargs
    assert kwargs["ExpiresIn"] == 600
    assert kwargs["Params"]["ResponseContentDisposition"] == f"{disp}; filename*=UTF-8''quote-C26%201.pdf"
    assert kwargs["Params"]["ResponseContentType"] == "application/pdf"
