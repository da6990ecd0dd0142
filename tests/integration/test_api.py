"""HTTP surface: preview totals, PDF download and S3 delivery."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from quotegen import api_main
from quotegen.config import PROFILES, Settings


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setattr(api_main, "settings", Settings(template="drawn", profile=PROFILES["gt"]))
    return TestClient(api_main.app)


@pytest.fixture
def body() -> dict:
    return {
        "client_name": "ACME",
        "contact": "Jane",
        "quote_number": "C261234",
        "quote_date": "2026-10-17",
        "items": [{"description": "Design", "price": "100"}, {"description": "Photos", "price": "50"}],
        "include_discount": True,
        "discount_percentage": 10,
    }


class FakeStorage:
    bucket = "quotes-bucket"

    def __init__(self) -> None:
        self.uploaded: dict[str, bytes] = {}

    def put_pdf(self, key: str, data: bytes) -> None:
        self.uploaded[key] = data

    def download_url(self, key: str, filename: str, expires_seconds: int = 3600) -> str:
        return f"https://example.invalid/{key}?name={filename}&ttl={expires_seconds}"


def test_health(client: TestClient) -> None:
    assert client.get("/api/health").json() == {"ok": True, "profile": "gt"}


def test_quote_number(client: TestClient) -> None:
    n = client.get("/api/quote-number").json()["quote_number"]
    assert n.startswith("C") and len(n) == 7


def test_preview_totals(client: TestClient, body: dict) -> None:
    r = client.post("/api/quotes/totals", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["total"] == "151.20"
    assert len(data["rows"]) == 5


def test_pdf_download(client: TestClient, body: dict) -> None:
    r = client.post("/api/quotes/pdf", json=body)
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/pdf"
    assert r.headers["content-disposition"] == 'attachment; filename="quote-C261234.pdf"'
    assert r.content.startswith(b"%PDF")


def test_pdf_inline(client: TestClient, body: dict) -> None:
    r = client.post("/api/quotes/pdf", params={"inline": "true"}, json=body)
    assert r.headers["content-disposition"].startswith("inline;")


def test_invalid_payload(client: TestClient, body: dict) -> None:
    body["items"] = []
    r = client.post("/api/quotes/pdf", json=body)
    assert r.status_code == 422
    assert "items" in r.json()["detail"]


def test_template_unavailable(monkeypatch: pytest.MonkeyPatch, body: dict, tmp_path) -> None:
    monkeypatch.setattr(
        api_main, "settings", Settings(template=str(tmp_path / "missing.pdf"), profile=PROFILES["gt"])
    )
    r = TestClient(api_main.app).post("/api/quotes/pdf", json=body)
    assert r.status_code == 503
    assert "template unavailable" in r.json()["detail"]


def test_upload(client: TestClient, body: dict, monkeypatch: pytest.MonkeyPatch) -> None:
    storage = FakeStorage()
    monkeypatch.setattr(api_main, "default_storage", lambda: storage)

    r = client.post("/api/quotes/upload", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["key"] == "quotes/quote-C261234.pdf"
    assert "name=quote-C261234.pdf" in data["url"]
    assert storage.uploaded["quotes/quote-C261234.pdf"].startswith(b"%PDF")


@pytest.mark.parametrize(
    "path, patch",
    [
        ("/api/quotes/pdf", {"items": "abc"}),
        ("/api/quotes/pdf", {"items": [1]}),
        ("/api/quotes/pdf", {"items": [{"description": "Design", "price": "Infinity"}]}),
        ("/api/quotes/totals", {"items": [{"description": "Design", "price": "NaN"}]}),
        ("/api/quotes/totals", {"discount_percentage": "NaN"}),
    ],
)
def test_malformed_payload_is_422(client: TestClient, body: dict, path: str, patch: dict) -> None:
    body.update(patch)
    r = client.post(path, json=body)
    assert r.status_code == 422
