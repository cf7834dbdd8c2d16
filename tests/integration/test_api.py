"""Integration tests for the inspection API."""

import json
import logging

import pytest
from fastapi.testclient import TestClient

from backend.api import inspector as inspect_api
from backend.main import app

PRODUCT_HTML = (
    '<html><body><script type="application/ld+json">'
    + json.dumps({"@type": "Product", "name": "Widget", "offers": {"price": "9.99", "priceCurrency": "USD"}})
    + "</script></body></html>"
)


@pytest.fixture
def client():
    return TestClient(app)


class TestPing:

    def test_ping(self, client):
        response = client.get("/api/ping")

        assert response.status_code == 200
        assert response.json()["ready"] is True
        assert response.json()["success"] is True

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "ok"

    def test_lifespan_startup_and_shutdown(self, caplog):
        with caplog.at_level(logging.INFO, logger="backend.main"):
            with TestClient(app) as client:
                assert client.get("/api/ping").status_code == 200

        assert "API started" in caplog.text
        assert "shutting down" in caplog.text


class TestInspectHtml:

    def test_single_html(self, client):
        response = client.post("/api/inspect", json={"html": PRODUCT_HTML})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1

        result = body["results"]["html_1"]
        assert result["success"] is True
        assert result["total_types"] == 1
        assert result["data"]["Product"]["price"] == "9.99"

    def test_multiple_html(self, client):
        response = client.post("/api/inspect", json={
            "htmls": [PRODUCT_HTML, "<html><body>No markup</body></html>"],
        })

        results = response.json()["results"]
        assert results["html_1"]["total_types"] == 1
        assert results["html_2"]["data"] == {}

    def test_base_url_applied(self, client):
        html = (
            '<html><body><div itemscope itemtype="https://schema.org/Thing">'
            '<a itemprop="url" href="/p">P</a></div></body></html>'
        )

        response = client.post("/api/inspect", json={"html": html, "base_url": "https://site.example/"})

        data = response.json()["results"]["html_1"]["data"]
        assert data["Thing"]["url"] == "https://site.example/p"

    def test_empty_html_reported_per_document(self, client):
        response = client.post("/api/inspect", json={"html": ""})

        assert response.status_code == 200
        result = response.json()["results"]["html_1"]
        assert result["success"] is False
        assert "Invalid HTML" in result["error"]


class TestInspectUrl:

    def test_single_url(self, client, monkeypatch):
        async def fake_fetch(url):
            return {"url": url, "fetch_mode": "static", "html": PRODUCT_HTML}

        monkeypatch.setattr(inspect_api, "fetch_page", fake_fetch)

        response = client.post("/api/inspect", json={"url": "https://shop.example/w"})

        result = response.json()["results"]["https://shop.example/w"]
        assert result["success"] is True
        assert result["fetch_mode"] == "static"
        assert result["data"]["Product"]["name"] == "Widget"

    def test_fetch_failure_reported_per_url(self, client, monkeypatch):
        async def failing_fetch(url):
            raise ValueError(f"Could not fetch {url}")

        monkeypatch.setattr(inspect_api, "fetch_page", failing_fetch)

        response = client.post("/api/inspect", json={"urls": ["https://down.example"]})

        result = response.json()["results"]["https://down.example"]
        assert result == {"success": False, "error": "Could not fetch https://down.example"}


class TestBadPayloads:

    @pytest.mark.parametrize("payload", [
        {},
        {"htmls": []},
        {"urls": "https://a.example"},
        {"url": ""},
        {"urls": [{"a": 1}]},
        {"urls": ["https://a.example", ""]},
        {"htmls": ["<p>x</p>"] * 6},
    ])
    def test_rejected(self, client, monkeypatch, payload):
        monkeypatch.setattr(inspect_api, "MAX_DOCUMENTS", 5)

        response = client.post("/api/inspect", json=payload)

        assert response.status_code == 400
