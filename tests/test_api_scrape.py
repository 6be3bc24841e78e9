"""Tests for the POST /scrape endpoint.

``scrape_all`` is replaced with an ``AsyncMock`` in most tests so no network
calls are made; one end-to-end test routes through ``respx`` instead.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from batchscrape.api.app import create_app
from batchscrape.scraper.models import HeadingRecord, ScrapeFailure, ScrapeSuccess

from tests.helpers import EXAMPLE_HTML

INVALID_REQUEST = {"error": "Please provide an array of URLs in the request body."}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client():
    with TestClient(create_app(), raise_server_exceptions=True) as c:
        yield c


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestRequestValidation:
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"urls": None},
            {"urls": []},
            {"urls": "https://example.com/"},
            {"urls": {"0": "https://example.com/"}},
            ["https://example.com/"],
        ],
    )
    def test_bad_shapes_are_rejected_without_scraping(self, client, body):
        with patch(
            "batchscrape.api.routers.scrape.scrape_all", new=AsyncMock()
        ) as mock_scrape:
            resp = client.post("/scrape", json=body)

        assert resp.status_code == 400
        assert resp.json() == INVALID_REQUEST
        mock_scrape.assert_not_called()

    def test_non_json_body_is_rejected(self, client):
        resp = client.post(
            "/scrape", content=b"urls=https://example.com", headers={"Content-Type": "text/plain"}
        )
        assert resp.status_code == 400
        assert resp.json() == INVALID_REQUEST

    def test_missing_body_is_rejected(self, client):
        resp = client.post("/scrape")
        assert resp.status_code == 400
        assert resp.json() == INVALID_REQUEST


class TestScrapeEndpoint:
    def test_serialises_outcomes_in_order(self, client):
        outcomes = [
            ScrapeSuccess(
                url="https://example.com/",
                records=[HeadingRecord(title="Example Domain", source="Generic H1 scrape")],
            ),
            ScrapeFailure(url="https://example.com/missing", error="Failed to fetch https://example.com/missing: 404 Not Found"),
            ScrapeSuccess(url="https://example.com/blank", records=[]),
        ]
        urls = [o.url for o in outcomes]

        with patch(
            "batchscrape.api.routers.scrape.scrape_all",
            new=AsyncMock(return_value=outcomes),
        ) as mock_scrape:
            resp = client.post("/scrape", json={"urls": urls})

        mock_scrape.assert_awaited_once_with(urls)
        assert resp.status_code == 200
        assert resp.json() == [
            {
                "url": "https://example.com/",
                "status": "success",
                "records": [{"title": "Example Domain", "source": "Generic H1 scrape"}],
            },
            {
                "url": "https://example.com/missing",
                "status": "failed",
                "error": "Failed to fetch https://example.com/missing: 404 Not Found",
            },
            {"url": "https://example.com/blank", "status": "success", "records": []},
        ]

    def test_end_to_end_with_mixed_results(self, client):
        with respx.mock(assert_all_called=False) as router:
            router.get("https://example.com/").mock(
                return_value=httpx.Response(200, text=EXAMPLE_HTML)
            )
            router.get("https://example.com/gone").mock(return_value=httpx.Response(410))
            resp = client.post(
                "/scrape",
                json={"urls": ["https://example.com/gone", "https://example.com/"]},
            )

        assert resp.status_code == 200
        data = resp.json()
        assert [d["url"] for d in data] == ["https://example.com/gone", "https://example.com/"]
        assert data[0]["status"] == "failed"
        assert "410" in data[0]["error"]
        assert data[1]["records"] == [{"title": "Example Domain", "source": "Generic H1 scrape"}]
