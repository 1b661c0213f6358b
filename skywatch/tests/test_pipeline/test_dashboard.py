"""Tests for the dashboard app with a stubbed pipeline."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from skywatch import dashboard
from skywatch.ingest.celestial_fetcher import CelestialFetcher
from skywatch.ingest.forecast_fetcher import ForecastFetcher, parse_daily_period, parse_period, parse_point
from skywatch.ingest.nws_client import FetchError
from skywatch.models.celestial import CelestialData
from skywatch.models.forecast import ForecastBundle
from skywatch.pipeline.forecast_pipeline import ForecastPipeline


@pytest.fixture
def bundle(points_doc: dict, hourly_doc: dict, daily_doc: dict) -> ForecastBundle:
    return ForecastBundle(
        grid=parse_point(points_doc),
        hourly=tuple(parse_period(p) for p in hourly_doc["properties"]["periods"]),
        daily=tuple(parse_daily_period(p) for p in daily_doc["properties"]["periods"]),
    )


@pytest.fixture
def forecast_fetcher(bundle: ForecastBundle) -> MagicMock:
    fetcher = MagicMock(spec=ForecastFetcher)
    fetcher.fetch.return_value = bundle
    return fetcher


@pytest.fixture
def client(forecast_fetcher: MagicMock, monkeypatch) -> TestClient:
    celestial = MagicMock(spec=CelestialFetcher)
    celestial.fetch.return_value = CelestialData.unavailable("USNO returned HTTP 503")
    pipeline = ForecastPipeline(forecast_fetcher=forecast_fetcher, celestial_fetcher=celestial)
    monkeypatch.setattr(dashboard, "_pipeline", lambda: pipeline)
    return TestClient(dashboard.app)


class TestDashboard:
    def test_index_has_form(self, client: TestClient):
        resp = client.get("/")
        assert resp.status_code == 200
        assert 'id="coordinates"' in resp.text
        assert 'id="forecast-container"' in resp.text

    def test_forecast_page(self, client: TestClient):
        resp = client.get("/forecast", params={"coordinates": "39.7456, -104.9994"})
        assert resp.status_code == 200
        assert '<table class="forecast">' in resp.text
        assert "usno unavailable" in resp.text
        assert 'value="39.7456, -104.9994"' in resp.text

    def test_forecast_page_bad_input(self, client: TestClient, forecast_fetcher: MagicMock):
        resp = client.get("/forecast", params={"coordinates": "<script>"})
        assert resp.status_code == 400
        assert "Invalid format" in resp.text
        assert "<script>" not in resp.text
        forecast_fetcher.fetch.assert_not_called()

    def test_api_forecast(self, client: TestClient):
        resp = client.get("/api/forecast", params={"coordinates": "39.7456, -104.9994"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["ok"] is True
        assert data["notices"][0]["source"] == "usno"
        kinds = {r["kind"] for r in data["table"]["rows"]}
        assert kinds == {"day_title", "celestial", "forecast"}

    def test_api_missing_input(self, client: TestClient):
        resp = client.get("/api/forecast")
        assert resp.status_code == 400
        assert resp.json()["detail"]["error_kind"] == "missing_input"

    def test_api_upstream_failure(self, client: TestClient, forecast_fetcher: MagicMock):
        forecast_fetcher.fetch.side_effect = FetchError("Failed to fetch data (HTTP 500)", status_code=500)
        resp = client.get("/api/forecast", params={"coordinates": "39.7456, -104.9994"})
        assert resp.status_code == 502
        assert resp.json()["detail"]["error_kind"] == "fetch_error"
