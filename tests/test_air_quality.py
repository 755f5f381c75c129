"""Tests for the air-quality relay service."""

import asyncio

import httpx
import pytest

from ecotracker.services.air_quality import POLLUTANTS, AirQualityService, AirQualityUnavailable
from ecotracker.settings import settings


@pytest.fixture(autouse=True)
def configured(monkeypatch):
    monkeypatch.setattr(settings, "rapidapi_key", "test-key")
    monkeypatch.setattr(settings, "rapidapi_host", "aq.example.com")
    monkeypatch.setattr(settings, "air_quality_url", "https://aq.example.com/AirQualityHealthIndex")


def fetch_with(handler):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await AirQualityService.fetch(client)

    return asyncio.run(run())


def test_forwards_fixed_pollutants_and_key():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["headers"] = request.headers
        return httpx.Response(200, json={"airQualityHealthIndex": 2})

    assert fetch_with(handler) == {"airQualityHealthIndex": 2}
    assert seen["url"].path == "/AirQualityHealthIndex"
    assert dict(seen["url"].params) == {k: str(v) for k, v in POLLUTANTS.items()}
    assert seen["headers"]["x-rapidapi-key"] == "test-key"
    assert seen["headers"]["x-rapidapi-host"] == "aq.example.com"


def test_provider_error_status():
    def handler(request):
        return httpx.Response(403, json={"message": "forbidden"})

    with pytest.raises(AirQualityUnavailable):
        fetch_with(handler)


def test_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AirQualityUnavailable):
        fetch_with(handler)


def test_non_json_body():
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(AirQualityUnavailable):
        fetch_with(handler)


def test_missing_api_key(monkeypatch):
    monkeypatch.setattr(settings, "rapidapi_key", None)
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(AirQualityUnavailable, match="Failed to fetch air quality data"):
        fetch_with(handler)
    assert calls == []
