# tests/conftest.py
import json
from datetime import datetime, timedelta

import httpx
import pytest

FORECAST_HOST = "api.open-meteo.com"
GEOCODING_HOST = "geocoding-api.open-meteo.com"


def _hourly_times(start: str, hours: int):
    base = datetime.fromisoformat(start)
    return [(base + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(hours)]


@pytest.fixture
def forecast_payload():
    """Factory for an Open-Meteo forecast body (48 hourly samples from midnight)."""
    def build(probs=None, current_time="2024-06-01T14:15", hours=48, **current):
        times = _hourly_times("2024-06-01T00:00", hours)
        if probs is None:
            probs = [0] * hours
        cur = {
            "time": current_time,
            "interval": 900,
            "temperature_2m": 27.4,
            "apparent_temperature": 30.0,
            "relative_humidity_2m": 78,
            "precipitation": 0.2,
            "wind_speed_10m": 11.5,
        }
        cur.update(current)
        return {
            "latitude": 31.25,
            "longitude": 121.5,
            "timezone": "Asia/Shanghai",
            "current": cur,
            "hourly": {"time": times, "precipitation_probability": probs},
        }
    return build


@pytest.fixture
def open_meteo():
    """
    Build a MockTransport that answers forecast and geocoding requests.
    Every request is recorded on transport.calls.
    """
    def build(forecast=None, geocoding=None, forecast_status=200, geocoding_status=200,
              forecast_error=None, geocoding_error=None):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if request.url.host == GEOCODING_HOST:
                if geocoding_error:
                    raise geocoding_error("geocoding unreachable", request=request)
                return _respond(geocoding_status, geocoding)
            if request.url.host == FORECAST_HOST:
                if forecast_error:
                    raise forecast_error("forecast unreachable", request=request)
                return _respond(forecast_status, forecast)
            return httpx.Response(404)

        transport = httpx.MockTransport(handler)
        transport.calls = calls
        return transport
    return build


def _respond(status, body):
    if isinstance(body, (dict, list)):
        return httpx.Response(status, content=json.dumps(body, ensure_ascii=False).encode("utf-8"),
                              headers={"Content-Type": "application/json"})
    return httpx.Response(status, text=body or "")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LAT", "LON", "TZ", "GITHUB_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
