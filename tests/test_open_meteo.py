from __future__ import annotations

import pytest
import requests

from atmosphere import open_meteo
from atmosphere.open_meteo import (
    GeoLocation,
    LocationNotFoundError,
    WeatherServiceError,
    fetch_weather,
    locate_by_ip,
    search_city,
)
from atmosphere.weather import WeatherState
from atmosphere.weather_fetcher import DEFAULT_LOCATION, WeatherFetcher
from game.state_manager import StateManager


class FakeResponse:
    def __init__(self, payload, status: int = 200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def serve(monkeypatch, payload, status: int = 200) -> list:
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        return FakeResponse(payload, status)

    monkeypatch.setattr(requests, "get", fake_get)
    return calls


FORECAST = {
    "utc_offset_seconds": 3600,
    "current": {"cloud_cover": 75, "wind_speed_10m": 18.4, "weather_code": 61},
}


class TestClient:
    def test_search_returns_best_match(self, monkeypatch):
        calls = serve(monkeypatch, {"results": [
            {"name": "Lisbon", "country": "Portugal", "latitude": 38.72, "longitude": -9.13},
        ]})
        location = search_city("  Lisbon ", timeout=3)
        assert location == GeoLocation(name="Lisbon", country="Portugal",
                                       latitude=38.72, longitude=-9.13)
        url, params, timeout = calls[0]
        assert url == open_meteo.GEOCODING_URL
        assert params["name"] == "Lisbon"
        assert timeout == 3

    def test_search_without_results(self, monkeypatch):
        serve(monkeypatch, {"generationtime_ms": 0.2})
        with pytest.raises(LocationNotFoundError):
            search_city("Atlantis")

    def test_empty_search_never_hits_network(self, monkeypatch):
        calls = serve(monkeypatch, {})
        with pytest.raises(LocationNotFoundError):
            search_city("   ")
        assert calls == []

    def test_network_failure(self, monkeypatch):
        def boom(*args, **kwargs):
            raise requests.ConnectionError("offline")
        monkeypatch.setattr(requests, "get", boom)
        with pytest.raises(WeatherServiceError):
            fetch_weather(0.0, 0.0)

    def test_http_error(self, monkeypatch):
        serve(monkeypatch, {}, status=503)
        with pytest.raises(WeatherServiceError):
            fetch_weather(0.0, 0.0)

    def test_bad_json_and_bad_payload(self, monkeypatch):
        serve(monkeypatch, ValueError("not json"))
        with pytest.raises(WeatherServiceError):
            fetch_weather(0.0, 0.0)
        serve(monkeypatch, {"current": {"cloud_cover": 10}})
        with pytest.raises(WeatherServiceError):
            fetch_weather(0.0, 0.0)

    def test_fetch_weather(self, monkeypatch):
        calls = serve(monkeypatch, FORECAST)
        state = fetch_weather(38.72, -9.13)
        assert state.loaded and state.is_raining and not state.is_snowing
        assert state.cloud_cover_percent == 75
        assert state.wind_speed_kmh == pytest.approx(18.4)
        assert state.utc_offset_seconds == 3600
        params = calls[0][1]
        assert params["current"] == "cloud_cover,wind_speed_10m,weather_code"
        assert params["timezone"] == "auto"

    def test_locate_by_ip(self, monkeypatch):
        serve(monkeypatch, {"latitude": 45.46, "longitude": 9.19,
                            "city": "Milan", "country_name": "Italy"})
        location = locate_by_ip()
        assert location.display_name == "Milan, Italy"


# ─────────────────────────────────────────────────────────────────────────────
# Fetcher (workers run inline)
# ─────────────────────────────────────────────────────────────────────────────

LISBON = GeoLocation(name="Lisbon", country="Portugal", latitude=38.72, longitude=-9.13)
RAINY = WeatherState.from_observation(90, 20.0, 63, 0)


@pytest.fixture
def manager() -> StateManager:
    return StateManager(320, 200, seed=1)


@pytest.fixture
def fetcher(manager: StateManager) -> WeatherFetcher:
    return WeatherFetcher(manager, timeout=1, run_async=False)


def test_search_success_loads_weather(monkeypatch, manager, fetcher) -> None:
    monkeypatch.setattr(open_meteo, "search_city", lambda name, timeout: LISBON)
    monkeypatch.setattr(open_meteo, "fetch_weather", lambda lat, lon, timeout: RAINY)

    fetcher.search("lisbon")

    assert manager.state.status.text == "Success: Lisbon"
    assert not manager.state.status.is_error
    assert manager.weather is RAINY
    assert manager.state.location == LISBON


def test_search_not_found_keeps_previous_weather(monkeypatch, manager, fetcher) -> None:
    def not_found(name, timeout):
        raise LocationNotFoundError(name)
    monkeypatch.setattr(open_meteo, "search_city", not_found)
    before = manager.weather

    fetcher.search("Atlantis")

    assert manager.state.status.text == "Not found"
    assert manager.state.status.is_error
    assert manager.weather is before


def test_service_error_reports_error(monkeypatch, manager, fetcher) -> None:
    def offline(name, timeout):
        raise WeatherServiceError("offline")
    monkeypatch.setattr(open_meteo, "search_city", offline)

    fetcher.search("Lisbon")

    assert manager.state.status.text == "Error"
    assert manager.weather.loaded is False


def test_stale_response_is_dropped(monkeypatch, manager, fetcher) -> None:
    # a newer request starts while the first is still waiting on the network
    sunny = WeatherState.from_observation(0, 5.0, 0, 0)
    pending = []

    def fetch(lat, lon, timeout):
        if lat == LISBON.latitude:
            pending.append(fetcher.fetch_location(DEFAULT_LOCATION))
            return RAINY
        return sunny

    monkeypatch.setattr(open_meteo, "fetch_weather", fetch)
    first = fetcher.fetch_location(LISBON)

    assert not fetcher.is_current(first)
    assert fetcher.is_current(pending[0])
    assert manager.weather is sunny
    assert manager.state.location == DEFAULT_LOCATION


def test_ip_failure_falls_back_to_default(monkeypatch, manager, fetcher) -> None:
    def no_ip(timeout):
        raise WeatherServiceError("blocked")
    seen = []

    def fetch(lat, lon, timeout):
        seen.append((lat, lon))
        return RAINY

    monkeypatch.setattr(open_meteo, "locate_by_ip", no_ip)
    monkeypatch.setattr(open_meteo, "fetch_weather", fetch)

    fetcher.locate_and_fetch()

    assert seen == [(51.5, 0.0)]
    assert manager.state.location == DEFAULT_LOCATION
    assert manager.weather.loaded


class _WatchedLock:
    def __init__(self):
        self.held = False

    def __enter__(self):
        self.held = True
        return self

    def __exit__(self, *exc):
        self.held = False
        return False


def test_publish_happens_while_request_id_is_locked(monkeypatch, manager, fetcher) -> None:
    lock = _WatchedLock()
    monkeypatch.setattr(fetcher, "_lock", lock)
    held_during_publish = []
    publish = manager.publish_weather

    def watched_publish(weather, location=None):
        held_during_publish.append(lock.held)
        publish(weather, location)

    monkeypatch.setattr(manager, "publish_weather", watched_publish)
    monkeypatch.setattr(open_meteo, "fetch_weather", lambda lat, lon, timeout: RAINY)

    fetcher.fetch_location(LISBON)

    assert held_during_publish == [True]
    assert manager.weather is RAINY
