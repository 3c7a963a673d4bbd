"""
Open-Meteo client — geocoding, current weather and IP geolocation.

All calls are blocking (requests); the fetcher runs them on worker threads so
the render loop never waits on the network.
"""

from __future__ import annotations
from typing import Any, Optional

import requests
from pydantic import BaseModel, ValidationError

from .weather import WeatherState


FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
IP_LOCATION_URL = "https://ipapi.co/json/"

DEFAULT_TIMEOUT_S: float = 10.0


class WeatherServiceError(Exception):
    """Network, HTTP or decoding failure talking to a provider."""


class LocationNotFoundError(WeatherServiceError):
    """Geocoding returned no candidates for the query."""


# =============================================================================
# API Response Models (Open-Meteo API Mappings)
# =============================================================================


class OpenMeteoCurrent(BaseModel):
    """`current` block of the forecast endpoint."""

    cloud_cover: float
    wind_speed_10m: float
    weather_code: int


class OpenMeteoForecastResponse(BaseModel):
    utc_offset_seconds: int
    current: OpenMeteoCurrent


class GeocodingResult(BaseModel):
    name: str
    latitude: float
    longitude: float
    country: str = ""


class GeocodingResponse(BaseModel):
    # the key is absent altogether when nothing matches
    results: Optional[list[GeocodingResult]] = None


class IpLocationResponse(BaseModel):
    latitude: float
    longitude: float
    city: str = ""
    country_name: str = ""


# =============================================================================
# Domain Models
# =============================================================================


class GeoLocation(BaseModel):
    """A place the diorama can be pointed at."""

    name: str
    country: str = ""
    latitude: float
    longitude: float

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name


# =============================================================================
# Requests
# =============================================================================


def _get_json(url: str, params: Optional[dict[str, Any]], timeout: float) -> Any:
    try:
        response = requests.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as e:
        raise WeatherServiceError(f"request to {url} failed: {e}") from e
    except ValueError as e:
        raise WeatherServiceError(f"invalid JSON from {url}: {e}") from e


def search_city(name: str, timeout: float = DEFAULT_TIMEOUT_S) -> GeoLocation:
    """Resolve a free-text place name to its best match."""
    query = name.strip()
    if not query:
        raise LocationNotFoundError("empty search")

    raw = _get_json(GEOCODING_URL, {"name": query, "count": 1}, timeout)
    try:
        parsed = GeocodingResponse.model_validate(raw)
    except ValidationError as e:
        raise WeatherServiceError(f"unexpected geocoding payload: {e}") from e

    if not parsed.results:
        raise LocationNotFoundError(f"no place called {query!r}")

    best = parsed.results[0]
    return GeoLocation(name=best.name, country=best.country,
                       latitude=best.latitude, longitude=best.longitude)


def fetch_weather(latitude: float, longitude: float,
                  timeout: float = DEFAULT_TIMEOUT_S) -> WeatherState:
    """Current conditions at a coordinate, as a loaded WeatherState."""
    params = {
        "latitude": str(latitude),
        "longitude": str(longitude),
        "current": "cloud_cover,wind_speed_10m,weather_code",
        "timezone": "auto",
    }
    raw = _get_json(FORECAST_URL, params, timeout)
    try:
        parsed = OpenMeteoForecastResponse.model_validate(raw)
    except ValidationError as e:
        raise WeatherServiceError(f"unexpected forecast payload: {e}") from e

    return WeatherState.from_observation(
        cloud_cover_percent=parsed.current.cloud_cover,
        wind_speed_kmh=parsed.current.wind_speed_10m,
        weather_code=parsed.current.weather_code,
        utc_offset_seconds=parsed.utc_offset_seconds,
    )


def locate_by_ip(timeout: float = DEFAULT_TIMEOUT_S) -> GeoLocation:
    """Approximate location of this machine from its public IP."""
    raw = _get_json(IP_LOCATION_URL, None, timeout)
    try:
        parsed = IpLocationResponse.model_validate(raw)
    except ValidationError as e:
        raise WeatherServiceError(f"unexpected IP location payload: {e}") from e
    return GeoLocation(name=parsed.city or "Here", country=parsed.country_name,
                       latitude=parsed.latitude, longitude=parsed.longitude)
