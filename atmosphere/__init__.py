"""
Atmosphere package — what the sky looks like right now.

Main exports:
    ThemeKeyframe      — (hour, sky colour, sun flag) anchor of the day cycle
    ResolvedTheme      — sky/ground colours and flags for one frame
    resolve_theme      — local hour + scene + weather → ResolvedTheme
    WeatherState       — current conditions at the selected location
    WeatherCondition   — enum: CLEAR / RAIN / SNOW
    CloudLayer         — drifting cloud band
    WeatherFetcher     — threaded Open-Meteo requests
"""
from .weather import (
    OVERCAST_SKY,
    WeatherCondition,
    WeatherState,
    apply_weather_overlay,
    classify_weather_code,
)
from .day_phase import (
    DEFAULT_KEYFRAMES,
    ResolvedTheme,
    ThemeKeyframe,
    phase_label,
    resolve_sky,
    resolve_theme,
    validate_keyframes,
)
from .cloud_layer import CloudLayer, cloud_count
from .open_meteo import GeoLocation, LocationNotFoundError, WeatherServiceError
from .weather_fetcher import DEFAULT_LOCATION, WeatherFetcher

__all__ = [
    "OVERCAST_SKY",
    "WeatherCondition",
    "WeatherState",
    "apply_weather_overlay",
    "classify_weather_code",
    "DEFAULT_KEYFRAMES",
    "ResolvedTheme",
    "ThemeKeyframe",
    "phase_label",
    "resolve_sky",
    "resolve_theme",
    "validate_keyframes",
    "CloudLayer",
    "cloud_count",
    "GeoLocation",
    "LocationNotFoundError",
    "WeatherServiceError",
    "DEFAULT_LOCATION",
    "WeatherFetcher",
]
