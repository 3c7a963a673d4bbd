from __future__ import annotations

import os

# Headless SDL before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from atmosphere.weather import WeatherState


@pytest.fixture(scope="session", autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def canvas() -> pygame.Surface:
    return pygame.Surface((320, 200))


@pytest.fixture
def clear_weather() -> WeatherState:
    return WeatherState(cloud_cover_percent=20.0, wind_speed_kmh=10.0,
                        utc_offset_seconds=0, loaded=True)


@pytest.fixture
def rain_weather() -> WeatherState:
    return WeatherState(cloud_cover_percent=90.0, wind_speed_kmh=25.0,
                        utc_offset_seconds=0, is_raining=True, loaded=True)


@pytest.fixture
def snow_weather() -> WeatherState:
    return WeatherState(cloud_cover_percent=80.0, wind_speed_kmh=5.0,
                        utc_offset_seconds=0, is_snowing=True, loaded=True)
