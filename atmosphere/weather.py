"""
Weather state and the precipitation overlay.

WeatherState is produced by the fetcher once per successful request and read
by the render loop every frame. It is frozen: a new fetch builds a new object
and swaps it in, nobody edits one in place.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass, replace
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .day_phase import ResolvedTheme


# Sky colour used whenever it rains or snows, whatever the hour
OVERCAST_SKY = "#4a5260"


class WeatherCondition(Enum):
    """Precipitation categories the diorama can draw."""
    CLEAR = "clear"
    RAIN = "rain"
    SNOW = "snow"

    @classmethod
    def from_code(cls, code: int) -> 'WeatherCondition':
        """
        Map a WMO weather code (as served by Open-Meteo) to a condition.

        rain: 51-67 (drizzle, rain, freezing rain), 80-82 (showers), >= 95 (storms)
        snow: 71-77 (snowfall, grains), 85-86 (snow showers)
        """
        if 51 <= code <= 67 or 80 <= code <= 82 or code >= 95:
            return cls.RAIN
        elif 71 <= code <= 77 or 85 <= code <= 86:
            return cls.SNOW
        else:
            return cls.CLEAR


def classify_weather_code(code: int) -> tuple[bool, bool]:
    """Return (is_raining, is_snowing) for a WMO weather code."""
    condition = WeatherCondition.from_code(code)
    return condition is WeatherCondition.RAIN, condition is WeatherCondition.SNOW


@dataclass(frozen=True)
class WeatherState:
    """Current conditions at the selected location."""
    cloud_cover_percent: float = 0.0
    wind_speed_kmh: float = 0.0
    utc_offset_seconds: int = 0
    is_raining: bool = False
    is_snowing: bool = False
    loaded: bool = False

    @classmethod
    def placeholder(cls) -> 'WeatherState':
        """Initial state before any fetch has completed."""
        return cls()

    @classmethod
    def from_observation(cls, cloud_cover_percent: float, wind_speed_kmh: float,
                         weather_code: int, utc_offset_seconds: int) -> 'WeatherState':
        is_raining, is_snowing = classify_weather_code(weather_code)
        return cls(
            cloud_cover_percent=float(cloud_cover_percent),
            wind_speed_kmh=float(wind_speed_kmh),
            utc_offset_seconds=int(utc_offset_seconds),
            is_raining=is_raining,
            is_snowing=is_snowing,
            loaded=True,
        )

    @property
    def precipitating(self) -> bool:
        return self.is_raining or self.is_snowing

    @property
    def precipitation(self) -> Optional[WeatherCondition]:
        """SNOW, RAIN or None. Snow wins if a state ever carries both flags."""
        if self.is_snowing:
            return WeatherCondition.SNOW
        if self.is_raining:
            return WeatherCondition.RAIN
        return None


def apply_weather_overlay(theme: 'ResolvedTheme', weather: WeatherState,
                          night_ground: str) -> 'ResolvedTheme':
    """
    Flatten the theme under rain or snow.

    Sky becomes OVERCAST_SKY, ground takes the scene's night colour and
    overcast is set (which hides the sun/moon and the stars). sun_visible is
    left alone: the city still lights its windows by the clock, not the rain.
    """
    if not weather.precipitating:
        return theme
    return replace(theme, sky=OVERCAST_SKY, ground=night_ground, overcast=True)
