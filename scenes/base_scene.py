"""
Base Scene Class

Abstract base class for all diorama scenes.
A scene owns the ground band and everything standing on it; the sky, stars,
sun/moon and clouds are drawn by the animation loop before the scene, the
precipitation after it.
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import List

import pygame

from atmosphere.day_phase import ResolvedTheme
from atmosphere.weather import WeatherState
from core.color import hex_to_rgb
from core.types import SceneObject


SWAY_TIME_SCALE_MS: float = 500.0
SWAY_WIND_FACTOR: float = 0.1
SNOW_LEAF_COLOR = "#e8eef2"


class SceneKind(Enum):
    PASTURE = "pasture"
    CITY = "city"
    BEACH = "beach"


def wind_sway(time_ms: float, wind_speed_kmh: float,
              factor: float = SWAY_WIND_FACTOR) -> float:
    """Horizontal leaf offset in px: sin(t/500) × wind × factor."""
    return math.sin(time_ms / SWAY_TIME_SCALE_MS) * wind_speed_kmh * factor


class SceneDefinition(ABC):
    """
    Abstract base class for scenes

    Subclasses set the class attributes and implement generate_objects()
    and draw_objects().
    """

    kind: SceneKind
    ground_height_fraction: float = 0.15
    day_color: str = "#32cd32"
    night_color: str = "#0d1a0d"

    def __init__(self):
        self.width = 0
        self.height = 0
        self.objects: List[SceneObject] = []

    @property
    def name(self) -> str:
        return self.kind.value

    def ground_y(self, height: int) -> int:
        """Screen y of the ground line for a viewport height."""
        return int(round(height * (1.0 - self.ground_height_fraction)))

    def init(self, width: int, height: int) -> None:
        """
        Rebuild the object set for a viewport.

        Safe to call any number of times: the previous list is replaced as
        a whole, never edited.
        """
        self.width = width
        self.height = height
        self.objects = self.generate_objects(width, height)

    @abstractmethod
    def generate_objects(self, width: int, height: int) -> List[SceneObject]:
        """Procedural layout for this viewport."""
        pass

    def draw(self, surface: pygame.Surface, ground_y: int, theme: ResolvedTheme,
             weather: WeatherState, time_ms: float) -> None:
        """
        Render ground-level content

        Args:
            surface: Low-res diorama surface
            ground_y: Screen y of the ground line
            theme: Resolved colours for this frame
            weather: Current conditions (wind, snow)
            time_ms: Wall-clock milliseconds, drives animation
        """
        self.draw_ground(surface, ground_y, theme)
        self.draw_objects(surface, ground_y, theme, weather, time_ms)

    def draw_ground(self, surface: pygame.Surface, ground_y: int,
                    theme: ResolvedTheme) -> None:
        width, height = surface.get_size()
        surface.fill(hex_to_rgb(theme.ground), (0, ground_y, width, height - ground_y))

    @abstractmethod
    def draw_objects(self, surface: pygame.Surface, ground_y: int,
                     theme: ResolvedTheme, weather: WeatherState,
                     time_ms: float) -> None:
        pass
