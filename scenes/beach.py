"""
Beach — sand, a strip of sea on the horizon and a single palm.
"""

from __future__ import annotations
from typing import List

import pygame

from atmosphere.day_phase import ResolvedTheme
from atmosphere.weather import WeatherState
from core.color import hex_to_rgb
from core.types import SceneObject, SceneObjectKind
from .base_scene import SNOW_LEAF_COLOR, SceneDefinition, SceneKind, wind_sway


PALM_X_FRAC = 0.7
PALM_HEIGHT_FRAC = 0.3
PALM_MIN_HEIGHT_PX = 12
PALM_LEAN_PX = 4
TRUNK_SEGMENT_PX = 2
TRUNK_COLOR = "#8b5a2b"
TRUNK_NIGHT = "#3d2814"
FROND_DAY = "#2e8b57"
FROND_NIGHT = "#143d26"
# (dx, dy) of each frond tip relative to the crown, as a fraction of palm height
FROND_TIPS = ((-0.35, 0.15), (-0.2, -0.05), (0.2, -0.05), (0.35, 0.15))

WATER_HEIGHT_FRAC = 0.03
WATER_MIN_PX = 2
WATER_DAY = "#2e86c1"
WATER_NIGHT = "#0b2545"


class BeachScene(SceneDefinition):
    kind = SceneKind.BEACH
    ground_height_fraction = 0.20
    day_color = "#e6c88a"
    night_color = "#5c4d30"

    def generate_objects(self, width: int, height: int) -> List[SceneObject]:
        return [SceneObject(kind=SceneObjectKind.PALM,
                            x=int(width * PALM_X_FRAC),
                            height=max(PALM_MIN_HEIGHT_PX, int(height * PALM_HEIGHT_FRAC)))]

    def water_rect(self, width: int, height: int, ground_y: int) -> pygame.Rect:
        """Sea strip sitting directly on top of the sand."""
        water_h = max(WATER_MIN_PX, int(height * WATER_HEIGHT_FRAC))
        return pygame.Rect(0, ground_y - water_h, width, water_h)

    def draw_objects(self, surface: pygame.Surface, ground_y: int,
                     theme: ResolvedTheme, weather: WeatherState,
                     time_ms: float) -> None:
        width, height = surface.get_size()
        water = WATER_DAY if theme.sun_visible else WATER_NIGHT
        surface.fill(hex_to_rgb(water), self.water_rect(width, height, ground_y))

        sway = wind_sway(time_ms, weather.wind_speed_kmh)
        for palm in self.objects:
            self._draw_palm(surface, palm, ground_y, theme, weather, sway)

    def _draw_palm(self, surface: pygame.Surface, palm: SceneObject, ground_y: int,
                   theme: ResolvedTheme, weather: WeatherState, sway: float) -> None:
        trunk = hex_to_rgb(TRUNK_COLOR if theme.sun_visible else TRUNK_NIGHT)
        segments = max(1, palm.height // TRUNK_SEGMENT_PX)
        crown_x = palm.x
        for i in range(segments):
            # quadratic lean, stronger towards the top
            lean = int((i / segments) ** 2 * PALM_LEAN_PX)
            crown_x = palm.x + lean
            y = ground_y - (i + 1) * TRUNK_SEGMENT_PX
            surface.fill(trunk, (crown_x, y, 2, TRUNK_SEGMENT_PX))

        crown = (crown_x + 1, ground_y - segments * TRUNK_SEGMENT_PX)
        if weather.is_snowing:
            frond = SNOW_LEAF_COLOR
        else:
            frond = FROND_DAY if theme.sun_visible else FROND_NIGHT
        for dx, dy in FROND_TIPS:
            tip = (int(crown[0] + dx * palm.height + sway),
                   int(crown[1] + dy * palm.height))
            pygame.draw.line(surface, hex_to_rgb(frond), crown, tip, 2)
