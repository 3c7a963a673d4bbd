"""
City — a procedurally tiled skyline.

Buildings are laid left to right with random width/height and a 1-2 px
overlap until the viewport is covered. Window lighting is a deterministic
hash of the building's x and the window's row/column, so the pattern is
stable from frame to frame without storing anything per window, yet every
building gets its own.
"""

from __future__ import annotations
import math
import random
from typing import List, Optional

import pygame

from atmosphere.day_phase import ResolvedTheme
from atmosphere.weather import WeatherState
from core.color import hex_to_rgb, shade
from core.types import SceneObject, SceneObjectKind
from .base_scene import SceneDefinition, SceneKind


BUILDING_MIN_WIDTH_PX = 6
BUILDING_WIDTH_FRACS = (1 / 16, 1 / 7)
BUILDING_HEIGHT_FRACS = (0.15, 0.5)
BUILDING_OVERLAP_PX = (1, 2)
BUILDING_COLORS = ("#3b3f4a", "#454a56", "#50505c", "#3f4450")

WINDOW_SIZE_PX = 2
WINDOW_PITCH_PX = 4
WINDOW_MARGIN_PX = 2
WINDOW_LIT_THRESHOLD = 0.3

WINDOW_LIT = "#ffd966"
WINDOW_DARK = "#3a3a44"
HIGHLIGHT_AMOUNT = 60


def window_lit(x: int, row: int, col: int,
               threshold: float = WINDOW_LIT_THRESHOLD) -> bool:
    """
    Pseudo-random but stable window test: sin(x·row·col) > threshold.

    row and col are 1-based; a zero would zero the product for a whole
    line of windows.
    """
    return math.sin(x * row * col) > threshold


class CityScene(SceneDefinition):
    kind = SceneKind.CITY
    ground_height_fraction = 0.10
    day_color = "#6b6b6b"
    night_color = "#262626"

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__()
        self._rng = rng or random.Random()

    def generate_objects(self, width: int, height: int) -> List[SceneObject]:
        rng = self._rng
        min_w = max(BUILDING_MIN_WIDTH_PX, int(width * BUILDING_WIDTH_FRACS[0]))
        max_w = max(min_w + 2, int(width * BUILDING_WIDTH_FRACS[1]))
        min_h = max(4, int(height * BUILDING_HEIGHT_FRACS[0]))
        max_h = max(min_h + 1, int(height * BUILDING_HEIGHT_FRACS[1]))

        buildings = []
        x = 0
        while x < width:
            w = rng.randint(min_w, max_w)
            h = rng.randint(min_h, max_h)
            buildings.append(SceneObject(kind=SceneObjectKind.BUILDING,
                                         x=x, height=h, width=w))
            x += w - rng.randint(*BUILDING_OVERLAP_PX)
        return buildings

    def draw_objects(self, surface: pygame.Surface, ground_y: int,
                     theme: ResolvedTheme, weather: WeatherState,
                     time_ms: float) -> None:
        for index, building in enumerate(self.objects):
            body = BUILDING_COLORS[index % len(BUILDING_COLORS)]
            if not theme.sun_visible:
                body = shade(body, -20)
            top = ground_y - building.height
            surface.fill(hex_to_rgb(body), (building.x, top, building.width, building.height))
            self._draw_windows(surface, building, top, theme)

    def _draw_windows(self, surface: pygame.Surface, building: SceneObject,
                      top: int, theme: ResolvedTheme) -> None:
        rows = (building.height - WINDOW_MARGIN_PX) // WINDOW_PITCH_PX
        cols = (building.width - WINDOW_MARGIN_PX) // WINDOW_PITCH_PX
        sky = hex_to_rgb(theme.sky)
        highlight = hex_to_rgb(shade(theme.sky, HIGHLIGHT_AMOUNT))
        lit = hex_to_rgb(WINDOW_LIT)
        dark = hex_to_rgb(WINDOW_DARK)

        for row in range(1, rows + 1):
            wy = top + WINDOW_MARGIN_PX + (row - 1) * WINDOW_PITCH_PX
            for col in range(1, cols + 1):
                wx = building.x + WINDOW_MARGIN_PX + (col - 1) * WINDOW_PITCH_PX
                on = window_lit(building.x, row, col)
                if theme.sun_visible:
                    # daytime panes mirror the sky; the "on" ones catch a glint
                    surface.fill(sky, (wx, wy, WINDOW_SIZE_PX, WINDOW_SIZE_PX))
                    if on:
                        surface.fill(highlight, (wx, wy, 1, 1))
                else:
                    surface.fill(lit if on else dark,
                                 (wx, wy, WINDOW_SIZE_PX, WINDOW_SIZE_PX))
