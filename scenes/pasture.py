"""
Pasture — green field with two trees leaning in the wind.
"""

from __future__ import annotations
from typing import List

import pygame

from atmosphere.day_phase import ResolvedTheme
from atmosphere.weather import WeatherState
from core.color import hex_to_rgb
from core.types import SceneObject, SceneObjectKind
from .base_scene import SNOW_LEAF_COLOR, SceneDefinition, SceneKind, wind_sway


TREE_X_FRACS = (0.2, 0.75)
TREE_HEIGHT_FRACS = (0.18, 0.14)
TREE_MIN_HEIGHT_PX = 10

TRUNK_WIDTH_PX = 3
TRUNK_DAY = "#5b3a1e"
TRUNK_NIGHT = "#2a1b0e"
LEAF_DAY = "#228b22"
LEAF_NIGHT = "#0f3d17"


class PastureScene(SceneDefinition):
    kind = SceneKind.PASTURE
    ground_height_fraction = 0.15
    day_color = "#32cd32"
    night_color = "#0d1a0d"

    def generate_objects(self, width: int, height: int) -> List[SceneObject]:
        trees = []
        for x_frac, h_frac in zip(TREE_X_FRACS, TREE_HEIGHT_FRACS):
            trees.append(SceneObject(
                kind=SceneObjectKind.TREE,
                x=int(width * x_frac),
                height=max(TREE_MIN_HEIGHT_PX, int(height * h_frac)),
            ))
        return trees

    def draw_objects(self, surface: pygame.Surface, ground_y: int,
                     theme: ResolvedTheme, weather: WeatherState,
                     time_ms: float) -> None:
        sway = int(round(wind_sway(time_ms, weather.wind_speed_kmh)))
        if weather.is_snowing:
            leaf = SNOW_LEAF_COLOR
        else:
            leaf = LEAF_DAY if theme.sun_visible else LEAF_NIGHT
        trunk = TRUNK_DAY if theme.sun_visible else TRUNK_NIGHT

        for tree in self.objects:
            trunk_h = int(tree.height * 0.45)
            canopy = tree.height - trunk_h
            # static trunk
            surface.fill(hex_to_rgb(trunk),
                         (tree.x - TRUNK_WIDTH_PX // 2, ground_y - trunk_h,
                          TRUNK_WIDTH_PX, trunk_h))
            # leaves sit on the trunk and follow the wind
            surface.fill(hex_to_rgb(leaf),
                         (tree.x - canopy // 2 + sway, ground_y - tree.height,
                          canopy, canopy))
