"""
Sky renderer — everything drawn behind the scene.

Layers, back to front:
    1. Sky fill (resolved theme colour)
    2. Stars (night and clear only), twinkling by time and index
    3. Sun or Moon on the day arc (hidden when overcast)
    4. Translucent cloud band
"""

from __future__ import annotations
import math
import random
from typing import Dict, Iterable, List, Optional, Tuple

import pygame

from atmosphere.day_phase import ResolvedTheme
from core.celestial_math import celestial_position, celestial_sprite_size
from core.color import hex_to_rgb
from core.types import Star


STAR_COUNT: int = 50
STAR_BIG_CHANCE: float = 0.2        # share of 2×2 stars
STAR_COLOR = (255, 255, 255)
STAR_TWINKLE_RATE: float = 0.001    # radians per ms
STAR_TWINKLE_CUTOFF: float = -0.5   # hidden while sin(...) is below this

SUN_COLOR = "#ffd700"
MOON_COLOR = "#f0ead6"

CLOUD_RGBA = (255, 255, 255, 102)   # white at 40%


# ─────────────────────────────────────────────────────────────────────────────
# Stars
# ─────────────────────────────────────────────────────────────────────────────

def generate_stars(width: int, ground_y: int, count: int = STAR_COUNT,
                   rng: Optional[random.Random] = None) -> List[Star]:
    """Scatter stars over the sky, always above the ground line."""
    rng = rng or random.Random()
    max_y = max(1, ground_y - 2)
    stars = []
    for _ in range(count):
        size = 2 if rng.random() < STAR_BIG_CHANCE else 1
        stars.append(Star(x=rng.randrange(max(1, width)), y=rng.randrange(max_y), size=size))
    return stars


def star_visible(index: int, time_ms: float) -> bool:
    return math.sin(time_ms * STAR_TWINKLE_RATE + index) > STAR_TWINKLE_CUTOFF


def draw_stars(surface: pygame.Surface, stars: Iterable[Star], time_ms: float) -> int:
    """Draw the visible stars; returns how many were drawn."""
    drawn = 0
    for index, star in enumerate(stars):
        if star_visible(index, time_ms):
            surface.fill(STAR_COLOR, (star.x, star.y, star.size, star.size))
            drawn += 1
    return drawn


# ─────────────────────────────────────────────────────────────────────────────
# Sky, Sun / Moon
# ─────────────────────────────────────────────────────────────────────────────

def draw_sky(surface: pygame.Surface, theme: ResolvedTheme) -> None:
    surface.fill(hex_to_rgb(theme.sky))


def celestial_rect(theme: ResolvedTheme, width: int, height: int,
                   ground_y: int) -> pygame.Rect:
    """Sprite rectangle centred on the arc position."""
    cx, cy = celestial_position(theme.hour, width, height, ground_y)
    size = celestial_sprite_size(width, height)
    return pygame.Rect(int(cx - size / 2), int(cy - size / 2), size, size)


def draw_celestial_body(surface: pygame.Surface, theme: ResolvedTheme,
                        ground_y: int) -> Optional[pygame.Rect]:
    """Gold sun by day, pale moon by night, nothing under cloud."""
    if theme.overcast:
        return None
    width, height = surface.get_size()
    rect = celestial_rect(theme, width, height, ground_y)
    color = SUN_COLOR if theme.sun_visible else MOON_COLOR
    surface.fill(hex_to_rgb(color), rect)
    return rect


# ─────────────────────────────────────────────────────────────────────────────
# Clouds
# ─────────────────────────────────────────────────────────────────────────────

_cloud_sprites: Dict[Tuple[int, int], pygame.Surface] = {}


def _cloud_sprite(w: int, h: int) -> pygame.Surface:
    sprite = _cloud_sprites.get((w, h))
    if sprite is None:
        sprite = pygame.Surface((w, h), pygame.SRCALPHA)
        sprite.fill(CLOUD_RGBA)
        _cloud_sprites[(w, h)] = sprite
    return sprite


def draw_clouds(surface: pygame.Surface,
                rects: Iterable[Tuple[int, int, int, int]]) -> None:
    for x, y, w, h in rects:
        surface.blit(_cloud_sprite(w, h), (x, y))
