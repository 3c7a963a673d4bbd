from __future__ import annotations

import random

import pygame

from rendering.sky_renderer import (
    CLOUD_RGBA,
    draw_clouds,
    draw_stars,
    generate_stars,
    star_visible,
)
from core.types import Star
from _utils import rgb_at


def test_stars_are_scattered_above_ground() -> None:
    stars = generate_stars(320, 170, count=50, rng=random.Random(2))
    assert len(stars) == 50
    assert all(0 <= s.x < 320 and 0 <= s.y < 168 for s in stars)
    assert {s.size for s in stars} <= {1, 2}


def test_twinkle_is_a_function_of_time_and_index() -> None:
    # sin(0 + 0) = 0 is above the cut-off, sin(pi * 1.5) = -1 is below
    assert star_visible(0, 0.0)
    assert not star_visible(0, 4712.39)
    assert star_visible(3, 1000.0) == star_visible(3, 1000.0)


def test_draw_stars_skips_hidden_ones(canvas: pygame.Surface) -> None:
    stars = [Star(x=i * 10, y=5) for i in range(20)]
    canvas.fill((0, 0, 0))
    drawn = draw_stars(canvas, stars, 0.0)
    assert 0 < drawn < len(stars)
    lit = sum(rgb_at(canvas, s.x, s.y) == (255, 255, 255) for s in stars)
    assert lit == drawn


def test_clouds_are_translucent_white(canvas: pygame.Surface) -> None:
    canvas.fill((0, 0, 0))
    draw_clouds(canvas, [(10, 10, 40, 10)])
    r, g, b = rgb_at(canvas, 20, 15)
    assert r == g == b
    assert abs(r - CLOUD_RGBA[3]) <= 1
    assert rgb_at(canvas, 5, 5) == (0, 0, 0)
