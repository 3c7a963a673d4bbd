"""
Celestial positioning for the sun/moon sprite.

The body rides a half-ellipse from the eastern horizon (06:00 / 18:00) over
the apex (12:00 / 00:00) to the western horizon. Day and night share the same
arc: the sun uses it from 06 to 18, the moon from 18 to 06.

    shifted = (hour - 6) mod 24
    cycle   = shifted folded onto [0, 12]
    θ       = cycle / 12 · π

    x = width/2 - cos θ · radius_x
    y = ground_y - sin θ · radius_y      (screen y grows downwards)
"""
from __future__ import annotations
import math
from typing import Tuple

# Arc radii as a fraction of the viewport, so the path scales with the window
ARC_RADIUS_X_FRAC: float = 0.40   # of width
ARC_RADIUS_Y_FRAC: float = 0.75   # of ground_y

# Sprite footprint (pixels, square)
SPRITE_SIZE_FRAC: float = 0.08
SPRITE_MIN_PX: int = 6
SPRITE_MAX_PX: int = 24


def celestial_angle(hour: float) -> float:
    """
    Map a local hour to the arc angle θ ∈ [0, π].

    18:00 closes the day arc on the western horizon (θ = π); the moon's arc
    starts from the east right after it.
    """
    shifted = (hour - 6.0) % 24.0
    cycle_hour = shifted - 12.0 if shifted > 12.0 else shifted
    return (cycle_hour / 12.0) * math.pi


def arc_radii(width: int, ground_y: int) -> Tuple[float, float]:
    return width * ARC_RADIUS_X_FRAC, ground_y * ARC_RADIUS_Y_FRAC


def celestial_position(hour: float, width: int, height: int,
                       ground_y: int) -> Tuple[float, float]:
    """
    Centre of the sun/moon sprite in surface pixels.

    Args:
        hour: Local decimal hour
        width, height: Viewport size in pixels
        ground_y: Screen y of the ground line

    Returns:
        (x, y) of the body's centre
    """
    theta = celestial_angle(hour)
    radius_x, radius_y = arc_radii(width, ground_y)
    x = width / 2.0 - math.cos(theta) * radius_x
    y = ground_y - math.sin(theta) * radius_y
    return x, y


def celestial_sprite_size(width: int, height: int) -> int:
    """Square sprite edge, proportional to the viewport but clamped."""
    size = int(min(width, height) * SPRITE_SIZE_FRAC)
    return max(SPRITE_MIN_PX, min(SPRITE_MAX_PX, size))
