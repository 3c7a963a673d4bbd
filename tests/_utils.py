from __future__ import annotations

from datetime import datetime, timezone

import pygame

from core.time_controller import SceneClock


def rgb_at(surface: pygame.Surface, x: int, y: int) -> tuple[int, int, int]:
    return tuple(surface.get_at((x, y)))[:3]


def frozen_clock(hour: int, minute: int = 0) -> SceneClock:
    """Scene clock pinned to a UTC time of day (wall time never moves)."""
    start = datetime(2024, 6, 1, hour, minute, tzinfo=timezone.utc)
    return SceneClock(start_utc=start, wall=lambda: 0.0)
