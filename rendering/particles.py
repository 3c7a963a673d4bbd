"""
Precipitation particles — one fixed pool shared by rain and snow.

The pool is a struct-of-arrays (x, y, fall_speed, wobble_phase) allocated
once; every update works in place. A particle that falls out of the bottom
of the viewport is recycled just above the top edge at a fresh random x, so
the stream never ends and nothing is ever reallocated.

Switching between rain and snow keeps the current positions (the change of
look is abrupt, which is fine for a pixel diorama).
"""

from __future__ import annotations
import math
from typing import Optional

import numpy as np
import pygame

from atmosphere.weather import WeatherCondition


POOL_SIZE: int = 100

# Per-frame fall in px = fall_speed × mode multiplier
RAIN_SPEED: float = 4.0
SNOW_SPEED: float = 0.6
FALL_SPEED_RANGE = (0.8, 1.6)

# Recycled particles re-enter between these heights above the top edge
RESPAWN_MIN_PX: float = 2.0
RESPAWN_MAX_PX: float = 10.0

RAIN_COLOR = (174, 194, 224)
RAIN_LENGTH_PX: int = 4
RAIN_SLANT_PX: int = 1         # leftward drift over one streak

SNOW_COLOR = (255, 255, 255)
SNOW_SIZE_PX: int = 2
SNOW_WOBBLE_PX: float = 2.0
SNOW_WOBBLE_RATE: float = 0.002  # radians per ms


class ParticlePool:
    """
    Fixed-size reusable particle pool.

    Args:
        size: Number of particles (never changes)
        seed: RNG seed (None = random)
    """

    def __init__(self, size: int = POOL_SIZE, seed: Optional[int] = None):
        self.size = size
        self._rng = np.random.default_rng(seed)
        self.x = np.zeros(size, dtype=np.float64)
        self.y = np.zeros(size, dtype=np.float64)
        self.fall_speed = self._rng.uniform(*FALL_SPEED_RANGE, size)
        self.wobble_phase = self._rng.uniform(0.0, 2.0 * math.pi, size)

    def __len__(self) -> int:
        return self.size

    def reset(self, width: int, height: int) -> None:
        """Scatter the pool over the viewport (start-up and resize)."""
        self.x[:] = self._rng.uniform(0.0, width, self.size)
        self.y[:] = self._rng.uniform(0.0, height, self.size)

    def step(self, kind: WeatherCondition, width: int, height: int) -> int:
        """
        Advance every particle by one frame.

        Returns:
            Number of particles recycled to the top this frame
        """
        multiplier = SNOW_SPEED if kind is WeatherCondition.SNOW else RAIN_SPEED
        self.y += self.fall_speed * multiplier

        out = self.y > height
        n_out = int(np.count_nonzero(out))
        if n_out:
            self.y[out] = -self._rng.uniform(RESPAWN_MIN_PX, RESPAWN_MAX_PX, n_out)
            self.x[out] = self._rng.uniform(0.0, width, n_out)
        return n_out

    def wobble(self, time_ms: float) -> np.ndarray:
        """Horizontal snow offset per particle; computed, never stored."""
        return np.sin(time_ms * SNOW_WOBBLE_RATE + self.wobble_phase) * SNOW_WOBBLE_PX

    def draw(self, surface: pygame.Surface, kind: WeatherCondition,
             time_ms: float) -> None:
        if kind is WeatherCondition.SNOW:
            xs = (self.x + self.wobble(time_ms)).tolist()
            for x, y in zip(xs, self.y.tolist()):
                surface.fill(SNOW_COLOR, (int(x), int(y), SNOW_SIZE_PX, SNOW_SIZE_PX))
        else:
            for x, y in zip(self.x.tolist(), self.y.tolist()):
                start = (int(x), int(y))
                end = (int(x) - RAIN_SLANT_PX, int(y) + RAIN_LENGTH_PX)
                pygame.draw.line(surface, RAIN_COLOR, start, end)
