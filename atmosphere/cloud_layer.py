"""
CloudLayer — a band of blocky pixel clouds drifting with the wind.

Cloud count follows cloud cover (ceil(cover/10 + 1), so even a clear sky
keeps one wisp), drift speed follows wind speed, and every cloud wraps from the right
edge back in on the left.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List, Tuple


CLOUD_SPACING_PX: int = 80
CLOUD_WIDTH_PX: int = 40
CLOUD_HEIGHT_PX: int = 10
CLOUD_MARGIN_PX: int = 60         # off-screen run-up before re-entering
CLOUD_ROW_STEP_PX: int = 15
CLOUD_ROWS: int = 3
CLOUD_TOP_FRAC: float = 0.25      # first row, as a fraction of the viewport height
WIND_DRIFT_PER_FRAME: float = 0.1  # px per frame per km/h

Rect = Tuple[int, int, int, int]


def cloud_count(cloud_cover_percent: float) -> int:
    # partial tens still earn a cloud: 45% cover draws 6
    return math.ceil(max(0.0, cloud_cover_percent) / 10.0 + 1.0)


@dataclass
class CloudLayer:
    """
    Keeps the horizontal drift offset between frames.

    Usage in the animation loop:
        clouds.update(weather.wind_speed_kmh)
        for rect in clouds.rects(width, height, weather.cloud_cover_percent):
            ...
    """
    _offset: float = field(default=0.0, init=False)

    @property
    def offset(self) -> float:
        return self._offset

    def update(self, wind_speed_kmh: float) -> None:
        """Advance the drift by one rendered frame."""
        self._offset += wind_speed_kmh * WIND_DRIFT_PER_FRAME

    def rects(self, width: int, height: int, cloud_cover_percent: float) -> List[Rect]:
        top = int(height * CLOUD_TOP_FRAC)
        span = width + CLOUD_MARGIN_PX
        out: List[Rect] = []
        for i in range(cloud_count(cloud_cover_percent)):
            x = (i * CLOUD_SPACING_PX + self._offset) % span - CLOUD_MARGIN_PX
            y = top + (i % CLOUD_ROWS) * CLOUD_ROW_STEP_PX
            out.append((int(x), y, CLOUD_WIDTH_PX, CLOUD_HEIGHT_PX))
        return out

    def reset(self) -> None:
        self._offset = 0.0
