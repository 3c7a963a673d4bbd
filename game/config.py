"""
Diorama configuration

Window defaults live here as module constants; DioramaConfig bundles them
with the command-line overrides.
"""

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from scenes import SCENE_ORDER, SceneKind, parse_scene_kind

# Window settings
WIDTH, HEIGHT = 1280, 800
PIXEL_SCALE = 4          # window pixels per diorama pixel
FPS = 15                 # diorama frame rate
REFRESH_HZ = 60          # host repaint rate (pygame clock)
TITLE = "Pixel Weather Diorama"

DEFAULT_LAT, DEFAULT_LON = 51.5, 0.0
REQUEST_TIMEOUT_S = 10.0


@dataclass
class DioramaConfig:
    """Runtime settings"""
    width: int = WIDTH
    height: int = HEIGHT
    pixel_scale: int = PIXEL_SCALE
    fps: float = FPS
    refresh_hz: int = REFRESH_HZ
    scene: SceneKind = SceneKind.PASTURE

    # Location: a city name wins over coordinates; neither → IP lookup
    city: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    default_lat: float = DEFAULT_LAT
    default_lon: float = DEFAULT_LON

    request_timeout_s: float = REQUEST_TIMEOUT_S
    log_frames: bool = True

    def __post_init__(self):
        if not 1 <= self.fps <= 60:
            raise ValueError(f"fps must be between 1 and 60, got {self.fps}")
        if self.pixel_scale < 1:
            raise ValueError(f"pixel scale must be >= 1, got {self.pixel_scale}")
        if self.width < 64 or self.height < 64:
            raise ValueError(f"window too small: {self.width}x{self.height}")
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("--lat and --lon must be given together")

    @property
    def canvas_size(self) -> tuple[int, int]:
        """Low-res diorama resolution for the current window size."""
        return (max(1, self.width // self.pixel_scale),
                max(1, self.height // self.pixel_scale))

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> 'DioramaConfig':
        parser = argparse.ArgumentParser(
            description="Pixel-art diorama driven by local time and live weather")
        parser.add_argument('--city', help="Place name to look up (e.g. 'Lisbon')")
        parser.add_argument('--lat', type=float, help="Latitude (with --lon)")
        parser.add_argument('--lon', type=float, help="Longitude (with --lat)")
        parser.add_argument('--scene', default=SceneKind.PASTURE.value,
                            choices=[k.value for k in SCENE_ORDER])
        parser.add_argument('--fps', type=float, default=FPS,
                            help=f"Diorama frame rate (default {FPS})")
        parser.add_argument('--width', type=int, default=WIDTH)
        parser.add_argument('--height', type=int, default=HEIGHT)
        parser.add_argument('--pixel-scale', type=int, default=PIXEL_SCALE,
                            help=f"Window pixels per diorama pixel (default {PIXEL_SCALE})")
        parser.add_argument('--timeout', type=float, default=REQUEST_TIMEOUT_S,
                            help="Network timeout in seconds")
        parser.add_argument('--quiet', action='store_true',
                            help="Do not print the per-frame diagnostic line")
        args = parser.parse_args(argv)

        return cls(
            width=args.width,
            height=args.height,
            pixel_scale=args.pixel_scale,
            fps=args.fps,
            scene=parse_scene_kind(args.scene),
            city=args.city,
            latitude=args.lat,
            longitude=args.lon,
            request_timeout_s=args.timeout,
            log_frames=not args.quiet,
        )
