"""
Diorama State Manager

Owns everything the animation loop reads each frame: the latest weather,
the active scene, the star field, the particle pool and the cloud drift.

Two sides touch it:
- the fetcher threads, through publish_weather() and set_status()
- the render loop, which only reads, once per frame

Every write is a single reference assignment of an immutable value, so a
frame never sees half of an update.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from atmosphere.cloud_layer import CloudLayer
from atmosphere.open_meteo import GeoLocation
from atmosphere.weather import WeatherState
from rendering.particles import POOL_SIZE, ParticlePool
from rendering.sky_renderer import STAR_COUNT, generate_stars
from scenes import SCENE_ORDER, SceneDefinition, SceneKind, create_scene
from core.types import Star


@dataclass(frozen=True)
class StatusMessage:
    text: str = ""
    is_error: bool = False


@dataclass(frozen=True)
class Conditions:
    """Latest weather and the place it was measured, swapped in as one value"""
    weather: WeatherState = field(default_factory=WeatherState.placeholder)
    location: Optional[GeoLocation] = None


@dataclass
class DioramaState:
    """Shared diorama state"""
    conditions: Conditions = field(default_factory=Conditions)
    status: StatusMessage = field(default_factory=StatusMessage)

    # Low-res canvas size
    width: int = 320
    height: int = 200

    @property
    def weather(self) -> WeatherState:
        return self.conditions.weather

    @property
    def location(self) -> Optional[GeoLocation]:
        return self.conditions.location


class StateManager:
    """
    Manages diorama state and scene switching

    Responsibilities:
    - Scene registration and switching (init before first draw)
    - Viewport resize (stars + scene objects regenerated)
    - Weather hand-over from the fetcher
    """

    def __init__(self, width: int, height: int,
                 scene: SceneKind = SceneKind.PASTURE,
                 seed: Optional[int] = None):
        self.state = DioramaState(width=width, height=height)
        self.scenes: Dict[SceneKind, SceneDefinition] = {}
        self.current_scene_kind: Optional[SceneKind] = None
        self._rng = random.Random(seed)

        self.stars: List[Star] = []
        self.particles = ParticlePool(POOL_SIZE, seed=seed)
        self.clouds = CloudLayer()

        for kind in SCENE_ORDER:
            self.register_scene(create_scene(kind))

        self.switch_scene(scene)
        self.resize(width, height)

    # ── Scenes ───────────────────────────────────────────────────────────────

    def register_scene(self, scene: SceneDefinition):
        self.scenes[scene.kind] = scene

    @property
    def current_scene(self) -> SceneDefinition:
        return self.scenes[self.current_scene_kind]

    def switch_scene(self, kind: SceneKind):
        """
        Make a scene active

        The new scene is rebuilt for the current viewport before the
        reference changes, so the next frame never draws stale geometry.
        """
        if kind not in self.scenes:
            print(f"Warning: Scene '{kind}' not registered!")
            return

        scene = self.scenes[kind]
        scene.init(self.state.width, self.state.height)
        self.current_scene_kind = kind
        self.stars = self._new_stars()
        print(f"Switched to scene: {kind.value}")

    @property
    def ground_y(self) -> int:
        return self.current_scene.ground_y(self.state.height)

    # ── Viewport ─────────────────────────────────────────────────────────────

    def resize(self, width: int, height: int):
        """Regenerate every size-dependent collection for a new canvas."""
        self.state.width = width
        self.state.height = height
        self.current_scene.init(width, height)
        self.stars = self._new_stars()
        self.particles.reset(width, height)
        self.clouds.reset()

    def _new_stars(self) -> List[Star]:
        return generate_stars(self.state.width, self.ground_y,
                              count=STAR_COUNT, rng=self._rng)

    # ── Weather (write side) ─────────────────────────────────────────────────

    @property
    def weather(self) -> WeatherState:
        return self.state.weather

    def publish_weather(self, weather: WeatherState,
                        location: Optional[GeoLocation] = None):
        if location is None:
            location = self.state.location
        self.state.conditions = Conditions(weather, location)
        where = location.display_name if location is not None else "current location"
        print(f"Weather loaded for {where}: cloud {weather.cloud_cover_percent:.0f}% "
              f"wind {weather.wind_speed_kmh:.1f} km/h "
              f"rain={weather.is_raining} snow={weather.is_snowing}")

    def set_status(self, text: str, is_error: bool = False):
        self.state.status = StatusMessage(text, is_error)
