"""
Animation Loop

Root driver of the diorama. The host calls request_frame() on every display
refresh; the FrameThrottle lets through only the frames that fit the target
frame rate, and each accepted frame is drawn in a fixed order:

    clear → sky → stars → sun/moon → clouds → scene → precipitation → log

Until the first weather fetch lands the loop draws a placeholder instead;
there is no separate state for that, the `loaded` flag is checked each frame.
"""

from __future__ import annotations
from typing import Optional, Sequence

import pygame

from atmosphere.day_phase import DEFAULT_KEYFRAMES, ResolvedTheme, ThemeKeyframe, resolve_theme
from core.astro_time import local_hour
from core.color import hex_to_rgb
from core.time_controller import FrameThrottle, SceneClock
from rendering.sky_renderer import draw_celestial_body, draw_clouds, draw_sky, draw_stars
from game.state_manager import StateManager


PLACEHOLDER_COLOR = "#111111"


class AnimationLoop:
    """
    Throttled frame renderer

    Args:
        state_manager: Source of weather, scene, stars, particles, clouds
        clock: Scene clock (real time or time-warped)
        fps: Target diorama frame rate
        keyframes: Day-cycle colour table
        log_frames: Print the per-frame diagnostic line
    """

    def __init__(self, state_manager: StateManager, clock: SceneClock,
                 fps: float, keyframes: Sequence[ThemeKeyframe] = DEFAULT_KEYFRAMES,
                 log_frames: bool = True, start_ms: float = 0.0):
        self.state_manager = state_manager
        self.clock = clock
        self.throttle = FrameThrottle(fps, start_ms)
        self.keyframes = keyframes
        self.log_frames = log_frames
        self.last_theme: Optional[ResolvedTheme] = None

    def request_frame(self, surface: pygame.Surface, now_ms: float) -> bool:
        """
        Host repaint callback

        Returns:
            True if a frame was rendered, False if the loop stayed idle
        """
        if not self.throttle.ready(now_ms):
            return False
        self.render_frame(surface, now_ms)
        return True

    def current_theme(self) -> ResolvedTheme:
        weather = self.state_manager.weather
        hour = local_hour(self.clock.now_utc(), weather.utc_offset_seconds)
        return resolve_theme(hour, self.state_manager.current_scene, weather,
                             self.keyframes)

    def render_frame(self, surface: pygame.Surface, time_ms: float) -> ResolvedTheme:
        """Draw one complete frame unconditionally."""
        sm = self.state_manager
        # one read per frame: a fetch landing mid-frame shows up next frame
        weather = sm.weather
        scene = sm.current_scene
        width, height = surface.get_size()

        hour = local_hour(self.clock.now_utc(), weather.utc_offset_seconds)
        theme = resolve_theme(hour, scene, weather, self.keyframes)

        surface.fill((0, 0, 0))
        if not weather.loaded:
            surface.fill(hex_to_rgb(PLACEHOLDER_COLOR))
        else:
            ground_y = scene.ground_y(height)

            draw_sky(surface, theme)
            if not theme.sun_visible and not theme.overcast:
                draw_stars(surface, sm.stars, time_ms)
            if not theme.overcast:
                draw_celestial_body(surface, theme, ground_y)

            sm.clouds.update(weather.wind_speed_kmh)
            draw_clouds(surface, sm.clouds.rects(width, height, weather.cloud_cover_percent))

            scene.draw(surface, ground_y, theme, weather, time_ms)

            kind = weather.precipitation
            if kind is not None:
                sm.particles.step(kind, width, height)
                sm.particles.draw(surface, kind, time_ms)

        if self.log_frames:
            print(f"Local hour at location: {theme.hour:.2f}  "
                  f"Wind: {weather.wind_speed_kmh:.1f} km/h")

        self.last_theme = theme
        return theme
