from __future__ import annotations

import numpy as np
import pygame
import pytest

from atmosphere.weather import OVERCAST_SKY, WeatherState
from core.color import hex_to_rgb
from game.animation_loop import PLACEHOLDER_COLOR, AnimationLoop
from game.state_manager import StateManager
from scenes import SceneKind
from _utils import frozen_clock, rgb_at


def make_loop(hour: int, weather: WeatherState | None = None,
              scene: SceneKind = SceneKind.PASTURE, **kwargs) -> AnimationLoop:
    manager = StateManager(320, 200, scene=scene, seed=5)
    if weather is not None:
        manager.publish_weather(weather)
    kwargs.setdefault("log_frames", False)
    return AnimationLoop(manager, frozen_clock(hour), fps=15, **kwargs)


def test_placeholder_until_first_fetch(canvas: pygame.Surface) -> None:
    loop = make_loop(12)
    loop.render_frame(canvas, 0.0)
    assert rgb_at(canvas, 0, 0) == hex_to_rgb(PLACEHOLDER_COLOR)
    assert rgb_at(canvas, 319, 199) == hex_to_rgb(PLACEHOLDER_COLOR)


def test_noon_clear_sky(canvas: pygame.Surface, clear_weather: WeatherState) -> None:
    loop = make_loop(12, clear_weather)
    theme = loop.render_frame(canvas, 0.0)
    assert theme.hour == pytest.approx(12.0)
    assert theme.sun_visible and not theme.overcast
    assert rgb_at(canvas, 0, 0) == hex_to_rgb("#87ceeb")
    scene = loop.state_manager.current_scene
    assert rgb_at(canvas, 0, 199) == hex_to_rgb(scene.day_color)


def test_rain_turns_sky_overcast(canvas: pygame.Surface, rain_weather: WeatherState) -> None:
    loop = make_loop(12, rain_weather, scene=SceneKind.CITY)
    theme = loop.render_frame(canvas, 0.0)
    assert theme.overcast
    assert theme.sky == OVERCAST_SKY
    assert theme.ground == loop.state_manager.current_scene.night_color


def test_hour_is_taken_at_the_location(canvas: pygame.Surface) -> None:
    weather = WeatherState(utc_offset_seconds=7200, loaded=True)
    loop = make_loop(12, weather)
    assert loop.render_frame(canvas, 0.0).hour == pytest.approx(14.0)


def test_midnight_draws_moon_not_sun(canvas: pygame.Surface, clear_weather: WeatherState) -> None:
    loop = make_loop(0, clear_weather)
    theme = loop.render_frame(canvas, 0.0)
    assert not theme.sun_visible
    assert theme.sky == "#05050a"


def test_request_frame_is_throttled(canvas: pygame.Surface, clear_weather: WeatherState) -> None:
    loop = make_loop(12, clear_weather, start_ms=1000.0)
    assert loop.request_frame(canvas, 1000.0) is False
    assert loop.last_theme is None
    assert loop.request_frame(canvas, 1070.0) is True
    assert loop.last_theme is not None
    assert loop.request_frame(canvas, 1080.0) is False


def test_particles_advance_only_while_precipitating(canvas: pygame.Surface,
                                                    clear_weather: WeatherState,
                                                    snow_weather: WeatherState) -> None:
    loop = make_loop(12, clear_weather)
    before = loop.state_manager.particles.y.copy()
    loop.render_frame(canvas, 0.0)
    assert (loop.state_manager.particles.y == before).all()

    loop.state_manager.publish_weather(snow_weather)
    loop.render_frame(canvas, 100.0)
    assert (loop.state_manager.particles.y != before).any()


def test_diagnostic_line(canvas: pygame.Surface, clear_weather: WeatherState, capsys) -> None:
    loop = make_loop(12, clear_weather, log_frames=True)
    capsys.readouterr()
    loop.render_frame(canvas, 0.0)
    out = capsys.readouterr().out
    assert "Local hour at location: 12.00" in out
    assert "Wind: 10.0 km/h" in out


def _white_sky_pixels(canvas: pygame.Surface, ground_y: int) -> int:
    pixels = pygame.surfarray.array3d(canvas)[:, :ground_y]
    return int(np.all(pixels == 255, axis=-1).sum())


def test_stars_only_on_clear_nights(canvas: pygame.Surface,
                                    clear_weather: WeatherState,
                                    rain_weather: WeatherState) -> None:
    night = make_loop(0, clear_weather)
    theme = night.render_frame(canvas, 0.0)
    assert not theme.sun_visible and not theme.overcast
    ground_y = night.state_manager.ground_y
    assert _white_sky_pixels(canvas, ground_y) > 0

    overcast_night = make_loop(0, rain_weather)
    theme = overcast_night.render_frame(canvas, 0.0)
    assert theme.overcast
    assert _white_sky_pixels(canvas, ground_y) == 0

    noon = make_loop(12, clear_weather)
    theme = noon.render_frame(canvas, 0.0)
    assert theme.sun_visible
    assert _white_sky_pixels(canvas, ground_y) == 0
