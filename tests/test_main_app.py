from __future__ import annotations

from datetime import timedelta

import pygame
import pytest

from game.config import DioramaConfig
from main_app import HOUR_S, DioramaApp
from scenes import SceneKind


@pytest.fixture
def app() -> DioramaApp:
    return DioramaApp(DioramaConfig(width=320, height=200, pixel_scale=2, log_frames=False))


def key(k: int, unicode: str = "") -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=k, unicode=unicode, mod=0)


def test_canvas_is_window_over_pixel_scale(app: DioramaApp) -> None:
    assert app.canvas.get_size() == (160, 100)
    assert (app.state_manager.state.width, app.state_manager.state.height) == (160, 100)


def test_bracket_keys_jump_one_hour(app: DioramaApp) -> None:
    before = app.scene_clock.now_utc()
    app.handle_event(key(pygame.K_RIGHTBRACKET, "]"))
    app.handle_event(key(pygame.K_RIGHTBRACKET, "]"))
    app.handle_event(key(pygame.K_LEFTBRACKET, "["))
    moved = app.scene_clock.now_utc() - before
    assert timedelta(seconds=HOUR_S) <= moved < timedelta(seconds=HOUR_S + 5)


def test_scene_and_warp_keys(app: DioramaApp) -> None:
    app.handle_event(key(pygame.K_2, "2"))
    assert app.state_manager.current_scene_kind is SceneKind.CITY
    app.handle_event(key(pygame.K_TAB))
    assert app.state_manager.current_scene_kind is SceneKind.BEACH
    app.handle_event(key(pygame.K_PLUS, "+"))
    assert not app.scene_clock.is_realtime
    app.handle_event(key(pygame.K_r, "r"))
    assert app.scene_clock.is_realtime


def test_typing_in_search_box_does_not_switch_scene(app: DioramaApp) -> None:
    app.hud.search_box.active = True
    app.handle_event(key(pygame.K_3, "3"))
    assert app.state_manager.current_scene_kind is SceneKind.PASTURE
    assert app.hud.search_box.text == "3"


def test_resize_rebuilds_canvas(app: DioramaApp) -> None:
    app.handle_resize(400, 300)
    assert app.canvas.get_size() == (200, 150)
    assert all(star.x < 200 for star in app.state_manager.stars)
