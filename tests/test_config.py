from __future__ import annotations

import pytest

from game.config import FPS, PIXEL_SCALE, DioramaConfig
from scenes import SceneKind


def test_defaults() -> None:
    config = DioramaConfig.from_args([])
    assert config.fps == FPS
    assert config.pixel_scale == PIXEL_SCALE
    assert config.scene is SceneKind.PASTURE
    assert config.city is None and config.latitude is None
    assert config.log_frames


def test_overrides() -> None:
    config = DioramaConfig.from_args(["--scene", "city", "--city", "Oslo",
                                      "--fps", "30", "--quiet"])
    assert config.scene is SceneKind.CITY
    assert config.city == "Oslo"
    assert config.fps == 30
    assert not config.log_frames


def test_canvas_size() -> None:
    config = DioramaConfig(width=1280, height=800, pixel_scale=4)
    assert config.canvas_size == (320, 200)


@pytest.mark.parametrize("kwargs", [
    {"fps": 0},
    {"fps": 120},
    {"pixel_scale": 0},
    {"width": 10},
    {"latitude": 10.0},
])
def test_rejects_invalid_settings(kwargs) -> None:
    with pytest.raises(ValueError):
        DioramaConfig(**kwargs)


def test_unknown_scene_exits() -> None:
    with pytest.raises(SystemExit):
        DioramaConfig.from_args(["--scene", "volcano"])
