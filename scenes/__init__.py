"""
Scenes package — interchangeable ground-level layouts.

    SceneKind         — enum: PASTURE / CITY / BEACH
    SceneDefinition   — abstract base (ground band + objects + draw)
    create_scene()    — factory from a SceneKind or its name
"""
from __future__ import annotations
from typing import Dict, Type, Union

from .base_scene import SceneDefinition, SceneKind, wind_sway
from .pasture import PastureScene
from .city import CityScene, window_lit
from .beach import BeachScene


SCENES: Dict[SceneKind, Type[SceneDefinition]] = {
    SceneKind.PASTURE: PastureScene,
    SceneKind.CITY: CityScene,
    SceneKind.BEACH: BeachScene,
}

SCENE_ORDER = (SceneKind.PASTURE, SceneKind.CITY, SceneKind.BEACH)


def parse_scene_kind(value: Union[SceneKind, str]) -> SceneKind:
    if isinstance(value, SceneKind):
        return value
    try:
        return SceneKind(value.strip().lower())
    except ValueError:
        names = ", ".join(k.value for k in SCENE_ORDER)
        raise ValueError(f"unknown scene {value!r} (expected one of: {names})") from None


def create_scene(kind: Union[SceneKind, str]) -> SceneDefinition:
    return SCENES[parse_scene_kind(kind)]()


def next_scene_kind(kind: SceneKind) -> SceneKind:
    return SCENE_ORDER[(SCENE_ORDER.index(kind) + 1) % len(SCENE_ORDER)]


__all__ = [
    "SceneDefinition",
    "SceneKind",
    "wind_sway",
    "PastureScene",
    "CityScene",
    "BeachScene",
    "window_lit",
    "SCENES",
    "SCENE_ORDER",
    "parse_scene_kind",
    "create_scene",
    "next_scene_kind",
]
