from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class SceneObjectKind(Enum):
    TREE = "tree"
    BUILDING = "building"
    PALM = "palm"


@dataclass(slots=True)
class SceneObject:
    kind: SceneObjectKind
    x: int
    height: int
    # only buildings have a footprint; vegetation is drawn around x
    width: int = 0

@dataclass(slots=True)
class Star:
    x: int
    y: int
    size: int = 1
