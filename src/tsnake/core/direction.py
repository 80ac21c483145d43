from __future__ import annotations

from enum import Enum

from ..linalg import Vec2


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def offset(self) -> Vec2:
        # Up is +y; frontends draw the highest row first.
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_OFFSETS = {
    Direction.LEFT: Vec2(-1, 0),
    Direction.RIGHT: Vec2(1, 0),
    Direction.UP: Vec2(0, 1),
    Direction.DOWN: Vec2(0, -1),
}
