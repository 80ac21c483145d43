from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Iterator

import numpy as np

from ..linalg import Vec2

if TYPE_CHECKING:
    from .state import GameState


class Field(IntEnum):
    INVALID = 0
    EMPTY = 1
    SNAKE_HEAD = 2
    SNAKE_TAIL = 3
    APPLE = 4


class Map:
    """Read-only snapshot of the grid, one Field per cell.

    Cells are stored row-major in a flat uint8 array: offset = y * width + x.
    A Map holds no reference back to the state it was built from.
    """

    def __init__(self, shape: Vec2, fields: np.ndarray):
        self._shape = shape
        self._fields = fields
        self._fields.flags.writeable = False

    @classmethod
    def from_state(cls, state: GameState) -> Map:
        shape = state.config.map_size
        fields = np.full(shape.prod(), Field.EMPTY, dtype=np.uint8)

        # Later marks win: tail < apple < head.
        for pos in state.tail:
            cls._mark(fields, shape, pos, Field.SNAKE_TAIL)
        cls._mark(fields, shape, state.apple, Field.APPLE)
        cls._mark(fields, shape, state.head.position, Field.SNAKE_HEAD)
        return cls(shape, fields)

    @staticmethod
    def pos_offset(pos: Vec2, shape: Vec2) -> int | None:
        if pos.x < 0 or pos.y < 0 or pos.x >= shape.x or pos.y >= shape.y:
            return None
        return pos.y * shape.x + pos.x

    @classmethod
    def _mark(cls, fields: np.ndarray, shape: Vec2, pos: Vec2, value: Field) -> None:
        offset = cls.pos_offset(pos, shape)
        if offset is not None:
            fields[offset] = value

    @property
    def shape(self) -> Vec2:
        return self._shape

    @property
    def fields(self) -> np.ndarray:
        return self._fields

    def at(self, x: int, y: int) -> Field:
        offset = self.pos_offset(Vec2(x, y), self._shape)
        if offset is None:
            return Field.INVALID
        return Field(int(self._fields[offset]))

    def count(self, value: Field) -> int:
        return int(np.count_nonzero(self._fields == value))

    def grid(self) -> np.ndarray:
        """2D (height, width) view indexed as grid()[y, x]."""
        return self._fields.reshape(self._shape.y, self._shape.x)

    def rows(self) -> Iterator[tuple[int, list[Field]]]:
        """Yield (y, cells) from the top row (highest y) down, for drawing."""
        grid = self.grid()
        for y in range(self._shape.y - 1, -1, -1):
            yield y, [Field(int(v)) for v in grid[y]]

    def __len__(self):
        return len(self._fields)
