from __future__ import annotations

from ..linalg import Vec2
from .direction import Direction


class SnakeHead:
    """Head of the snake: where it is, where it was, and where it is going.

    The anti-reversal rule lives here. A heading that would take the head
    straight back onto the cell it just left is flipped on the next advance,
    so a 180 degree turn degrades to going straight.
    """

    def __init__(self, pos: Vec2, prev_pos: Vec2, direction: Direction = Direction.RIGHT):
        self._pos = pos
        self._prev_pos = prev_pos
        self._direction = direction
        self._alive = True

    @property
    def position(self) -> Vec2:
        return self._pos

    @property
    def previous_position(self) -> Vec2:
        return self._prev_pos

    @property
    def heading(self) -> Direction:
        return self._direction

    def looking_at(self) -> Vec2:
        return self._pos + self._direction.offset

    def _fix_direction(self) -> None:
        if self.looking_at() == self._prev_pos:
            self._direction = self._direction.opposite()

    def advance(self) -> Vec2:
        """Move one cell and return the cell that was vacated."""
        self._fix_direction()
        self._prev_pos = self._pos
        self._pos = self.looking_at()
        return self._prev_pos

    def change_direction(self, direction: Direction) -> None:
        # Checked lazily against the neck in advance().
        self._direction = direction

    def kill(self) -> None:
        self._alive = False

    def is_alive(self) -> bool:
        return self._alive

    def __repr__(self):
        return (
            f"SnakeHead(pos={self._pos!r}, prev={self._prev_pos!r}, "
            f"heading={self._direction.name}, alive={self._alive})"
        )
