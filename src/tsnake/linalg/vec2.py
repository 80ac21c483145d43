from __future__ import annotations


class Vec2:
    """Integer grid coordinate. Immutable, compared and hashed by value."""

    __slots__ = ("x", "y")

    def __init__(self, x: int = 0, y: int = 0):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError(f"Vec2 is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Vec2 is immutable, cannot delete {name!r}")

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2({self.x}, {self.y})"

    def __iter__(self):
        yield self.x
        yield self.y

    def prod(self) -> int:
        return self.x * self.y
