from __future__ import annotations

from dataclasses import dataclass, field

from .. import config as defaults
from ..linalg import Vec2
from .errors import ConfigError


@dataclass(frozen=True)
class Config:
    """Rules for one run. Validated on construction, immutable afterwards.

    map_size:      grid width and height in cells.
    start_tail:    tail cells laid out behind the head at spawn. The bound is
                   inclusive: up to width // 2, which reaches column 0.
    step_interval: seconds between logic steps at score 0.
    step_accel:    fraction the step interval shrinks by per apple eaten.
    """

    map_size: Vec2 = field(default_factory=lambda: Vec2(defaults.MAP_WIDTH, defaults.MAP_HEIGHT))
    start_tail: int = defaults.START_TAIL
    step_interval: float = defaults.STEP_INTERVAL
    step_accel: float = defaults.STEP_ACCEL

    def __post_init__(self) -> None:
        width, height = self.map_size
        if width <= 0 or height <= 0:
            raise ConfigError(f"map size must be positive, got {width}x{height}")
        if self.start_tail < 0:
            raise ConfigError(f"start_tail must be >= 0, got {self.start_tail}")
        # The tail spawns along -x from the center column.
        if self.start_tail > width // 2:
            raise ConfigError(
                f"start_tail {self.start_tail} does not fit left of the center column "
                f"(at most {width // 2} for width {width})"
            )
        if width * height <= self.start_tail + 1:
            raise ConfigError("grid has no room left for the apple")
        if self.step_interval <= 0:
            raise ConfigError(f"step_interval must be > 0, got {self.step_interval}")
        if not 0.0 <= self.step_accel < 1.0:
            raise ConfigError(f"step_accel must be in [0, 1), got {self.step_accel}")

    @property
    def center(self) -> Vec2:
        return Vec2(self.map_size.x // 2, self.map_size.y // 2)

    @property
    def cell_count(self) -> int:
        return self.map_size.prod()

    def in_bounds(self, pos: Vec2) -> bool:
        return 0 <= pos.x < self.map_size.x and 0 <= pos.y < self.map_size.y
