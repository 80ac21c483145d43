from __future__ import annotations

import logging
import random
from collections import deque

from .. import config as defaults
from ..linalg import Vec2
from .clock import Clock, MonotonicClock
from .config import Config
from .direction import Direction
from .errors import PlacementError
from .field import Field
from .head import SnakeHead
from .inputs import ChangeDirection, Input, Suicide

logger = logging.getLogger(__name__)


class GameState:
    """Everything that changes during a run.

    Logic steps are paced by the clock, not by how often update() is called:
    update() only moves the snake once step_interval has passed since the
    previous step, and never before the player's first input.
    """

    def __init__(self, config: Config, clock: Clock | None = None, rng: random.Random | None = None):
        self.config = config
        self.clock = clock if clock is not None else MonotonicClock()
        self.rng = rng if rng is not None else random.Random()

        self.score = 0
        self.started = False
        self.won = False
        self.step_interval = config.step_interval
        self.real_step_interval = 0.0
        self.last_update = self.clock.now()

        mid = config.center
        # Oldest segment first: (mid.x - start_tail), ..., (mid.x - 1).
        self.snake_tail: deque[Vec2] = deque(
            Vec2(mid.x - i, mid.y) for i in range(config.start_tail, 0, -1)
        )
        neck = self.snake_tail[-1] if self.snake_tail else mid - Direction.RIGHT.offset
        self.head = SnakeHead(mid, neck, Direction.RIGHT)

        self.apple = mid
        self.apple = self.rand_empty_pos()
        logger.debug("new game: head=%r tail=%r apple=%r", mid, list(self.snake_tail), self.apple)

    @property
    def tail(self) -> tuple[Vec2, ...]:
        return tuple(self.snake_tail)

    def rand_pos(self) -> Vec2:
        return Vec2(
            self.rng.randrange(self.config.map_size.x),
            self.rng.randrange(self.config.map_size.y),
        )

    def rand_empty_pos(self) -> Vec2:
        attempts = defaults.PLACEMENT_ATTEMPTS_PER_CELL * self.config.cell_count
        for _ in range(attempts):
            pos = self.rand_pos()
            if self.check_pos(pos) == Field.EMPTY:
                return pos

        # Crowded grid; pick uniformly among whatever is left.
        logger.debug("apple sampling gave up after %d draws, scanning grid", attempts)
        empty = [
            Vec2(x, y)
            for y in range(self.config.map_size.y)
            for x in range(self.config.map_size.x)
            if self.check_pos(Vec2(x, y)) == Field.EMPTY
        ]
        if not empty:
            raise PlacementError("no empty cell left for the apple")
        return self.rng.choice(empty)

    def grid_full(self) -> bool:
        # Tail cells and the head never overlap while the snake is alive.
        return len(self.snake_tail) + 1 >= self.config.cell_count

    def check_pos(self, pos: Vec2) -> Field:
        if not self.config.in_bounds(pos):
            return Field.INVALID
        if pos in self.snake_tail:
            return Field.SNAKE_TAIL
        if pos == self.apple:
            return Field.APPLE
        if pos == self.head.position:
            return Field.SNAKE_HEAD
        return Field.EMPTY

    def handle_input(self, user_input: Input) -> None:
        if user_input is None:
            return
        if not self.started:
            logger.info("game started")
            self.started = True

        if isinstance(user_input, ChangeDirection):
            self.head.change_direction(user_input.direction)
        elif isinstance(user_input, Suicide):
            logger.info("player forfeited at score %d", self.score)
            self.head.kill()

    def update(self) -> None:
        if not self.started or self.is_terminal():
            return
        now = self.clock.now()
        elapsed = now - self.last_update
        if elapsed < self.step_interval:
            return

        self.real_step_interval = elapsed
        self.last_update = now
        self.snake_tail.append(self.head.advance())

        pos = self.head.position
        shrink = True
        hit = self.check_pos(pos)
        if hit == Field.INVALID:
            logger.info("hit the wall at %r, score %d", pos, self.score)
            self.head.kill()
        elif hit == Field.SNAKE_TAIL:
            logger.info("ran into own tail at %r, score %d", pos, self.score)
            self.head.kill()
        elif hit == Field.APPLE:
            shrink = False
            self.score += 1
            self.step_interval *= 1.0 - self.config.step_accel
            logger.info(
                "apple eaten, score %d, step interval %.1f ms",
                self.score,
                self.step_interval * 1000,
            )
            if self.grid_full():
                logger.info("grid filled, score %d", self.score)
                self.won = True
                self.head.kill()
            else:
                self.apple = self.rand_empty_pos()
        else:
            logger.debug("step to %r", pos)

        if shrink and self.head.is_alive():
            self.snake_tail.popleft()

    def is_terminal(self) -> bool:
        return not self.head.is_alive()
