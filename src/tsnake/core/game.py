from __future__ import annotations

import logging
import random
from typing import Protocol

from .. import config as defaults
from .clock import Clock, MonotonicClock
from .config import Config
from .field import Map
from .inputs import Input
from .state import GameState

logger = logging.getLogger(__name__)


class Controller(Protocol):
    def get_input(self) -> Input: ...


class Renderer(Protocol):
    def render_snake(self, snake_map: Map, status: str) -> None: ...


def format_status(state: GameState, fps: float) -> str:
    if not state.started:
        return "press a direction key to start"
    return (
        f"score {state.score} | step {state.step_interval * 1000:.0f} ms"
        f" | real {state.real_step_interval * 1000:.0f} ms | {fps:.0f} fps"
    )


class Game:
    """Runs one game from spawn to death.

    Each frame polls the controller once, feeds the input to the state, lets
    the state step if its interval is due, and hands the renderer a fresh
    snapshot. Frames run at up to frame_limit per second; logic steps run
    at the state's own pace.
    """

    def __init__(
        self,
        config: Config,
        controller: Controller,
        renderer: Renderer,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        frame_limit: float = defaults.FPS_LIMIT,
    ):
        self.config = config
        self.controller = controller
        self.renderer = renderer
        self.clock = clock if clock is not None else MonotonicClock()
        self.rng = rng
        self.frame_limit = frame_limit
        self.state: GameState | None = None

    def run(self) -> int:
        state = GameState(self.config, clock=self.clock, rng=self.rng)
        self.state = state
        frame_budget = 1.0 / self.frame_limit if self.frame_limit > 0 else 0.0
        fps = 0.0
        frames = 0

        logger.info(
            "running on %dx%d grid, step %.0f ms",
            self.config.map_size.x,
            self.config.map_size.y,
            self.config.step_interval * 1000,
        )
        while not state.is_terminal():
            frame_start = self.clock.now()

            state.handle_input(self.controller.get_input())
            state.update()
            self.renderer.render_snake(Map.from_state(state), format_status(state, fps))
            frames += 1

            self.clock.sleep(frame_budget - (self.clock.now() - frame_start))
            frame_time = self.clock.now() - frame_start
            if frame_time > 0:
                fps = 1.0 / frame_time

        logger.info("game over after %d frames, score %d", frames, state.score)
        return state.score
