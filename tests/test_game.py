"""Tests for the Game loop."""

import random

from tests.helpers import RecordingRenderer, ScriptedController
from tsnake.core import (
    ChangeDirection,
    Config,
    Direction,
    Field,
    Game,
    ManualClock,
    Suicide,
    format_status,
)
from tsnake.linalg import Vec2


def make_game(inputs, frame_limit=10, step_interval=0.25, rng=None):
    cfg = Config(map_size=Vec2(10, 10), start_tail=2, step_interval=step_interval)
    clock = ManualClock()
    controller = ScriptedController(inputs)
    renderer = RecordingRenderer()
    game = Game(
        cfg,
        controller,
        renderer,
        clock=clock,
        rng=rng or random.Random(7),
        frame_limit=frame_limit,
    )
    return game, controller, renderer, clock


class TestGameLoop:
    def test_suicide_ends_run_with_zero(self):
        game, controller, renderer, _ = make_game([Suicide()])
        assert game.run() == 0
        assert controller.calls == 1
        assert len(renderer.frames) == 1

    def test_waits_for_first_input(self):
        game, _, renderer, _ = make_game([None, None, None, Suicide()])
        game.run()
        for snake_map, status in renderer.frames[:3]:
            assert snake_map.at(5, 5) == Field.SNAKE_HEAD
            assert status == "press a direction key to start"

    def test_runs_until_wall_and_returns_score(self):
        game, controller, renderer, _ = make_game([None, ChangeDirection(Direction.UP)])
        score = game.run()
        assert game.state.is_terminal()
        assert score == game.state.score
        assert game.state.head.position.y == 10
        # Frames run faster than logic steps.
        assert len(renderer.frames) > 5
        assert controller.calls == len(renderer.frames)

    def test_renders_status_once_started(self):
        game, _, renderer, _ = make_game([ChangeDirection(Direction.UP)])
        game.run()
        _, status = renderer.frames[-1]
        assert status.startswith("score ")
        assert " | step " in status
        assert "fps" in status

    def test_sleeps_remaining_frame_budget(self):
        game, _, _, clock = make_game([None, Suicide()], frame_limit=20)
        game.run()
        assert clock.slept
        assert all(abs(s - 0.05) < 1e-9 for s in clock.slept)

    def test_no_frame_cap(self):
        game, _, renderer, clock = make_game([None, None, Suicide()], frame_limit=0)
        game.run()
        assert len(renderer.frames) == 3
        assert all(s <= 0 for s in clock.slept)


class TestFormatStatus:
    def test_before_start(self, state):
        assert format_status(state, 0.0) == "press a direction key to start"

    def test_after_start(self, state):
        state.handle_input(ChangeDirection(Direction.UP))
        state.real_step_interval = 0.102
        assert format_status(state, 59.6) == "score 0 | step 100 ms | real 102 ms | 60 fps"


class TestGameWon:
    def test_filling_grid_returns_score(self):
        cfg = Config(map_size=Vec2(3, 1), start_tail=1, step_interval=0.25)
        renderer = RecordingRenderer()
        game = Game(
            cfg,
            ScriptedController([ChangeDirection(Direction.RIGHT)]),
            renderer,
            clock=ManualClock(),
            rng=random.Random(3),
            frame_limit=10,
        )
        assert game.run() == 1
        assert game.state.won
        snake_map, _ = renderer.frames[-1]
        assert snake_map.at(2, 0) == Field.SNAKE_HEAD
        assert snake_map.count(Field.SNAKE_TAIL) == 2
