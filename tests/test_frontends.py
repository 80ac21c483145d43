"""Tests for key mapping in the terminal and window frontends."""

import curses

import pytest

from tsnake.core import ChangeDirection, Direction, Suicide
from tsnake.frontends.terminal import TerminalController, key_to_input


class FakeScreen:
    def __init__(self, keys):
        self.keys = list(keys)

    def nodelay(self, flag):
        pass

    def keypad(self, flag):
        pass

    def getch(self):
        if self.keys:
            return self.keys.pop(0)
        return -1


class TestTerminalKeys:
    @pytest.mark.parametrize(
        "key, direction",
        [
            (ord("w"), Direction.UP),
            (ord("a"), Direction.LEFT),
            (ord("s"), Direction.DOWN),
            (ord("d"), Direction.RIGHT),
            (curses.KEY_UP, Direction.UP),
            (curses.KEY_LEFT, Direction.LEFT),
        ],
    )
    def test_direction_keys(self, key, direction):
        assert key_to_input(key) == ChangeDirection(direction)

    def test_quit_keys(self):
        assert key_to_input(27) == Suicide()
        assert key_to_input(ord("q")) == Suicide()

    def test_other_keys_are_nothing(self):
        assert key_to_input(ord("x")) is None

    def test_controller_keeps_last_key(self):
        screen = FakeScreen([ord("w"), ord("a"), ord("s")])
        controller = TerminalController(screen)
        assert controller.get_input() == ChangeDirection(Direction.DOWN)
        assert controller.get_input() is None

    def test_unmapped_last_key_drops_earlier_ones(self):
        controller = TerminalController(FakeScreen([ord("w"), ord("x")]))
        assert controller.get_input() is None


class TestWindowKeys:
    def test_keydown_and_quit(self):
        pygame = pytest.importorskip("pygame")
        from tsnake.frontends.window import event_to_input

        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d)
        assert event_to_input(event) == ChangeDirection(Direction.RIGHT)
        assert event_to_input(pygame.event.Event(pygame.QUIT)) == Suicide()
        assert event_to_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)) == Suicide()
        assert event_to_input(pygame.event.Event(pygame.KEYUP, key=pygame.K_d)) is None

    def test_window_size_includes_status_bar(self):
        pytest.importorskip("pygame")
        from tsnake import config
        from tsnake.frontends.window import window_size
        from tsnake.linalg import Vec2

        assert window_size(Vec2(4, 3)) == (
            4 * config.CELL_SIZE,
            3 * config.CELL_SIZE + config.STATUS_HEIGHT,
        )


class TestWindowController:
    def drain(self, monkeypatch, events):
        pygame = pytest.importorskip("pygame")
        from tsnake.frontends.window import WindowController

        monkeypatch.setattr(pygame.event, "get", lambda: list(events(pygame)))
        return WindowController().get_input()

    def test_keeps_last_key(self, monkeypatch):
        result = self.drain(
            monkeypatch,
            lambda pg: [
                pg.event.Event(pg.KEYDOWN, key=pg.K_w),
                pg.event.Event(pg.KEYDOWN, key=pg.K_a),
            ],
        )
        assert result == ChangeDirection(Direction.LEFT)

    def test_close_wins_over_later_keys(self, monkeypatch):
        result = self.drain(
            monkeypatch,
            lambda pg: [
                pg.event.Event(pg.QUIT),
                pg.event.Event(pg.KEYDOWN, key=pg.K_d),
            ],
        )
        assert result == Suicide()

    def test_nothing_pending(self, monkeypatch):
        assert self.drain(monkeypatch, lambda pg: []) is None
