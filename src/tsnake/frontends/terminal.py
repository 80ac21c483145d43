from __future__ import annotations

import curses

from ..core import ChangeDirection, Direction, Field, Input, Map, SnakeError, Suicide
from ..linalg import Vec2

# Each grid cell is drawn this many columns wide so cells look square.
CELL_WIDTH = 2
ESC = 27

KEY_MAP = {
    ord("w"): Direction.UP,
    ord("s"): Direction.DOWN,
    ord("a"): Direction.LEFT,
    ord("d"): Direction.RIGHT,
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}
QUIT_KEYS = (ESC, ord("q"))

COLOR_BORDER = 1
COLOR_SNAKE = 2
COLOR_APPLE = 3
COLOR_INVALID = 4
COLOR_TEXT = 5


class TerminalTooSmall(SnakeError):
    pass


def key_to_input(key: int) -> Input:
    direction = KEY_MAP.get(key)
    if direction is not None:
        return ChangeDirection(direction)
    if key in QUIT_KEYS:
        return Suicide()
    return None


class TerminalController:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)

    def get_input(self) -> Input:
        last = -1
        while True:
            key = self.stdscr.getch()
            if key == -1:
                break
            last = key
        if last == -1:
            return None
        return key_to_input(last)


class TerminalRenderer:
    """Draws the grid inside a one-cell border with the status line below."""

    def __init__(self, stdscr, map_size: Vec2):
        self.stdscr = stdscr
        self.map_size = map_size
        rows, cols = stdscr.getmaxyx()
        need_rows = map_size.y + 4
        need_cols = (map_size.x + 2) * CELL_WIDTH
        if rows < need_rows or cols < need_cols:
            raise TerminalTooSmall(
                f"terminal is {cols}x{rows}, need at least {need_cols}x{need_rows} for a "
                f"{map_size.x}x{map_size.y} grid"
            )
        curses.curs_set(0)
        self._init_colors()
        self.attrs = {
            Field.INVALID: curses.color_pair(COLOR_INVALID),
            Field.EMPTY: curses.A_NORMAL,
            Field.SNAKE_HEAD: curses.color_pair(COLOR_SNAKE) | curses.A_BOLD,
            Field.SNAKE_TAIL: curses.color_pair(COLOR_SNAKE),
            Field.APPLE: curses.color_pair(COLOR_APPLE),
        }

    def _init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        # Cells are painted as blank blocks on a colored background.
        curses.init_pair(COLOR_BORDER, curses.COLOR_WHITE, curses.COLOR_WHITE)
        curses.init_pair(COLOR_SNAKE, curses.COLOR_GREEN, curses.COLOR_GREEN)
        curses.init_pair(COLOR_APPLE, curses.COLOR_RED, curses.COLOR_RED)
        curses.init_pair(COLOR_INVALID, curses.COLOR_MAGENTA, curses.COLOR_MAGENTA)
        curses.init_pair(COLOR_TEXT, curses.COLOR_YELLOW, -1)

    def _block(self, row: int, cell: int, attr: int) -> None:
        self.stdscr.addstr(row, cell * CELL_WIDTH, " " * CELL_WIDTH, attr)

    def render_snake(self, snake_map: Map, status: str) -> None:
        width, height = snake_map.shape
        border = curses.color_pair(COLOR_BORDER)

        for cell in range(width + 2):
            self._block(0, cell, border)
            self._block(height + 1, cell, border)
        for row, (_, cells) in enumerate(snake_map.rows(), start=1):
            self._block(row, 0, border)
            for x, value in enumerate(cells):
                self._block(row, x + 1, self.attrs[value])
            self._block(row, width + 1, border)

        self.stdscr.move(height + 2, 0)
        self.stdscr.clrtoeol()
        self.stdscr.addstr(height + 2, 0, status[: (width + 2) * CELL_WIDTH], curses.color_pair(COLOR_TEXT))
        self.stdscr.noutrefresh()
        curses.doupdate()
