from __future__ import annotations

import pygame

from .. import config
from ..core import ChangeDirection, Direction, Field, Input, Map, Suicide
from ..linalg import Vec2

KEY_MAP = {
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

COLORS = {
    Field.INVALID: config.MAGENTA,
    Field.EMPTY: config.BLACK,
    Field.SNAKE_HEAD: config.GREEN,
    Field.SNAKE_TAIL: config.DARK_GREEN,
    Field.APPLE: config.RED,
}


def window_size(map_size: Vec2) -> tuple[int, int]:
    return (
        map_size.x * config.CELL_SIZE,
        map_size.y * config.CELL_SIZE + config.STATUS_HEIGHT,
    )


def event_to_input(event) -> Input:
    if event.type == pygame.QUIT:
        return Suicide()
    if event.type != pygame.KEYDOWN:
        return None
    direction = KEY_MAP.get(event.key)
    if direction is not None:
        return ChangeDirection(direction)
    if event.key in QUIT_KEYS:
        return Suicide()
    return None


class WindowController:
    def get_input(self) -> Input:
        # Only the newest key press counts, but a close request is never dropped.
        last = None
        closing = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                closing = True
            elif event.type == pygame.KEYDOWN:
                last = event
        if closing:
            return Suicide()
        if last is None:
            return None
        return event_to_input(last)


class WindowRenderer:
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font = pygame.font.Font(None, config.STATUS_HEIGHT - 4)

    def render_snake(self, snake_map: Map, status: str) -> None:
        self.screen.fill(config.BLACK)
        block = config.CELL_SIZE

        for row, (_, cells) in enumerate(snake_map.rows()):
            for x, value in enumerate(cells):
                if value == Field.EMPTY:
                    continue
                rect = pygame.Rect(x * block, row * block, block, block)
                pygame.draw.rect(self.screen, COLORS[value], rect)

        top = snake_map.shape.y * block
        pygame.draw.line(self.screen, config.GREY, (0, top), (self.screen.get_width(), top))
        text = self.font.render(status, True, config.YELLOW)
        self.screen.blit(text, (4, top + 2))

        pygame.display.flip()
