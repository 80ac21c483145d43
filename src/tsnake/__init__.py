from .core import (
    ChangeDirection,
    Config,
    ConfigError,
    Direction,
    Field,
    Game,
    GameState,
    Map,
    SnakeHead,
    Suicide,
)
from .linalg import Vec2

__all__ = [
    "ChangeDirection",
    "Config",
    "ConfigError",
    "Direction",
    "Field",
    "Game",
    "GameState",
    "Map",
    "SnakeHead",
    "Suicide",
    "Vec2",
]
