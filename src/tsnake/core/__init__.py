from .clock import Clock, ManualClock, MonotonicClock
from .config import Config
from .direction import Direction
from .errors import ConfigError, PlacementError, SnakeError
from .field import Field, Map
from .game import Controller, Game, Renderer, format_status
from .head import SnakeHead
from .inputs import ChangeDirection, Input, Suicide
from .state import GameState

__all__ = [
    "ChangeDirection",
    "Clock",
    "Config",
    "ConfigError",
    "Controller",
    "Direction",
    "Field",
    "Game",
    "GameState",
    "Input",
    "ManualClock",
    "Map",
    "MonotonicClock",
    "PlacementError",
    "Renderer",
    "SnakeError",
    "SnakeHead",
    "Suicide",
    "format_status",
]
