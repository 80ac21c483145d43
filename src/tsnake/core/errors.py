from __future__ import annotations


class SnakeError(Exception):
    """Base class for errors raised by tsnake."""


class ConfigError(SnakeError, ValueError):
    """A Config value breaks a precondition of the simulation."""


class PlacementError(SnakeError):
    """No empty cell is left to place the apple on."""
