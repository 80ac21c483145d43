import random

import pytest

from tsnake.core import Config, GameState, ManualClock
from tsnake.linalg import Vec2


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config():
    return Config(map_size=Vec2(10, 10), start_tail=2, step_interval=0.1, step_accel=0.05)


@pytest.fixture
def state(config, clock, rng):
    return GameState(config, clock=clock, rng=rng)
