from tsnake.core import ChangeDirection


def step(state, clock):
    """Let a bit more than one step interval pass, then update."""
    clock.advance(state.step_interval * 1.5)
    state.update()


def steer(state, direction):
    state.handle_input(ChangeDirection(direction))


class ScriptedController:
    """Plays back a list of inputs, then nothing."""

    def __init__(self, inputs):
        self.inputs = list(inputs)
        self.calls = 0

    def get_input(self):
        self.calls += 1
        if self.inputs:
            return self.inputs.pop(0)
        return None


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def render_snake(self, snake_map, status):
        self.frames.append((snake_map, status))


class FixedRandom:
    """Stands in for random.Random; always draws the lowest value."""

    def randrange(self, stop):
        return 0

    def choice(self, seq):
        return seq[0]
