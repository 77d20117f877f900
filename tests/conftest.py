import sys
from collections import deque

import numpy as np
import pytest

sys.path.append('src')

from termsnake.game_state import GameState


class ScriptedRng:
    """Return queued coordinates, then defer to a real generator."""

    def __init__(self, values, seed=0):
        self.values = list(values)
        self.fallback = np.random.default_rng(seed)

    def integers(self, high):
        if self.values:
            return self.values.pop(0)
        return self.fallback.integers(high)

    def choice(self, candidates):
        return self.fallback.choice(candidates)


class FakeScreen:
    """In-memory stand-in for a terminal surface."""

    def __init__(self, width=20, height=20, events=()):
        self.width = width
        self.height = height
        self.events = deque(events)
        self.cells = {}
        self.frames = []
        self.calls = []
        self.initialised = False
        self.finished = False

    def init(self):
        self.initialised = True

    def fini(self):
        self.calls.append("fini")
        self.finished = True

    def set_style(self, style):
        self.calls.append("set_style")

    def size(self):
        return self.width, self.height

    def set_content(self, x, y, glyph, style):
        self.cells[(x, y)] = glyph

    def clear(self):
        self.calls.append("clear")
        self.cells = {}

    def show(self):
        self.calls.append("show")
        self.frames.append(dict(self.cells))

    def sync(self):
        self.calls.append("sync")

    def poll_event(self):
        if self.events:
            return self.events.popleft()
        return None

    def text_at(self, y):
        row = sorted((x, g) for (x, yy), g in self.cells.items() if yy == y)
        return "".join(g for _, g in row)


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def state():
    return GameState(width=20, height=20, rng=np.random.default_rng(0))


@pytest.fixture
def make_screen():
    return FakeScreen


@pytest.fixture
def scripted_rng():
    return ScriptedRng
