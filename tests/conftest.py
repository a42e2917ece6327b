import random

import pytest

from dino_run.data_models import World
from dino_run.interfaces import DisplayControl, Haptics, Navigator
from dino_run.session import GameSession
from dino_run.settings import Settings


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FixedRandom(random.Random):
    """random() always returns `value`, which also pins every choice()."""

    def __init__(self, value: float, seed: int = 1):
        super().__init__(seed)
        self.value = value

    def random(self):
        return self.value


class RecordingHaptics(Haptics):
    def __init__(self):
        self.pulses = []

    def pulse(self, strength, duration_ms):
        self.pulses.append((strength, duration_ms))


class RecordingDisplay(DisplayControl):
    def __init__(self):
        self.calls = []

    def keep_awake(self, seconds):
        self.calls.append(("keep_awake", seconds))

    def reset(self):
        self.calls.append(("reset",))


class RecordingNavigator(Navigator):
    def __init__(self):
        self.calls = []

    def open_settings(self):
        self.calls.append("open_settings")

    def back(self):
        self.calls.append("back")


@pytest.fixture
def world():
    # Scale 1.0 keeps the arithmetic in base units
    return World(screen_width=480, screen_height=480, scale=1.0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def haptics():
    return RecordingHaptics()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def make_session(clock, haptics, display, navigator):
    """Session factory; by default nothing ever spawns."""
    def factory(rng=None, settings=None, high_score=0.0, **kwargs):
        return GameSession(
            settings=settings or Settings(),
            high_score=high_score,
            rng=rng or FixedRandom(0.99),
            clock=clock,
            haptics=haptics,
            display=display,
            navigator=navigator,
            **kwargs,
        )
    return factory


@pytest.fixture
def session(make_session):
    return make_session()
