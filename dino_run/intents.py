"""
intents.py: Already-decoded user actions, independent of the input device.
"""

from dataclasses import dataclass


class Intent:
    """Base class for every intent."""


@dataclass(frozen=True)
class Jump(Intent):
    pass


@dataclass(frozen=True)
class Select(Intent):
    """Physical select-button click. Jumps while playing."""


@dataclass(frozen=True)
class DuckStart(Intent):
    pass


@dataclass(frozen=True)
class DuckEnd(Intent):
    pass


@dataclass(frozen=True)
class TogglePause(Intent):
    pass


@dataclass(frozen=True)
class Back(Intent):
    pass


@dataclass(frozen=True)
class SwipeRight(Intent):
    pass


@dataclass(frozen=True)
class PointerUpAt(Intent):
    """A tap release, hit-tested against the current UI regions."""
    x: float
    y: float


PAUSE_TOGGLES = (TogglePause, Back, SwipeRight)
