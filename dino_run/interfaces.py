"""
interfaces.py: Boundary contracts for the collaborators outside the simulation.

Every base class here doubles as a do-nothing implementation, so a headless
session can run without a screen, a vibration motor or a router.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class HapticStrength(Enum):
    GENTLE = "gentle"
    STRONG = "strong"


class Haptics:
    def pulse(self, strength: HapticStrength, duration_ms: int):
        pass


class DisplayControl:
    """Screen keep-awake hints."""

    def keep_awake(self, seconds: int):
        pass

    def reset(self):
        pass


class Navigator:
    def open_settings(self):
        pass

    def back(self):
        pass


class Renderer:
    def draw(self, snapshot: Any):
        pass


class TextMeasurer:
    """Approximates text extents when no font backend is available."""

    def measure(self, text: str, size: float) -> Tuple[float, float]:
        return len(text) * size * 0.6, size * 1.2


DEFAULT_TEXT: Dict[str, str] = {
    "title": "Dino Run",
    "startBtnTxt": "Start",
    "settingBtnTxt": "Settings",
    "restartTxt": "Restart",
    "resumeText": "Resume",
    "pauseText": "Paused",
    "gameOverText": "GAME OVER",
    "scoreText": "Score:",
    "highScoreText": "High Score:",
    "newHighScoreMsg": "New High Score!",
    "settingsTitle": "Settings",
    "vibration": "Vibration",
    "darkMode": "Dark Mode",
    "fontSize": "Font Size",
    "scaleFactor": "Game Size",
    "back": "Back",
}


class TextSource:
    """Localized string lookup. Unknown keys come back unchanged."""

    def __init__(self, strings: Optional[Dict[str, str]] = None):
        self.strings = dict(DEFAULT_TEXT if strings is None else strings)

    def get_text(self, key: str) -> str:
        return self.strings.get(key, key)


def guarded(action: Callable, *args, **kwargs):
    """Runs a collaborator call; failures are logged, never raised into the tick."""
    try:
        return action(*args, **kwargs)
    except Exception as e:
        logger.warning("Boundary call %s failed: %s", getattr(action, "__qualname__", action), e)
        return None
