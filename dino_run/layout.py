"""
layout.py: Screen regions of the overlay buttons, shared by hit-testing and drawing.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .constants import BUTTON_PADDING, TEXT_SIZES
from .data_models import GameMode
from .geometry import Box
from .interfaces import TextMeasurer, TextSource

# (action, text key, offset of the button top from the screen middle)
BUTTONS: Dict[GameMode, Tuple[Tuple[str, str, int], ...]] = {
    GameMode.MENU: (("start", "startBtnTxt", 70), ("settings", "settingBtnTxt", 140)),
    GameMode.PAUSED: (("resume", "resumeText", 30),),
    GameMode.GAME_OVER: (("restart", "restartTxt", 60),),
    GameMode.PLAYING: (),
}


@dataclass(frozen=True)
class Button:
    action: str
    label: str
    box: Box
    size: float


class ButtonLayout:
    """Centered, padded text buttons sized from the measured label."""

    def __init__(self, screen_width: float, screen_height: float,
                 text: TextSource, measurer: TextMeasurer, text_size_modifier: float = 1.0):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.text = text
        self.measurer = measurer
        self.text_size_modifier = text_size_modifier

    @property
    def label_size(self) -> float:
        return TEXT_SIZES["instructions"] * self.text_size_modifier

    def button(self, action: str, text_key: str, offset: float) -> Button:
        label = self.text.get_text(text_key)
        text_width, text_height = self.measurer.measure(label, self.label_size)
        top = self.screen_height / 2 + offset
        box = Box(
            (self.screen_width - text_width) / 2 - BUTTON_PADDING,
            top,
            text_width + 2 * BUTTON_PADDING,
            text_height + BUTTON_PADDING,
        )
        return Button(action, label, box, self.label_size)

    def buttons_for(self, mode: GameMode) -> Tuple[Button, ...]:
        return tuple(self.button(*entry) for entry in BUTTONS[mode])

    def hit(self, mode: GameMode, x: float, y: float):
        """Returns the action of the button under (x, y), or None."""
        for button in self.buttons_for(mode):
            if button.box.contains(x, y):
                return button.action
        return None
