"""
settings.py: Player preferences and the settings page that edits them.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .constants import (
    TEXT_SIZE_MODIFIERS, SCALE_FACTORS, TEXT_SIZES, PULSE_SHORT_MS,
)
from .geometry import Box
from .intents import Intent, PointerUpAt, Back
from .interfaces import (
    Haptics, HapticStrength, Navigator, TextSource, TextMeasurer, guarded,
)
from .snapshot import Palette, SettingsSnapshot, TextLine

logger = logging.getLogger(__name__)

# Order in which the toggles cycle: Normal -> Large -> Small -> Normal
CYCLE = ("normal", "large", "small")


def next_in_cycle(table: dict, current: float) -> float:
    for i, name in enumerate(CYCLE):
        if table[name] == current:
            return table[CYCLE[(i + 1) % len(CYCLE)]]
    return table["normal"]


def preset_name(table: dict, value: float) -> str:
    for name, preset in table.items():
        if preset == value:
            return name.capitalize()
    return "Normal"


@dataclass
class Settings:
    scale_factor: float = SCALE_FACTORS["normal"]
    text_size: float = TEXT_SIZE_MODIFIERS["normal"]
    dark_mode: bool = False
    vibration_enabled: bool = True

    def cycle_text_size(self):
        self.text_size = next_in_cycle(TEXT_SIZE_MODIFIERS, self.text_size)

    def cycle_scale_factor(self):
        self.scale_factor = next_in_cycle(SCALE_FACTORS, self.scale_factor)


@dataclass
class SaveData:
    """Everything persisted between runs."""
    high_score: float = 0.0
    settings: Settings = field(default_factory=Settings)


class SettingsPage:
    """
    Four option rows plus a back button. Tapping a row flips or cycles its
    value, pulses the motor (if vibration is on after the change) and the
    next snapshot reflects the new value.
    """

    ROW_HALF_WIDTH = 100
    BACK_HALF_WIDTH = 50
    # (setting, text key, offset from the screen middle)
    ROWS = (
        ("vibration_enabled", "vibration", -80),
        ("dark_mode", "darkMode", -20),
        ("text_size", "fontSize", 40),
        ("scale_factor", "scaleFactor", 100),
    )

    def __init__(self, settings: Settings, screen_width: float, screen_height: float,
                 haptics: Optional[Haptics] = None, navigator: Optional[Navigator] = None,
                 text: Optional[TextSource] = None, measurer: Optional[TextMeasurer] = None):
        self.settings = settings
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.haptics = haptics or Haptics()
        self.navigator = navigator or Navigator()
        self.text = text or TextSource()
        self.measurer = measurer or TextMeasurer()

    def row_regions(self) -> Sequence[tuple]:
        """(setting, hit box) for every option row and the back button."""
        cx = self.screen_width / 2
        regions = []
        for name, key, offset in self.ROWS:
            top = self.screen_height / 2 + offset
            _, height = self.measurer.measure(self.text.get_text(key), TEXT_SIZES["option"])
            regions.append((name, Box(cx - self.ROW_HALF_WIDTH, top, 2 * self.ROW_HALF_WIDTH, height)))
        back_top = self.screen_height - 60
        _, height = self.measurer.measure(self.text.get_text("back"), TEXT_SIZES["button"])
        regions.append(("back", Box(cx - self.BACK_HALF_WIDTH, back_top, 2 * self.BACK_HALF_WIDTH, height)))
        return regions

    def _pulse(self):
        if self.settings.vibration_enabled:
            guarded(self.haptics.pulse, HapticStrength.GENTLE, PULSE_SHORT_MS)

    def toggle(self, name: str):
        s = self.settings
        if name == "vibration_enabled":
            s.vibration_enabled = not s.vibration_enabled
        elif name == "dark_mode":
            s.dark_mode = not s.dark_mode
        elif name == "text_size":
            s.cycle_text_size()
        elif name == "scale_factor":
            s.cycle_scale_factor()
        logger.info("Setting %s changed to %s", name, getattr(s, name))
        self._pulse()

    def handle(self, intent: Intent):
        if isinstance(intent, Back):
            guarded(self.navigator.back)
            return
        if not isinstance(intent, PointerUpAt):
            return

        for name, box in self.row_regions():
            if box.contains(intent.x, intent.y):
                if name == "back":
                    self._pulse()
                    guarded(self.navigator.back)
                else:
                    self.toggle(name)
                return

    def tick(self):
        pass

    def snapshot(self) -> SettingsSnapshot:
        s = self.settings
        palette = Palette.for_mode(s.dark_mode)
        text = self.text.get_text
        mid = self.screen_height / 2
        option = TEXT_SIZES["option"] * s.text_size

        def on_off(flag):
            return "On" if flag else "Off"

        def color(highlighted):
            return palette.highlight if highlighted else palette.font

        lines = (
            TextLine(text("settingsTitle"), 40, TEXT_SIZES["title"] * s.text_size, palette.font),
            TextLine(f"{text('vibration')}: {on_off(s.vibration_enabled)}", mid - 80, option,
                     color(s.vibration_enabled)),
            TextLine(f"{text('darkMode')}: {on_off(s.dark_mode)}", mid - 20, option, color(s.dark_mode)),
            TextLine(f"{text('fontSize')}: {preset_name(TEXT_SIZE_MODIFIERS, s.text_size)}", mid + 40, option,
                     color(s.text_size != TEXT_SIZE_MODIFIERS["normal"])),
            TextLine(f"{text('scaleFactor')}: {preset_name(SCALE_FACTORS, s.scale_factor)}", mid + 100, option,
                     color(s.scale_factor != SCALE_FACTORS["normal"])),
            TextLine(text("back"), self.screen_height - 60, TEXT_SIZES["button"] * s.text_size, palette.font),
        )
        return SettingsSnapshot(palette, lines)
