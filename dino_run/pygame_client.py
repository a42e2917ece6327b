"""
pygame_client.py

Desktop frontend: decodes keyboard/mouse events into intents and draws the
snapshots with plain pygame shapes.
"""

import logging
from typing import Callable, Dict, Optional, Tuple

import pygame

from .geometry import Box
from .intents import (
    Intent, Jump, Select, DuckStart, DuckEnd, TogglePause, Back, SwipeRight, PointerUpAt,
)
from .interfaces import DisplayControl, Haptics, HapticStrength, Renderer, TextMeasurer
from .snapshot import GameSnapshot, SettingsSnapshot, Sprite, TextLine

logger = logging.getLogger(__name__)

KEY_DOWN_INTENTS: Dict[int, Callable[[], Intent]] = {
    pygame.K_SPACE: Jump,
    pygame.K_UP: Jump,
    pygame.K_RETURN: Select,
    pygame.K_DOWN: DuckStart,
    pygame.K_ESCAPE: TogglePause,
    pygame.K_p: TogglePause,
    pygame.K_BACKSPACE: Back,
    pygame.K_RIGHT: SwipeRight,
}
KEY_UP_INTENTS: Dict[int, Callable[[], Intent]] = {
    pygame.K_DOWN: DuckEnd,
}

# Placeholder colors per sprite family
SPRITE_COLORS = {
    "Dino": (83, 83, 83),
    "Cactus": (46, 125, 50),
    "Bird": (120, 85, 72),
    "Cloud": (210, 210, 210),
    "Track": (140, 140, 140),
}


def rgb(color: int) -> Tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def decode_event(event) -> Tuple[Intent, ...]:
    """Translates one pygame event into zero or more intents."""
    if event.type == pygame.KEYDOWN and event.key in KEY_DOWN_INTENTS:
        return (KEY_DOWN_INTENTS[event.key](),)
    if event.type == pygame.KEYUP and event.key in KEY_UP_INTENTS:
        return (KEY_UP_INTENTS[event.key](),)
    # A held press ducks; the release is the tap
    if event.type == pygame.MOUSEBUTTONDOWN:
        return (DuckStart(),)
    if event.type == pygame.MOUSEBUTTONUP:
        return (PointerUpAt(*event.pos), DuckEnd())
    return ()


class PygameDisplay(DisplayControl):
    def keep_awake(self, seconds: int):
        pygame.display.set_allow_screensaver(False)

    def reset(self):
        pygame.display.set_allow_screensaver(True)


class LoggingHaptics(Haptics):
    """Desktops have no vibration motor; pulses are only logged."""

    def pulse(self, strength: HapticStrength, duration_ms: int):
        logger.debug("Haptic pulse: %s %d ms", strength.value, duration_ms)


class PygameFrontend(Renderer, TextMeasurer):
    def __init__(self, screen_width: int, screen_height: int):
        pygame.init()
        self.screen = pygame.display.set_mode((screen_width, screen_height))
        pygame.display.set_caption("Dino Run")
        self.fonts: Dict[int, pygame.font.Font] = {}
        self.post: Optional[Callable[[Intent], None]] = None
        self.on_quit: Optional[Callable[[], None]] = None

    def attach(self, loop):
        self.post = loop.post
        self.on_quit = loop.stop

    def font(self, size: float) -> pygame.font.Font:
        size = int(size)
        if size not in self.fonts:
            self.fonts[size] = pygame.font.Font(None, size)
        return self.fonts[size]

    def measure(self, text: str, size: float) -> Tuple[float, float]:
        return self.font(size).size(text)

    def pump_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                if self.on_quit:
                    self.on_quit()
                continue
            for intent in decode_event(event):
                if self.post:
                    self.post(intent)

    # -------- Drawing --------

    def draw(self, snapshot):
        self.pump_events()
        if isinstance(snapshot, GameSnapshot):
            self._draw_game(snapshot)
        elif isinstance(snapshot, SettingsSnapshot):
            self.screen.fill(rgb(snapshot.palette.background))
            for line in snapshot.lines:
                self._draw_text(line)
        pygame.display.flip()

    def _rect(self, box: Box) -> pygame.Rect:
        return pygame.Rect(int(box.x), int(box.y), int(box.width), int(box.height))

    def _draw_sprite(self, sprite: Sprite):
        color = next((c for family, c in SPRITE_COLORS.items() if family in sprite.image), (0, 0, 0))
        pygame.draw.rect(self.screen, color, self._rect(sprite.box))

    def _draw_text(self, line: TextLine):
        surface = self.font(line.size).render(line.text, True, rgb(line.color))
        self.screen.blit(surface, ((self.screen.get_width() - surface.get_width()) // 2, int(line.y)))

    def _draw_game(self, snap: GameSnapshot):
        palette = snap.palette
        self.screen.fill(rgb(palette.background))

        for sprite in snap.clouds + snap.ground_tiles:
            self._draw_sprite(sprite)
        self._draw_sprite(snap.player)
        for sprite in snap.obstacles:
            self._draw_sprite(sprite)
        for line in snap.hud:
            self._draw_text(line)

        if snap.overlay == "pause":
            veil = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            veil.fill(rgb(palette.background) + (150,))
            self.screen.blit(veil, (0, 0))
        for line in snap.overlay_text:
            self._draw_text(line)

        for button in snap.buttons:
            fill = palette.font if button.action == "settings" else palette.highlight
            pygame.draw.rect(self.screen, rgb(fill), self._rect(button.box), border_radius=10)
            label = self.font(button.size).render(button.label, True, rgb(palette.background))
            self.screen.blit(label, label.get_rect(center=self._rect(button.box).center))

        for box in snap.hitboxes:
            pygame.draw.rect(self.screen, (255, 0, 0), self._rect(box), 1)

