"""
app.py: Application lifecycle: load saved data, wire the pages, run, write back.
"""

import logging
import random
from typing import Optional

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, TICK_TIME
from .game_loop import GameLoop
from .interfaces import (
    Haptics, DisplayControl, Navigator, Renderer, TextSource, TextMeasurer, guarded,
)
from .session import GameSession
from .settings import SaveData, SettingsPage
from .storage import SettingsStore

logger = logging.getLogger(__name__)


class Router(Navigator):
    """Two pages: the game and its settings screen."""

    def __init__(self):
        self.session: Optional[GameSession] = None
        self.settings_page: Optional[SettingsPage] = None
        self.current = None

    def attach(self, session: GameSession, settings_page: SettingsPage):
        self.session = session
        self.settings_page = settings_page
        self.current = session

    def open_settings(self):
        self.current = self.settings_page
        logger.info("Opened settings")

    def back(self):
        if self.current is self.settings_page:
            self.current = self.session
            self.session.reload_settings()
            logger.info("Back to game")


class DinoRunApp:
    """
    Owns one game session from creation to teardown.

    Saved data is read once in create() and written once in destroy(), after
    the loop has stopped, so no tick can see a torn-down session.
    """

    def __init__(self, store: Optional[SettingsStore] = None,
                 screen_width: float = SCREEN_WIDTH, screen_height: float = SCREEN_HEIGHT,
                 renderer: Optional[Renderer] = None, haptics: Optional[Haptics] = None,
                 display: Optional[DisplayControl] = None, text: Optional[TextSource] = None,
                 measurer: Optional[TextMeasurer] = None, rng: Optional[random.Random] = None,
                 tick_time: float = TICK_TIME, debug_hitboxes: bool = False):
        self.store = store or SettingsStore()
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.renderer = renderer or Renderer()
        self.haptics = haptics or Haptics()
        self.display = display or DisplayControl()
        self.text = text or TextSource()
        self.measurer = measurer or TextMeasurer()
        self.rng = rng
        self.tick_time = tick_time
        self.debug_hitboxes = debug_hitboxes

        self.data: Optional[SaveData] = None
        self.router = Router()
        self.session: Optional[GameSession] = None
        self.loop: Optional[GameLoop] = None

    def create(self):
        self.data = self.store.load()
        self.session = GameSession(
            settings=self.data.settings,
            high_score=self.data.high_score,
            screen_width=self.screen_width,
            screen_height=self.screen_height,
            rng=self.rng,
            haptics=self.haptics,
            display=self.display,
            navigator=self.router,
            text=self.text,
            measurer=self.measurer,
            debug_hitboxes=self.debug_hitboxes,
        )
        settings_page = SettingsPage(
            self.data.settings, self.screen_width, self.screen_height,
            haptics=self.haptics, navigator=self.router, text=self.text, measurer=self.measurer,
        )
        self.router.attach(self.session, settings_page)
        self.loop = GameLoop(self.router, self.renderer, self.tick_time)
        logger.info("Dino Run initialized")

    def destroy(self):
        if self.loop:
            self.loop.stop()
        guarded(self.display.reset)
        if self.session:
            self.data.high_score = self.session.high_score
            self.store.save(self.data)
        self.store.close()
        logger.info("Dino Run destroyed")

    def run(self):
        """Runs the loop on the calling thread until it is stopped."""
        self.create()
        try:
            self.loop.run()
        finally:
            self.destroy()
