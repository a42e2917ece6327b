"""
session.py: The game-mode state machine and the per-tick update order.

A GameSession owns every piece of mutable game state. Input callbacks and the
loop driver hold a reference to the session; nothing lives at module scope.
"""

import logging
import random
import time
from typing import Callable, List, Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FLYER_ANIM_STEP, ANIM_PERIOD,
    KEEP_AWAKE_INTERVAL_TICKS, KEEP_AWAKE_SECONDS, PULSE_SHORT_MS, PULSE_BRIEF_MS,
)
from .data_models import GameMode, Player, Obstacle, Cloud, World
from .difficulty import DifficultyController
from .intents import (
    Intent, Jump, Select, DuckStart, DuckEnd, PointerUpAt, PAUSE_TOGGLES,
)
from .interfaces import (
    Haptics, HapticStrength, DisplayControl, Navigator, TextSource, TextMeasurer, guarded,
)
from .layout import ButtonLayout
from .physics_core import PhysicsCore
from .settings import Settings
from .snapshot import GameSnapshot, build_game_snapshot
from .spawner import Spawner

logger = logging.getLogger(__name__)


class GameSession:
    """
    Menu -> playing <-> paused, playing -> game over -> playing.

    Intents may arrive at any time between ticks; the ones that make no
    sense for the current mode are ignored.
    """

    def __init__(self, settings: Optional[Settings] = None, high_score: float = 0.0,
                 screen_width: float = SCREEN_WIDTH, screen_height: float = SCREEN_HEIGHT,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic,
                 haptics: Optional[Haptics] = None,
                 display: Optional[DisplayControl] = None,
                 navigator: Optional[Navigator] = None,
                 text: Optional[TextSource] = None,
                 measurer: Optional[TextMeasurer] = None,
                 debug_hitboxes: bool = False):
        self.settings = settings or Settings()
        self.high_score = max(0.0, float(high_score))
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.rng = rng or random.Random()
        self.clock = clock
        self.haptics = haptics or Haptics()
        self.display = display or DisplayControl()
        self.navigator = navigator or Navigator()
        self.text = text or TextSource()
        self.measurer = measurer or TextMeasurer()
        self.debug_hitboxes = debug_hitboxes

        self.mode = GameMode.MENU
        self.new_record = False
        self.apply_settings()
        self._reset_entities()

    # -------- Setup --------

    def apply_settings(self):
        """Rebuilds the scale-dependent subsystems from the current settings."""
        self.world = World(self.screen_width, self.screen_height, self.settings.scale_factor)
        self.physics = PhysicsCore(self.world)
        self.spawner = Spawner(self.world, self.rng)
        self.difficulty = DifficultyController(self.world.base_speed, self.world.speed_increment)

    def reload_settings(self):
        """Picks up edited settings. A game in progress keeps its scale until restart."""
        if self.mode is GameMode.MENU:
            self.apply_settings()
            self._reset_entities()

    def _reset_entities(self):
        self.player = Player.spawn(self.world)
        self.obstacles: List[Obstacle] = []
        self.clouds: List[Cloud] = []
        self.ground_offset = 0.0
        self.flyer_phase = 0.0
        self.duck_held = False
        self.duck_started_at = 0.0
        self.awake_ticks = 0

    @property
    def layout(self) -> ButtonLayout:
        return ButtonLayout(self.screen_width, self.screen_height, self.text,
                            self.measurer, self.settings.text_size)

    @property
    def score(self) -> float:
        return self.difficulty.score

    @property
    def speed(self) -> float:
        return self.difficulty.speed

    # -------- Haptics / Display --------

    def _pulse(self, strength: HapticStrength, duration_ms: int):
        if self.settings.vibration_enabled:
            guarded(self.haptics.pulse, strength, duration_ms)

    def _keep_awake(self):
        self.awake_ticks = 0
        guarded(self.display.keep_awake, KEEP_AWAKE_SECONDS)

    # -------- Mode transitions --------

    def start(self):
        self.apply_settings()
        self._reset_entities()
        self.new_record = False
        self.mode = GameMode.PLAYING
        self._keep_awake()
        logger.info("Game started")

    def restart(self):
        self.start()

    def pause(self):
        if self.mode is GameMode.PLAYING:
            self.mode = GameMode.PAUSED
            logger.info("Game paused")

    def resume(self):
        if self.mode is GameMode.PAUSED:
            self.mode = GameMode.PLAYING
            logger.info("Game resumed")

    def toggle_pause(self):
        if self.mode is GameMode.PLAYING:
            self.pause()
        elif self.mode is GameMode.PAUSED:
            self.resume()

    def jump(self):
        if self.mode is GameMode.PLAYING and self.physics.jump(self.player):
            self._pulse(HapticStrength.GENTLE, PULSE_SHORT_MS)

    def game_over(self):
        self.mode = GameMode.GAME_OVER
        self.physics.kill(self.player)
        self.duck_held = False

        if self.score > self.high_score:
            self.high_score = self.score
            self.new_record = True
            self._pulse(HapticStrength.STRONG, PULSE_SHORT_MS)
        else:
            self._pulse(HapticStrength.GENTLE, PULSE_BRIEF_MS)

        guarded(self.display.reset)
        logger.info("Game over! Score: %d, High score: %d", self.score, self.high_score)

    # -------- Input --------

    def handle(self, intent: Intent):
        if isinstance(intent, PAUSE_TOGGLES):
            self.toggle_pause()
        elif isinstance(intent, (Jump, Select)):
            self.jump()
        elif isinstance(intent, DuckStart):
            if self.mode is GameMode.PLAYING:
                self.duck_held = True
                self.duck_started_at = self.clock()
        elif isinstance(intent, DuckEnd):
            self.duck_held = False
            if self.mode is GameMode.PLAYING and self.player.ducking:
                self.physics.stand_up(self.player)
        elif isinstance(intent, PointerUpAt):
            self._handle_pointer(intent.x, intent.y)

    def _handle_pointer(self, x: float, y: float):
        if self.mode is GameMode.PLAYING:
            self.jump()
            return

        action = self.layout.hit(self.mode, x, y)
        if action is None:
            return

        self._pulse(HapticStrength.GENTLE, PULSE_SHORT_MS)
        if action == "start":
            self.start()
        elif action == "settings":
            guarded(self.navigator.open_settings)
        elif action == "restart":
            self.restart()
        elif action == "resume":
            self.resume()

    # -------- Simulation --------

    def update(self):
        """
        One simulation step, in fixed order: player, scrolling entities,
        difficulty, spawner, collision.
        """
        # 1. Player
        self.physics.update_duck(self.player, self.duck_held, self.duck_started_at, self.clock())
        self.physics.step_player(self.player)
        if not self.player.dead:
            self.flyer_phase = (self.flyer_phase + FLYER_ANIM_STEP) % ANIM_PERIOD

        # 2. Obstacles, clouds and the ground track
        speed = self.difficulty.speed
        self.obstacles = self.physics.step_obstacles(self.obstacles, speed)
        self.clouds = self.physics.step_clouds(self.clouds, speed)
        self.ground_offset = (self.ground_offset + speed) % self.world.track_width

        # 3. Score and speed
        self.difficulty.step()

        # 4. New entities
        self.spawner.step(self.obstacles, self.clouds, self.score)

        # 5. Collision
        if self.physics.check_collision(self.player, self.obstacles):
            self.game_over()

    def tick(self):
        """Called once per loop tick in every mode; only playing advances the world."""
        if self.mode is GameMode.PLAYING:
            self.update()

        if self.mode in (GameMode.PLAYING, GameMode.PAUSED):
            self.awake_ticks += 1
            if self.awake_ticks >= KEEP_AWAKE_INTERVAL_TICKS:
                self._keep_awake()

    def snapshot(self) -> GameSnapshot:
        return build_game_snapshot(self)
