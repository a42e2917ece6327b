"""
game_loop.py: Fixed-tick loop driver with a thread-safe intent channel.
"""

import logging
import queue
import threading
import time
from typing import Optional

from .constants import TICK_TIME
from .intents import Intent
from .interfaces import Renderer, guarded

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives whichever page the router currently shows.

    Each tick drains the intents posted since the previous tick, advances
    the page once and hands its snapshot to the renderer. A tick that
    overruns its slot makes the loop skip the missed slots instead of
    running them back to back.
    """

    def __init__(self, router, renderer: Optional[Renderer] = None, tick_time: float = TICK_TIME):
        self.router = router
        self.renderer = renderer or Renderer()
        self.tick_time = tick_time
        self.intents: "queue.Queue[Intent]" = queue.Queue()
        self.tick_count = 0
        self.skipped_ticks = 0

        self.running = threading.Event()
        self.thread: Optional[threading.Thread] = None
        self._tick_lock = threading.RLock()

    def post(self, intent: Intent):
        """Safe to call from any thread; applied at the start of the next tick."""
        self.intents.put(intent)

    def _drain_intents(self):
        while True:
            try:
                intent = self.intents.get_nowait()
            except queue.Empty:
                return
            self.router.current.handle(intent)

    def step(self):
        """Runs exactly one tick."""
        with self._tick_lock:
            self.tick_count += 1

            # 1. Input collected since the last tick
            self._drain_intents()

            # 2. Simulation (pages decide themselves whether they advance)
            page = self.router.current
            page.tick()

            # 3. Render from an immutable snapshot
            guarded(self.renderer.draw, page.snapshot())

    def run(self):
        """Blocks, ticking at the fixed rate until stop() is called."""
        self.running.set()
        self._run_loop()

    def _run_loop(self):
        logger.info("Game loop started. Tick rate: %.0f Hz.", 1 / self.tick_time)
        next_tick = time.monotonic()
        while self.running.is_set():
            self.step()

            next_tick += self.tick_time
            now = time.monotonic()
            if now > next_tick:
                missed = int((now - next_tick) // self.tick_time) + 1
                self.skipped_ticks += missed
                next_tick += missed * self.tick_time
                logger.debug("Tick overran; skipped %d tick(s)", missed)
            sleep_time = next_tick - now
            if sleep_time > 0:
                time.sleep(sleep_time)
        logger.info("Game loop stopped after %d ticks.", self.tick_count)

    def start(self):
        """Runs the loop on a background thread."""
        self.running.set()
        self.thread = threading.Thread(target=self._run_loop, daemon=True)
        self.thread.start()

    def stop(self):
        """Stops ticking; returns once no tick is in flight."""
        self.running.clear()
        if self.thread and self.thread is not threading.current_thread():
            self.thread.join()
        self.thread = None
        # A tick started from another thread finishes before teardown proceeds;
        # called from inside a tick (a renderer handling window close) it returns at once
        with self._tick_lock:
            pass
