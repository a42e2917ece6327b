import threading
import time

import pytest

from dino_run.app import Router
from dino_run.data_models import GameMode
from dino_run.game_loop import GameLoop
from dino_run.intents import Jump, TogglePause
from dino_run.interfaces import Renderer
from dino_run.settings import SettingsPage
from dino_run.snapshot import GameSnapshot, SettingsSnapshot


class RecordingRenderer(Renderer):
    def __init__(self, delay: float = 0.0):
        self.frames = []
        self.delay = delay

    def draw(self, snapshot):
        self.frames.append(snapshot)
        if self.delay:
            time.sleep(self.delay)


@pytest.fixture
def router(session):
    router = Router()
    router.attach(session, SettingsPage(session.settings, 480, 480, navigator=router))
    return router


def wait_for(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not condition():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached")
        time.sleep(0.005)


def test_posted_intents_apply_on_the_next_tick(router, session):
    session.start()
    loop = GameLoop(router, RecordingRenderer())
    loop.post(Jump())
    assert not session.player.airborne

    loop.step()
    assert session.player.airborne
    assert session.player.y < session.world.ground_y


def test_render_runs_every_tick_even_when_paused(router, session):
    session.start()
    renderer = RecordingRenderer()
    loop = GameLoop(router, renderer)
    loop.post(TogglePause())
    for _ in range(5):
        loop.step()

    assert session.mode is GameMode.PAUSED
    assert session.score == 0
    assert len(renderer.frames) == 5
    assert all(isinstance(frame, GameSnapshot) for frame in renderer.frames)


def test_renderer_failure_does_not_stop_ticking(router, session):
    class BrokenRenderer(Renderer):
        def draw(self, snapshot):
            raise RuntimeError("surface lost")

    session.start()
    loop = GameLoop(router, BrokenRenderer())
    for _ in range(3):
        loop.step()
    assert session.score == pytest.approx(0.3)


def test_threaded_loop_stops_deterministically(router, session):
    session.start()
    loop = GameLoop(router, RecordingRenderer(), tick_time=0.002)
    loop.start()
    wait_for(lambda: loop.tick_count >= 5)
    loop.stop()

    assert loop.thread is None
    ticks = loop.tick_count
    time.sleep(0.02)
    assert loop.tick_count == ticks


def test_overrunning_ticks_are_skipped_not_queued(router, session):
    session.start()
    loop = GameLoop(router, RecordingRenderer(delay=0.025), tick_time=0.01)
    loop.start()
    wait_for(lambda: loop.tick_count >= 4)
    loop.stop()

    assert loop.skipped_ticks >= loop.tick_count - 1
    # Each tick advanced the world exactly once
    assert session.score == pytest.approx(loop.tick_count * 0.1)


def test_loop_follows_the_router(router, session):
    renderer = RecordingRenderer()
    loop = GameLoop(router, renderer)
    router.open_settings()
    loop.step()
    router.back()
    loop.step()
    assert isinstance(renderer.frames[0], SettingsSnapshot)
    assert isinstance(renderer.frames[1], GameSnapshot)


class QuittingRenderer(Renderer):
    """Stops the loop from inside draw, the way closing the window does."""

    def __init__(self, after: int = 3):
        self.after = after
        self.frames = 0
        self.loop = None

    def draw(self, snapshot):
        self.frames += 1
        if self.frames == self.after:
            self.loop.stop()


def test_stop_from_draw_ends_a_blocking_run(router, session):
    session.start()
    renderer = QuittingRenderer()
    loop = GameLoop(router, renderer, tick_time=0.002)
    renderer.loop = loop

    runner = threading.Thread(target=loop.run, daemon=True)
    runner.start()
    runner.join(timeout=2.0)

    assert not runner.is_alive()
    assert loop.tick_count == 3
    assert not loop.running.is_set()


def test_stop_from_draw_ends_a_background_loop(router, session):
    session.start()
    renderer = QuittingRenderer(after=50)
    loop = GameLoop(router, renderer, tick_time=0.002)
    renderer.loop = loop

    loop.start()
    thread = loop.thread
    thread.join(timeout=2.0)

    assert not thread.is_alive()
    assert loop.tick_count == 50
