import random

from dino_run.app import DinoRunApp
from dino_run.data_models import GameMode
from dino_run.intents import PointerUpAt
from dino_run.settings import SaveData, Settings, SettingsPage
from dino_run.storage import SettingsStore


def make_app(tmp_path, **kwargs):
    return DinoRunApp(store=SettingsStore(str(tmp_path / "dino.db")), rng=random.Random(0), **kwargs)


def test_create_loads_saved_data(tmp_path):
    store = SettingsStore(str(tmp_path / "dino.db"))
    store.save(SaveData(high_score=77.0, settings=Settings(dark_mode=True)))
    store.close()

    app = make_app(tmp_path)
    app.create()
    assert app.session.high_score == 77.0
    assert app.session.settings.dark_mode
    assert app.router.current is app.session
    app.destroy()


def test_destroy_writes_back_the_high_score(tmp_path, display):
    app = make_app(tmp_path, display=display)
    app.create()
    app.session.start()
    app.session.difficulty.score = 64.0
    app.session.game_over()
    app.destroy()

    assert ("reset",) in display.calls
    assert SettingsStore(str(tmp_path / "dino.db")).load().high_score == 64.0


def test_settings_round_trip_through_the_router(tmp_path):
    app = make_app(tmp_path)
    app.create()
    menu = app.session.layout.buttons_for(GameMode.MENU)
    settings_box = [b.box for b in menu if b.action == "settings"][0]
    app.loop.post(PointerUpAt(settings_box.x + 5, settings_box.y + 5))
    app.loop.step()
    assert isinstance(app.router.current, SettingsPage)

    page = app.router.current
    scale_box = dict(page.row_regions())["scale_factor"]
    app.loop.post(PointerUpAt(scale_box.x + 5, scale_box.y + 5))
    back_box = dict(page.row_regions())["back"]
    app.loop.post(PointerUpAt(back_box.x + 5, back_box.y + 5))
    app.loop.step()

    assert app.router.current is app.session
    assert app.session.world.scale == 0.9
    app.destroy()
    assert SettingsStore(str(tmp_path / "dino.db")).load().settings.scale_factor == 0.9
