import pytest

from dino_run.settings import SaveData, Settings
from dino_run.storage import (
    SettingsStore, KEY_HIGH_SCORE, KEY_SCALE_FACTOR, KEY_TEXT_SIZE, KEY_DARK_MODE, KEY_VIBRATION,
)


@pytest.fixture
def db_file(tmp_path):
    return str(tmp_path / "dino.db")


def test_fresh_database_yields_defaults(db_file):
    store = SettingsStore(db_file)
    data = store.load()
    assert data == SaveData()
    assert data.settings.scale_factor == 0.7
    assert data.settings.vibration_enabled is True
    store.close()


def test_saved_data_survives_a_restart(db_file):
    store = SettingsStore(db_file)
    saved = SaveData(high_score=321.5, settings=Settings(
        scale_factor=0.9, text_size=0.8, dark_mode=True, vibration_enabled=False))
    assert store.save(saved)
    store.close()

    reopened = SettingsStore(db_file)
    assert reopened.load() == saved
    reopened.close()


def test_invalid_fields_fall_back_individually(db_file):
    store = SettingsStore(db_file)
    store.put(KEY_HIGH_SCORE, -5)
    store.put(KEY_SCALE_FACTOR, 3.0)
    store.put(KEY_TEXT_SIZE, 1.2)
    store.put(KEY_DARK_MODE, "yes")
    store.put(KEY_VIBRATION, False)
    store.conn.commit()

    data = store.load()
    assert data.high_score == 0.0
    assert data.settings == Settings(text_size=1.2, vibration_enabled=False)
    store.close()


def test_corrupt_value_falls_back(db_file):
    store = SettingsStore(db_file)
    store.connect().execute(
        "INSERT INTO KeyValue (key, value) VALUES (?, ?)", (KEY_HIGH_SCORE, "{not json"))
    assert store.load().high_score == 0.0
    store.close()


def test_unreachable_database_is_not_fatal(tmp_path):
    store = SettingsStore(str(tmp_path / "missing" / "dino.db"))
    assert store.load() == SaveData()
    assert store.save(SaveData(high_score=10)) is False
    store.close()
