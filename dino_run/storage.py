"""
storage.py: SQLite key-value persistence for the high score and settings.
"""

import json
import logging
import sqlite3
from typing import Any, Callable, Optional

from .constants import DB_FILE, TEXT_SIZE_MODIFIERS, SCALE_FACTORS
from .settings import SaveData, Settings

logger = logging.getLogger(__name__)

KEY_HIGH_SCORE = "dino_high_score"
KEY_DARK_MODE = "dino_is_dark_mode"
KEY_TEXT_SIZE = "dino_text_size_modifier"
KEY_SCALE_FACTOR = "dino_scale_factor"
KEY_VIBRATION = "dino_vibration_enabled"


def _non_negative_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0


def _one_of(presets: dict) -> Callable[[Any], bool]:
    return lambda value: _non_negative_number(value) and value in presets.values()


def _boolean(value: Any) -> bool:
    return isinstance(value, bool)


class SettingsStore:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE):
        self.db_file = db_file
        self.conn: Optional[sqlite3.Connection] = None

    def connect(self) -> sqlite3.Connection:
        if self.conn is None:
            # Saving happens on teardown, possibly from another thread than loading
            self.conn = sqlite3.connect(self.db_file, check_same_thread=False)
            self.setup()
        return self.conn

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS KeyValue (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def get(self, key: str, default: Any, valid: Callable[[Any], bool]) -> Any:
        """Fetches one value, or `default` if it is missing or fails `valid`."""
        row = self.connect().execute("SELECT value FROM KeyValue WHERE key=?", (key,)).fetchone()
        if row is None:
            logger.debug("No saved value for %s, using %r", key, default)
            return default
        try:
            value = json.loads(row[0])
        except ValueError:
            value = None
        if not valid(value):
            logger.debug("Ignoring invalid saved value for %s: %r", key, row[0])
            return default
        return value

    def put(self, key: str, value: Any):
        self.connect().execute(
            "INSERT OR REPLACE INTO KeyValue (key, value) VALUES (?, ?)", (key, json.dumps(value)))

    def load(self) -> SaveData:
        """Never fails: every missing or broken field falls back to its default."""
        defaults = Settings()
        try:
            data = SaveData(
                high_score=float(self.get(KEY_HIGH_SCORE, 0.0, _non_negative_number)),
                settings=Settings(
                    scale_factor=self.get(KEY_SCALE_FACTOR, defaults.scale_factor, _one_of(SCALE_FACTORS)),
                    text_size=self.get(KEY_TEXT_SIZE, defaults.text_size, _one_of(TEXT_SIZE_MODIFIERS)),
                    dark_mode=self.get(KEY_DARK_MODE, defaults.dark_mode, _boolean),
                    vibration_enabled=self.get(KEY_VIBRATION, defaults.vibration_enabled, _boolean),
                ),
            )
        except sqlite3.Error as e:
            logger.debug("No saved data available (%s); using defaults", e)
            return SaveData()
        logger.info("Loaded saved data: high score %d", data.high_score)
        return data

    def save(self, data: SaveData) -> bool:
        """Best effort, at most once per call. Returns False if nothing was written."""
        s = data.settings
        try:
            self.put(KEY_HIGH_SCORE, data.high_score)
            self.put(KEY_DARK_MODE, bool(s.dark_mode))
            self.put(KEY_TEXT_SIZE, s.text_size)
            self.put(KEY_SCALE_FACTOR, s.scale_factor)
            self.put(KEY_VIBRATION, bool(s.vibration_enabled))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Failed to save high score and settings: %s", e)
            return False
        logger.info("Saved high score %d and settings", data.high_score)
        return True
