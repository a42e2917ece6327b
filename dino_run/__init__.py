"""
Dino Run: a side-scrolling runner simulation.
Split into shared physics core, session state machine, loop driver and frontend.
"""

from .app import DinoRunApp, Router
from .game_loop import GameLoop
from .geometry import Box, overlaps
from .session import GameSession
from .settings import SaveData, Settings

__all__ = [
    "Box",
    "DinoRunApp",
    "GameLoop",
    "GameSession",
    "Router",
    "SaveData",
    "Settings",
    "overlaps",
]
