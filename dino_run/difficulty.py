"""
difficulty.py: Score accrual and the stepped scroll-speed ramp.
"""

import logging
import math
from dataclasses import dataclass

from .constants import SCORE_PER_TICK, SPEED_INCREMENT_INTERVAL

logger = logging.getLogger(__name__)


@dataclass
class DifficultyController:
    """
    Speed rises by one increment each time the score enters a new
    `interval`-wide band. The band test uses floor division on both sides,
    so landing on a boundary twice never steps twice.
    """
    base_speed: float
    increment: float
    interval: float = SPEED_INCREMENT_INTERVAL
    score: float = 0.0
    speed: float = 0.0
    last_increase_score: float = 0.0

    def __post_init__(self):
        if not self.speed:
            self.speed = self.base_speed

    def crossed_threshold(self) -> bool:
        return (math.floor(self.score / self.interval)
                > math.floor(self.last_increase_score / self.interval))

    def step(self) -> bool:
        """Advances one playing tick. Returns True when the speed stepped up."""
        self.score += SCORE_PER_TICK
        if self.crossed_threshold():
            self.speed += self.increment
            self.last_increase_score = self.score
            logger.debug("Speed up to %.2f at score %.1f", self.speed, self.score)
            return True
        return False
