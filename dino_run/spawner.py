"""
spawner.py: Obstacle and cloud generation policy.
"""

import random
from typing import List, Optional

from .constants import (
    OBSTACLE_SPAWN_RATE, CLOUD_SPAWN_RATE, MIN_GAP, GAP_JITTER, GROUND_CHANCE,
    FLYER_MIN_SCORE, FLYER_HEIGHTS, SPRITE_SINK, CLOUD_SIZE, CLOUD_TOP, CLOUD_BAND,
)
from .data_models import (
    World, Obstacle, Cloud, ObstacleKind, ObstacleVariant, OBSTACLE_CATALOG,
)


class Spawner:
    """
    Decides once per tick whether a new obstacle or cloud enters at the
    right screen edge. All randomness goes through `rng` so a seeded
    generator replays the same course.
    """

    def __init__(self, world: World, rng: Optional[random.Random] = None):
        self.world = world
        self.rng = rng or random.Random()

    def obstacle_eligible(self, obstacles: List[Obstacle]) -> bool:
        if not obstacles:
            return True
        min_distance = self.world.scaled(MIN_GAP) + self.rng.random() * self.world.scaled(GAP_JITTER)
        return self.world.screen_width - obstacles[-1].x > min_distance

    def choose_kind(self, score: float) -> ObstacleKind:
        if self.rng.random() < GROUND_CHANCE or score < FLYER_MIN_SCORE:
            return self.rng.choice((ObstacleKind.HIGH_GROUND, ObstacleKind.LOW_GROUND))
        return ObstacleKind.FLYING

    def make_obstacle(self, kind: ObstacleKind) -> Obstacle:
        variant: ObstacleVariant = self.rng.choice(OBSTACLE_CATALOG[kind])
        width = self.world.scaled(variant.width)
        height = self.world.scaled(variant.height)

        if kind.grounded:
            y = self.world.ground_y - height + self.world.scaled(SPRITE_SINK)
        else:
            y = self.world.ground_y - self.world.scaled(self.rng.choice(FLYER_HEIGHTS))

        return Obstacle(variant=variant, x=float(self.world.screen_width), y=y,
                        width=width, height=height)

    def make_cloud(self) -> Cloud:
        y = self.rng.random() * (self.world.screen_height * CLOUD_BAND) + self.world.scaled(CLOUD_TOP)
        return Cloud(
            x=float(self.world.screen_width),
            y=y,
            width=self.world.scaled(CLOUD_SIZE[0]),
            height=self.world.scaled(CLOUD_SIZE[1]),
        )

    def step(self, obstacles: List[Obstacle], clouds: List[Cloud], score: float):
        """Appends at most one obstacle and one cloud (mutates both lists)."""
        # 1. Obstacles: gap first, then the per-tick roll
        if self.obstacle_eligible(obstacles) and self.rng.random() < OBSTACLE_SPAWN_RATE:
            obstacles.append(self.make_obstacle(self.choose_kind(score)))

        # 2. Clouds roll independently
        if self.rng.random() < CLOUD_SPAWN_RATE:
            clouds.append(self.make_cloud())
