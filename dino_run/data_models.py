"""
data_models.py: Data structures for the simulation state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_OFFSET, PLAYER_X, STAND_SIZE,
    GRAVITY, JUMP_FORCE, BASE_SPEED, SPEED_INCREMENT, TRACK_WIDTH,
)


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


class Pose(Enum):
    STANDING = "standing"
    AIRBORNE = "airborne"
    DUCKING = "ducking"
    DEAD = "dead"


class ObstacleKind(Enum):
    LOW_GROUND = "low_ground"
    HIGH_GROUND = "high_ground"
    FLYING = "flying"

    @property
    def grounded(self) -> bool:
        return self is not ObstacleKind.FLYING


@dataclass(frozen=True)
class ObstacleVariant:
    """One entry of the size catalog, in base units."""
    kind: ObstacleKind
    sprite: str
    width: int
    height: int


OBSTACLE_CATALOG: Dict[ObstacleKind, Tuple[ObstacleVariant, ...]] = {
    ObstacleKind.HIGH_GROUND: (
        ObstacleVariant(ObstacleKind.HIGH_GROUND, "LargeCactus1", 48, 95),
        ObstacleVariant(ObstacleKind.HIGH_GROUND, "LargeCactus2", 99, 95),
        ObstacleVariant(ObstacleKind.HIGH_GROUND, "LargeCactus3", 102, 95),
    ),
    ObstacleKind.LOW_GROUND: (
        ObstacleVariant(ObstacleKind.LOW_GROUND, "SmallCactus1", 40, 71),
        ObstacleVariant(ObstacleKind.LOW_GROUND, "SmallCactus2", 68, 71),
        ObstacleVariant(ObstacleKind.LOW_GROUND, "SmallCactus3", 105, 71),
    ),
    ObstacleKind.FLYING: (
        ObstacleVariant(ObstacleKind.FLYING, "Bird", 93, 62),
    ),
}


@dataclass(frozen=True)
class World:
    """Screen metrics and physics constants resolved for one scale factor."""
    screen_width: float = SCREEN_WIDTH
    screen_height: float = SCREEN_HEIGHT
    scale: float = 0.7

    def scaled(self, value: float) -> float:
        return value * self.scale

    @property
    def ground_y(self) -> float:
        return self.screen_height - self.scaled(GROUND_OFFSET)

    @property
    def player_x(self) -> float:
        return self.scaled(PLAYER_X)

    @property
    def gravity(self) -> float:
        return self.scaled(GRAVITY)

    @property
    def jump_force(self) -> float:
        return self.scaled(JUMP_FORCE)

    @property
    def base_speed(self) -> float:
        return self.scaled(BASE_SPEED)

    @property
    def speed_increment(self) -> float:
        return self.scaled(SPEED_INCREMENT)

    @property
    def track_width(self) -> float:
        return self.scaled(TRACK_WIDTH)


@dataclass
class Player:
    """The runner's body. `y` is the foot line, never below the ground."""
    x: float
    y: float
    width: float
    height: float
    velocity_y: float = 0.0
    airborne: bool = False
    ducking: bool = False
    dead: bool = False
    anim_phase: float = 0.0

    @classmethod
    def spawn(cls, world: World) -> "Player":
        return cls(
            x=world.player_x,
            y=world.ground_y,
            width=world.scaled(STAND_SIZE[0]),
            height=world.scaled(STAND_SIZE[1]),
        )

    @property
    def pose(self) -> Pose:
        if self.dead:
            return Pose.DEAD
        if self.airborne:
            return Pose.AIRBORNE
        if self.ducking:
            return Pose.DUCKING
        return Pose.STANDING

    @property
    def frame(self) -> int:
        return int(self.anim_phase) % 2


@dataclass
class Obstacle:
    variant: ObstacleVariant
    x: float
    y: float
    width: float
    height: float

    @property
    def kind(self) -> ObstacleKind:
        return self.variant.kind

    @property
    def off_screen(self) -> bool:
        return self.x + self.width < 0


@dataclass
class Cloud:
    """Decoration only; never collides."""
    x: float
    y: float
    width: float
    height: float

    @property
    def off_screen(self) -> bool:
        return self.x + self.width < 0
