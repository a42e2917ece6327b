"""
physics_core.py: Deterministic per-tick kinematics, pose rules and collision logic.
"""

from typing import List

from .constants import (
    DUCK_DELAY, STAND_SIZE, DUCK_SIZE, SPRITE_SINK, RUN_ANIM_STEP, ANIM_PERIOD,
    PLAYER_INSET_X, PLAYER_INSET_W, PLAYER_INSET_H, GROUND_INSET_X, FLYER_INSET,
    CLOUD_SPEED_RATIO,
)
from .data_models import Player, Obstacle, Cloud, World
from .geometry import Box, overlaps


class PhysicsCore:
    """
    Physics for one session. All constants are resolved through the World
    so a scale change only takes effect on a fresh session.
    """

    def __init__(self, world: World):
        self.world = world

    # -------- Player --------

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float, bool]:
        """
        Integrates one tick. Returns the new y, the new velocity and whether
        the body is resting on the ground line.
        """
        velocity += self.world.gravity
        y += velocity
        if y >= self.world.ground_y:
            return self.world.ground_y, 0.0, True
        return y, velocity, False

    def step_player(self, player: Player):
        """Single-tick update of a living player (mutates player)."""
        if player.dead:
            return

        player.y, player.velocity_y, grounded = self.apply_gravity_and_movement(
            player.y, player.velocity_y)
        if grounded:
            player.airborne = False

        # Only running and ducking animate; the jump pose is a single frame
        if not player.airborne:
            player.anim_phase = (player.anim_phase + RUN_ANIM_STEP) % ANIM_PERIOD

    def jump(self, player: Player) -> bool:
        """Launches the player if standing. Returns False when rejected."""
        if player.airborne or player.ducking or player.dead:
            return False
        player.velocity_y = self.world.jump_force
        player.airborne = True
        return True

    def update_duck(self, player: Player, held: bool, held_since: float, now: float):
        """Enters or leaves the ducking pose based on the duck hold."""
        if player.airborne or player.dead:
            return

        if held:
            if now - held_since >= DUCK_DELAY and not player.ducking:
                player.ducking = True
                player.width = self.world.scaled(DUCK_SIZE[0])
                player.height = self.world.scaled(DUCK_SIZE[1])
        elif player.ducking:
            self.stand_up(player)

    def stand_up(self, player: Player):
        player.ducking = False
        player.width = self.world.scaled(STAND_SIZE[0])
        player.height = self.world.scaled(STAND_SIZE[1])

    def kill(self, player: Player):
        if player.ducking:
            self.stand_up(player)
        player.dead = True
        player.airborne = False
        player.velocity_y = 0.0

    def respawn(self, player: Player):
        fresh = Player.spawn(self.world)
        player.x, player.y = fresh.x, fresh.y
        player.width, player.height = fresh.width, fresh.height
        player.velocity_y = 0.0
        player.airborne = player.ducking = player.dead = False
        player.anim_phase = 0.0

    def visual_box(self, player: Player) -> Box:
        sink = self.world.scaled(SPRITE_SINK)
        return Box(player.x, player.y - player.height + sink, player.width, player.height)

    def player_hitbox(self, player: Player) -> Box:
        """Visual box shrunk to forgive near misses."""
        visual = self.visual_box(player)
        s = self.world.scaled
        return Box(
            visual.x + s(PLAYER_INSET_X),
            visual.y,
            visual.width - s(PLAYER_INSET_W),
            visual.height - s(PLAYER_INSET_H),
        )

    # -------- Obstacles & Clouds --------

    def obstacle_hitbox(self, obstacle: Obstacle) -> Box:
        s = self.world.scaled
        if obstacle.kind.grounded:
            return Box(
                obstacle.x + s(GROUND_INSET_X),
                obstacle.y,
                obstacle.width - 2 * s(GROUND_INSET_X),
                obstacle.height,
            )
        inset = s(FLYER_INSET)
        return Box(
            obstacle.x + inset,
            obstacle.y + inset,
            obstacle.width - 2 * inset,
            obstacle.height - 2 * inset,
        )

    def step_obstacles(self, obstacles: List[Obstacle], speed: float) -> List[Obstacle]:
        """Scrolls obstacles left and drops the ones fully off screen."""
        for obstacle in obstacles:
            obstacle.x -= speed
        return [o for o in obstacles if not o.off_screen]

    def step_clouds(self, clouds: List[Cloud], speed: float) -> List[Cloud]:
        delta_x = speed * CLOUD_SPEED_RATIO
        for cloud in clouds:
            cloud.x -= delta_x
        return [c for c in clouds if not c.off_screen]

    def check_collision(self, player: Player, obstacles: List[Obstacle]) -> bool:
        """True as soon as any obstacle hitbox overlaps the player hitbox."""
        player_box = self.player_hitbox(player)
        return any(overlaps(player_box, self.obstacle_hitbox(o)) for o in obstacles)
