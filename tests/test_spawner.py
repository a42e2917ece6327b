import random

import pytest

from conftest import FixedRandom
from dino_run.data_models import ObstacleKind, OBSTACLE_CATALOG
from dino_run.spawner import Spawner


def test_first_obstacle_is_always_eligible(world):
    assert Spawner(world, random.Random(3)).obstacle_eligible([])


def test_gap_blocks_spawn_right_behind_the_last_obstacle(world):
    spawner = Spawner(world, FixedRandom(0.0))
    last = spawner.make_obstacle(ObstacleKind.LOW_GROUND)
    assert not spawner.obstacle_eligible([last])

    # Minimum gap is 100 plus up to 50 of jitter
    last.x = world.screen_width - 151
    assert spawner.obstacle_eligible([last])


def test_flyers_locked_below_early_score(world):
    spawner = Spawner(world, random.Random(7))
    kinds = {spawner.choose_kind(score=499.9) for _ in range(500)}
    assert ObstacleKind.FLYING not in kinds
    assert kinds == {ObstacleKind.LOW_GROUND, ObstacleKind.HIGH_GROUND}


def test_ground_dominates_after_flyers_unlock(world):
    spawner = Spawner(world, random.Random(11))
    kinds = [spawner.choose_kind(score=800) for _ in range(4000)]
    flying_share = kinds.count(ObstacleKind.FLYING) / len(kinds)
    assert 0.25 < flying_share < 0.35


def test_ground_obstacle_sits_on_the_ground_line(world):
    spawner = Spawner(world, random.Random(5))
    for _ in range(50):
        obstacle = spawner.make_obstacle(ObstacleKind.HIGH_GROUND)
        assert obstacle.x == world.screen_width
        assert obstacle.variant in OBSTACLE_CATALOG[ObstacleKind.HIGH_GROUND]
        assert (obstacle.width, obstacle.height) == (obstacle.variant.width, 95)
        assert obstacle.y == world.ground_y - 95 + 3


def test_flyer_heights_come_from_the_catalog(world):
    spawner = Spawner(world, random.Random(9))
    heights = {world.ground_y - spawner.make_obstacle(ObstacleKind.FLYING).y for _ in range(200)}
    assert heights == {50, 75, 100, 125}


def test_sizes_follow_the_scale_factor():
    from dino_run.data_models import World
    small = World(480, 480, 0.5)
    obstacle = Spawner(small, random.Random(1)).make_obstacle(ObstacleKind.LOW_GROUND)
    assert obstacle.height == pytest.approx(35.5)


def test_step_spawns_when_rolls_succeed(world):
    spawner = Spawner(world, FixedRandom(0.0))
    obstacles, clouds = [], []
    spawner.step(obstacles, clouds, score=0)

    assert len(obstacles) == 1 and len(clouds) == 1
    assert obstacles[0].kind.grounded
    assert clouds[0].x == world.screen_width
    assert clouds[0].y == 50


def test_step_spawns_nothing_when_rolls_fail(world):
    spawner = Spawner(world, FixedRandom(0.5))
    obstacles, clouds = [], []
    for _ in range(100):
        spawner.step(obstacles, clouds, score=1000)
    assert obstacles == [] and clouds == []


def test_second_obstacle_waits_for_the_gap(world):
    spawner = Spawner(world, FixedRandom(0.0))
    obstacles, clouds = [], []
    spawner.step(obstacles, clouds, score=0)
    spawner.step(obstacles, clouds, score=0)
    assert len(obstacles) == 1
    assert len(clouds) == 2


def test_clouds_stay_in_the_top_band(world):
    spawner = Spawner(world, random.Random(2))
    for _ in range(100):
        cloud = spawner.make_cloud()
        assert 50 <= cloud.y < 50 + 0.3 * world.screen_height
        assert (cloud.width, cloud.height) == (84, 101)
