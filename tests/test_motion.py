import math

import numpy as np
import pytest

from evoforage.simulation.geometry import TAU
from evoforage.simulation.motion import forage, move_animal
from evoforage.simulation.prng import Prng


def test_wraps_past_the_right_edge(make_world, motion_config):
    world = make_world([(0.999, 0.5, 0.0, 0.01)], [(0.2, 0.2)])
    move_animal(world, 0, 0.0, 0.0, motion_config)
    np.testing.assert_allclose(world.positions[0], (0.009, 0.5), atol=1e-12)


def test_wraps_past_the_top_and_left_edges(make_world, motion_config):
    world = make_world([(0.005, 0.003, 1.25 * math.pi, 0.01)], [(0.5, 0.5)])
    move_animal(world, 0, 0.0, 0.0, motion_config)
    step = 0.01 / math.sqrt(2)
    np.testing.assert_allclose(
        world.positions[0], (1.0 + 0.005 - step, 1.0 + 0.003 - step), atol=1e-12
    )
    assert np.all(world.positions[0] < 1.0)


def test_rotation_is_wrapped(make_world, motion_config):
    world = make_world([(0.5, 0.5, 6.2, 0.01)], [(0.2, 0.2)])
    move_animal(world, 0, 0.5, 0.0, motion_config)
    assert world.rotations[0] == pytest.approx(6.7 - TAU)


@pytest.mark.parametrize(
    "d_speed, expected", [(0.005, 0.015), (1.0, 0.02), (-1.0, 0.0)]
)
def test_speed_is_clamped(make_world, motion_config, d_speed, expected):
    world = make_world([(0.5, 0.5, 0.0, 0.01)], [(0.2, 0.2)])
    move_animal(world, 0, 0.0, d_speed, motion_config)
    assert world.speeds[0] == pytest.approx(expected)
    assert world.positions[0][0] == pytest.approx(0.5 + expected)


def test_eats_food_within_radius(make_world, motion_config):
    world = make_world([(0.5, 0.5, 0.0, 0.0)], [(0.505, 0.5), (0.9, 0.9)])
    before = world.food_positions.copy()

    assert forage(world, 0, motion_config, Prng(0)) == 0
    assert world.fitness[0] == 1
    assert not np.array_equal(world.food_positions[0], before[0])
    np.testing.assert_array_equal(world.food_positions[1], before[1])
    assert len(world.food_positions) == 2


def test_eats_across_the_edge(make_world, motion_config):
    world = make_world([(0.998, 0.5, 0.0, 0.0)], [(0.003, 0.5)])
    assert forage(world, 0, motion_config, Prng(0)) == 0
    assert world.fitness[0] == 1


def test_eats_nearest_only(make_world, motion_config):
    world = make_world([(0.5, 0.5, 0.0, 0.0)], [(0.508, 0.5), (0.503, 0.5)])
    before = world.food_positions.copy()

    assert forage(world, 0, motion_config, Prng(0)) == 1
    assert world.fitness[0] == 1
    np.testing.assert_array_equal(world.food_positions[0], before[0])


def test_tie_goes_to_lowest_index(make_world, motion_config):
    world = make_world([(0.5, 0.5, 0.0, 0.0)], [(0.505, 0.5), (0.505, 0.5)])
    assert forage(world, 0, motion_config, Prng(0)) == 0


def test_nothing_in_reach(make_world, motion_config):
    world = make_world([(0.5, 0.5, 0.0, 0.0)], [(0.52, 0.5), (0.1, 0.1)])
    before = world.food_positions.copy()

    assert forage(world, 0, motion_config, Prng(0)) is None
    assert world.fitness[0] == 0
    np.testing.assert_array_equal(world.food_positions, before)
