"""Per-animal movement and food consumption."""

from __future__ import annotations

import numpy as np

from evoforage.simulation.config import SimulationConfig
from evoforage.simulation.geometry import heading, toroidal_distance, wrap_angle, wrap_unit
from evoforage.simulation.prng import Prng
from evoforage.simulation.world import World

__all__ = ["forage", "move_animal"]


def move_animal(
    world: World,
    index: int,
    d_rotation: float,
    d_speed: float,
    config: SimulationConfig,
) -> None:
    rotation = wrap_angle(world.rotations[index] + d_rotation)
    speed = min(max(world.speeds[index] + d_speed, config.min_speed), config.max_speed)

    world.rotations[index] = rotation
    world.speeds[index] = speed
    world.positions[index] = wrap_unit(
        world.positions[index] + speed * heading(rotation)
    )


def forage(
    world: World, index: int, config: SimulationConfig, prng: Prng
) -> int | None:
    """Let animal ``index`` eat the nearest food within reach.

    Returns the consumed food slot, or None. Ties on distance go to the lowest
    food index; at most one item is eaten per call.
    """
    distances = toroidal_distance(world.positions[index], world.food_positions)
    nearest = int(np.argmin(distances))
    if distances[nearest] > config.eating_radius:
        return None

    world.fitness[index] += 1
    world.respawn_food(nearest, prng)
    return nearest
