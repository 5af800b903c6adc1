import numpy as np
import pytest

from evoforage.simulation.brain import Brain, BrainTopology
from evoforage.simulation.config import SimulationConfig
from evoforage.simulation.prng import Prng
from evoforage.simulation.world import World


@pytest.fixture
def small_options() -> dict:
    return {
        "population_size": 6,
        "food_count": 9,
        "generation_length": 12,
        "eye_cells": 5,
        "seed": 11,
    }


@pytest.fixture
def make_world():
    """Build a hand-placed world: ``make_world([(x, y, rotation, speed)], [(x, y)])``."""

    def _make(animals, food, cells: int = 3):
        prng = Prng(0)
        topology = BrainTopology(inputs=cells, hidden=2 * cells)
        return World(
            positions=np.array([[a[0], a[1]] for a in animals], dtype=float),
            rotations=np.array([a[2] for a in animals], dtype=float),
            speeds=np.array([a[3] for a in animals], dtype=float),
            brains=[Brain.random(prng, topology) for _ in animals],
            food_positions=np.array(food, dtype=float),
        )

    return _make


@pytest.fixture
def motion_config() -> SimulationConfig:
    return SimulationConfig(
        min_speed=0.0,
        max_speed=0.02,
        eating_radius=0.01,
        eye_cells=3,
    )
