from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from evoforage.evolution.engine import EvolutionEngine
from evoforage.evolution.statistics import GenerationStatistics
from evoforage.simulation.config import SimulationConfig, load_config
from evoforage.simulation.eye import Eye, EyeConfig
from evoforage.simulation.metrics import SimulationMetrics
from evoforage.simulation.motion import forage, move_animal
from evoforage.simulation.prng import Prng
from evoforage.simulation.world import World, WorldSnapshot

__all__ = ["Simulation"]


class Simulation:
    """
    Facade over the foraging world:
    - ``world()`` hands out immutable snapshots, never live state;
    - ``step()`` advances exactly one tick and evolves at generation boundaries.

    Not reentrant: callers invoke ``step()``/``world()`` strictly in sequence.
    """

    def __init__(
        self, config: SimulationConfig | Mapping[str, Any] | None = None
    ):
        config = load_config(config)

        prng = Prng(config.seed)
        eye = Eye(
            EyeConfig(
                fov_angle=config.eye_fov_angle,
                cells=config.eye_cells,
                max_distance=config.eye_max_distance,
            )
        )
        world = World.random(config, prng)
        engine = EvolutionEngine(config)

        self._config = config
        self._prng = prng
        self._eye = eye
        self._world = world
        self._engine = engine
        self.metrics = SimulationMetrics()

        logger.info(
            "[Simulation] Init | animals={}, food={}, generation_length={}, seed={}",
            config.population_size,
            config.food_count,
            config.generation_length,
            config.seed,
        )

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def generation(self) -> int:
        return self._world.generation

    def world(self) -> WorldSnapshot:
        return self._world.snapshot()

    def step(self) -> int:
        """Advance one tick; returns the (possibly new) generation counter."""
        world, config = self._world, self._config
        eaten = 0

        for index in range(world.population_size):
            retina = self._eye.process_vision(
                world.positions[index], world.rotations[index], world.food_positions
            )
            d_rotation, d_speed = world.brains[index].think(
                retina, config.max_turn, config.max_accel
            )
            move_animal(world, index, d_rotation, d_speed, config)
            if forage(world, index, config, self._prng) is not None:
                eaten += 1

        world.tick += 1
        self.metrics.record_tick(eaten)

        if self._engine.is_due(world):
            stats = self._engine.evolve(world, self._prng)
            self.metrics.record_generation(stats)

        return world.generation

    def train(self) -> GenerationStatistics:
        """Step until the current generation ends and return its statistics."""
        generation = self._world.generation
        while self.step() == generation:
            pass
        return self.metrics.last_statistics

    def __repr__(self) -> str:
        return f"Simulation({self._world!r}, seed={self._config.seed})"
