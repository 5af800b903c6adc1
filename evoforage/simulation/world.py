from __future__ import annotations

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from evoforage.simulation.brain import Brain, BrainTopology
from evoforage.simulation.config import SimulationConfig
from evoforage.simulation.geometry import TAU
from evoforage.simulation.prng import Prng

__all__ = ["AnimalView", "FoodView", "World", "WorldSnapshot"]


class AnimalView(BaseModel):
    x: float = Field(ge=0, lt=1)
    y: float = Field(ge=0, lt=1)
    rotation: float = Field(ge=0, lt=TAU, description="Heading in radians")

    model_config = ConfigDict(frozen=True)


class FoodView(BaseModel):
    x: float = Field(ge=0, lt=1)
    y: float = Field(ge=0, lt=1)

    model_config = ConfigDict(frozen=True)


class WorldSnapshot(BaseModel):
    """Read-only copy of the world handed to collaborators."""

    generation: int = Field(ge=0)
    tick: int = Field(ge=0)
    animals: tuple[AnimalView, ...]
    food: tuple[FoodView, ...]

    model_config = ConfigDict(frozen=True)


class World:
    """Fixed-size arenas of animals and food.

    Animal state is kept column-wise (``positions``, ``rotations``, ``speeds``,
    ``fitness``, ``brains``), one slot per animal; food is a ``(F, 2)`` array of
    positions. Slots are overwritten in place and never appended or removed.
    """

    def __init__(
        self,
        positions: np.ndarray,
        rotations: np.ndarray,
        speeds: np.ndarray,
        brains: list[Brain],
        food_positions: np.ndarray,
    ):
        n = len(brains)
        if positions.shape != (n, 2) or rotations.shape != (n,) or speeds.shape != (n,):
            raise ValueError(
                f"Animal arrays do not match a population of {n}: positions "
                f"{positions.shape}, rotations {rotations.shape}, speeds {speeds.shape}"
            )
        if food_positions.ndim != 2 or food_positions.shape[1] != 2:
            raise ValueError(
                f"food_positions must have shape (F, 2), got {food_positions.shape}"
            )
        self.generation = 0
        self.tick = 0
        self.positions = np.array(positions, dtype=float)
        self.rotations = np.array(rotations, dtype=float)
        self.speeds = np.array(speeds, dtype=float)
        self.fitness = np.zeros(n, dtype=np.int64)
        self.brains = list(brains)
        self.food_positions = np.array(food_positions, dtype=float)

    @classmethod
    def random(
        cls,
        config: SimulationConfig,
        prng: Prng,
        brains: list[Brain] | None = None,
    ) -> "World":
        n = config.population_size
        if brains is None:
            topology = BrainTopology(config.eye_cells, config.hidden_neurons)
            brains = [Brain.random(prng, topology) for _ in range(n)]
        return cls(
            positions=prng.unit_points(n),
            rotations=prng.angles(n),
            speeds=np.full(n, config.spawn_speed),
            brains=brains,
            food_positions=prng.unit_points(config.food_count),
        )

    @property
    def population_size(self) -> int:
        return len(self.brains)

    @property
    def food_count(self) -> int:
        return len(self.food_positions)

    def reset(self, prng: Prng, brains: list[Brain], spawn_speed: float) -> None:
        """Start the next generation in place with ``brains``."""
        if len(brains) != self.population_size:
            raise ValueError(
                f"Expected {self.population_size} brains, got {len(brains)}"
            )
        self.generation += 1
        self.tick = 0
        self.positions[:] = prng.unit_points(self.population_size)
        self.rotations[:] = prng.angles(self.population_size)
        self.speeds[:] = spawn_speed
        self.fitness[:] = 0
        self.brains[:] = brains
        self.food_positions[:] = prng.unit_points(self.food_count)

    def respawn_food(self, index: int, prng: Prng) -> None:
        self.food_positions[index] = prng.unit_point()

    def snapshot(self) -> WorldSnapshot:
        return WorldSnapshot(
            generation=self.generation,
            tick=self.tick,
            animals=tuple(
                AnimalView(x=float(x), y=float(y), rotation=float(rotation))
                for (x, y), rotation in zip(self.positions, self.rotations)
            ),
            food=tuple(FoodView(x=float(x), y=float(y)) for x, y in self.food_positions),
        )

    def __repr__(self) -> str:
        return (
            f"World(generation={self.generation}, tick={self.tick}, "
            f"animals={self.population_size}, food={self.food_count})"
        )
