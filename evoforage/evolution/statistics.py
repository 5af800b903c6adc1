from __future__ import annotations

import numpy as np
from pydantic import BaseModel, Field


class GenerationStatistics(BaseModel):
    """Fitness summary of one finished generation."""

    generation: int = Field(ge=0, description="Generation the fitness was earned in")
    population_size: int = Field(gt=0)
    min_fitness: float = Field(description="Lowest fitness in the population")
    max_fitness: float = Field(description="Highest fitness in the population")
    mean_fitness: float = Field(description="Average fitness")
    median_fitness: float = Field(description="Median fitness")
    total_fitness: float = Field(description="Sum of all fitness values")

    @classmethod
    def from_fitness(cls, generation: int, fitness) -> "GenerationStatistics":
        values = np.asarray(fitness, dtype=float)
        if values.size == 0:
            raise ValueError("fitness cannot be empty")
        return cls(
            generation=generation,
            population_size=values.size,
            min_fitness=float(values.min()),
            max_fitness=float(values.max()),
            mean_fitness=float(values.mean()),
            median_fitness=float(np.median(values)),
            total_fitness=float(values.sum()),
        )

    def summary(self) -> str:
        return (
            f"gen={self.generation} min={self.min_fitness:.2f} "
            f"max={self.max_fitness:.2f} avg={self.mean_fitness:.2f} "
            f"median={self.median_fitness:.2f}"
        )
