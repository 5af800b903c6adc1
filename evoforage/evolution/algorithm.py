from __future__ import annotations

import numpy as np
from loguru import logger

from evoforage.evolution.crossover import CrossoverMethod
from evoforage.evolution.individual import Individual
from evoforage.evolution.mutation import MutationMethod
from evoforage.evolution.selection import SelectionMethod
from evoforage.exceptions import EvolutionError
from evoforage.simulation.prng import Prng

__all__ = ["GeneticAlgorithm"]


class GeneticAlgorithm:
    """Selection -> crossover -> mutation, one offspring per individual."""

    def __init__(
        self,
        selection: SelectionMethod,
        crossover: CrossoverMethod,
        mutation: MutationMethod,
    ):
        self.selection = selection
        self.crossover = crossover
        self.mutation = mutation

    def evolve(self, prng: Prng, population: list[Individual]) -> list[np.ndarray]:
        """Breed exactly ``len(population)`` child genomes.

        Draws happen offspring by offspring (parent A, parent B, crossover,
        mutation) so the PRNG is consumed in a fixed order.
        """
        if not population:
            raise EvolutionError("Cannot evolve an empty population")

        offspring = []
        for _ in range(len(population)):
            parent_a = self.selection.select(prng, population)
            parent_b = self.selection.select(prng, population)
            child = self.crossover.crossover(prng, parent_a, parent_b)
            offspring.append(self.mutation.mutate(prng, child))

        logger.debug(
            "GeneticAlgorithm: bred {} offspring (selection={}, crossover={}, mutation={})",
            len(offspring),
            type(self.selection).__name__,
            type(self.crossover).__name__,
            type(self.mutation).__name__,
        )
        return offspring
