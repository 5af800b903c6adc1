from abc import ABC, abstractmethod

import numpy as np

from evoforage.evolution.individual import Individual
from evoforage.exceptions import EvolutionError
from evoforage.simulation.prng import Prng


class CrossoverMethod(ABC):
    @abstractmethod
    def crossover(
        self, prng: Prng, parent_a: Individual, parent_b: Individual
    ) -> np.ndarray:
        """Combine two parents into a fresh child genome."""


class UniformCrossover(CrossoverMethod):
    """Every gene comes from either parent with equal probability."""

    def crossover(
        self, prng: Prng, parent_a: Individual, parent_b: Individual
    ) -> np.ndarray:
        if len(parent_a) != len(parent_b):
            raise EvolutionError(
                f"Parents differ in genome length: {len(parent_a)} vs {len(parent_b)}"
            )
        take_a = prng.coin_flips(len(parent_a))
        return np.where(take_a, parent_a.genome, parent_b.genome)
