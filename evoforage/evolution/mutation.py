from abc import ABC, abstractmethod

import numpy as np

from evoforage.simulation.prng import Prng


class MutationMethod(ABC):
    @abstractmethod
    def mutate(self, prng: Prng, genome: np.ndarray) -> np.ndarray:
        """Return a mutated copy of ``genome``."""


class GaussianMutation(MutationMethod):
    """Adds ``N(0, magnitude)`` noise to each gene with probability ``rate``."""

    def __init__(self, rate: float, magnitude: float):
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"rate must be within [0, 1], got {rate}")
        if magnitude < 0.0:
            raise ValueError(f"magnitude must be non-negative, got {magnitude}")
        self.rate = rate
        self.magnitude = magnitude

    def mutate(self, prng: Prng, genome: np.ndarray) -> np.ndarray:
        mutated = np.array(genome, dtype=float)
        hits = prng.bernoulli(self.rate, mutated.size)
        noise = prng.normal(self.magnitude, mutated.size)
        mutated[hits] += noise[hits]
        return mutated

    def __repr__(self) -> str:
        return f"GaussianMutation(rate={self.rate}, magnitude={self.magnitude})"
