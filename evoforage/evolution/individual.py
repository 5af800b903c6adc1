from __future__ import annotations

import numpy as np

__all__ = ["Individual"]


class Individual:
    """One entry of the genome pool: a genome and the fitness it earned."""

    __slots__ = ("_genome", "fitness")

    def __init__(self, genome, fitness: float):
        self._genome = np.array(genome, dtype=float)
        self._genome.flags.writeable = False
        self.fitness = float(fitness)

    @property
    def genome(self) -> np.ndarray:
        return self._genome

    def __len__(self) -> int:
        return self._genome.size

    def __repr__(self) -> str:
        return f"Individual(genes={len(self)}, fitness={self.fitness})"
