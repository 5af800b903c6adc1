from __future__ import annotations

import numpy as np

from evoforage.simulation.geometry import TAU, wrap_angle, wrap_unit

__all__ = ["Prng"]


class Prng:
    """Seedable random source owned by a single simulation.

    Every draw the engine makes goes through one instance of this class, so the
    sequence of calls (always in animal/food index order) fully determines the
    run. Nothing here touches numpy's global random state.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed
        self._rng = np.random.Generator(np.random.PCG64(seed))

    def uniform(
        self, low: float = 0.0, high: float = 1.0, size: int | tuple | None = None
    ):
        return self._rng.uniform(low, high, size)

    def unit_point(self) -> np.ndarray:
        return wrap_unit(self._rng.random(2))

    def unit_points(self, n: int) -> np.ndarray:
        return wrap_unit(self._rng.random((n, 2)))

    def angles(self, n: int) -> np.ndarray:
        return wrap_angle(self._rng.random(n) * TAU)

    def integers(self, high: int) -> int:
        return int(self._rng.integers(0, high))

    def coin_flips(self, n: int) -> np.ndarray:
        return self._rng.random(n) < 0.5

    def bernoulli(self, p: float, n: int) -> np.ndarray:
        return self._rng.random(n) < p

    def normal(self, scale: float, n: int) -> np.ndarray:
        return self._rng.normal(0.0, scale, n)

    def weighted_index(self, weights) -> int:
        """Roulette-wheel draw of an index; uniform when all weights are zero."""
        weights = np.asarray(weights, dtype=float)
        if weights.size == 0:
            raise ValueError("weights cannot be empty")
        cumulative = np.cumsum(weights)
        total = cumulative[-1]
        if total <= 0.0:
            return self.integers(weights.size)
        ball = self._rng.random() * total
        index = int(np.searchsorted(cumulative, ball, side="right"))
        return min(index, weights.size - 1)

    def __repr__(self) -> str:
        return f"Prng(seed={self.seed})"
