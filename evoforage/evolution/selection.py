from abc import ABC, abstractmethod

from loguru import logger

from evoforage.evolution.individual import Individual
from evoforage.exceptions import EvolutionError
from evoforage.simulation.prng import Prng


class SelectionMethod(ABC):
    """Base class for parent selection strategies."""

    @abstractmethod
    def select(self, prng: Prng, population: list[Individual]) -> Individual:
        """Pick one parent from ``population``."""


class RouletteWheelSelection(SelectionMethod):
    """Fitness-proportionate selection with replacement.

    Falls back to a uniform draw when the population's total fitness is zero.
    """

    def select(self, prng: Prng, population: list[Individual]) -> Individual:
        if not population:
            raise EvolutionError("Cannot select from an empty population")
        fitnesses = [max(individual.fitness, 0.0) for individual in population]
        if sum(fitnesses) <= 0.0:
            logger.trace(
                "RouletteWheelSelection: zero total fitness over {} individuals, "
                "selecting uniformly",
                len(population),
            )
        return population[prng.weighted_index(fitnesses)]
