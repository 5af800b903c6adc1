from evoforage.evolution.algorithm import GeneticAlgorithm
from evoforage.evolution.crossover import CrossoverMethod, UniformCrossover
from evoforage.evolution.individual import Individual
from evoforage.evolution.mutation import GaussianMutation, MutationMethod
from evoforage.evolution.selection import RouletteWheelSelection, SelectionMethod
from evoforage.evolution.statistics import GenerationStatistics

__all__ = [
    "CrossoverMethod",
    "GaussianMutation",
    "GeneticAlgorithm",
    "GenerationStatistics",
    "Individual",
    "MutationMethod",
    "RouletteWheelSelection",
    "SelectionMethod",
    "UniformCrossover",
]
