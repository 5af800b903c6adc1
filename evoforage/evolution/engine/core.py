from __future__ import annotations

from loguru import logger

from evoforage.evolution.algorithm import GeneticAlgorithm
from evoforage.evolution.crossover import UniformCrossover
from evoforage.evolution.engine.state import EvolutionPhase, validate_transition
from evoforage.evolution.individual import Individual
from evoforage.evolution.mutation import GaussianMutation
from evoforage.evolution.selection import RouletteWheelSelection
from evoforage.evolution.statistics import GenerationStatistics
from evoforage.simulation.brain import Brain
from evoforage.simulation.config import SimulationConfig
from evoforage.simulation.prng import Prng
from evoforage.simulation.world import World

__all__ = ["EvolutionEngine"]


class EvolutionEngine:
    """
    Generation boundary handling:
    - ACTIVE while ticks accumulate;
    - EVOLVING only inside ``evolve()``, which always returns to ACTIVE.
    """

    def __init__(
        self,
        config: SimulationConfig,
        algorithm: GeneticAlgorithm | None = None,
    ):
        self.config = config
        self.algorithm = algorithm or GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(config.mutation_rate, config.mutation_magnitude),
        )
        self.phase = EvolutionPhase.ACTIVE

        logger.debug(
            "[EvolutionEngine] Init | generation_length={}, mutation={}",
            config.generation_length,
            self.algorithm.mutation,
        )

    def is_due(self, world: World) -> bool:
        return world.tick >= self.config.generation_length

    def evolve(self, world: World, prng: Prng) -> GenerationStatistics:
        self._set_phase(EvolutionPhase.EVOLVING)
        try:
            population = [
                Individual(brain.genome(), fitness)
                for brain, fitness in zip(world.brains, world.fitness)
            ]
            stats = GenerationStatistics.from_fitness(world.generation, world.fitness)

            offspring = self.algorithm.evolve(prng, population)
            topology = world.brains[0].topology
            brains = [Brain.from_genome(genome, topology) for genome in offspring]

            world.reset(prng, brains, self.config.spawn_speed)
        finally:
            self._set_phase(EvolutionPhase.ACTIVE)

        logger.info(
            "[EvolutionEngine] Generation {} done | {}", stats.generation, stats.summary()
        )
        return stats

    def _set_phase(self, phase: EvolutionPhase) -> None:
        validate_transition(self.phase, phase)
        self.phase = phase
