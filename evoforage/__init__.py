"""Evolving foragers in a toroidal arena."""

from evoforage.exceptions import BrainError, ConfigError, EvoForageError, EvolutionError
from evoforage.simulation.config import SimulationConfig
from evoforage.simulation.core import Simulation
from evoforage.simulation.world import WorldSnapshot

__version__ = "0.1.0"

__all__ = [
    "BrainError",
    "ConfigError",
    "EvoForageError",
    "EvolutionError",
    "Simulation",
    "SimulationConfig",
    "WorldSnapshot",
]
