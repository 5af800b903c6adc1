from evoforage.simulation.brain import Brain, BrainTopology
from evoforage.simulation.config import SimulationConfig, load_config
from evoforage.simulation.eye import Eye, EyeConfig
from evoforage.simulation.prng import Prng
from evoforage.simulation.world import AnimalView, FoodView, World, WorldSnapshot

__all__ = [
    "AnimalView",
    "Brain",
    "BrainTopology",
    "Eye",
    "EyeConfig",
    "FoodView",
    "Prng",
    "SimulationConfig",
    "World",
    "WorldSnapshot",
    "load_config",
]
