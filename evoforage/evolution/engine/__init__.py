from __future__ import annotations

from evoforage.evolution.engine.core import EvolutionEngine
from evoforage.evolution.engine.state import EvolutionPhase
