from __future__ import annotations

from pydantic import BaseModel, Field

from evoforage.evolution.statistics import GenerationStatistics


class SimulationMetrics(BaseModel):
    """Running counters of a simulation (in memory only)."""

    total_ticks: int = Field(default=0, description="Ticks stepped since construction")
    total_generations: int = Field(
        default=0, description="Generation boundaries crossed"
    )
    food_eaten: int = Field(default=0, description="Food items consumed overall")
    last_statistics: GenerationStatistics | None = Field(
        default=None, description="Fitness summary of the latest finished generation"
    )

    def record_tick(self, eaten: int) -> None:
        self.total_ticks += 1
        self.food_eaten += eaten

    def record_generation(self, stats: GenerationStatistics) -> None:
        self.total_generations += 1
        self.last_statistics = stats
