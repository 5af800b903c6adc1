from abc import ABC, abstractmethod

from evoforage.evolution.statistics import GenerationStatistics


class LogWriter(ABC):
    @abstractmethod
    def scalar(self, metric: str, value: float, step: int) -> None:
        pass

    @abstractmethod
    def text(self, tag: str, text: str, step: int) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def write_statistics(self, stats: GenerationStatistics) -> None:
        step = stats.generation
        self.scalar("fitness/min", stats.min_fitness, step)
        self.scalar("fitness/max", stats.max_fitness, step)
        self.scalar("fitness/mean", stats.mean_fitness, step)
        self.scalar("fitness/median", stats.median_fitness, step)
        self.scalar("fitness/total", stats.total_fitness, step)
