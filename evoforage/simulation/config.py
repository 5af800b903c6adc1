from __future__ import annotations

from collections.abc import Mapping
import math
from typing import Any

from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from evoforage.exceptions import ConfigError

__all__ = ["SimulationConfig", "load_config"]


class SimulationConfig(BaseModel):
    """Construction-time options of a Simulation.

    Building this model directly raises pydantic's ValidationError on bad
    values; load_config() is the entry point that turns those into ConfigError.
    Both are ValueError subclasses.
    """

    population_size: int = Field(default=40, gt=0, description="Animals per generation")
    food_count: int = Field(default=60, gt=0, description="Food items in the arena")
    generation_length: int = Field(
        default=2500, gt=0, description="Ticks per generation"
    )

    eye_fov_angle: float = Field(
        default=math.pi + math.pi / 4,
        gt=0,
        le=2 * math.pi,
        description="Field of view in radians, centered on the heading",
    )
    eye_cells: int = Field(default=9, gt=0, description="Retina sectors")
    eye_max_distance: float = Field(
        default=0.25, gt=0, description="Maximum view distance in arena units"
    )
    brain_hidden_neurons: int | None = Field(
        default=None,
        gt=0,
        description="Hidden layer width (None = twice the eye cells)",
    )

    min_speed: float = Field(default=0.001, ge=0)
    max_speed: float = Field(default=0.005, ge=0)
    initial_speed: float = Field(
        default=0.002,
        ge=0,
        description="Speed at spawn, clamped into [min_speed, max_speed]",
    )
    max_turn: float = Field(
        default=math.pi / 2, ge=0, description="Bound of the per-tick rotation delta"
    )
    max_accel: float = Field(
        default=0.2, ge=0, description="Bound of the per-tick speed delta"
    )
    eating_radius: float = Field(default=0.01, ge=0)

    mutation_rate: float = Field(
        default=0.01, ge=0, le=1, description="Per-gene mutation probability"
    )
    mutation_magnitude: float = Field(
        default=0.3, ge=0, description="Scale of the Gaussian mutation noise"
    )
    seed: int = Field(default=0, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    @model_validator(mode="after")
    def validate_speeds(self):
        if self.min_speed > self.max_speed:
            raise ValueError(
                f"min_speed ({self.min_speed}) must be <= max_speed ({self.max_speed})"
            )
        return self

    @property
    def hidden_neurons(self) -> int:
        if self.brain_hidden_neurons is None:
            return 2 * self.eye_cells
        return self.brain_hidden_neurons

    @property
    def spawn_speed(self) -> float:
        return min(max(self.initial_speed, self.min_speed), self.max_speed)


def load_config(
    options: SimulationConfig | Mapping[str, Any] | DictConfig | None = None,
) -> SimulationConfig:
    """Validate ``options`` into a SimulationConfig or raise ConfigError."""
    if isinstance(options, SimulationConfig):
        return options
    if options is None:
        options = {}
    elif isinstance(options, DictConfig):
        options = OmegaConf.to_container(options, resolve=True)
    if not isinstance(options, Mapping):
        raise ConfigError(
            f"Expected a mapping of simulation options, got {type(options).__name__}"
        )
    try:
        return SimulationConfig(**options)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigError(f"Invalid simulation config: {problems}") from exc
