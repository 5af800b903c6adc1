from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from evoforage.simulation.geometry import toroidal_delta, wrap_signed_angle

__all__ = ["Eye", "EyeConfig"]


@dataclass(frozen=True)
class EyeConfig:
    fov_angle: float
    cells: int
    max_distance: float


class Eye:
    """Turns food positions into a retina of ``cells`` angular sectors.

    The field of view is centered on the animal's heading and split evenly into
    sectors, lowest index on the right-hand (clockwise) edge. Every food item
    closer than ``max_distance`` adds ``(max_distance - d) / max_distance`` to
    the sector it falls in. A food item lying exactly on the border between two
    sectors counts for the lower-indexed one.
    """

    def __init__(self, config: EyeConfig):
        if config.cells <= 0:
            raise ValueError(f"cells must be positive, got {config.cells}")
        if config.fov_angle <= 0:
            raise ValueError(f"fov_angle must be positive, got {config.fov_angle}")
        if config.max_distance <= 0:
            raise ValueError(
                f"max_distance must be positive, got {config.max_distance}"
            )
        self.config = config

    @property
    def cells(self) -> int:
        return self.config.cells

    def process_vision(
        self, position, rotation: float, food_positions: np.ndarray
    ) -> np.ndarray:
        fov_angle = self.config.fov_angle
        max_distance = self.config.max_distance
        retina = np.zeros(self.config.cells)

        if len(food_positions) == 0:
            return retina

        delta = toroidal_delta(position, food_positions)
        distances = np.hypot(delta[:, 0], delta[:, 1])
        angles = wrap_signed_angle(np.arctan2(delta[:, 1], delta[:, 0]) - rotation)

        visible = (distances < max_distance) & (np.abs(angles) <= fov_angle / 2)
        if not visible.any():
            return retina

        offsets = (angles[visible] + fov_angle / 2) / fov_angle * self.config.cells
        sectors = np.clip(np.ceil(offsets).astype(int) - 1, 0, self.config.cells - 1)
        energy = (max_distance - distances[visible]) / max_distance

        # np.add.at accumulates in food index order, including repeated sectors
        np.add.at(retina, sectors, energy)
        return retina
