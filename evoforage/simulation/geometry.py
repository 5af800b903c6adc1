"""Toroidal arena math shared by the eye and the foraging resolver.

The arena is the unit square with opposite edges identified. Positions live in
``[0, 1)``, headings in ``[0, 2*pi)``. All helpers accept scalars or numpy
arrays and never raise on out-of-range input: they wrap.
"""

from __future__ import annotations

import math

import numpy as np

TAU = 2.0 * math.pi

__all__ = [
    "TAU",
    "heading",
    "toroidal_delta",
    "toroidal_distance",
    "wrap_angle",
    "wrap_signed_angle",
    "wrap_unit",
]


def _fold(values, period: float):
    wrapped = np.mod(values, period)
    # np.mod(-1e-18, 1.0) == 1.0 in floating point
    return np.where(wrapped >= period, 0.0, wrapped)


def wrap_unit(values):
    """Wrap coordinates into ``[0, 1)``."""
    wrapped = _fold(values, 1.0)
    return float(wrapped) if np.ndim(wrapped) == 0 else wrapped


def wrap_angle(angles):
    """Wrap angles into ``[0, 2*pi)``."""
    wrapped = _fold(angles, TAU)
    return float(wrapped) if np.ndim(wrapped) == 0 else wrapped


def wrap_signed_angle(angles):
    """Wrap angles into ``[-pi, pi)``."""
    wrapped = _fold(np.asarray(angles) + math.pi, TAU) - math.pi
    return float(wrapped) if np.ndim(wrapped) == 0 else wrapped


def toroidal_delta(origin, targets) -> np.ndarray:
    """Shortest wrap-around vector(s) from ``origin`` to ``targets``.

    Each component lands in ``[-0.5, 0.5)``.
    """
    delta = np.asarray(targets, dtype=float) - np.asarray(origin, dtype=float)
    return _fold(delta + 0.5, 1.0) - 0.5


def toroidal_distance(origin, targets):
    distances = np.linalg.norm(toroidal_delta(origin, targets), axis=-1)
    return float(distances) if np.ndim(distances) == 0 else distances


def heading(rotation: float) -> np.ndarray:
    return np.array([math.cos(rotation), math.sin(rotation)])
