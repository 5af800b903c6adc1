from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from evoforage.exceptions import BrainError
from evoforage.simulation.prng import Prng

__all__ = ["Brain", "BrainTopology"]


@dataclass(frozen=True)
class BrainTopology:
    inputs: int
    hidden: int
    outputs: int = 2

    @property
    def layer_sizes(self) -> tuple[tuple[int, int], ...]:
        """``(inputs, outputs)`` of every layer, in propagation order."""
        return ((self.inputs, self.hidden), (self.hidden, self.outputs))

    @property
    def genome_length(self) -> int:
        return sum((n_in + 1) * n_out for n_in, n_out in self.layer_sizes)


class Brain:
    """Feed-forward controller: retina -> hidden (tanh) -> (rotation, speed).

    The genome is every bias and weight flattened layer by layer and neuron by
    neuron, each neuron contributing its bias followed by its incoming weights.
    """

    def __init__(
        self,
        topology: BrainTopology,
        weights: list[np.ndarray],
        biases: list[np.ndarray],
    ):
        if len(weights) != len(topology.layer_sizes) or len(biases) != len(weights):
            raise BrainError(
                f"Expected {len(topology.layer_sizes)} layers, got "
                f"{len(weights)} weight matrices and {len(biases)} bias vectors"
            )
        for (n_in, n_out), w, b in zip(topology.layer_sizes, weights, biases):
            if w.shape != (n_out, n_in) or b.shape != (n_out,):
                raise BrainError(
                    f"Layer shape mismatch: expected weights {(n_out, n_in)} and "
                    f"biases {(n_out,)}, got {w.shape} and {b.shape}"
                )
        self.topology = topology
        self.weights = [np.array(w, dtype=float) for w in weights]
        self.biases = [np.array(b, dtype=float) for b in biases]

    @classmethod
    def random(cls, prng: Prng, topology: BrainTopology) -> "Brain":
        return cls.from_genome(
            prng.uniform(-1.0, 1.0, topology.genome_length), topology
        )

    @classmethod
    def from_genome(cls, genome, topology: BrainTopology) -> "Brain":
        genome = np.asarray(genome, dtype=float)
        if genome.shape != (topology.genome_length,):
            raise BrainError(
                f"Genome of length {genome.size} does not fit topology "
                f"{topology} (needs {topology.genome_length})"
            )
        weights, biases = [], []
        offset = 0
        for n_in, n_out in topology.layer_sizes:
            size = (n_in + 1) * n_out
            neurons = genome[offset : offset + size].reshape(n_out, n_in + 1)
            biases.append(neurons[:, 0].copy())
            weights.append(neurons[:, 1:].copy())
            offset += size
        return cls(topology, weights, biases)

    def genome(self) -> np.ndarray:
        return np.concatenate(
            [
                np.column_stack((b, w)).ravel()
                for w, b in zip(self.weights, self.biases)
            ]
        )

    def propagate(self, inputs) -> np.ndarray:
        """Raw outputs, each in ``[-1, 1]``."""
        signal = np.asarray(inputs, dtype=float)
        if signal.shape != (self.topology.inputs,):
            raise BrainError(
                f"Expected {self.topology.inputs} inputs, got shape {signal.shape}"
            )
        for w, b in zip(self.weights, self.biases):
            signal = np.tanh(w @ signal + b)
        return signal

    def think(
        self, retina, max_turn: float, max_accel: float
    ) -> tuple[float, float]:
        """Map a retina to ``(delta_rotation, delta_speed)``."""
        turn, accel = self.propagate(retina)
        return float(turn) * max_turn, float(accel) * max_accel

    def __repr__(self) -> str:
        return (
            f"Brain(inputs={self.topology.inputs}, hidden={self.topology.hidden}, "
            f"outputs={self.topology.outputs})"
        )
