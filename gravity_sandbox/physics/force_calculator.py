"""Pairwise gravitational force calculation.

Every unordered pair (i, j) is visited once; the pair force is added to body i
and subtracted from body j, so the result obeys Newton's third law exactly.
Positions are read into a snapshot before anything is returned, so no body can
observe a partially updated neighbour within a tick.
"""

from typing import Literal, Sequence

import numpy as np

from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.constants import G as G_DEFAULT, SOFTENING


class ForceCalculator:
    """Computes the net gravitational force on each body for one tick."""

    def __init__(
        self,
        G: float = G_DEFAULT,
        softening: float = SOFTENING,
        method: Literal["vectorized", "direct"] = "vectorized",
    ):
        """Initialize force calculator.

        Args:
            G: Gravitational constant (simulation units)
            softening: Minimum squared distance used in the force law
            method: 'vectorized' (numpy over the upper triangle) or 'direct' (double loop)
        """
        if method not in ("vectorized", "direct"):
            raise ValueError(f"Unknown force method: {method}. Use 'vectorized' or 'direct'")
        self.G = G
        self.softening = softening
        self.method = method

    def compute_forces(self, bodies: Sequence[Body]) -> np.ndarray:
        """Compute net forces on all bodies.

        Args:
            bodies: Ordered body sequence (not modified)

        Returns:
            (n, 2) array of forces, row i acting on bodies[i]
        """
        positions = np.array([body.position for body in bodies], dtype=np.float64).reshape(-1, 2)
        masses = np.array([body.mass for body in bodies], dtype=np.float64)
        if self.method == "direct":
            return self._compute_forces_direct(positions, masses)
        return self._compute_forces_vectorized(positions, masses)

    def pair_force(self, position_i, position_j, mass_i: float, mass_j: float) -> np.ndarray:
        """Force exerted on body i by body j."""
        direction = np.asarray(position_j, dtype=np.float64) - np.asarray(position_i, dtype=np.float64)
        distance_sq = max(float(np.dot(direction, direction)), self.softening)
        magnitude = self.G * mass_i * mass_j / distance_sq
        return _normalize(direction) * magnitude

    def _compute_forces_direct(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        """Loop-based calculation over j > i."""
        n = len(masses)
        forces = np.zeros((n, 2))
        for i in range(n):
            for j in range(i + 1, n):
                force = self.pair_force(positions[i], positions[j], masses[i], masses[j])
                forces[i] += force
                forces[j] -= force
        return forces

    def _compute_forces_vectorized(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        """Vectorized calculation over the upper-triangle pair list."""
        n = len(masses)
        forces = np.zeros((n, 2))
        if n < 2:
            return forces

        i_idx, j_idx = np.triu_indices(n, k=1)
        # direction (pairs, 2): from i towards j
        direction = positions[j_idx] - positions[i_idx]
        length_sq = np.sum(direction ** 2, axis=1)
        distance_sq = np.maximum(length_sq, self.softening)
        magnitude = self.G * masses[i_idx] * masses[j_idx] / distance_sq

        length = np.sqrt(length_sq)
        # Coincident bodies have no direction; their pair force is zero
        safe_length = np.where(length > 0.0, length, 1.0)
        unit = np.where(length[:, np.newaxis] > 0.0, direction / safe_length[:, np.newaxis], 0.0)
        pair_forces = unit * magnitude[:, np.newaxis]

        np.add.at(forces, i_idx, pair_forces)
        np.add.at(forces, j_idx, -pair_forces)
        return forces


def _normalize(vec: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vec))
    if length == 0.0:
        return np.zeros_like(vec)
    return vec / length
