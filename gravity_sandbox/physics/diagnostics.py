"""Diagnostics for the body simulation."""

import math
from typing import Sequence, Tuple

import numpy as np

from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.constants import G as G_DEFAULT, SOFTENING


class Diagnostics:
    """Compute energy and momentum diagnostics matching the force law."""

    def __init__(self, G: float = G_DEFAULT, softening: float = SOFTENING):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            softening: Minimum squared distance (must match force calculation)
        """
        self.G = G
        self.softening = softening

    def kinetic_energy(self, bodies: Sequence[Body]) -> float:
        """K = 0.5 * Σ m_i * v_i^2"""
        return float(sum(0.5 * body.mass * float(np.dot(body.velocity, body.velocity))
                         for body in bodies))

    def potential_energy(self, bodies: Sequence[Body]) -> float:
        """Pairwise potential consistent with the softened force.

        Outside the softening radius s = sqrt(softening) the potential is the
        Newtonian -G*m_i*m_j/r. Inside it the force magnitude is constant
        (G*m_i*m_j/softening), so the potential continues linearly:
        U(r) = -G*m_i*m_j/s - G*m_i*m_j*(s - r)/softening.
        """
        s = math.sqrt(self.softening)
        U = 0.0
        n = len(bodies)
        for i in range(n):
            for j in range(i + 1, n):
                r = float(np.linalg.norm(bodies[j].position - bodies[i].position))
                gmm = self.G * bodies[i].mass * bodies[j].mass
                if r >= s:
                    U -= gmm / r
                else:
                    U -= gmm / s + gmm * (s - r) / self.softening
        return U

    def compute_energies(self, bodies: Sequence[Body]) -> Tuple[float, float, float]:
        """Return (kinetic, potential, total)."""
        K = self.kinetic_energy(bodies)
        U = self.potential_energy(bodies)
        return K, U, K + U

    def total_energy(self, bodies: Sequence[Body]) -> float:
        return self.compute_energies(bodies)[2]

    def momentum(self, bodies: Sequence[Body]) -> np.ndarray:
        """Total linear momentum Σ m_i * v_i."""
        total = np.zeros(2)
        for body in bodies:
            total += body.mass * body.velocity
        return total

    def angular_momentum(self, bodies: Sequence[Body]) -> float:
        """L_z = Σ m_i * (x_i * vy_i - y_i * vx_i)"""
        return float(sum(
            body.mass * (body.position[0] * body.velocity[1] - body.position[1] * body.velocity[0])
            for body in bodies
        ))

    def center_of_mass(self, bodies: Sequence[Body]) -> np.ndarray:
        total_mass = sum(body.mass for body in bodies)
        if total_mass <= 0:
            return np.zeros(2)
        com = np.zeros(2)
        for body in bodies:
            com += body.mass * body.position
        return com / total_mass
