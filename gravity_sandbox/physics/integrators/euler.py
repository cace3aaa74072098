"""Euler method integrator (baseline, O(h) accuracy)."""

from typing import Sequence

import numpy as np

from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.integrators.base import Integrator


class EulerIntegrator(Integrator):
    """Explicit Euler - position advanced with the old velocity.
    
    Energy drifts steadily on orbits. Kept for baseline comparisons only.
    """
    
    @property
    def name(self) -> str:
        return "euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, bodies: Sequence[Body], forces: np.ndarray, dt: float) -> None:
        if len(forces) != len(bodies):
            raise ValueError(f"Got {len(forces)} forces for {len(bodies)} bodies")
        for body, force in zip(bodies, forces):
            body.apply_force(force)
            # r_new = r + v*dt uses the velocity from before this tick
            body.position += body.velocity * dt
            body.velocity += body.acceleration * dt
            body.acceleration[:] = 0.0
