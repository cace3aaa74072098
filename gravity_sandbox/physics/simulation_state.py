"""Live simulation state and the per-tick physics step."""

from typing import List, Optional, Sequence

import numpy as np

from gravity_sandbox.physics.body import Body, DrawRecord
from gravity_sandbox.physics.constants import TIME_STEP, RADIUS_SCALE, HIT_TOLERANCE
from gravity_sandbox.physics.force_calculator import ForceCalculator
from gravity_sandbox.physics.integrators import Integrator, SymplecticEulerIntegrator, get_integrator


class SimulationState:
    """Owns the live bodies, the reset snapshot, the run flag and the drag selection.

    ``bodies`` is only mutated through the methods below, all of which run on
    the single tick-processing path.
    """

    def __init__(
        self,
        bodies: Sequence[Body],
        force_calculator: Optional[ForceCalculator] = None,
        integrator: Optional[Integrator] = None,
        dt: float = TIME_STEP,
        radius_scale: float = RADIUS_SCALE,
        hit_tolerance: float = HIT_TOLERANCE,
        running: bool = True
    ):
        """Initialize simulation state.

        Args:
            bodies: Startup bodies (copied; also become the reset snapshot)
            force_calculator: Force field (default: ForceCalculator with default constants)
            integrator: Integrator to use (default: symplectic Euler)
            dt: Fixed time step
            radius_scale: Visual radius scale for hit-testing and drawing
            hit_tolerance: Extra hit-test margin around each body
            running: Whether physics starts enabled
        """
        self.force_calculator = force_calculator or ForceCalculator()
        self.integrator = integrator or SymplecticEulerIntegrator()
        self.dt = dt
        self.radius_scale = radius_scale
        self.hit_tolerance = hit_tolerance

        self.initial_bodies: List[Body] = [body.copy() for body in bodies]
        self.bodies: List[Body] = [body.copy() for body in bodies]
        self.running = running
        self.selected: Optional[int] = None
        self.drag_target: Optional[np.ndarray] = None
        self.step_count = 0

    @classmethod
    def from_config(cls, bodies: Sequence[Body], config) -> "SimulationState":
        """Build a state whose physics settings come from a Config."""
        return cls(
            bodies,
            force_calculator=ForceCalculator(
                G=config.G, softening=config.softening, method=config.force_method
            ),
            integrator=get_integrator(config.integrator),
            dt=config.dt,
            radius_scale=config.radius_scale,
            hit_tolerance=config.hit_tolerance,
            running=config.start_running,
        )

    def step(self):
        """Advance one tick: forces from a frozen snapshot, then integrate every body once."""
        if self.running:
            forces = self.force_calculator.compute_forces(self.bodies)
            self.integrator.step(self.bodies, forces, self.dt)
            self.step_count += 1
        # The held body still felt its force above, but the pointer wins
        self._pin_selected()

    def toggle_running(self):
        self.running = not self.running

    def reset(self):
        """Restore the bodies present after the last load (or startup)."""
        self.bodies = [body.copy() for body in self.initial_bodies]
        self.release()

    def replace(self, bodies: Sequence[Body]):
        """Install a newly loaded configuration; it also becomes the reset snapshot."""
        self.initial_bodies = [body.copy() for body in bodies]
        self.bodies = [body.copy() for body in bodies]
        self.release()

    def select_at(self, point) -> Optional[int]:
        """Select the first body (in index order) whose circle contains ``point``.

        Returns:
            Selected index, or None if the point is over empty space
        """
        for i, body in enumerate(self.bodies):
            if body.contains(point, self.radius_scale, self.hit_tolerance):
                self.selected = i
                return i
        return None

    def drag_to(self, point):
        """Move the selected body to ``point`` and stop it."""
        if self.selected is None:
            return
        self.drag_target = np.array(point, dtype=np.float64).reshape(2)
        self._pin_selected()

    def release(self):
        self.selected = None
        self.drag_target = None

    def _pin_selected(self):
        if self.selected is None or self.drag_target is None:
            return
        body = self.bodies[self.selected]
        body.position[:] = self.drag_target
        body.velocity[:] = 0.0

    def snapshot(self) -> List[Body]:
        """Independent copies of the current bodies."""
        return [body.copy() for body in self.bodies]

    def draw_records(self) -> List[DrawRecord]:
        """Draw records for the renderer, one per body in order."""
        return [
            DrawRecord(
                position=(float(body.position[0]), float(body.position[1])),
                radius=body.radius(self.radius_scale),
                color=body.color.normalized(),
            )
            for body in self.bodies
        ]
