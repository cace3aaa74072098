"""Point-mass body representation."""

import math
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence, Tuple

import numpy as np

from gravity_sandbox.physics.constants import RADIUS_SCALE, HIT_TOLERANCE


class Color(NamedTuple):
    """RGB display color with 8-bit channels."""
    red: int
    green: int
    blue: int

    def normalized(self) -> Tuple[float, float, float]:
        """Return channels scaled to 0..1 for drawing APIs."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0)


class DrawRecord(NamedTuple):
    """Everything a renderer needs to draw one body as a filled circle."""
    position: Tuple[float, float]
    radius: float
    color: Tuple[float, float, float]  # normalized RGB, 0..1


def radius_for_mass(mass: float, radius_scale: float = RADIUS_SCALE) -> float:
    """Visual radius of a body: radius_scale * sqrt(mass / pi).

    Used for both drawing and hit-testing so the two always agree.
    """
    return radius_scale * math.sqrt(mass / math.pi)


def _vec2(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64).reshape(-1)
    if arr.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class Body:
    """A point mass in 2D.

    ``acceleration`` is scratch space for force accumulation; it is zero
    outside of a force-application step.
    """
    position: np.ndarray
    velocity: np.ndarray
    mass: float
    color: Color
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2))

    @classmethod
    def create(cls, position: Sequence[float], velocity: Sequence[float], mass: float,
               color=(255, 255, 255)) -> "Body":
        """Build a body with zero acceleration."""
        return cls(
            position=_vec2(position),
            velocity=_vec2(velocity),
            mass=float(mass),
            color=Color(*color),
        )

    def apply_force(self, force: np.ndarray):
        """Fold a force into the acceleration accumulator."""
        self.acceleration += np.asarray(force, dtype=np.float64) / self.mass

    def update(self, dt: float):
        """Semi-implicit Euler: velocity first, then position, then clear."""
        self.velocity += self.acceleration * dt
        self.position += self.velocity * dt
        self.acceleration[:] = 0.0

    def radius(self, radius_scale: float = RADIUS_SCALE) -> float:
        return radius_for_mass(self.mass, radius_scale)

    def contains(self, point: Sequence[float], radius_scale: float = RADIUS_SCALE,
                 tolerance: float = HIT_TOLERANCE) -> bool:
        """Whether ``point`` lies within the visual radius plus ``tolerance``."""
        distance = np.linalg.norm(self.position - np.asarray(point, dtype=np.float64))
        return bool(distance < self.radius(radius_scale) + tolerance)

    def copy(self) -> "Body":
        return Body(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            mass=self.mass,
            color=self.color,
            acceleration=self.acceleration.copy(),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Body):
            return NotImplemented
        return (
            np.array_equal(self.position, other.position)
            and np.array_equal(self.velocity, other.velocity)
            and np.array_equal(self.acceleration, other.acceleration)
            and self.mass == other.mass
            and self.color == other.color
        )
