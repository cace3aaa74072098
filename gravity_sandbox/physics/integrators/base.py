"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from gravity_sandbox.physics.body import Body


class Integrator(ABC):
    """Abstract interface for numerical integrators."""
    
    @abstractmethod
    def step(self, bodies: Sequence[Body], forces: np.ndarray, dt: float) -> None:
        """Advance every body by one tick, in place.
        
        Args:
            bodies: Bodies to advance
            forces: (n, 2) net forces for this tick, computed before any body moved
            dt: Time step
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
