"""Numerical integrators for the body simulation."""

from gravity_sandbox.physics.integrators.base import Integrator
from gravity_sandbox.physics.integrators.euler import EulerIntegrator
from gravity_sandbox.physics.integrators.symplectic_euler import SymplecticEulerIntegrator

_INTEGRATORS = {
    'symplectic_euler': SymplecticEulerIntegrator,
    'euler': EulerIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get integrator by name.
    
    Raises:
        ValueError: If the name is unknown
    """
    integrator_class = _INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(_INTEGRATORS.keys())}")
    return integrator_class()


__all__ = ["Integrator", "EulerIntegrator", "SymplecticEulerIntegrator", "get_integrator"]
