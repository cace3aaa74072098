"""Physics engine for the body simulation."""

from gravity_sandbox.physics.body import Body, Color, DrawRecord, radius_for_mass
from gravity_sandbox.physics.force_calculator import ForceCalculator
from gravity_sandbox.physics.diagnostics import Diagnostics
from gravity_sandbox.physics.simulation_state import SimulationState

__all__ = ["Body", "Color", "DrawRecord", "radius_for_mass", "ForceCalculator", "Diagnostics", "SimulationState"]
