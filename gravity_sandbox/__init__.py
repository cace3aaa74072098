"""
Gravity Sandbox - an interactive 2D gravitational body simulation.

Features:
- Pairwise Newtonian gravity with softening
- Symplectic Euler integration at a fixed time step
- Pause, reset and drag bodies with the mouse
- Save/load body configurations as scale-normalized JSON or YAML documents
- Interactive matplotlib window and a headless CLI mode
"""

__version__ = "0.1.0"

from gravity_sandbox.physics.body import Body, Color
from gravity_sandbox.physics.simulation_state import SimulationState
from gravity_sandbox.interaction.controller import InteractionController
from gravity_sandbox.io.state_io import load_bodies, save_bodies

__all__ = [
    "Body",
    "Color",
    "SimulationState",
    "InteractionController",
    "load_bodies",
    "save_bodies",
]
