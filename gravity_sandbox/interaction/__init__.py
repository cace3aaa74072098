"""Input signals and the controller that applies them."""

from gravity_sandbox.interaction.controller import InteractionController
from gravity_sandbox.interaction.signals import (
    ToggleRun, Reset, PointerDown, PointerHeld, PointerUp, SaveRequest, LoadRequest,
)

__all__ = [
    "InteractionController",
    "ToggleRun", "Reset", "PointerDown", "PointerHeld", "PointerUp", "SaveRequest", "LoadRequest",
]
