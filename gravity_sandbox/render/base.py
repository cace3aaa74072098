"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from gravity_sandbox.interaction.signals import Signal
from gravity_sandbox.physics.body import DrawRecord

__all__ = ["DrawRecord", "Renderer"]


class Renderer(ABC):
    """Abstract base class for renderers.

    A renderer draws the body sequence it is handed each tick and collects the
    user's input as signals for the interaction controller.
    """

    @abstractmethod
    def render(self, records: Sequence[DrawRecord]):
        """Render current frame.

        Args:
            records: One draw record per body, in body order
        """
        pass

    @abstractmethod
    def poll_signals(self) -> List[Signal]:
        """Return the signals gathered since the last poll."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass

    def reset_trails(self):
        """Forget drawing history; called when the body set is replaced."""

    def set_title(self, text: str):
        """Show a status line, if the renderer has somewhere to put one."""
