"""Interaction controller: applies input signals to the simulation state."""

import sys
from typing import Iterable, List

from gravity_sandbox.interaction.signals import (
    ToggleRun, Reset, PointerDown, PointerHeld, PointerUp, SaveRequest, LoadRequest, Signal,
)
from gravity_sandbox.io.state_io import DocumentError, load_bodies, save_bodies
from gravity_sandbox.physics.body import DrawRecord
from gravity_sandbox.physics.constants import DISPLAY_SCALE
from gravity_sandbox.physics.simulation_state import SimulationState


class InteractionController:
    """Translates one tick's batch of signals into SimulationState mutations.

    Save and load failures are reported on stderr and never reach the
    physics state.
    """

    def __init__(self, state: SimulationState, display_scale: float = DISPLAY_SCALE):
        self.state = state
        self.display_scale = display_scale
        # Whether ToggleRun was part of the previous tick's batch
        self._toggle_was_active = False

    def tick(self, signals: Iterable[Signal]) -> List[DrawRecord]:
        """Apply signals, advance physics once, return what to draw."""
        self.apply(signals)
        self.state.step()
        return self.state.draw_records()

    def apply(self, signals: Iterable[Signal]):
        """Apply one tick's batch of signals in order."""
        toggle_active = False
        for signal in signals:
            if isinstance(signal, ToggleRun):
                if not toggle_active and not self._toggle_was_active:
                    self.state.toggle_running()
                toggle_active = True
            elif isinstance(signal, Reset):
                self.state.reset()
            elif isinstance(signal, (PointerDown, PointerHeld)):
                self._pointer(signal.point)
            elif isinstance(signal, PointerUp):
                self.state.release()
            elif isinstance(signal, SaveRequest):
                if signal.path is not None:
                    self.save(signal.path)
            elif isinstance(signal, LoadRequest):
                if signal.path is not None:
                    self.load(signal.path)
            else:
                raise TypeError(f"Unknown signal: {signal!r}")
        self._toggle_was_active = toggle_active

    def _pointer(self, point):
        if self.state.selected is not None:
            self.state.drag_to(point)
        else:
            self.state.select_at(point)

    def save(self, path) -> bool:
        """Write the current bodies to ``path`` in unit coordinates.

        Returns:
            True on success, False if the write failed (state is untouched either way)
        """
        try:
            save_bodies(path, self.state.bodies, self.display_scale)
        except OSError as e:
            print(f"Warning: unable to save bodies to {path}: {e}", file=sys.stderr)
            return False
        print(f"Saved {len(self.state.bodies)} bodies to {path}")
        return True

    def load(self, path) -> bool:
        """Load bodies from ``path`` and make them the new reset snapshot.

        Returns:
            True on success, False if the read failed (state is unchanged)
        """
        try:
            bodies = load_bodies(path, self.display_scale)
        except (OSError, DocumentError) as e:
            print(f"Warning: unable to load bodies from {path}: {e}", file=sys.stderr)
            return False
        self.state.replace(bodies)
        print(f"Loaded {len(bodies)} bodies from {path}")
        return True
