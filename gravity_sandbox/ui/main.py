"""Interactive application: matplotlib window driving the tick loop."""

from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from gravity_sandbox.interaction.controller import InteractionController
from gravity_sandbox.interaction.signals import Reset
from gravity_sandbox.physics.diagnostics import Diagnostics
from gravity_sandbox.physics.simulation_state import SimulationState
from gravity_sandbox.render.base import Renderer
from gravity_sandbox.render.renderer_2d import Renderer2D
from gravity_sandbox.ui.dialogs import FileDialogs
from gravity_sandbox.utils.config import Config


class SandboxApp:
    """Runs one tick per animation frame: poll input, apply, step, draw."""

    def __init__(self, state: SimulationState, config: Config, renderer: Optional[Renderer] = None):
        self.state = state
        self.config = config
        self.controller = InteractionController(state, display_scale=config.display_scale)
        self.diagnostics = Diagnostics(G=config.G, softening=config.softening)

        if renderer is None:
            dialogs = FileDialogs()
            renderer = Renderer2D(
                figsize=config.figsize,
                trail_length=config.trail_length,
                view_extent=2.0 * config.display_scale,
                fullscreen=config.fullscreen,
                ask_save_path=dialogs.ask_save_path,
                ask_load_path=dialogs.ask_load_path,
            )
        self.renderer = renderer
        self.animation: Optional[FuncAnimation] = None
        self._was_running = state.running

    def tick(self, _frame=None):
        """Process one tick."""
        signals = self.renderer.poll_signals()
        snapshot = self.state.initial_bodies
        records = self.controller.tick(signals)
        # Reset, or a load that succeeded: old trails belong to bodies no longer on screen
        if self.state.initial_bodies is not snapshot or any(isinstance(s, Reset) for s in signals):
            self.renderer.reset_trails()
        self.renderer.render(records)
        if self.state.running != self._was_running or (self.state.running and self.state.step_count % 30 == 0):
            self._update_title()
        self._was_running = self.state.running

    def _update_title(self):
        _, _, energy = self.diagnostics.compute_energies(self.state.bodies)
        status = "running" if self.state.running else "paused"
        self.renderer.set_title(
            f"Gravity Sandbox - {status} - step {self.state.step_count} - E = {energy:.4g}"
        )

    def run(self):
        """Open the window and block until it is closed."""
        self.renderer.render(self.state.draw_records())
        fig = getattr(self.renderer, 'fig', None)
        if fig is None:
            raise RuntimeError("Renderer has no figure to animate")
        interval_ms = max(1, int(1000 / self.config.fps))
        self.animation = FuncAnimation(fig, self.tick, interval=interval_ms, cache_frame_data=False)
        self._update_title()
        plt.show()
        self.renderer.close()


def run_gui(state: SimulationState, config: Config):
    """Run the interactive sandbox."""
    app = SandboxApp(state, config)
    app.run()
