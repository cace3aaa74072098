"""Interactive example: open the sandbox window on the figure-eight orbit."""

from pathlib import Path

from gravity_sandbox import SimulationState
from gravity_sandbox.ui.main import run_gui
from gravity_sandbox.utils.config import Config, load_startup_bodies


def main():
    """Space runs/pauses, r resets, s saves, l loads; drag bodies with the mouse."""
    config = Config(bodies_path=str(Path(__file__).parent / "config.json"), trail_length=60)
    bodies = load_startup_bodies(config)
    state = SimulationState.from_config(bodies, config)
    run_gui(state, config)


if __name__ == "__main__":
    main()
