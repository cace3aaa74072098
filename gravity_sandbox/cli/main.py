"""CLI main entry point."""

import argparse
import sys

import numpy as np
import yaml

from gravity_sandbox.physics.diagnostics import Diagnostics
from gravity_sandbox.physics.simulation_state import SimulationState
from gravity_sandbox.io.state_io import save_bodies
from gravity_sandbox.utils.config import Config, StartupError, load_config, load_startup_bodies


def build_config(args) -> Config:
    """Settings file first, then command-line overrides."""
    config = load_config(args.settings) if args.settings else Config()
    if args.bodies is not None:
        config.bodies_path = args.bodies
    if args.integrator is not None:
        config.integrator = args.integrator
    if args.force_method is not None:
        config.force_method = args.force_method
    if args.paused:
        config.start_running = False
    if args.fullscreen:
        config.fullscreen = True
    return config


def run_headless(state: SimulationState, config: Config, args):
    """Run a fixed number of ticks without a window, printing diagnostics."""
    diagnostics = Diagnostics(G=config.G, softening=config.softening)
    state.running = True

    K0, U0, E0 = diagnostics.compute_energies(state.bodies)
    P0 = np.linalg.norm(diagnostics.momentum(state.bodies))

    print(f"Running {args.steps} steps: {len(state.bodies)} bodies, "
          f"integrator: {state.integrator.name}, dt: {state.dt}")
    print(f"{'Step':<8} {'K':<14} {'U':<14} {'E':<14} {'dE/E0':<10} {'|P|':<12}")
    print("-" * 76)
    print(f"{0:<8} {K0:<14.6g} {U0:<14.6g} {E0:<14.6g} {0.0:<10.4f}% {P0:<12.4g}")

    for step in range(1, args.steps + 1):
        state.step()
        if step % args.debug_every == 0 or step == args.steps:
            K, U, E = diagnostics.compute_energies(state.bodies)
            P = np.linalg.norm(diagnostics.momentum(state.bodies))
            dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
            print(f"{step:<8} {K:<14.6g} {U:<14.6g} {E:<14.6g} {dE:<10.4f}% {P:<12.4g}")

    if args.save_state:
        save_bodies(args.save_state, state.bodies, config.display_scale)
        print(f"State saved to {args.save_state}")

    print("Simulation complete!")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Gravity Sandbox - interactive 2D body simulation")

    parser.add_argument('--bodies', type=str, default=None,
                        help='Startup body document (default: config.json beside the program)')
    parser.add_argument('--settings', type=str, default=None,
                        help='Settings file (.json or .yaml)')
    parser.add_argument('--paused', action='store_true',
                        help='Start paused (press space to run)')
    parser.add_argument('--fullscreen', action='store_true',
                        help='Open the window full-screen')
    parser.add_argument('--integrator', type=str, default=None,
                        choices=['symplectic_euler', 'euler'],
                        help='Numerical integrator (default: symplectic_euler)')
    parser.add_argument('--force-method', type=str, default=None,
                        choices=['vectorized', 'direct'],
                        help='Force evaluation method (default: vectorized)')

    # Headless mode
    parser.add_argument('--headless', action='store_true',
                        help='Run without a window and print diagnostics')
    parser.add_argument('--steps', type=int, default=1000,
                        help='Number of ticks in headless mode')
    parser.add_argument('--debug-every', type=int, default=100,
                        help='Print diagnostics every N ticks in headless mode')
    parser.add_argument('--save-state', type=str, default=None,
                        help='Save final bodies to file in headless mode')

    args = parser.parse_args(argv)

    if args.steps < 0 or args.debug_every < 1:
        parser.error("--steps must be >= 0 and --debug-every >= 1")

    try:
        config = build_config(args)
        bodies = load_startup_bodies(config)
        state = SimulationState.from_config(bodies, config)
    except (StartupError, OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.headless:
        run_headless(state, config, args)
        return

    from gravity_sandbox.ui.main import run_gui
    print("Controls: space = run/pause, r = reset, s = save, l = load, drag bodies with the left mouse button")
    run_gui(state, config)


if __name__ == '__main__':
    main()
