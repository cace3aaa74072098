"""Configuration management."""

import json
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from gravity_sandbox.io.state_io import DocumentError, load_bodies
from gravity_sandbox.physics import constants
from gravity_sandbox.physics.body import Body

STARTUP_BODIES_FILENAME = "config.json"


class StartupError(RuntimeError):
    """The startup body configuration could not be established."""


@dataclass
class Config:
    """Sandbox configuration."""
    # Simulation parameters
    dt: float = constants.TIME_STEP
    display_scale: float = constants.DISPLAY_SCALE
    G: Optional[float] = None  # None -> display_scale ** 3
    softening: float = constants.SOFTENING
    integrator: str = "symplectic_euler"
    force_method: str = "vectorized"
    start_running: bool = True

    # Interaction / drawing parameters
    radius_scale: float = constants.RADIUS_SCALE
    hit_tolerance: float = constants.HIT_TOLERANCE

    # Startup bodies (None -> config.json beside the program)
    bodies_path: Optional[str] = None

    # Rendering parameters
    fps: int = 60
    trail_length: int = 40
    figsize: Tuple[float, float] = (10.0, 10.0)
    fullscreen: bool = False

    def __post_init__(self):
        if self.G is None:
            self.G = self.display_scale ** 3
        self.figsize = tuple(self.figsize)


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return Config(**(data or {}))


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    data['figsize'] = list(data['figsize'])

    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)


def default_bodies_path() -> Path:
    """Startup document located beside the running program."""
    return Path(sys.argv[0]).resolve().parent / STARTUP_BODIES_FILENAME


def load_startup_bodies(config: Config) -> List[Body]:
    """Load the startup body list once at process start.

    Raises:
        StartupError: If the document is missing, unreadable or invalid
    """
    path = Path(config.bodies_path) if config.bodies_path else default_bodies_path()
    try:
        return load_bodies(path, config.display_scale)
    except (OSError, DocumentError) as e:
        raise StartupError(f"Unable to load startup bodies from {path}: {e}") from e
