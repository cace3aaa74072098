"""Configuration utilities."""

from gravity_sandbox.utils.config import (
    Config, StartupError, load_config, save_config, default_bodies_path, load_startup_bodies,
)

__all__ = ["Config", "StartupError", "load_config", "save_config", "default_bodies_path", "load_startup_bodies"]
