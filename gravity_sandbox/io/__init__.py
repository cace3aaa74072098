"""I/O utilities for body documents."""

from gravity_sandbox.io.state_io import (
    DocumentError, load_bodies, save_bodies, bodies_from_records, bodies_to_records,
)

__all__ = ["DocumentError", "load_bodies", "save_bodies", "bodies_from_records", "bodies_to_records"]
