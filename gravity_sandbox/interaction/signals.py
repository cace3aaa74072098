"""Discrete input signals delivered to the controller once per tick."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class ToggleRun:
    """Run/pause key is active this tick (edge-detected by the controller)."""


@dataclass(frozen=True)
class Reset:
    """Restore the bodies present after the last load."""


@dataclass(frozen=True)
class PointerDown:
    point: Point


@dataclass(frozen=True)
class PointerHeld:
    point: Point


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class SaveRequest:
    """Save to ``path``; ``None`` means the user cancelled."""
    path: Optional[Union[str, Path]] = None


@dataclass(frozen=True)
class LoadRequest:
    """Load from ``path``; ``None`` means the user cancelled."""
    path: Optional[Union[str, Path]] = None


Signal = Union[ToggleRun, Reset, PointerDown, PointerHeld, PointerUp, SaveRequest, LoadRequest]
