"""Body document I/O for saving and loading configurations.

A document is an ordered list of records::

    [{"pos": [x, y], "vel": [x, y], "mass": m,
      "color": {"red": r, "green": g, "blue": b}}, ...]

Documents hold unit coordinates. Positions and velocities are multiplied by the
display scale on load and divided by it on save, so files do not depend on the
scale the simulation runs at. An ``acc`` entry is accepted and ignored.
"""

import json
import math
import numbers
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import numpy as np
import yaml

from gravity_sandbox.physics.body import Body, Color
from gravity_sandbox.physics.constants import DISPLAY_SCALE

PathLike = Union[str, Path]


class DocumentError(ValueError):
    """Raised when a body document is malformed or out of contract."""


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def _finite_float(value: Any, message: str) -> float:
    """Convert a document number to float, rejecting NaN, infinities and overflow."""
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise DocumentError(message)
    try:
        number = float(value)
    except OverflowError:
        # Integer literals beyond float range
        raise DocumentError(message) from None
    if not math.isfinite(number):
        raise DocumentError(message)
    return number


def _parse_vector(record: Dict[str, Any], key: str, index: int) -> List[float]:
    value = record.get(key)
    message = f"Body {index}: '{key}' must be a list of two finite numbers"
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise DocumentError(message)
    return [_finite_float(v, message) for v in value]


def _parse_color(value: Any, index: int) -> Color:
    if isinstance(value, dict):
        try:
            channels = [value['red'], value['green'], value['blue']]
        except KeyError as e:
            raise DocumentError(f"Body {index}: color is missing channel {e}") from None
    elif isinstance(value, (list, tuple)) and len(value) == 3:
        channels = list(value)
    else:
        raise DocumentError(f"Body {index}: 'color' must be {{red, green, blue}} or [r, g, b]")

    for channel in channels:
        if not isinstance(channel, int) or isinstance(channel, bool) or not 0 <= channel <= 255:
            raise DocumentError(f"Body {index}: color channels must be integers in 0..255")
    return Color(*channels)


def bodies_from_records(records: Any, scale: float = DISPLAY_SCALE) -> List[Body]:
    """Convert parsed document records to bodies in simulation coordinates.

    Args:
        records: Parsed document (list of mappings)
        scale: Display scale applied to positions and velocities

    Returns:
        List of bodies in document order

    Raises:
        DocumentError: If the document does not match the schema
    """
    if not isinstance(records, list):
        raise DocumentError("Document must be a list of body records")

    bodies = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise DocumentError(f"Body {index}: record must be a mapping")

        position = _parse_vector(record, 'pos', index)
        velocity = _parse_vector(record, 'vel', index)

        mass = _finite_float(record.get('mass'), f"Body {index}: 'mass' must be a finite number")
        if mass <= 0:
            raise DocumentError(f"Body {index}: 'mass' must be positive, got {mass}")

        color = _parse_color(record.get('color'), index)

        bodies.append(Body.create(
            np.multiply(position, scale),
            np.multiply(velocity, scale),
            mass,
            color,
        ))
    return bodies


def bodies_to_records(
    bodies: Sequence[Body],
    scale: float = DISPLAY_SCALE,
    include_acc: bool = False
) -> List[Dict[str, Any]]:
    """Convert bodies to document records in unit coordinates.

    Args:
        bodies: Bodies in simulation coordinates
        scale: Display scale removed from positions and velocities
        include_acc: Write a zero 'acc' entry for readers that expect one
    """
    records = []
    for body in bodies:
        record = {
            'pos': (body.position / scale).tolist(),
            'vel': (body.velocity / scale).tolist(),
        }
        if include_acc:
            record['acc'] = [0.0, 0.0]
        record['mass'] = body.mass
        record['color'] = {
            'red': body.color.red,
            'green': body.color.green,
            'blue': body.color.blue,
        }
        records.append(record)
    return records


def load_bodies(input_path: PathLike, scale: float = DISPLAY_SCALE) -> List[Body]:
    """Load bodies from a document file.

    Args:
        input_path: Input file path (.json, or .yaml/.yml)
        scale: Display scale applied on load

    Returns:
        Bodies in simulation coordinates

    Raises:
        OSError: If the file cannot be read
        DocumentError: If the file cannot be parsed or fails validation
    """
    input_path = Path(input_path)

    with open(input_path, 'r', encoding='utf-8') as f:
        try:
            if _is_yaml(input_path):
                records = yaml.safe_load(f)
            else:
                records = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise DocumentError(f"Unable to parse {input_path}: {e}") from e

    return bodies_from_records(records, scale)


def save_bodies(
    output_path: PathLike,
    bodies: Sequence[Body],
    scale: float = DISPLAY_SCALE,
    include_acc: bool = False
):
    """Save bodies to a document file, creating parent directories.

    Args:
        output_path: Output file path (.json, or .yaml/.yml)
        bodies: Bodies in simulation coordinates
        scale: Display scale removed on save
        include_acc: Write a zero 'acc' entry per record

    Raises:
        OSError: If the directory or file cannot be created or written
    """
    output_path = Path(output_path)
    records = bodies_to_records(bodies, scale, include_acc=include_acc)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        if _is_yaml(output_path):
            yaml.safe_dump(records, f, default_flow_style=None, sort_keys=False)
        else:
            json.dump(records, f, indent=2)
