"""Shared fixtures for the test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest

from gravity_sandbox.physics.body import Body

# Classic figure-eight three-body solution (G = 1, unit masses)
FIGURE_EIGHT = [
    ((0.97000436, -0.24308753), (0.466203685, 0.43236573)),
    ((-0.97000436, 0.24308753), (0.466203685, 0.43236573)),
    ((0.0, 0.0), (-0.93240737, -0.86473146)),
]


def make_figure_eight(scale: float = 250.0):
    colors = [(255, 99, 71), (30, 144, 255), (50, 205, 50)]
    return [
        Body.create([p * scale for p in pos], [v * scale for v in vel], 1.0, color)
        for (pos, vel), color in zip(FIGURE_EIGHT, colors)
    ]


@pytest.fixture
def figure_eight_at():
    """Factory for figure-eight bodies at a given display scale."""
    return make_figure_eight


@pytest.fixture
def figure_eight():
    """Figure-eight bodies in simulation coordinates."""
    return make_figure_eight()


@pytest.fixture
def figure_eight_records():
    """Figure-eight as a unit-coordinate document."""
    return [
        {
            "pos": list(pos),
            "vel": list(vel),
            "acc": [0.0, 0.0],
            "mass": 1.0,
            "color": {"red": 10 * i, "green": 20 * i, "blue": 30 * i},
        }
        for i, (pos, vel) in enumerate(FIGURE_EIGHT)
    ]
