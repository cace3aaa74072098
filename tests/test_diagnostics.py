"""Tests for energy and momentum diagnostics."""

import math

import numpy as np
import pytest

from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.diagnostics import Diagnostics


def test_energy_calculation():
    """Test energy computation."""
    diagnostics = Diagnostics(G=1.0, softening=0.01)
    bodies = [
        Body.create([0.0, 0.0], [0.0, 0.0], 1.0),
        Body.create([1.0, 0.0], [0.0, 1.0], 1.0),
    ]
    
    K, U, E = diagnostics.compute_energies(bodies)
    
    assert K == pytest.approx(0.5)
    assert U == pytest.approx(-1.0)
    assert E == pytest.approx(K + U)


def test_potential_continuous_at_softening_radius():
    """The softened potential joins the Newtonian one without a jump."""
    diagnostics = Diagnostics(G=1.0, softening=4.0)
    
    def potential(r):
        return diagnostics.potential_energy([
            Body.create([0.0, 0.0], [0.0, 0.0], 1.0),
            Body.create([r, 0.0], [0.0, 0.0], 1.0),
        ])
    
    assert potential(2.0 - 1e-9) == pytest.approx(potential(2.0), abs=1e-6)
    # Inside: slope equals the capped force G*m*m/softening
    assert potential(1.5) - potential(1.0) == pytest.approx(0.5 * 1.0 / 4.0)
    assert potential(0.0) == pytest.approx(-0.5 - 2.0 / 4.0)


def test_momentum_and_center_of_mass():
    diagnostics = Diagnostics()
    bodies = [
        Body.create([0.0, 0.0], [1.0, 0.0], 1.0),
        Body.create([3.0, 0.0], [0.0, 2.0], 2.0),
    ]
    
    assert np.allclose(diagnostics.momentum(bodies), [1.0, 4.0])
    assert np.allclose(diagnostics.center_of_mass(bodies), [2.0, 0.0])
    assert diagnostics.angular_momentum(bodies) == pytest.approx(12.0)
    assert np.array_equal(diagnostics.center_of_mass([]), [0.0, 0.0])


def test_figure_eight_energy_in_unit_coordinates(figure_eight_at):
    """Scaling positions/velocities by S with G = S^3 scales the energy by S^2."""
    unit = Diagnostics(G=1.0, softening=1e-9).total_energy(figure_eight_at(scale=1.0))
    scaled = Diagnostics().total_energy(figure_eight_at())
    
    assert unit == pytest.approx(-1.2871, abs=1e-3)
    assert scaled == pytest.approx(unit * 250.0 ** 2, rel=1e-9)
