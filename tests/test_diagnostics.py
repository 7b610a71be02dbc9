"""Tests for orbital diagnostics."""

import numpy as np
from solar_sim.physics.diagnostics import Diagnostics, circular_speed


def test_potential_outside_floor_is_keplerian():
    """Test phi = -G * M / r beyond the distance floor."""
    diagnostics = Diagnostics(G=1.0, dist_floor=1.0)

    phi = diagnostics.potential(1000.0, [2.0, 10.0])

    assert np.allclose(phi, [-500.0, -100.0])


def test_potential_inside_floor_matches_harmonic_field():
    """Test the inner potential is continuous and its gradient matches the force law."""
    diagnostics = Diagnostics(G=1.0, dist_floor=2.0)
    GM = 1000.0

    at_floor = diagnostics.potential(GM, [2.0 - 1e-9, 2.0])
    assert np.allclose(at_floor[0], at_floor[1])
    assert np.allclose(diagnostics.potential(GM, [0.0]), [-1.5 * GM / 2.0])

    # dphi/dr = G * M * r / floor^3 inside the floor
    r, h = 1.0, 1e-6
    slope = (diagnostics.potential(GM, [r + h]) - diagnostics.potential(GM, [r - h])) / (2 * h)
    assert np.allclose(slope, GM * r / 2.0 ** 3, rtol=1e-6)


def test_orbital_elements_circular_orbit():
    """Test energy and angular momentum of a circular orbit."""
    diagnostics = Diagnostics(G=1.0)
    v = circular_speed(1.0, 1000.0, 10.0)

    elements = diagnostics.compute_orbital_elements((0.0, 0.0), 1000.0, [[10.0, 0.0]], [[0.0, v]])

    assert np.allclose(elements['radius'], [10.0])
    assert np.allclose(elements['energy'], [-50.0])
    assert np.allclose(elements['angular_momentum'], [100.0])
    assert diagnostics.compute_bound_fraction((0.0, 0.0), 1000.0, [[10.0, 0.0]], [[0.0, v]]) == 1.0


def test_coincident_orbiter_energy_is_finite():
    """Test the energy at the source position is the bottom of the well."""
    diagnostics = Diagnostics(G=1.0, dist_floor=1.0)

    elements = diagnostics.compute_orbital_elements((5.0, 5.0), 1000.0, [[5.0, 5.0]], [[0.0, 0.0]])

    assert np.allclose(elements['energy'], [-1500.0])
