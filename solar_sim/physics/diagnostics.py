"""Orbital diagnostics for orbiters in the anchor's field."""

import numpy as np
from typing import Dict


def circular_speed(G: float, source_mass: float, distance: float) -> float:
    """Speed of a circular orbit at the given distance: sqrt(G * M / d)."""
    return float(np.sqrt(G * source_mass / distance))


class Diagnostics:
    """Compute per-orbiter quantities consistent with the floored force law."""

    def __init__(self, G: float, dist_floor: float = 1.0):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            dist_floor: Distance floor (must match the force calculation)
        """
        self.G = G
        self.dist_floor = dist_floor

    def potential(self, source_mass: float, radius) -> np.ndarray:
        """Specific potential of the floored field at the given radii."""
        radius = np.asarray(radius, dtype=np.float64)
        floor = self.dist_floor
        GM = self.G * source_mass
        outer = -GM / np.maximum(radius, floor)
        inner = GM * radius ** 2 / (2 * floor ** 3) - 1.5 * GM / floor
        return np.where(radius < floor, inner, outer)

    def compute_orbital_elements(self, source_position, source_mass: float, positions, velocities) -> Dict[str, np.ndarray]:
        """Compute radius, speed, specific energy and specific angular momentum.

        Specific energy uses the potential of the floored force law. Outside
        the floor it is Keplerian; inside it the field is harmonic:
            phi(r) = -G * M / r                                      r >= floor
            phi(r) = G * M * r^2 / (2 floor^3) - 3 G * M / (2 floor)   r <  floor
        which is continuous at r = floor. e = 0.5 * v^2 + phi(r)

        Args:
            source_position: Anchor position (2,)
            source_mass: Anchor mass
            positions: Orbiter positions (n, 2)
            velocities: Orbiter velocities (n, 2)

        Returns:
            Dict of (n,) arrays: radius, speed, energy, angular_momentum
        """
        rel = np.asarray(positions, dtype=np.float64).reshape(-1, 2) - np.asarray(source_position, dtype=np.float64)
        vel = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)

        radius = np.linalg.norm(rel, axis=1)
        speed = np.linalg.norm(vel, axis=1)
        energy = 0.5 * speed ** 2 + self.potential(source_mass, radius)
        # z component of r x v
        angular_momentum = rel[:, 0] * vel[:, 1] - rel[:, 1] * vel[:, 0]

        return {
            'radius': radius,
            'speed': speed,
            'energy': energy,
            'angular_momentum': angular_momentum,
        }

    def compute_bound_fraction(self, source_position, source_mass: float, positions, velocities) -> float:
        """Fraction of orbiters with negative specific energy."""
        energy = self.compute_orbital_elements(source_position, source_mass, positions, velocities)['energy']
        if energy.size == 0:
            return 0.0
        return float(np.mean(energy < 0.0))
