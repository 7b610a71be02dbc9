"""Euler method integrators (first order)."""

from typing import Tuple
import numpy as np
from solar_sim.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit (symplectic) Euler.

    Velocity is updated first and the *new* velocity advances the position.
    Bounded energy error makes this the default for orbital motion.
    """

    @property
    def name(self) -> str:
        return "semi_implicit_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, accelerations, step: float) -> Tuple[np.ndarray, np.ndarray]:
        """v_new = v + a*h, r_new = r + v_new*h."""
        new_velocities = velocities + accelerations * step
        new_positions = positions + new_velocities * step
        return new_positions, new_velocities


class ExplicitEulerIntegrator(Integrator):
    """Explicit (forward) Euler - position uses the pre-update velocity.

    Orbits spiral outward; kept as a baseline for comparisons.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, accelerations, step: float) -> Tuple[np.ndarray, np.ndarray]:
        """v_new = v + a*h, r_new = r + v*h."""
        new_velocities = velocities + accelerations * step
        new_positions = positions + velocities * step
        return new_positions, new_velocities
