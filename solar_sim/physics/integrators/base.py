"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple
import numpy as np


class Integrator(ABC):
    """Abstract interface for numerical integrators."""

    @abstractmethod
    def step(self, positions, velocities, accelerations, step: float) -> Tuple[np.ndarray, np.ndarray]:
        """Perform one integration step.

        Args:
            positions: Current positions (n, 2)
            velocities: Current velocities (n, 2)
            accelerations: Accelerations at the current positions (n, 2)
            step: Simulated time advanced this frame (dt * time_scale)

        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (1 for both Euler variants)."""
        pass
