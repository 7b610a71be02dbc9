"""Body registry with an explicit anchor role."""

import warnings
from typing import Any, List, Optional, Tuple
import numpy as np
from solar_sim.physics.body import Body
from solar_sim.utils.config import SimulationConfig

BodyId = int


class BodyRegistry:
    """Holds the anchor (fixed gravity source) and the ordered orbiters.

    The ordered view returned by ``bodies()`` always has the anchor at index 0
    followed by orbiters in insertion order; a ``BodyId`` is an index into that
    view. Bodies are never removed.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """Initialize registry.

        Args:
            config: Simulation configuration (default: SimulationConfig())
        """
        self.config = config or SimulationConfig()
        self._anchor: Optional[Body] = None
        self._orbiters: List[Body] = []

    @property
    def anchor(self) -> Optional[Body]:
        """The gravity source, or None before the first body is added."""
        return self._anchor

    @property
    def orbiters(self) -> Tuple[Body, ...]:
        return tuple(self._orbiters)

    def add_body(self, position, velocity, mass: float, radius: float, color: Any) -> BodyId:
        """Append a body; the first one added becomes the anchor.

        Args:
            position: 2D position
            velocity: 2D velocity (ignored for the anchor, which never moves)
            mass: Mass (> 0)
            radius: Display radius (> 0)
            color: Display color

        Returns:
            BodyId of the new body
        """
        body = Body(
            position,
            velocity,
            mass,
            radius,
            color,
            history_capacity=self.config.history_capacity,
        )
        if self._anchor is None:
            if np.any(body.velocity != 0.0):
                warnings.warn(
                    f"Anchor body added with non-zero velocity {body.velocity.tolist()}; "
                    f"the anchor is held fixed and its velocity is never applied.",
                    UserWarning
                )
            self._anchor = body
            return 0
        self._orbiters.append(body)
        return len(self._orbiters)

    def bodies(self) -> Tuple[Body, ...]:
        """Return all bodies, anchor first."""
        if self._anchor is None:
            return ()
        return (self._anchor, *self._orbiters)

    def __len__(self) -> int:
        return len(self._orbiters) + (0 if self._anchor is None else 1)

    def __getitem__(self, body_id: BodyId) -> Body:
        return self.bodies()[body_id]

    def get_state(self):
        """Get orbiter state as arrays.

        Returns:
            Tuple of (positions (n, 2), velocities (n, 2), masses (n,))
        """
        n = len(self._orbiters)
        positions = np.empty((n, 2), dtype=np.float64)
        velocities = np.empty((n, 2), dtype=np.float64)
        masses = np.empty(n, dtype=np.float64)
        for i, body in enumerate(self._orbiters):
            positions[i] = body.position
            velocities[i] = body.velocity
            masses[i] = body.mass
        return positions, velocities, masses

    def set_state(self, positions, velocities):
        """Write integrated orbiter state back and record orbit history.

        Only the integrator step should call this.
        """
        for i, body in enumerate(self._orbiters):
            body.velocity = np.array(velocities[i], dtype=np.float64)
            body.position = np.array(positions[i], dtype=np.float64)
            body.orbit_history.append(body.position)
