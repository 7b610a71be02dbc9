"""Single-source gravity field.

Orbiters feel only the anchor; orbiter-orbiter attraction is not modeled.
"""

import numpy as np


def gravitational_acceleration(
    source_position,
    source_mass: float,
    positions,
    G: float,
    dist_floor: float = 1.0
) -> np.ndarray:
    """Compute the acceleration of each orbiter toward the source.

    For each orbiter:
        delta = source_position - position
        dist  = max(|delta|, dist_floor)
        a     = G * source_mass / dist^2 * delta / dist

    The orbiter's own mass cancels (F / m_i), so it is not an input. Inside the
    floor the direction is delta / dist_floor rather than a unit vector, which
    goes to zero at coincidence instead of producing NaN.

    Args:
        source_position: Anchor position (2,)
        source_mass: Anchor mass
        positions: Orbiter positions (n, 2)
        G: Gravitational constant
        dist_floor: Minimum distance used in the force law

    Returns:
        Accelerations (n, 2)
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    delta = np.asarray(source_position, dtype=np.float64) - positions
    dist = np.maximum(np.linalg.norm(delta, axis=1), dist_floor)
    magnitude = G * source_mass / (dist * dist)
    return (magnitude / dist)[:, None] * delta
