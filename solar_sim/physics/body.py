"""Body state and bounded orbit history."""

from typing import Any, Iterator
import numpy as np


def as_vector(value, name: str = "vector") -> np.ndarray:
    """Convert a 2-component sequence to a float64 array of shape (2,)."""
    vec = np.array(value, dtype=np.float64)
    if vec.shape != (2,):
        raise ValueError(f"{name} must have shape (2,), got {vec.shape}")
    return vec


class OrbitHistory:
    """Fixed-capacity ring buffer of past positions.

    Samples are stored in a preallocated (capacity, 2) array. Once full, each
    append overwrites the oldest sample, so memory stays flat for the life of
    the simulation.
    """

    def __init__(self, capacity: int = 200):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._buffer = np.zeros((capacity, 2), dtype=np.float64)
        self._start = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._buffer.shape[0]

    def append(self, position):
        """Push a sample, evicting the oldest one if the buffer is full."""
        capacity = self.capacity
        if self._size < capacity:
            self._buffer[(self._start + self._size) % capacity] = position
            self._size += 1
        else:
            self._buffer[self._start] = position
            self._start = (self._start + 1) % capacity

    def clear(self):
        self._start = 0
        self._size = 0

    def to_array(self) -> np.ndarray:
        """Return a (len, 2) copy of the samples, oldest first."""
        idx = (self._start + np.arange(self._size)) % self.capacity
        return self._buffer[idx]

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index) -> np.ndarray:
        """Return a copy of one sample, or of a slice of samples oldest first."""
        if isinstance(index, slice):
            return self.to_array()[index]
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("orbit history index out of range")
        return self._buffer[(self._start + index) % self.capacity].copy()

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.to_array())

    def __repr__(self) -> str:
        return f"OrbitHistory(len={self._size}, capacity={self.capacity})"


class Body:
    """A simulated body.

    Mass, radius and color are fixed at creation. Position, velocity and the
    orbit history are mutated by the integrator only.
    """

    def __init__(
        self,
        position,
        velocity,
        mass: float,
        radius: float,
        color: Any,
        history_capacity: int = 200
    ):
        """Initialize body.

        Args:
            position: 2D position in simulation units
            velocity: 2D velocity in simulation units per simulated second
            mass: Mass (> 0)
            radius: Display radius (> 0), no physical effect
            color: Display color, no physical effect
            history_capacity: Maximum number of orbit history samples
        """
        if not mass > 0:
            raise ValueError(f"mass must be positive, got {mass}")
        if not radius > 0:
            raise ValueError(f"radius must be positive, got {radius}")
        self.position = as_vector(position, "position")
        self.velocity = as_vector(velocity, "velocity")
        self._mass = float(mass)
        self._radius = float(radius)
        self._color = color
        self.orbit_history = OrbitHistory(history_capacity)

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def color(self) -> Any:
        return self._color

    def __repr__(self) -> str:
        return (
            f"Body(position={self.position.tolist()}, velocity={self.velocity.tolist()}, "
            f"mass={self._mass}, radius={self._radius}, color={self._color!r})"
        )
