"""Plain function API consumed by a rendering layer."""

from typing import Any, NamedTuple, Optional, Tuple
import numpy as np
from solar_sim.physics.registry import BodyRegistry, BodyId
from solar_sim.physics.simulator import advance
from solar_sim.utils.config import SimulationConfig


class BodyView(NamedTuple):
    """Read-only snapshot of a body for drawing."""
    position: np.ndarray
    radius: float
    color: Any
    orbit_history: np.ndarray


def create_simulation(config: Optional[SimulationConfig] = None) -> BodyRegistry:
    """Create an empty registry bound to a configuration."""
    return BodyRegistry(config)


def add_body(registry: BodyRegistry, position, velocity, mass: float, radius: float, color: Any) -> BodyId:
    """Add a body; the first body added is the fixed anchor."""
    return registry.add_body(position, velocity, mass, radius, color)


def step(
    registry: BodyRegistry,
    dt: float,
    time_scale: Optional[float] = None,
    config: Optional[SimulationConfig] = None
):
    """Advance all orbiters by one frame of ``dt`` real seconds."""
    config = config or registry.config
    if time_scale is None:
        time_scale = config.time_scale
    advance(registry, dt, time_scale, config)


def bodies(registry: BodyRegistry) -> Tuple[BodyView, ...]:
    """Snapshot every body, anchor first."""
    views = []
    for body in registry.bodies():
        position = body.position.copy()
        history = body.orbit_history.to_array()
        position.flags.writeable = False
        history.flags.writeable = False
        views.append(BodyView(position, body.radius, body.color, history))
    return tuple(views)
