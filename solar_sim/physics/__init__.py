"""Physics engine for anchor-and-orbiter simulations."""

from solar_sim.physics.body import Body, OrbitHistory
from solar_sim.physics.registry import BodyRegistry
from solar_sim.physics.simulator import Simulator, advance

__all__ = ["Body", "OrbitHistory", "BodyRegistry", "Simulator", "advance"]
