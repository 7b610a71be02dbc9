"""
Solar Simulator - a fixed central mass with orbiting bodies.

Features:
- Single-source gravity with a distance floor
- Semi-implicit Euler frame stepping with a time multiplier
- Bounded per-body orbit history for trailing paths
- Solar system preset and headless CLI
"""

__version__ = "0.1.0"

from solar_sim.api import create_simulation, add_body, step, bodies, BodyView
from solar_sim.physics.registry import BodyRegistry
from solar_sim.physics.simulator import Simulator
from solar_sim.utils.config import SimulationConfig

__all__ = [
    "create_simulation",
    "add_body",
    "step",
    "bodies",
    "BodyView",
    "BodyRegistry",
    "Simulator",
    "SimulationConfig",
]
