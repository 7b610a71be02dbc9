"""Preset scenarios."""

from typing import Optional
from solar_sim.presets.base import Preset
from solar_sim.presets.solar_system import SolarSystem, Planet, PLANETS
from solar_sim.utils.config import SimulationConfig

PRESETS = {
    'solar_system': SolarSystem,
}


def get_preset(name: str, config: Optional[SimulationConfig] = None, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(config, **kwargs)


__all__ = [
    "Preset",
    "SolarSystem",
    "Planet",
    "PLANETS",
    "PRESETS",
    "get_preset",
]
