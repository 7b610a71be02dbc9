"""Configuration management."""

import json
import yaml
from typing import Dict, Any, Tuple
from pathlib import Path
from dataclasses import dataclass, asdict, field, fields, replace


@dataclass
class SimulationConfig:
    """Simulation configuration.

    Physical constants of the model live here instead of in module globals so
    that every integrator call receives them explicitly.
    """
    # Physical model
    G: float = 6.67e-11
    AU: float = 100.0
    time_scale: float = 100000.0
    dist_floor: float = 1.0

    # Bookkeeping
    history_capacity: int = 200

    # Runner parameters
    dt: float = 1.0 / 60.0
    integrator: str = "semi_implicit_euler"

    # Preset parameters
    preset: str = "solar_system"
    center: Tuple[float, float] = (540.0, 540.0)
    preset_params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.preset_params is None:
            self.preset_params = {}
        self.center = tuple(float(c) for c in self.center)
        if len(self.center) != 2:
            raise ValueError(f"center must have 2 components, got {len(self.center)}")
        if self.G <= 0:
            raise ValueError(f"G must be positive, got {self.G}")
        if self.AU <= 0:
            raise ValueError(f"AU must be positive, got {self.AU}")
        if self.dist_floor <= 0:
            raise ValueError(f"dist_floor must be positive, got {self.dist_floor}")
        if int(self.history_capacity) != self.history_capacity or self.history_capacity < 1:
            raise ValueError(f"history_capacity must be a positive integer, got {self.history_capacity}")
        self.history_capacity = int(self.history_capacity)

    def with_overrides(self, **overrides) -> "SimulationConfig":
        """Return a copy with the given fields replaced (None values are ignored)."""
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **overrides)


def _check_suffix(path: Path):
    if path.suffix not in ('.json', '.yaml', '.yml'):
        raise ValueError(f"Unsupported config format: {path.suffix}. Use .json or .yaml")


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        SimulationConfig object
    """
    config_path = Path(config_path)
    _check_suffix(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix == '.json':
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    data = data or {}
    unknown = sorted(set(data) - {fld.name for fld in fields(SimulationConfig)})
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {unknown}")

    return SimulationConfig(**data)


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    _check_suffix(output_path)
    data = asdict(config)
    data['center'] = list(data['center'])

    with open(output_path, 'w') as f:
        if output_path.suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, default_flow_style=False)
