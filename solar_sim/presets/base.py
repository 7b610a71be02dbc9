"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import Optional
from solar_sim.physics.registry import BodyRegistry
from solar_sim.utils.config import SimulationConfig


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    def __init__(self, config: Optional[SimulationConfig] = None):
        """Initialize preset.

        Args:
            config: Simulation configuration (provides G, AU and center)
        """
        self.config = config or SimulationConfig()

    @abstractmethod
    def populate(self, registry: BodyRegistry) -> BodyRegistry:
        """Add the anchor and orbiters to an empty registry.

        Returns:
            The same registry, for chaining
        """
        pass

    def build(self) -> BodyRegistry:
        """Create a fresh registry from this preset."""
        return self.populate(BodyRegistry(self.config))

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
