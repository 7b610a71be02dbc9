"""Solar system preset: the Sun and eight planets on circular orbits."""

from typing import NamedTuple, Optional, Sequence, Tuple
from solar_sim.physics.registry import BodyRegistry
from solar_sim.physics.diagnostics import circular_speed
from solar_sim.presets.base import Preset
from solar_sim.utils.config import SimulationConfig

Color = Tuple[int, int, int]


class Planet(NamedTuple):
    name: str
    distance_au: float
    mass: float  # relative to Earth
    radius: float
    color: Color


PLANETS = (
    Planet("Mercury", 0.39, 0.055, 3.0, (130, 130, 130)),
    Planet("Venus", 0.72, 0.815, 4.0, (255, 161, 0)),
    Planet("Earth", 1.00, 1.0, 5.0, (0, 121, 241)),
    Planet("Mars", 1.52, 0.107, 4.0, (230, 41, 55)),
    Planet("Jupiter", 3.20, 317.8, 10.0, (127, 106, 79)),
    Planet("Saturn", 4.58, 95.2, 8.0, (255, 203, 0)),
    Planet("Uranus", 5.18, 14.5, 7.0, (102, 191, 255)),
    Planet("Neptune", 7.07, 17.1, 7.0, (0, 82, 172)),
)


class SolarSystem(Preset):
    """Fixed Sun at the configured center with planets started on its +x side.

    Each planet gets the circular speed sqrt(G * M / d) in +y, so every orbit
    runs counter-clockwise in simulation coordinates.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        sun_mass: float = 1.0e6,
        sun_radius: float = 20.0,
        sun_color: Color = (253, 249, 0),
        planets: Optional[Sequence[Planet]] = None
    ):
        """Initialize solar system preset.

        Args:
            config: Simulation configuration
            sun_mass: Anchor mass (field strength)
            sun_radius: Anchor display radius
            sun_color: Anchor display color
            planets: Planet table (default: PLANETS)
        """
        super().__init__(config)
        self.sun_mass = sun_mass
        self.sun_radius = sun_radius
        self.sun_color = sun_color
        self.planets = tuple(PLANETS if planets is None else planets)

    @property
    def name(self) -> str:
        return "solar_system"

    def populate(self, registry: BodyRegistry) -> BodyRegistry:
        """Add the Sun, then each planet in table order."""
        cx, cy = self.config.center
        registry.add_body((cx, cy), (0.0, 0.0), self.sun_mass, self.sun_radius, self.sun_color)

        for planet in self.planets:
            dist = planet.distance_au * self.config.AU
            speed = circular_speed(self.config.G, self.sun_mass, dist)
            registry.add_body((cx + dist, cy), (0.0, speed), planet.mass, planet.radius, planet.color)

        return registry
