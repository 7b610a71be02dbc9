"""Frame stepping and the main simulator controller."""

from typing import Callable, Optional
import numpy as np
from solar_sim.physics.registry import BodyRegistry
from solar_sim.physics.gravity import gravitational_acceleration
from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators import get_integrator
from solar_sim.physics.diagnostics import Diagnostics
from solar_sim.utils.config import SimulationConfig


def advance(
    registry: BodyRegistry,
    dt: float,
    time_scale: float,
    config: Optional[SimulationConfig] = None,
    integrator: Optional[Integrator] = None
) -> float:
    """Advance every orbiter by one frame.

    Accelerations are computed for all orbiters from the current state before
    any of them is moved; the anchor is never touched. Non-positive ``dt`` is
    accepted and simply advances zero or negative simulated time.

    Args:
        registry: Body registry to mutate in place
        dt: Elapsed real time for this frame (seconds)
        time_scale: Simulated seconds per real second
        config: Physical constants (default: the registry's config)
        integrator: Integrator to use (default: from config.integrator)

    Returns:
        Simulated time advanced (dt * time_scale)
    """
    config = config or registry.config
    integrator = integrator or get_integrator(config.integrator)
    anchor = registry.anchor
    if anchor is None:
        raise RuntimeError("Cannot step a simulation without an anchor body")

    step = dt * time_scale
    if not registry.orbiters:
        return step

    positions, velocities, _ = registry.get_state()
    accelerations = gravitational_acceleration(
        anchor.position,
        anchor.mass,
        positions,
        G=config.G,
        dist_floor=config.dist_floor,
    )
    new_positions, new_velocities = integrator.step(positions, velocities, accelerations, step)
    registry.set_state(new_positions, new_velocities)
    return step


class Simulator:
    """Main simulation controller.

    Owns the frame clock bookkeeping around ``advance``.
    """

    def __init__(
        self,
        registry: BodyRegistry,
        config: Optional[SimulationConfig] = None,
        integrator: Optional[Integrator] = None
    ):
        """Initialize simulator.

        Args:
            registry: Populated body registry
            config: Simulation configuration (default: the registry's config)
            integrator: Integrator to use (default: from config.integrator)
        """
        self.registry = registry
        self.config = config or registry.config
        self.integrator = integrator or get_integrator(self.config.integrator)
        self.time_scale = self.config.time_scale

        self.time = 0.0
        self.step_count = 0
        self.paused = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.debug_table: bool = False
        self.debug_table_interval: int = 100

    def step(self, dt: Optional[float] = None, time_scale: Optional[float] = None):
        """Perform one frame.

        Args:
            dt: Elapsed real time (default: config.dt)
            time_scale: Override for this frame (default: self.time_scale)
        """
        if self.paused:
            return
        dt = self.config.dt if dt is None else dt
        time_scale = self.time_scale if time_scale is None else time_scale

        self.time += advance(self.registry, dt, time_scale, self.config, self.integrator)
        self.step_count += 1

        if self.debug_table and (self.step_count % self.debug_table_interval == 0):
            self._log_orbit_table()

        if self.on_step_callback:
            self.on_step_callback(self)

    def _log_orbit_table(self):
        """Log radius, speed, specific energy and bound fraction."""
        anchor = self.registry.anchor
        positions, velocities, _ = self.registry.get_state()
        diagnostics = Diagnostics(self.config.G, self.config.dist_floor)
        radius = diagnostics.compute_orbital_elements(anchor.position, anchor.mass, positions, velocities)['radius']
        bound_frac = diagnostics.compute_bound_fraction(anchor.position, anchor.mass, positions, velocities)
        r_mean = float(np.mean(radius)) if radius.size else 0.0
        print(f"[Diag] step={self.step_count} t={self.time:.1f} r_mean={r_mean:.3f} bound={bound_frac:.2f}")

    def get_orbital_elements(self):
        """Per-orbiter diagnostics (see Diagnostics.compute_orbital_elements)."""
        anchor = self.registry.anchor
        positions, velocities, _ = self.registry.get_state()
        diagnostics = Diagnostics(self.config.G, self.config.dist_floor)
        return diagnostics.compute_orbital_elements(anchor.position, anchor.mass, positions, velocities)

    def run(self, n_frames: int, dt: Optional[float] = None):
        """Run simulation for a number of frames.

        Args:
            n_frames: Number of frames to run
            dt: Elapsed real time per frame (default: config.dt)
        """
        for _ in range(n_frames):
            if self.paused:
                return
            self.step(dt)

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_time_scale(self, time_scale: float):
        """Set time multiplier.

        Args:
            time_scale: Simulated seconds per real second
        """
        self.time_scale = time_scale

    def set_integrator(self, integrator: Integrator):
        """Set integrator."""
        self.integrator = integrator
