"""Numerical integrators for orbital simulations."""

from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.euler import SemiImplicitEulerIntegrator, ExplicitEulerIntegrator

INTEGRATORS = {
    'semi_implicit_euler': SemiImplicitEulerIntegrator,
    'euler': ExplicitEulerIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get integrator instance by name."""
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "Integrator",
    "SemiImplicitEulerIntegrator",
    "ExplicitEulerIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
