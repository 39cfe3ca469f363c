"""Numerical integrators for N-body simulations."""

from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.euler import EulerIntegrator
from solar_sim.physics.integrators.euler_cromer import EulerCromerIntegrator

INTEGRATORS = {
    "euler": EulerIntegrator,
    "euler-cromer": EulerCromerIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get integrator by name.

    Args:
        name: 'euler' or 'euler-cromer' (underscores accepted)

    Returns:
        New integrator instance
    """
    key = name.lower().replace("_", "-")
    integrator_class = INTEGRATORS.get(key)
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "Integrator",
    "EulerIntegrator",
    "EulerCromerIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
