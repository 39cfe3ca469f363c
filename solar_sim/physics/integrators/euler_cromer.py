"""Euler-Cromer (semi-implicit Euler) integrator."""

from solar_sim.physics.integrators.base import Integrator


class EulerCromerIntegrator(Integrator):
    """Euler-Cromer method - velocity first, then position with the new velocity.

    v_new = v + a*dt, then r_new = r + v_new*dt. Energy stays bounded on
    orbits, which makes it the default for this package.
    """

    @property
    def name(self) -> str:
        return "euler-cromer"

    @property
    def order(self) -> int:
        return 1

    def advance(self, body, dt: float):
        body.advance_velocity(dt)
        body.advance_position(dt)
