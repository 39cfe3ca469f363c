"""Explicit Euler integrator (first order)."""

from solar_sim.physics.integrators.base import Integrator


class EulerIntegrator(Integrator):
    """Explicit Euler method.

    Both updates are drawn from the state at step n:
    r_new = r + v*dt, then v_new = v + a*dt.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def advance(self, body, dt: float):
        body.advance_position(dt)
        body.advance_velocity(dt)
