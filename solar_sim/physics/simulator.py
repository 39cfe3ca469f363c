"""Main simulator controller."""

import math
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from solar_sim.physics.body import Body
from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.euler_cromer import EulerCromerIntegrator
from solar_sim.physics.vector import PhysicsVector


def centre_of_mass(bodies: Sequence[Body]) -> PhysicsVector:
    """Mass-weighted mean position, sum(m_i * r_i) / sum(m_i).

    Raises:
        ValueError: If the total mass is zero (including an empty collection)
    """
    weighted = PhysicsVector.zero(3)
    total_mass = 0.0
    for body in bodies:
        weighted += body.position.scaled_by(body.mass)
        total_mass += body.mass
    if total_mass == 0.0:
        raise ValueError("Centre of mass is undefined for zero total mass")
    return PhysicsVector([c / total_mass for c in weighted], dim=3)


class Simulator:
    """Fixed-step simulation driver.

    Owns the ordered body collection and advances it one step at a time:
    recentre on the barycentre, accumulate every body's acceleration from the
    same snapshot, then advance every body with the chosen integrator.
    """

    def __init__(
        self,
        bodies: Sequence[Body],
        integrator: Optional[Integrator] = None,
        dt: float = 1.0,
        duration: float = 10.0,
    ):
        """Initialize simulator.

        Args:
            bodies: Ordered collection of bodies (kept, not copied)
            integrator: Update scheme (default: Euler-Cromer)
            dt: Time step in seconds
            duration: Total simulated time in seconds
        """
        if dt <= 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        if duration < 0:
            raise ValueError(f"Duration must be non-negative, got {duration}")
        if len(bodies) == 0:
            raise ValueError("Simulator needs at least one body")

        self.bodies: List[Body] = list(bodies)
        self.integrator = integrator or EulerCromerIntegrator()
        self.dt = float(dt)
        self.duration = float(duration)
        self.time = 0.0
        self.step_count = 0

        self.on_step_callback: Optional[Callable] = None

    @property
    def expected_steps(self) -> int:
        """Nominal step count, ceil(duration / dt).

        :meth:`run` loops on accumulated time, so rounding in ``time += dt`` can
        make it take one step more (dt=0.1, duration=1.0 runs 11 steps).
        """
        return math.ceil(self.duration / self.dt)

    def centre_of_mass(self) -> PhysicsVector:
        return centre_of_mass(self.bodies)

    def recentre(self) -> PhysicsVector:
        """Move the frame origin onto the barycentre.

        Returns:
            The centre of mass that was subtracted from every position
        """
        com = self.centre_of_mass()
        for body in self.bodies:
            body.position = body.position - com
        return com

    def step(self):
        """Perform one simulation step."""
        self.recentre()

        # All accelerations come from the same snapshot of positions.
        for body in self.bodies:
            body.accumulate_acceleration(self.bodies)
        for body in self.bodies:
            self.integrator.advance(body, self.dt)

        self.time += self.dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, on_step: Optional[Callable] = None) -> int:
        """Run until the simulated time reaches the configured duration.

        Args:
            on_step: Optional callback ``f(simulator)`` fired after every step,
                in addition to ``on_step_callback``

        Returns:
            Number of steps taken
        """
        steps = 0
        while self.time < self.duration:
            self.step()
            if on_step is not None:
                on_step(self)
            steps += 1
        return steps

    def run_steps(self, k: int):
        """Run exactly k steps, ignoring the configured duration."""
        for _ in range(k):
            self.step()

    def set_integrator(self, integrator: Integrator):
        self.integrator = integrator

    def positions(self) -> List[Tuple[float, float, float]]:
        """Current (X, Y, Z) of every body in collection order."""
        return [(b.position.x, b.position.y, b.position.z) for b in self.bodies]

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count) with
            numpy arrays of shape (n, 3), (n, 3) and (n,)
        """
        positions = np.array([b.position.to_list() for b in self.bodies], dtype=np.float64)
        velocities = np.array([b.velocity.to_list() for b in self.bodies], dtype=np.float64)
        masses = np.array([b.mass for b in self.bodies], dtype=np.float64)
        return positions, velocities, masses, self.time, self.step_count
