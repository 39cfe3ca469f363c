"""Point-mass bodies and the Newtonian gravity law.

All quantities are in SI base units: kg, m, m/s and m/s^2.
"""

from typing import Optional, Sequence

from solar_sim.physics.formattable import Formattable
from solar_sim.physics.integrators.euler import EulerIntegrator
from solar_sim.physics.integrators.euler_cromer import EulerCromerIntegrator
from solar_sim.physics.vector import PhysicsVector

G = 6.67408e-11  # Gravitational constant (m^3 kg^-1 s^-2)


class CoincidentBodiesError(ZeroDivisionError):
    """Raised when the gravity law is evaluated for two bodies at the same position."""


def _as_vector3(value) -> PhysicsVector:
    """Copy a vector or sequence into a new 3-vector (truncating or zero-padding)."""
    if value is None:
        return PhysicsVector.zero(3)
    return PhysicsVector(value, dim=3)


def gravitational_acceleration(
    position: PhysicsVector,
    other_position: PhysicsVector,
    other_mass: float,
    G: float = G,
) -> PhysicsVector:
    """Acceleration at ``position`` due to a point mass at ``other_position``.

    a = -(G * M / r^2) * unit(position - other_position)

    Args:
        position: Position of the body being accelerated
        other_position: Position of the attracting body
        other_mass: Mass of the attracting body
        G: Gravitational constant

    Returns:
        Acceleration vector pointing towards the attracting body

    Raises:
        CoincidentBodiesError: If the two positions are identical
    """
    separation = position - other_position
    r_sq = separation.length_squared()
    if r_sq == 0.0:
        raise CoincidentBodiesError(
            f"Zero separation between bodies at {separation.format()}"
        )
    return separation.unit_vector().scale(-(G * other_mass) / r_sq)


class Body(Formattable):
    """A named point mass with position, velocity and acceleration.

    The acceleration holds the net gravitational acceleration from the last
    call to :meth:`accumulate_acceleration` and is stale until recomputed.
    """

    DEFAULT_NAME = "Unnamed Body"

    def __init__(
        self,
        name: Optional[str],
        mass: float,
        position: Sequence[float] = None,
        velocity: Sequence[float] = None,
        acceleration: Sequence[float] = None,
    ):
        """Initialize body.

        Args:
            name: Body name (need not be unique)
            mass: Mass in kg
            position: Position in m
            velocity: Velocity in m/s
            acceleration: Acceleration in m/s^2 (default: zero)
        """
        self.name = name if name is not None else self.DEFAULT_NAME
        self.mass = float(mass)
        self._position = _as_vector3(position)
        self._velocity = _as_vector3(velocity)
        self._acceleration = _as_vector3(acceleration)

    @property
    def position(self) -> PhysicsVector:
        return self._position

    @position.setter
    def position(self, value):
        self._position = _as_vector3(value)

    @property
    def velocity(self) -> PhysicsVector:
        return self._velocity

    @velocity.setter
    def velocity(self, value):
        self._velocity = _as_vector3(value)

    @property
    def acceleration(self) -> PhysicsVector:
        return self._acceleration

    @acceleration.setter
    def acceleration(self, value):
        self._acceleration = _as_vector3(value)

    def acceleration_from(self, other: "Body") -> PhysicsVector:
        """Gravitational acceleration this body feels due to ``other``."""
        return gravitational_acceleration(self._position, other._position, other.mass)

    def accumulate_acceleration(self, bodies: Sequence["Body"]) -> PhysicsVector:
        """Sum the acceleration due to every other body and store it.

        Self is skipped by identity, so another body with identical values
        still contributes.
        """
        total = PhysicsVector.zero(3)
        for other in bodies:
            if other is self:
                continue
            total += self.acceleration_from(other)
        self._acceleration = total
        return total

    def advance_position(self, dt: float):
        """First-order update: r <- r + v * dt."""
        self._position += self._velocity.scaled_by(dt)

    def advance_velocity(self, dt: float):
        """First-order update: v <- v + a * dt."""
        self._velocity += self._acceleration.scaled_by(dt)

    def step_euler(self, bodies: Sequence["Body"], dt: float):
        """Explicit Euler: the position update uses the step-n velocity."""
        EulerIntegrator().step(self, bodies, dt)

    def step_euler_cromer(self, bodies: Sequence["Body"], dt: float):
        """Euler-Cromer: the position update uses the already-advanced velocity."""
        EulerCromerIntegrator().step(self, bodies, dt)

    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * self._velocity.length_squared()

    def momentum(self) -> PhysicsVector:
        return self._velocity.scaled_by(self.mass)

    def format(self) -> str:
        return (
            f"{self.name}: m={self.mass:g}, r={self._position.format()}, "
            f"v={self._velocity.format()}"
        )

    def __repr__(self) -> str:
        return (
            f"Body(name={self.name!r}, mass={self.mass!r}, "
            f"position={self._position.to_list()!r}, "
            f"velocity={self._velocity.to_list()!r}, "
            f"acceleration={self._acceleration.to_list()!r})"
        )
