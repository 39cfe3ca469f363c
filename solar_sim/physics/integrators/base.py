"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Sequence


class Integrator(ABC):
    """Abstract interface for first-order body update schemes.

    The simulator accumulates every body's acceleration before any body is
    advanced, so :meth:`advance` only applies the velocity/position update
    order of the scheme.
    """

    @abstractmethod
    def advance(self, body, dt: float):
        """Advance velocity and position of one body by ``dt``.

        Args:
            body: Body whose acceleration is already up to date
            dt: Time step in seconds
        """
        pass

    def step(self, body, bodies: Sequence, dt: float):
        """Accumulate the acceleration of ``body`` from ``bodies``, then advance it."""
        body.accumulate_acceleration(bodies)
        self.advance(body, dt)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
