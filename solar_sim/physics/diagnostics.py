"""Conservation diagnostics for N-body simulations."""

from typing import Sequence, Tuple

import numpy as np

from solar_sim.physics.body import Body, G as G_SI
from solar_sim.physics.vector import PhysicsVector


class Diagnostics:
    """Compute energies and momenta consistent with the unsoftened force law."""

    def __init__(self, G: float = G_SI):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant (must match the force law)
        """
        self.G = G

    def compute_energies(self, bodies: Sequence[Body]) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        U = -G * sum_{i<j} m_i * m_j / r_ij

        Args:
            bodies: Body collection

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions = np.array([b.position.to_list() for b in bodies], dtype=np.float64)
        velocities = np.array([b.velocity.to_list() for b in bodies], dtype=np.float64)
        masses = np.array([b.mass for b in bodies], dtype=np.float64)

        n = len(masses)
        if n == 0:
            return 0.0, 0.0, 0.0

        v_sq = np.sum(velocities ** 2, axis=1)
        K = 0.5 * np.sum(masses * v_sq)

        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        r = np.sqrt(np.sum(r_diff ** 2, axis=2))
        i_upper, j_upper = np.triu_indices(n, k=1)
        U = -self.G * np.sum(masses[i_upper] * masses[j_upper] / r[i_upper, j_upper])

        return float(K), float(U), float(K + U)

    def total_momentum(self, bodies: Sequence[Body]) -> PhysicsVector:
        """Total linear momentum, sum(m_i * v_i)."""
        total = PhysicsVector.zero(3)
        for body in bodies:
            total += body.momentum()
        return total

    def angular_momentum(self, bodies: Sequence[Body]) -> PhysicsVector:
        """Total angular momentum about the origin, sum(m_i * r_i x v_i)."""
        total = PhysicsVector.zero(3)
        for body in bodies:
            total += body.position.cross(body.velocity).scale(body.mass)
        return total

    @staticmethod
    def energy_drift(initial_energy: float, energy: float) -> float:
        """Relative energy change (E - E0) / |E0|, or 0 when E0 is 0."""
        if initial_energy == 0.0:
            return 0.0
        return (energy - initial_energy) / abs(initial_energy)
