"""
Solar System Simulator - fixed-step N-body gravity in SI units.

Features:
- Fixed-dimension PhysicsVector algebra (3D and 7D cross products)
- Euler and Euler-Cromer integrators with per-step barycentre recentring
- Key-value input file reader and CSV trajectory output
- Default solar-system dataset (NASA JPL state vectors)
- Energy and momentum diagnostics, trajectory plots
"""

__version__ = "0.1.0"

from solar_sim.physics.vector import PhysicsVector, vector3
from solar_sim.physics.body import Body
from solar_sim.physics.simulator import Simulator

__all__ = [
    "PhysicsVector",
    "vector3",
    "Body",
    "Simulator",
]
