"""Physics engine for N-body simulations."""

from solar_sim.physics.vector import PhysicsVector, vector3
from solar_sim.physics.body import Body, CoincidentBodiesError, G
from solar_sim.physics.simulator import Simulator, centre_of_mass
from solar_sim.physics.diagnostics import Diagnostics

__all__ = [
    "PhysicsVector",
    "vector3",
    "Body",
    "CoincidentBodiesError",
    "G",
    "Simulator",
    "centre_of_mass",
    "Diagnostics",
]
