"""Basic example of using the solar system simulator."""

from solar_sim import Simulator
from solar_sim.physics import Diagnostics
from solar_sim.physics.integrators import EulerCromerIntegrator
from solar_sim.presets import SolarSystem

def main():
    """Run the default solar system for one simulated year."""
    bodies = SolarSystem().generate()

    # One-hour steps over a 365-day year
    sim = Simulator(
        bodies,
        EulerCromerIntegrator(),
        dt=3600.0,
        duration=365 * 86400.0
    )

    diagnostics = Diagnostics()
    _, _, E0 = diagnostics.compute_energies(sim.bodies)

    print("Running simulation...")
    print(f"Initial energy: {E0:.6e} J")

    while sim.time < sim.duration:
        sim.step()
        if sim.step_count % 1000 == 0:
            _, _, E = diagnostics.compute_energies(sim.bodies)
            print(f"Step {sim.step_count}: Time={sim.time / 86400.0:.1f} d, "
                  f"dE/E0={diagnostics.energy_drift(E0, E):.2e}")

    earth = next(b for b in sim.bodies if b.name == "Earth")
    print(f"Final Earth state: {earth}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
