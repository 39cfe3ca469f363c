"""Example writing a CSV trajectory and an orbit plot."""

from solar_sim import Simulator
from solar_sim.io import TrajectoryWriter
from solar_sim.presets import SolarSystem
from solar_sim.render import TrajectoryRecorder, plot_trajectories

def main():
    """Record the inner planets over two years."""
    bodies = SolarSystem().generate()
    sim = Simulator(bodies, dt=6 * 3600.0, duration=2 * 365 * 86400.0)

    recorder = TrajectoryRecorder(every=4)
    names = [b.name for b in sim.bodies]

    with TrajectoryWriter("solar_system.csv", names) as writer:
        def on_step(simulator):
            writer(simulator)
            recorder(simulator)

        steps = sim.run(on_step=on_step)

    print(f"Wrote {steps} rows to solar_system.csv")

    # Keep the Sun and the terrestrial planets so the plot stays readable
    inner = [i for i, name in enumerate(names) if name in ("The Sun", "Mercury", "Venus", "Earth", "Mars")]
    history = recorder.history()[:, inner, :]
    plot_trajectories([names[i] for i in inner], history, "inner_planets.png")
    print("Plot saved to inner_planets.png")

if __name__ == "__main__":
    main()
