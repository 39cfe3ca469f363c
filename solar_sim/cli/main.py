"""CLI main entry point."""

import argparse
import dataclasses
import sys
from pathlib import Path

from solar_sim.io.config_reader import ConfigError, SimulationSetup, read_config
from solar_sim.io.csv_writer import TrajectoryWriter
from solar_sim.io.state_io import save_state
from solar_sim.physics.diagnostics import Diagnostics
from solar_sim.physics.integrators import INTEGRATORS, get_integrator
from solar_sim.physics.simulator import Simulator
from solar_sim.presets import PRESETS, get_preset
from solar_sim.utils.config import Config, load_config
from solar_sim.utils.progress import ProgressReporter


def load_setup(config: Config) -> SimulationSetup:
    """Read the input file, falling back to defaults when it is missing or has no bodies."""
    input_path = Path(config.input_path)
    if input_path.exists():
        setup = read_config(input_path)
    else:
        print(f"Input file {input_path} not found, using defaults.")
        setup = SimulationSetup()

    if config.dt is not None:
        setup.dt = config.dt
    if config.duration is not None:
        setup.duration = config.duration

    print(f"Simulation time step : {setup.dt:g}\tSimulation total simulated length: {setup.duration:g}")

    if not setup.bodies:
        print(f"Bodies could not be read from {input_path}, or it is empty. Adding default {config.preset}...")
        setup.bodies = get_preset(config.preset).generate()
        print(f"Default {config.preset} loaded.")
    else:
        print(f"Bodies being simulated: {len(setup.bodies)}")

    return setup


def run_simulation(config: Config):
    """Run a simulation."""
    setup = load_setup(config)
    integrator = get_integrator(config.integrator)
    sim = Simulator(setup.bodies, integrator, dt=setup.dt, duration=setup.duration)

    recorder = None
    if config.plot_path:
        from solar_sim.render.trajectory_plot import TrajectoryRecorder
        recorder = TrajectoryRecorder()

    diagnostics = None
    if config.diagnostics_every > 0:
        diagnostics = Diagnostics()
        K0, U0, E0 = diagnostics.compute_energies(sim.bodies)
        print(f"{'Step':<8} {'Time':<14} {'K':<14} {'U':<14} {'E':<14} {'dE/E0':<10}")
        print("-" * 80)
        print(f"{0:<8} {0.0:<14.6g} {K0:<14.6g} {U0:<14.6g} {E0:<14.6g} {0.0:<10.2e}")

    progress = ProgressReporter(sim.duration, enabled=config.progress)

    print(f"Integrator: {integrator.name}, expected steps: {sim.expected_steps}")
    print("Beginning simulation.")

    with TrajectoryWriter(config.output_path, [b.name for b in sim.bodies]) as writer:
        while sim.time < sim.duration:
            progress.update(sim.time)
            sim.step()
            writer(sim)
            if recorder is not None:
                recorder(sim)
            if diagnostics is not None and sim.step_count % config.diagnostics_every == 0:
                K, U, E = diagnostics.compute_energies(sim.bodies)
                drift = diagnostics.energy_drift(E0, E)
                print(f"{sim.step_count:<8} {sim.time:<14.6g} {K:<14.6g} {U:<14.6g} {E:<14.6g} {drift:<10.2e}")

    progress.finish()
    print(f"Data written to {config.output_path}")

    if config.save_state:
        save_state(sim.bodies, config.save_state, metadata={
            'time': sim.time,
            'steps': sim.step_count,
            'dt': sim.dt,
            'integrator': integrator.name,
        })
        print(f"State saved to {config.save_state}")

    if recorder is not None:
        from solar_sim.render.trajectory_plot import plot_trajectories
        plot_trajectories([b.name for b in sim.bodies], recorder.history(), config.plot_path,
                          plane=config.plot_plane)
        print(f"Trajectory plot written to {config.plot_path}")

    return sim


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solar System Simulator - fixed-step N-body gravity")

    # Input
    parser.add_argument('--config-file', type=str, default=None,
                       help='Key-value input file with timeStep, simulationLength and bodies (default: config.txt)')
    parser.add_argument('--settings', type=str, default=None,
                       help='Run settings file (.json or .yaml); command-line flags take precedence')
    parser.add_argument('--preset', type=str, default=None,
                       choices=list(PRESETS.keys()),
                       help='Dataset used when the input file provides no bodies')

    # Simulation parameters
    parser.add_argument('--dt', type=float, default=None,
                       help='Time step in seconds (overrides timeStep)')
    parser.add_argument('--duration', type=float, default=None,
                       help='Total simulated time in seconds (overrides simulationLength)')
    parser.add_argument('--integrator', type=str, default=None,
                       choices=list(INTEGRATORS.keys()),
                       help='Update scheme (default: euler-cromer)')

    # Output
    parser.add_argument('--output', type=str, default=None,
                       help='CSV trajectory output file (default: output.csv)')
    parser.add_argument('--save-state', type=str, default=None,
                       help='Save final state to file (.npz or .json)')
    parser.add_argument('--plot', type=str, default=None,
                       help='Write a trajectory plot to this image file')
    parser.add_argument('--plot-plane', type=str, default=None,
                       choices=['xy', 'xz', 'yz'],
                       help='Projection plane for --plot (default: xy)')

    # Reporting
    parser.add_argument('--diagnostics-every', type=int, default=None,
                       help='Print energy diagnostics every N steps (0 disables)')
    parser.add_argument('--quiet', action='store_true',
                       help='Do not print percentage progress')
    return parser


def config_from_args(args) -> Config:
    """Merge the optional settings file with command-line overrides."""
    config = load_config(args.settings) if args.settings else Config()

    overrides = {
        'input_path': args.config_file,
        'preset': args.preset,
        'dt': args.dt,
        'duration': args.duration,
        'integrator': args.integrator,
        'output_path': args.output,
        'save_state': args.save_state,
        'plot_path': args.plot,
        'plot_plane': args.plot_plane,
        'diagnostics_every': args.diagnostics_every,
    }
    changes = {key: value for key, value in overrides.items() if value is not None}
    if args.quiet:
        changes['progress'] = False
    # replace() re-runs Config validation on the merged values
    return dataclasses.replace(config, **changes)


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
        run_simulation(config)
    except (ConfigError, ValueError, ZeroDivisionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
