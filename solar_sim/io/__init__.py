"""I/O utilities: input file reader, trajectory output and state files."""

from solar_sim.io.config_reader import ConfigError, SimulationSetup, parse_config, read_config
from solar_sim.io.csv_writer import TrajectoryWriter, read_trajectory
from solar_sim.io.state_io import save_state, load_state

__all__ = [
    "ConfigError",
    "SimulationSetup",
    "parse_config",
    "read_config",
    "TrajectoryWriter",
    "read_trajectory",
    "save_state",
    "load_state",
]
