"""Utility functions for configuration and console reporting."""

from solar_sim.utils.config import load_config, save_config, Config
from solar_sim.utils.progress import ProgressReporter

__all__ = ["load_config", "save_config", "Config", "ProgressReporter"]
