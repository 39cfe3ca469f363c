"""Trajectory plotting."""

from solar_sim.render.trajectory_plot import TrajectoryRecorder, plot_trajectories

__all__ = ["TrajectoryRecorder", "plot_trajectories"]
