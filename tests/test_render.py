"""Tests for trajectory recording and plotting."""

import numpy as np
import pytest
from solar_sim.physics.body import Body
from solar_sim.physics.simulator import Simulator
from solar_sim.render.trajectory_plot import TrajectoryRecorder, plot_trajectories


def make_simulator():
    bodies = [
        Body("Star", 2.0e30),
        Body("Planet", 6.0e24, (1.5e11, 0.0, 0.0), (0.0, 3.0e4, 0.0)),
    ]
    return Simulator(bodies, dt=3600.0, duration=10 * 3600.0)


def test_recorder_history_shape():
    sim = make_simulator()
    recorder = TrajectoryRecorder()

    sim.run(on_step=recorder)

    assert len(recorder) == 10
    assert recorder.history().shape == (10, 2, 3)
    assert np.allclose(recorder.history()[-1], np.array(sim.positions()))


def test_recorder_every():
    sim = make_simulator()
    recorder = TrajectoryRecorder(every=3)

    sim.run(on_step=recorder)

    assert len(recorder) == 3


def test_recorder_empty_and_invalid():
    assert TrajectoryRecorder().history().shape == (0, 0, 3)
    with pytest.raises(ValueError):
        TrajectoryRecorder(every=0)


@pytest.mark.parametrize("plane", ["xy", "xz", "yz"])
def test_plot_writes_image(tmp_path, plane):
    sim = make_simulator()
    recorder = TrajectoryRecorder()
    sim.run(on_step=recorder)
    path = tmp_path / f"orbits_{plane}.png"

    plot_trajectories([b.name for b in sim.bodies], recorder.history(), str(path), plane=plane, dpi=40)

    assert path.exists()
    assert path.stat().st_size > 0


def test_plot_rejects_bad_input(tmp_path):
    history = np.zeros((4, 2, 3))

    with pytest.raises(ValueError):
        plot_trajectories(["a", "b"], history, str(tmp_path / "p.png"), plane="zz")
    with pytest.raises(ValueError):
        plot_trajectories(["a"], history, str(tmp_path / "p.png"))
    with pytest.raises(ValueError):
        plot_trajectories(["a", "b"], np.zeros((4, 2)), str(tmp_path / "p.png"))
