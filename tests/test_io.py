"""Tests for I/O functionality."""

import numpy as np
import pytest
from solar_sim.io.csv_writer import TrajectoryWriter, read_trajectory
from solar_sim.io.state_io import save_state, load_state
from solar_sim.physics.body import Body
from solar_sim.physics.simulator import Simulator
from solar_sim.physics.vector import vector3


def make_bodies():
    return [
        Body("Sun", 2.0e30, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1e-9, 0.0, 0.0)),
        Body("The Moon", 7.3e22, (3.8e8, 0.0, 1.0), (0.0, 1.0e3, 0.0)),
    ]


@pytest.mark.parametrize("suffix", [".npz", ".json"])
def test_save_load_state(tmp_path, suffix):
    """Bodies and metadata survive a save/load cycle."""
    bodies = make_bodies()
    path = tmp_path / f"state{suffix}"

    save_state(bodies, str(path), metadata={"time": 10.0, "steps": 100})
    loaded, metadata = load_state(str(path))

    assert [b.name for b in loaded] == ["Sun", "The Moon"]
    assert loaded[1].mass == 7.3e22
    assert loaded[1].position == vector3(3.8e8, 0.0, 1.0)
    assert loaded[0].velocity == vector3(0.0, 1.0, 0.0)
    assert loaded[0].acceleration == vector3(1e-9, 0.0, 0.0)
    assert metadata.get("time") == 10.0
    assert metadata.get("steps") == 100


def test_state_unsupported_format(tmp_path):
    with pytest.raises(ValueError):
        save_state(make_bodies(), str(tmp_path / "state.txt"))
    with pytest.raises(ValueError):
        load_state(str(tmp_path / "state.txt"))


def test_trajectory_writer_header_and_rows(tmp_path):
    """One header row plus one row per written step."""
    path = tmp_path / "out.csv"

    with TrajectoryWriter(str(path), ["Sun", "Earth"]) as writer:
        writer.write_step([(0.0, 0.0, 0.0), (1.5, -2.0, 3.25)])
        writer.write_step([(0.1, 0.0, 0.0), (1.6, -2.0, 3.25)])
        assert writer.rows_written == 2

    lines = path.read_text().splitlines()
    assert lines[0] == "SunX,SunY,SunZ,EarthX,EarthY,EarthZ"
    assert lines[1] == "0.0,0.0,0.0,1.5,-2.0,3.25"
    assert len(lines) == 3


def test_trajectory_writer_rejects_wrong_body_count(tmp_path):
    with TrajectoryWriter(str(tmp_path / "out.csv"), ["Sun", "Earth"]) as writer:
        with pytest.raises(ValueError):
            writer.write_step([(0.0, 0.0, 0.0)])


def test_trajectory_writer_as_step_callback(tmp_path):
    """The writer records the simulator's positions after every step."""
    path = tmp_path / "out.csv"
    bodies = make_bodies()
    sim = Simulator(bodies, dt=60.0, duration=180.0)

    with TrajectoryWriter(str(path), [b.name for b in bodies]) as writer:
        sim.run(on_step=writer)

    names, positions = read_trajectory(str(path))
    assert names == ["Sun", "The Moon"]
    assert positions.shape == (3, 2, 3)
    assert np.allclose(positions[-1, 1], sim.bodies[1].position.to_list())


def test_npz_archive_names(tmp_path):
    """The .npz arrays use plural names that load_state reads back."""
    path = tmp_path / "state.npz"
    save_state(make_bodies(), str(path), metadata={"steps": 3})

    with np.load(path) as data:
        keys = set(data.keys())

    assert keys == {
        "names", "masses", "positions", "velocities", "accelerations", "metadata_steps",
    }
    loaded, _ = load_state(str(path))
    assert loaded[1].velocity == vector3(0.0, 1.0e3, 0.0)
