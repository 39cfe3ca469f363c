"""Tests for run settings and progress reporting."""

import pytest
from solar_sim.utils.config import Config, load_config, save_config
from solar_sim.utils.progress import ProgressReporter


def test_config_defaults():
    config = Config()

    assert config.dt is None
    assert config.integrator == "euler-cromer"
    assert config.input_path == "config.txt"
    assert config.output_path == "output.csv"
    assert config.progress is True


def test_config_json_round_trip(tmp_path):
    config = Config(dt=60.0, duration=3600.0, integrator="euler", plot_path="orbits.png")
    path = tmp_path / "settings.json"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_config_yaml_round_trip(tmp_path):
    pytest.importorskip("yaml")
    config = Config(duration=86400.0, progress=False, diagnostics_every=10)
    path = tmp_path / "settings.yaml"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_config_rejects_unknown_field(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"timestep": 5}')

    with pytest.raises(TypeError):
        load_config(str(path))


def test_progress_prints_one_marker_per_update():
    lines = []
    progress = ProgressReporter(100.0, printer=lines.append)

    progress.update(0.0)
    assert lines == []

    progress.update(50.0)
    progress.update(50.0)
    assert lines == ["1% complete.", "2% complete."]


def test_progress_caps_before_finish():
    lines = []
    progress = ProgressReporter(10.0, printer=lines.append)

    for _ in range(150):
        progress.update(10.0)
    assert lines[-1] == "99% complete."
    assert len(lines) == 99

    progress.finish()
    assert lines[-1] == "100% complete."


def test_progress_disabled():
    lines = []
    progress = ProgressReporter(10.0, enabled=False, printer=lines.append)

    progress.update(5.0)
    progress.finish()

    assert lines == []
    assert progress.current_percent == 1


def test_config_validation():
    with pytest.raises(ValueError):
        Config(diagnostics_every=-1)
    with pytest.raises(ValueError):
        Config(plot_plane="xw")
