"""Tests for the key-value input file reader."""

import pytest
from solar_sim.io.config_reader import (
    ConfigError,
    parse_config,
    parse_number,
    parse_vector,
    read_config,
)
from solar_sim.physics.vector import vector3

SAMPLE = """\
# Simulation settings
timeStep = 3600
simulationLength = 3.1536e7

name = The Sun
mass = 1.989e30
position = (0, 0, 0)
velocity = (0,0,0)

# Bodies may list their keys in any order
mass=5.972e24
velocity=( -2.87e4, 9.47e3, -1.29 )
name=Earth
position=(4.79e10,1.40e11,-2.92e7)
"""


def test_parse_sample():
    setup = parse_config(SAMPLE.splitlines())

    assert setup.dt == 3600.0
    assert setup.duration == 3.1536e7
    assert [b.name for b in setup.bodies] == ["The Sun", "Earth"]
    earth = setup.bodies[1]
    assert earth.mass == 5.972e24
    assert earth.position == vector3(4.79e10, 1.40e11, -2.92e7)
    assert earth.velocity == vector3(-2.87e4, 9.47e3, -1.29)
    assert earth.acceleration == vector3(0, 0, 0)


def test_defaults_when_settings_missing():
    setup = parse_config(["name=a", "mass=1", "position=(1,2,3)", "velocity=(0,0,0)"])

    assert setup.dt == 1.0
    assert setup.duration == 10.0
    assert len(setup.bodies) == 1


def test_incomplete_trailing_body_is_dropped():
    setup = parse_config(["name=a", "mass=1", "position=(1,2,3)"])

    assert setup.bodies == []


def test_empty_input():
    setup = parse_config([])

    assert setup.bodies == []


def test_unknown_key_reports_line_number():
    with pytest.raises(ConfigError) as excinfo:
        parse_config(["timeStep=1", "", "colour=red"])

    assert excinfo.value.line_number == 3
    assert "colour" in str(excinfo.value)


def test_missing_equals_sign():
    with pytest.raises(ConfigError):
        parse_config(["timeStep 1"])


def test_invalid_numbers():
    for text in ("abc", "1.2.3", "", "1e", "0x10", "inf", "nan"):
        with pytest.raises(ConfigError):
            parse_number(text)

    assert parse_number("-6.135600299763972e-2") == -6.135600299763972e-2
    assert parse_number("+12") == 12.0
    assert parse_number(".5") == 0.5
    assert parse_number("1E+10") == 1e10


def test_number_out_of_range():
    with pytest.raises(ConfigError):
        parse_config(["mass=1e400"])


def test_vector_parsing():
    assert parse_vector("(1,2,3)") == (1.0, 2.0, 3.0)
    assert parse_vector("1,2,3") == (1.0, 2.0, 3.0)

    with pytest.raises(ConfigError):
        parse_vector("(1,2)")
    with pytest.raises(ConfigError):
        parse_vector("(1,2,3,4)")
    with pytest.raises(ConfigError):
        parse_vector("(1,,3)")


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        parse_config(["velocity=(1;2;3)"])


def test_read_config_file(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text(SAMPLE)

    setup = read_config(str(path))

    assert setup.dt == 3600.0
    assert len(setup.bodies) == 2


def test_read_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(str(tmp_path / "nope.txt"))
