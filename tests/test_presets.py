"""Tests for preset datasets."""

import pytest
from solar_sim.presets import SolarSystem, get_preset


def test_solar_system():
    """The default dataset holds the Sun, planets, the Moon and Pluto."""
    preset = SolarSystem()

    bodies = preset.generate()

    assert preset.name == "solar_system"
    assert len(bodies) == 11
    assert [b.name for b in bodies][:4] == ["The Sun", "Mercury", "Venus", "Earth"]
    assert bodies[0].mass == 1.989e30
    assert bodies[-1].name == "Pluto"
    for body in bodies:
        assert body.mass > 0
        assert body.acceleration.magnitude() == 0.0


def test_earth_distance_is_about_one_au():
    earth = {b.name: b for b in SolarSystem().generate()}["Earth"]

    assert earth.position.magnitude() == pytest.approx(1.478e11, rel=0.01)


def test_preset_generates_fresh_bodies():
    """Each call builds new, independent bodies."""
    preset = SolarSystem()
    first = preset.generate()
    second = preset.generate()

    first[0].position.x = 1.0
    assert second[0].position.x == 0.0
    assert first[3] is not second[3]


def test_get_preset():
    assert isinstance(get_preset("solar_system"), SolarSystem)
    with pytest.raises(ValueError):
        get_preset("galaxy")
