"""Preset initial conditions."""

from solar_sim.presets.base import Preset
from solar_sim.presets.solar_system import SolarSystem

PRESETS = {
    "solar_system": SolarSystem,
}


def get_preset(name: str) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class()


__all__ = ["Preset", "SolarSystem", "PRESETS", "get_preset"]
