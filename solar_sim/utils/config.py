"""Run settings, stored as JSON or YAML."""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

YAML_SUFFIXES = ('.yaml', '.yml')


@dataclass
class Config:
    """Run configuration.

    ``dt`` and ``duration`` left as None mean the values from the input file
    (or its defaults) are used.
    """
    dt: Optional[float] = None
    duration: Optional[float] = None
    integrator: str = "euler-cromer"

    input_path: str = "config.txt"
    preset: str = "solar_system"

    output_path: str = "output.csv"
    save_state: Optional[str] = None
    plot_path: Optional[str] = None
    plot_plane: str = "xy"

    progress: bool = True
    diagnostics_every: int = 0

    def __post_init__(self):
        if self.diagnostics_every < 0:
            raise ValueError("diagnostics_every must be >= 0")
        if self.plot_plane not in ("xy", "xz", "yz"):
            raise ValueError(f"Unknown plot plane: {self.plot_plane}")


def _yaml():
    try:
        import yaml
    except ImportError:
        raise ImportError("YAML support requires PyYAML. Install with: pip install solar-sim[config]")
    return yaml


def load_config(config_path: str) -> Config:
    """Load settings from a .json, .yaml or .yml file.

    Raises:
        TypeError: For keys that are not Config fields
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in YAML_SUFFIXES:
            data = _yaml().safe_load(f) or {}
        else:
            data = json.load(f)

    return Config(**data)


def save_config(config: Config, output_path: str):
    output_path = Path(output_path)

    with open(output_path, 'w') as f:
        if output_path.suffix in YAML_SUFFIXES:
            _yaml().dump(asdict(config), f, default_flow_style=False)
        else:
            json.dump(asdict(config), f, indent=2)
