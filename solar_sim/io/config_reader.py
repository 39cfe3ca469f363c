"""Reader for the key-value simulation input file.

The file holds one ``key=value`` pair per line::

    # comment
    timeStep = 3600
    simulationLength = 3.15e7
    name = Earth
    mass = 5.972e24
    position = (1.496e11, 0, 0)
    velocity = (0, 29780, 0)

``timeStep`` and ``simulationLength`` are in seconds. A body is created as
soon as its name, mass, position and velocity have all been read; the keys
may appear in any order and the same keys are reused for the next body.
"""

import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from solar_sim.physics.body import Body

DEFAULT_TIME_STEP = 1.0
DEFAULT_SIMULATION_LENGTH = 10.0

BODY_KEYS = ("name", "mass", "position", "velocity")

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


class ConfigError(ValueError):
    """Raised for malformed lines in the input file."""

    def __init__(self, message: str, line_number: int = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


@dataclass
class SimulationSetup:
    """Everything the input file hands to the simulator."""
    dt: float = DEFAULT_TIME_STEP
    duration: float = DEFAULT_SIMULATION_LENGTH
    bodies: List[Body] = field(default_factory=list)


def parse_number(text: str, line_number: int = None) -> float:
    """Parse a plain or scientific-notation number."""
    if not _NUMBER_RE.match(text):
        raise ConfigError(f"value {text!r} follows invalid format", line_number)
    value = float(text)
    if math.isinf(value):
        raise ConfigError(f"value {text!r} is outside the double range", line_number)
    return value


def parse_vector(text: str, line_number: int = None) -> Tuple[float, float, float]:
    """Parse ``(a,b,c)``; the parentheses are optional."""
    if text.startswith("("):
        text = text[1:]
    if text.endswith(")"):
        text = text[:-1]
    if text.count(",") != 2:
        raise ConfigError(
            f"{text!r} needs exactly two commas to be read as a 3D vector", line_number
        )
    x, y, z = (parse_number(part, line_number) for part in text.split(","))
    return x, y, z


def parse_config(lines: Iterable[str]) -> SimulationSetup:
    """Parse input-file lines into a :class:`SimulationSetup`.

    Args:
        lines: Text lines of the input file

    Returns:
        Parsed setup; an incomplete trailing body is dropped
    """
    setup = SimulationSetup()
    pending = {}

    for line_number, raw_line in enumerate(lines, start=1):
        stripped = raw_line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if "=" not in stripped:
            raise ConfigError(f"expected key=value, got {stripped!r}", line_number)

        key, value = stripped.split("=", 1)
        key = "".join(key.split())

        if key == "name":
            pending["name"] = value.strip()
        else:
            # Whitespace carries no meaning in numbers and vectors.
            value = "".join(value.split())
            if key == "timeStep":
                setup.dt = parse_number(value, line_number)
            elif key == "simulationLength":
                setup.duration = parse_number(value, line_number)
            elif key == "mass":
                pending["mass"] = parse_number(value, line_number)
            elif key in ("position", "velocity"):
                pending[key] = parse_vector(value, line_number)
            else:
                raise ConfigError(f"{key!r} does not match an expected key", line_number)

        if all(k in pending for k in BODY_KEYS):
            setup.bodies.append(
                Body(pending["name"], pending["mass"], pending["position"], pending["velocity"])
            )
            pending = {}

    return setup


def read_config(config_path: str) -> SimulationSetup:
    """Read the input file at ``config_path``.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: For malformed content
    """
    config_path = Path(config_path)
    with open(config_path, "r") as f:
        return parse_config(f)
