"""CSV trajectory output."""

import csv
from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np


class TrajectoryWriter:
    """Stream per-step body positions to a CSV file.

    The header holds ``<name>X,<name>Y,<name>Z`` for every body and each row
    holds the positions after one completed step, in collection order. An
    instance can be passed straight to ``Simulator.run`` as the step callback.
    """

    def __init__(self, output_path: str, names: Sequence[str]):
        """Open the output file and write the header.

        Args:
            output_path: Output file path (.csv)
            names: Body names in collection order
        """
        self.output_path = Path(output_path)
        self.names = list(names)
        self.rows_written = 0
        self._file = open(self.output_path, "w", newline="")
        self._writer = csv.writer(self._file)
        header = []
        for name in self.names:
            header.extend([f"{name}X", f"{name}Y", f"{name}Z"])
        self._writer.writerow(header)

    def write_step(self, positions: Sequence[Tuple[float, float, float]]):
        """Write one row of (X, Y, Z) positions."""
        if len(positions) != len(self.names):
            raise ValueError(
                f"Expected {len(self.names)} positions, got {len(positions)}"
            )
        row = []
        for x, y, z in positions:
            row.extend([repr(float(x)), repr(float(y)), repr(float(z))])
        self._writer.writerow(row)
        self.rows_written += 1

    def __call__(self, simulator):
        self.write_step(simulator.positions())

    def close(self):
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def read_trajectory(input_path: str) -> Tuple[List[str], np.ndarray]:
    """Read a trajectory CSV back.

    Returns:
        Tuple of (names, positions) with positions shaped (steps, n, 3)
    """
    with open(input_path, "r", newline="") as f:
        reader = csv.reader(f)
        header = next(reader)
        rows = [[float(v) for v in row] for row in reader if row]

    names = [column[:-1] for column in header[::3]]
    positions = np.array(rows, dtype=np.float64).reshape(len(rows), len(names), 3)
    return names, positions
