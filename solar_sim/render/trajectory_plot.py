"""Static trajectory plots using matplotlib."""

from typing import List, Sequence, Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

PLANES = {
    "xy": (0, 1),
    "xz": (0, 2),
    "yz": (1, 2),
}


class TrajectoryRecorder:
    """Collect body positions after every simulation step.

    Pass the instance as a step callback; :meth:`history` returns an array of
    shape (steps, n, 3).
    """

    def __init__(self, every: int = 1):
        """Initialize recorder.

        Args:
            every: Keep one snapshot per ``every`` calls
        """
        if every <= 0:
            raise ValueError("every must be > 0")
        self.every = every
        self._calls = 0
        self._frames: List[List[Tuple[float, float, float]]] = []

    def __call__(self, simulator):
        self._calls += 1
        if self._calls % self.every == 0:
            self._frames.append(simulator.positions())

    def __len__(self) -> int:
        return len(self._frames)

    def history(self) -> np.ndarray:
        if not self._frames:
            return np.zeros((0, 0, 3), dtype=np.float64)
        return np.asarray(self._frames, dtype=np.float64)


def plot_trajectories(
    names: Sequence[str],
    history: np.ndarray,
    output_path: str,
    plane: str = "xy",
    figsize: Tuple[int, int] = (10, 10),
    dpi: int = 100,
    title: str = "Solar System Simulation",
):
    """Plot every body's path projected onto a coordinate plane.

    Args:
        names: Body names in collection order
        history: Positions shaped (steps, n, 3)
        output_path: Image file to write (format from suffix)
        plane: 'xy', 'xz' or 'yz'
        figsize: Figure size (width, height)
        dpi: Dots per inch
        title: Figure title
    """
    if plane not in PLANES:
        raise ValueError(f"Unknown plane: {plane}. Available: {list(PLANES.keys())}")
    history = np.asarray(history, dtype=np.float64)
    if history.ndim != 3 or history.shape[-1] != 3:
        raise ValueError(f"history must have shape (steps, n, 3), got {history.shape}")
    if history.shape[1] != len(names):
        raise ValueError(f"Got {len(names)} names for {history.shape[1]} bodies")

    a, b = PLANES[plane]
    fig, ax = plt.subplots(figsize=figsize, dpi=dpi)
    try:
        ax.set_aspect('equal')
        ax.set_xlabel(f'{plane[0].upper()} (m)')
        ax.set_ylabel(f'{plane[1].upper()} (m)')
        ax.set_title(title)
        ax.grid(True, alpha=0.3)

        for i, name in enumerate(names):
            ax.plot(history[:, i, a], history[:, i, b], linewidth=0.8, label=name)
            if history.shape[0] > 0:
                ax.scatter(history[-1, i, a], history[-1, i, b], s=12)

        if len(names) > 0:
            ax.legend(loc='upper right', fontsize='small')
        fig.savefig(output_path)
    finally:
        plt.close(fig)
