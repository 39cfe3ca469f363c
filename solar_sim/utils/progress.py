"""Console progress reporting for long runs."""

from typing import Callable


class ProgressReporter:
    """Print whole-percent progress of a run.

    Percent markers sit at i * total_length / 100 for i = 0..99. Each call to
    :meth:`update` prints at most one marker, and each marker is printed at
    most once; :meth:`finish` prints the closing "100% complete." line.
    """

    def __init__(self, total_length: float, enabled: bool = True, printer: Callable = print):
        """Initialize reporter.

        Args:
            total_length: Total simulated time
            enabled: If False, nothing is printed
            printer: Output function (default: print)
        """
        self.total_length = total_length
        self.enabled = enabled
        self.printer = printer
        self.markers = [i * (total_length / 100) for i in range(100)]
        self.current_percent = 0

    def update(self, current_length: float):
        """Report progress at the start of a step at ``current_length``."""
        if self.current_percent >= 99:
            return
        if current_length > self.markers[self.current_percent]:
            if self.enabled:
                self.printer(f"{self.current_percent + 1}% complete.")
            self.current_percent += 1

    def __call__(self, simulator):
        self.update(simulator.time)

    def finish(self):
        if self.enabled:
            self.printer("100% complete.")
