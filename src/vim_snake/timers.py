"""Fixed-interval timers driven by frame deltas."""

from __future__ import annotations


class IntervalTimer:
    """Repeating timer that fires at most once per :meth:`tick`.

    Elapsed time beyond the interval carries over, so a 150 ms timer fed
    100 ms frames fires on frames 2, 3, 5, 6, ...
    """

    def __init__(self, interval_ms: float) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive.")
        self.interval_ms = float(interval_ms)
        self.elapsed_ms = 0.0
        self.times_fired = 0

    def tick(self, delta_ms: float) -> bool:
        """Advance by *delta_ms*; return True if the interval elapsed."""
        if delta_ms < 0:
            raise ValueError("delta_ms must be non-negative.")
        self.elapsed_ms += delta_ms
        if self.elapsed_ms < self.interval_ms:
            return False
        self.elapsed_ms %= self.interval_ms
        self.times_fired += 1
        return True
