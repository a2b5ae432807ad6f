"""Wall-clock timing helpers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class Stopwatch:
    """Monotonic millisecond stopwatch that starts on creation.

    The first call to ``stop`` freezes the reading; later calls return the
    same value.
    """

    start_time: float = field(default_factory=time.perf_counter)
    stopped_at: float | None = None

    def stop(self) -> int:
        """Stop the stopwatch (once) and return elapsed whole milliseconds."""
        if self.is_running:
            self.stopped_at = time.perf_counter()
        return self.elapsed_ms

    @property
    def is_running(self) -> bool:
        return self.stopped_at is None

    @property
    def elapsed_ms(self) -> int:
        """Elapsed milliseconds, truncated; live while running."""
        end = self.stopped_at if self.stopped_at is not None else time.perf_counter()
        return int((end - self.start_time) * 1000)
