"""Progress tracking for a batch of concurrent requests."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tinyget.models.outcome import OutcomeKind
from tinyget.utils.logger import get_logger

if TYPE_CHECKING:
    from tinyget.models.outcome import RequestOutcome

logger = get_logger(__name__)


@dataclass
class ProgressTracker:
    """Tally resolved request outcomes by kind."""

    total: int
    resolved: int = 0
    counts: dict[OutcomeKind, int] = field(
        default_factory=lambda: dict.fromkeys(OutcomeKind, 0)
    )
    start_time: float = field(default_factory=time.monotonic)

    def record(self, outcome: RequestOutcome) -> None:
        """Record one resolved request."""
        self.resolved += 1
        self.counts[outcome.kind] += 1

    @property
    def successful(self) -> int:
        return self.counts[OutcomeKind.SUCCESS]

    @property
    def failed(self) -> int:
        return self.resolved - self.successful

    @property
    def is_complete(self) -> bool:
        return self.resolved >= self.total

    @property
    def elapsed_seconds(self) -> float:
        """Time elapsed since start."""
        return time.monotonic() - self.start_time

    @property
    def progress_percentage(self) -> float:
        """Percentage of requests resolved."""
        if self.total == 0:
            return 100.0
        return (self.resolved / self.total) * 100.0

    def log_progress(self, every_n: int = 10) -> None:
        """Log progress every N resolved requests and on the last one."""
        if self.resolved % every_n == 0 or self.is_complete:
            logger.debug(
                "batch_progress",
                resolved=self.resolved,
                total=self.total,
                successful=self.successful,
                failed=self.failed,
                percentage=f"{self.progress_percentage:.1f}%",
                elapsed=f"{self.elapsed_seconds:.1f}s",
            )

    def summary(self) -> dict[str, int]:
        """Return counts per outcome kind plus the resolved total."""
        summary = {str(kind): count for kind, count in self.counts.items()}
        summary["resolved"] = self.resolved
        return summary
