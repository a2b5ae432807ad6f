"""Concurrent fan-out of GET requests against a single URL."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING

from tinyget.models.batch_result import BatchResult
from tinyget.services.http_client import open_client
from tinyget.services.request_executor import execute_request
from tinyget.utils.logger import get_logger
from tinyget.utils.progress import ProgressTracker
from tinyget.utils.timing import Stopwatch

if TYPE_CHECKING:
    from collections.abc import Callable

    from tinyget.models.config import Config
    from tinyget.models.outcome import RequestOutcome
    from tinyget.services.protocols import ClientFactoryProtocol

logger = get_logger(__name__)


class BatchDispatcher:
    """Launches a batch of concurrent requests and aggregates their timing."""

    def __init__(
        self,
        config: Config,
        client_factory: ClientFactoryProtocol = open_client,
    ) -> None:
        self.config = config
        self.client_factory = client_factory

    def run(
        self,
        url: str,
        parallel_count: int,
        log_response_body: bool = False,
        on_outcome: Callable[[RequestOutcome], None] | None = None,
    ) -> BatchResult:
        """Send parallel_count simultaneous GETs to url and wait for all of them.

        Every request gets its own thread, so all of them are in flight at
        once. on_outcome is called on the calling thread as each request
        resolves, in completion order. Individual request failures are
        reported as outcomes and never abort the batch.

        Raises:
            ValueError: If parallel_count is less than 1.
            ClientSetupError: If the shared client cannot be created.
        """
        if parallel_count < 1:
            msg = "parallel_count must be at least 1"
            raise ValueError(msg)

        logger.info(
            "batch_started",
            url=url,
            parallel_count=parallel_count,
            log_response_body=log_response_body,
        )
        tracker = ProgressTracker(total=parallel_count)

        with self.client_factory(
            timeout_seconds=self.config.request_timeout_seconds,
            user_agent=self.config.user_agent,
            max_connections=parallel_count,
        ) as client:
            stopwatch = Stopwatch()
            with ThreadPoolExecutor(
                max_workers=parallel_count,
                thread_name_prefix="tinyget",
            ) as executor:
                futures = [
                    executor.submit(execute_request, client, url, request_id, log_response_body)
                    for request_id in range(1, parallel_count + 1)
                ]

                for future in as_completed(futures):
                    outcome = future.result()
                    tracker.record(outcome)
                    if on_outcome is not None:
                        on_outcome(outcome)
                    tracker.log_progress(every_n=10)

            total_elapsed_ms = stopwatch.stop()

        result = BatchResult(
            total_elapsed_ms=total_elapsed_ms,
            request_count=parallel_count,
        )
        logger.info(
            "batch_completed",
            total_elapsed_ms=result.total_elapsed_ms,
            average_ms=round(result.average_ms, 2),
            complete=tracker.is_complete,
            **tracker.summary(),
        )
        return result
