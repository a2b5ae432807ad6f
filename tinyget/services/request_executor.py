"""Executes a single timed GET request and classifies its outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests
from urllib3.exceptions import ReadTimeoutError

from tinyget.models.outcome import (
    HttpError,
    OtherError,
    OutcomeStatus,
    RequestOutcome,
    Success,
    Timeout,
)
from tinyget.utils.logger import get_logger
from tinyget.utils.timing import Stopwatch

if TYPE_CHECKING:
    from tinyget.services.protocols import HttpClientProtocol

logger = get_logger(__name__)

DRAIN_CHUNK_SIZE = 64 * 1024


def execute_request(
    client: HttpClientProtocol,
    url: str,
    request_id: int,
    read_body: bool = False,
) -> RequestOutcome:
    """Perform one GET against url and return its classified outcome.

    The request resolves once the whole response has arrived: the body is
    always consumed under the client's timeout, but only kept when
    read_body is set. The timer stops at that point, or at the point of
    failure. Failures are returned as HttpError, Timeout or OtherError
    outcomes and never raised.

    Args:
        client: Shared client carrying the per-request timeout.
        url: Absolute URL, validated by the caller.
        request_id: 1-based sequence number within the batch.
        read_body: Keep the response body and attach its length and text.
    """
    stopwatch = Stopwatch()
    status: OutcomeStatus
    try:
        response = client.get(url)
        with response:
            content = _consume_body(response, read_body)
            stopwatch.stop()
            status = _success(response, content)
    # Timeout first: requests.ConnectTimeout is also a ConnectionError.
    except requests.Timeout:
        status = Timeout()
    except requests.RequestException as exc:
        status = HttpError(message=str(exc))
    except Exception as exc:
        status = OtherError(message=str(exc) or type(exc).__name__)

    outcome = RequestOutcome(
        request_id=request_id,
        elapsed_ms=stopwatch.stop(),
        status=status,
    )
    if not outcome.is_success:
        logger.debug(
            "request_failed",
            request_id=request_id,
            kind=str(outcome.kind),
            elapsed_ms=outcome.elapsed_ms,
        )
    return outcome


def _consume_body(response: requests.Response, keep: bool) -> bytes | None:
    """Read the body to the end, returning it only when keep is set.

    requests reports a read timeout during streaming as a ConnectionError
    wrapping urllib3's ReadTimeoutError; it is re-raised as ReadTimeout.
    """
    try:
        if keep:
            return response.content
        for _ in response.iter_content(chunk_size=DRAIN_CHUNK_SIZE):
            pass
        return None
    except requests.ConnectionError as exc:
        if any(isinstance(arg, ReadTimeoutError) for arg in exc.args):
            raise requests.ReadTimeout(str(exc), response=response) from exc
        raise


def _success(response: requests.Response, content: bytes | None) -> Success:
    if content is None:
        return Success(status_code=response.status_code)

    return Success(
        status_code=response.status_code,
        content_length=len(content),
        body=response.text,
    )
