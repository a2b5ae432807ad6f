"""Console report formatting for request outcomes and batch summaries.

Pure functions: each returns the lines to print and performs no I/O.
"""

from __future__ import annotations

import re
from http import HTTPStatus
from typing import TYPE_CHECKING

from tinyget.models.outcome import HttpError, OtherError, Success, Timeout

if TYPE_CHECKING:
    from tinyget.models.batch_result import BatchResult
    from tinyget.models.outcome import RequestOutcome

RULE = "-" * 50
BODY_RULE = "-" * 30

# Codes whose phrase does not PascalCase cleanly or differs between Python versions.
STATUS_LABEL_OVERRIDES = {
    413: "RequestEntityTooLarge",
    414: "RequestUriTooLong",
    416: "RequestedRangeNotSatisfiable",
    422: "UnprocessableEntity",
    505: "HttpVersionNotSupported",
}

# Printed as bare numbers.
UNNAMED_STATUS_CODES = frozenset({418, 425})


def status_label(status_code: int) -> str:
    """Render a status code as its PascalCase name, e.g. 404 -> NotFound.

    Codes without a registered name render as the bare number.
    """
    if status_code in STATUS_LABEL_OVERRIDES:
        return STATUS_LABEL_OVERRIDES[status_code]
    if status_code in UNNAMED_STATUS_CODES:
        return str(status_code)
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        return str(status_code)
    words = [word for word in re.split(r"[^A-Za-z0-9]+", phrase) if word]
    return "".join(word if word.isupper() else word[:1].upper() + word[1:] for word in words)


def format_header(url: str, parallel_count: int, log_response_body: bool) -> list[str]:
    return [
        f"Making {parallel_count} parallel requests to: {url}",
        f"Log response body: {'Yes' if log_response_body else 'No'}",
        RULE,
    ]


def format_outcome(outcome: RequestOutcome) -> list[str]:
    """Render one outcome as its report lines."""
    prefix = f"[{outcome.request_id:03d}]"
    elapsed = f"({outcome.elapsed_ms}ms)"
    status = outcome.status

    if isinstance(status, Success):
        line = f"{prefix} {status_label(status.status_code)} {elapsed}"
        if status.content_length is None:
            return [line]
        return [
            f"{line} - Content Length: {status.content_length}",
            f"Response Body:\n{status.body or ''}\n{BODY_RULE}",
        ]
    if isinstance(status, HttpError):
        return [f"{prefix} HTTP Error {elapsed}: {status.message}"]
    if isinstance(status, Timeout):
        return [f"{prefix} Timeout {elapsed}"]
    if isinstance(status, OtherError):
        return [f"{prefix} Error {elapsed}: {status.message}"]

    msg = f"Unknown outcome status: {status!r}"
    raise TypeError(msg)


def format_summary(result: BatchResult) -> list[str]:
    return [
        RULE,
        f"All {result.request_count} requests completed in {result.total_elapsed_ms} ms",
        f"Average time per request: {result.average_ms:.2f} ms",
    ]
