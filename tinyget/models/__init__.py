"""Pydantic data models for TinyGet."""

from tinyget.models.batch_result import BatchResult
from tinyget.models.config import Config
from tinyget.models.outcome import (
    HttpError,
    OtherError,
    OutcomeKind,
    OutcomeStatus,
    RequestOutcome,
    Success,
    Timeout,
)

__all__ = [
    "BatchResult",
    "Config",
    "HttpError",
    "OtherError",
    "OutcomeKind",
    "OutcomeStatus",
    "RequestOutcome",
    "Success",
    "Timeout",
]
