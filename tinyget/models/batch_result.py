"""Batch result model for aggregate timing of a completed batch."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class BatchResult(BaseModel):
    """Wall-clock statistics for one batch of concurrent requests."""

    model_config = ConfigDict(frozen=True)

    total_elapsed_ms: int
    request_count: int

    @field_validator("request_count")
    @classmethod
    def validate_request_count(cls, value: int) -> int:
        """A batch always has at least one request."""
        if value < 1:
            msg = "request_count must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("total_elapsed_ms")
    @classmethod
    def validate_total_elapsed_ms(cls, value: int) -> int:
        """Elapsed time cannot be negative."""
        if value < 0:
            msg = "total_elapsed_ms must not be negative"
            raise ValueError(msg)
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average_ms(self) -> float:
        """Average wall-clock time per request."""
        return self.total_elapsed_ms / self.request_count
