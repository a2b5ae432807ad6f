"""Request outcome model: the classified result of one GET attempt."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OutcomeKind(StrEnum):
    """Terminal classification of a single request."""

    SUCCESS = "success"
    HTTP_ERROR = "http_error"
    TIMEOUT = "timeout"
    OTHER_ERROR = "other_error"


class Success(BaseModel):
    """A response was received, whatever its status code.

    ``content_length`` and ``body`` are only populated when the body was read.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    status_code: int
    content_length: int | None = None
    body: str | None = None

    @field_validator("status_code")
    @classmethod
    def validate_status_code(cls, value: int) -> int:
        """Status code must be a three-digit HTTP status."""
        if value < 100 or value > 999:
            msg = "status_code must be between 100 and 999"
            raise ValueError(msg)
        return value


class HttpError(BaseModel):
    """Transport or protocol level failure."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["http_error"] = "http_error"
    message: str


class Timeout(BaseModel):
    """No response within the client's deadline."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["timeout"] = "timeout"


class OtherError(BaseModel):
    """Any failure that is neither transport nor timeout."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["other_error"] = "other_error"
    message: str


OutcomeStatus = Annotated[
    Success | HttpError | Timeout | OtherError,
    Field(discriminator="kind"),
]


class RequestOutcome(BaseModel):
    """Result of one request attempt within a batch."""

    model_config = ConfigDict(frozen=True)

    request_id: int
    elapsed_ms: int
    status: OutcomeStatus

    @field_validator("request_id")
    @classmethod
    def validate_request_id(cls, value: int) -> int:
        """Request IDs are 1-based."""
        if value < 1:
            msg = "request_id must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("elapsed_ms")
    @classmethod
    def validate_elapsed_ms(cls, value: int) -> int:
        """Elapsed time cannot be negative."""
        if value < 0:
            msg = "elapsed_ms must not be negative"
            raise ValueError(msg)
        return value

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind(self.status.kind)

    @property
    def is_success(self) -> bool:
        return isinstance(self.status, Success)
