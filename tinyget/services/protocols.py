"""Service protocols defining interfaces for dependency injection."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Protocol


class HttpClientProtocol(Protocol):
    """Protocol for the shared GET client used by every request in a batch."""

    @property
    def timeout_seconds(self) -> float: ...

    def get(self, url: str) -> Any: ...

    def close(self) -> None: ...


class ClientFactoryProtocol(Protocol):
    """Protocol for acquiring a batch-scoped HTTP client."""

    def __call__(
        self,
        timeout_seconds: float,
        user_agent: str,
        max_connections: int = 10,
    ) -> AbstractContextManager[HttpClientProtocol]: ...
