"""Shared HTTP client for issuing timed GET requests."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import requests
from requests.adapters import HTTPAdapter

from tinyget.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = get_logger(__name__)


class ClientSetupError(RuntimeError):
    """The shared HTTP client could not be constructed."""


class HttpClient:
    """GET client with a fixed per-request timeout.

    Configuration is set at construction and never mutated afterwards, so a
    single instance is shared by all threads of a batch.
    """

    def __init__(
        self,
        timeout_seconds: float,
        user_agent: str,
        max_connections: int = 10,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=max_connections)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def get(self, url: str) -> requests.Response:
        """Issue a GET and return once the status line and headers arrive.

        The body is left unread; callers read it through the response or
        release it by closing the response.
        """
        return self.session.get(url, timeout=self._timeout_seconds, stream=True)

    def close(self) -> None:
        self.session.close()


@contextmanager
def open_client(
    timeout_seconds: float,
    user_agent: str,
    max_connections: int = 10,
) -> Iterator[HttpClient]:
    """Create a client for one batch and close it on every exit path.

    Raises:
        ClientSetupError: If the client cannot be constructed.
    """
    try:
        client = HttpClient(
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
            max_connections=max_connections,
        )
    except Exception as exc:
        logger.error("client_setup_failed", error=str(exc))
        raise ClientSetupError(f"Could not create HTTP client: {exc}") from exc

    try:
        yield client
    finally:
        client.close()
