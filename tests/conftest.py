"""Shared test fixtures for TinyGet."""

from __future__ import annotations

import socket
import threading
import time
from contextlib import contextmanager
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import pytest
import structlog

from tinyget.models.config import Config

if TYPE_CHECKING:
    from collections.abc import Iterator

_PROXY_VARS = ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy")


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Drop logger configuration bound to streams captured by a previous test."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _no_proxy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep requests to the local test server off any configured proxy."""
    for var in _PROXY_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config() -> Config:
    """Configuration with defaults, independent of the environment."""
    return Config(request_timeout_seconds=30.0, log_level="WARNING", user_agent="tinyget-test")


# ---------------------------------------------------------------------------
# Fake client pieces for contract tests
# ---------------------------------------------------------------------------


class FakeResponse:
    """Stand-in for requests.Response that records body reads and closing."""

    def __init__(self, status_code: int = 200, body: bytes = b"") -> None:
        self.status_code = status_code
        self._body = body
        self.content_reads = 0
        self.drained = False
        self.closed = False

    @property
    def content(self) -> bytes:
        self.content_reads += 1
        return self._body

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        self.drained = True
        for start in range(0, len(self._body), chunk_size):
            yield self._body[start : start + chunk_size]

    @property
    def text(self) -> str:
        return self._body.decode("utf-8")

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class FakeClientFactory:
    """Client factory that hands out one MagicMock client and records its lifecycle."""

    def __init__(self, client: MagicMock | None = None) -> None:
        self.client = client or MagicMock()
        self.calls: list[dict[str, Any]] = []
        self.opened = 0
        self.closed = 0

    @contextmanager
    def __call__(
        self,
        timeout_seconds: float,
        user_agent: str,
        max_connections: int = 10,
    ) -> Iterator[MagicMock]:
        self.calls.append(
            {
                "timeout_seconds": timeout_seconds,
                "user_agent": user_agent,
                "max_connections": max_connections,
            }
        )
        self.opened += 1
        try:
            yield self.client
        finally:
            self.closed += 1


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def client_factory() -> FakeClientFactory:
    """Factory whose client returns 200 OK for every request."""
    factory = FakeClientFactory()
    factory.client.get.side_effect = lambda url: FakeResponse(200, b"ok")
    return factory


# ---------------------------------------------------------------------------
# Local HTTP server for integration tests
# ---------------------------------------------------------------------------


class _Handler(BaseHTTPRequestHandler):
    server: _TestServer

    def do_GET(self) -> None:  # noqa: N802
        if self.path == "/ok":
            self._reply(200, b"ok")
        elif self.path == "/missing":
            self._reply(404, b"nope")
        elif self.path == "/slow":
            time.sleep(self.server.slow_seconds)
            self._reply(200, b"slow")
        elif self.path == "/first-slow":
            # Only the first request to arrive stalls.
            with self.server.lock:
                self.server.first_slow_hits += 1
                stall = self.server.first_slow_hits == 1
            if stall:
                time.sleep(self.server.slow_seconds)
            self._reply(200, b"ok")
        elif self.path == "/stall-body":
            self._stall_mid_body()
        else:
            self._reply(404, b"")

    def _stall_mid_body(self) -> None:
        """Send headers and part of the body, then go quiet."""
        try:
            self.send_response(200)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", "10")
            self.end_headers()
            self.wfile.write(b"ab")
            self.wfile.flush()
            time.sleep(self.server.slow_seconds)
            self.wfile.write(b"cdefghij")
        except (BrokenPipeError, ConnectionResetError):
            pass

    def _reply(self, status: int, body: bytes) -> None:
        try:
            self.send_response(status)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        pass


class _TestServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), _Handler)
        self.lock = threading.Lock()
        self.first_slow_hits = 0
        self.slow_seconds = 2.0


@pytest.fixture
def http_server() -> Iterator[str]:
    """Run a threaded HTTP server on a free local port; yields its base URL."""
    server = _TestServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def unreachable_url() -> str:
    """URL of a local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/"


@pytest.fixture
def make_client_factory() -> type[FakeClientFactory]:
    return FakeClientFactory
