"""
Pytest configuration and shared fixtures for DarkThrone client tests.
"""

import logging
import tempfile
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Dict, Generator, List, Tuple

import pytest
import structlog

from darkthrone.core.session import Session
from darkthrone.transport import MockTransport

BASE_URL = "http://x"


class RecordedRequest:
    """A request received by the local test server."""

    def __init__(self, method: str, path: str, headers: Dict[str, str], body: bytes):
        self.method = method
        self.path = path
        self.headers = headers
        self.body = body


class LocalServer:
    """
    Threaded HTTP server answering from a route table.

    Routes map ``(method, path)`` to ``(status, body, headers)``. Unknown
    routes answer 404 with an empty body.
    """

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Tuple[int, bytes, Dict[str, str]]] = {}
        self.requests: List[RecordedRequest] = []
        server = self

        class Handler(BaseHTTPRequestHandler):
            def _handle(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length else b""
                server.requests.append(
                    RecordedRequest(self.command, self.path, dict(self.headers), body)
                )
                status, payload, headers = server.routes.get(
                    (self.command, self.path), (404, b"", {})
                )
                self.send_response(status)
                for key, value in headers.items():
                    self.send_header(key, value)
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                if self.command != "HEAD":
                    self.wfile.write(payload)

            do_GET = do_POST = do_PUT = do_DELETE = do_HEAD = _handle

            def log_message(self, format, *args):
                pass

        self._httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self._thread = threading.Thread(target=self._httpd.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._httpd.server_address[:2]
        return f"http://{host}:{port}"

    def route(self, method: str, path: str, status: int = 200, body: bytes = b"",
              headers: Dict[str, str] = None) -> None:
        self.routes[(method, path)] = (status, body, headers or {})

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._httpd.shutdown()
        self._httpd.server_close()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_session_singleton(monkeypatch):
    """Give every test a fresh, uninitialized process session."""
    monkeypatch.setattr(Session, "_instance", None)
    yield


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def session(mock_transport: MockTransport) -> Session:
    """Session on the mock transport with base URL ``http://x``."""
    return Session(BASE_URL, transport=mock_transport)


@pytest.fixture
def http_server() -> Generator[LocalServer, None, None]:
    """Local HTTP server, the equivalent of an httptest server."""
    server = LocalServer()
    server.start()
    try:
        yield server
    finally:
        server.stop()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo setup_logging() so later tests see default logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
