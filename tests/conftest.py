import socket
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from quote_frontend.core.config import Settings
from quote_frontend.main import create_app
from quote_frontend.services.backend import InterestBackend
from quote_frontend.services.http_client import HttpError


class FakeBackend(InterestBackend):
    """In-memory backend; `None` for a body means the call fails."""

    def __init__(self, interest: Optional[str] = "5", version: Optional[str] = "1.0.0"):
        self.interest = interest
        self.version = version
        self.interest_calls = 0

    def fetch_interest_rate(self) -> str:
        self.interest_calls += 1
        if self.interest is None:
            raise HttpError("http://fake/api/v1/interest", "HTTP 503")
        return self.interest

    def fetch_version(self) -> str:
        if self.version is None:
            raise HttpError("http://fake/version", "connection refused")
        return self.version


@pytest.fixture(autouse=True)
def _no_proxy_for_loopback(monkeypatch):
    # urllib honours *_proxy variables; local test servers must be reached directly
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def make_client():
    def _make(
        backend: Optional[InterestBackend] = None,
        raise_server_exceptions: bool = True,
        **settings_overrides,
    ) -> TestClient:
        settings_overrides.setdefault("app_version", "1.2.3")
        app = create_app(
            settings_override=make_settings(**settings_overrides),
            backend_override=backend,
        )
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


SLOW_RESPONSE_SECONDS = 1.0


class _BackendHandler(BaseHTTPRequestHandler):
    def do_GET(self):  # noqa: N802
        status, body = self.server.routes.get(self.path, (404, "404 page not found"))
        if status == "slow":
            # Outlasts any client timeout used in the tests
            time.sleep(SLOW_RESPONSE_SECONDS)
            status = 200
        if status == "truncated":
            # Promise more bytes than are sent, then drop the connection
            self.send_response(200)
            self.send_header("Content-Length", "100")
            self.end_headers()
            self.wfile.write(body.encode())
            return
        data = body.encode()
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, format, *args):  # noqa: A002
        pass


@pytest.fixture
def backend_server():
    """Throwaway interest backend on 127.0.0.1; set `server.routes[path]`."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _BackendHandler)
    server.routes = {}
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def closed_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
