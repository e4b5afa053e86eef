"""
Pytest configuration and common fixtures for drupal-testkit end-to-end tests.

This module provides a local HTTP server standing in for Drupal, so requests
go through a real socket. All fixtures follow camelCase naming convention.
"""

import json
import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, Generator, List, Tuple

import pytest

logger = logging.getLogger(__name__)

STUB_RESPONSE = {
    "jsonapi": {"version": "1.0", "meta": {"links": {"self": {"href": "http://jsonapi.org/format/1.0/"}}}},
    "data": [{"type": "media--document", "id": "fd0b8969-ecc9-4a0d-81d3-537ba95bd5a8"}],
}


class RecordedRequest:
    """Path, query and headers of a request the stub server received"""

    def __init__(self, path: str, headers: Dict[str, str]):
        self.path, _, self.query = path.partition("?")
        self.headers = headers

    @property
    def authorization(self) -> str:
        return self.headers.get("Authorization", "")


class StubDrupal:
    """
    Local HTTP server answering every GET with a canned response.

    Responses are keyed by request path, unknown paths get STUB_RESPONSE.
    """

    def __init__(self) -> None:
        self.requests: List[RecordedRequest] = []
        self.responses: Dict[str, Tuple[int, bytes]] = {}
        stub = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self) -> None:
                stub.requests.append(RecordedRequest(self.path, dict(self.headers.items())))
                status, body = stub.responses.get(self.path.partition("?")[0], (200, json.dumps(STUB_RESPONSE).encode()))
                self.send_response(status)
                self.send_header("Content-Type", "application/vnd.api+json")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, format: str, *args) -> None:
                logger.debug(f"stub drupal: {format % args}")

        self.server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        host, port = self.server.server_address[:2]
        self.baseUrl = f"http://{host}:{port}"
        self._thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    def respond(self, path: str, status: int = 200, body: object = STUB_RESPONSE) -> None:
        raw = body if isinstance(body, bytes) else json.dumps(body).encode()
        self.responses[path] = (status, raw)

    def start(self) -> None:
        self._thread.start()
        logger.debug(f"Stub drupal listening on {self.baseUrl}")

    def stop(self) -> None:
        self.server.shutdown()
        self.server.server_close()
        self._thread.join()


@pytest.fixture
def stubDrupal() -> Generator[StubDrupal, None, None]:
    """
    Running stub Drupal server on a free localhost port.

    Yields:
        StubDrupal: Server with `baseUrl`, recorded `requests` and `respond()`
    """
    server = StubDrupal()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def drupalEnv(monkeypatch, stubDrupal):
    """
    Point DRUPAL_* environment variables at the stub server.

    Returns:
        MonkeyPatch: For further environment changes in the test
    """
    monkeypatch.setenv("DRUPAL_BASE_URL", stubDrupal.baseUrl)
    monkeypatch.setenv("DRUPAL_TEST_DOTENV", "/nonexistent/.env")
    for name in ("DRUPAL_USERNAME", "DRUPAL_PASSWORD", "DRUPAL_TEST_BASEDIR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
