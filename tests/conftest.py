"""pytest configuration for sovereign-agent tests."""

import os
import socket
import threading
from unittest.mock import MagicMock

import pytest


# Endpoint for tests that post to a real service
LIVE_ENDPOINT = os.environ.get("SOVEREIGN_AGENT_LIVE_ENDPOINT")


@pytest.fixture
def live_endpoint():
    """Provide the live endpoint URL for tests."""
    return LIVE_ENDPOINT


# Skip marker for tests that require network access
requires_network = pytest.mark.skipif(
    not LIVE_ENDPOINT,
    reason="Requires a reachable endpoint (set SOVEREIGN_AGENT_LIVE_ENDPOINT)",
)


def mock_response(text: str = "ok", status_code: int = 200) -> MagicMock:
    """Build a fake httpx.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.is_success = 200 <= status_code < 300
    resp.text = text
    resp.iter_text.return_value = [text]
    return resp


def mock_stream(text: str = "ok", status_code: int = 200) -> MagicMock:
    """Build a fake httpx.Client.stream() context manager."""
    stream = MagicMock()
    stream.__enter__.return_value = mock_response(text, status_code)
    stream.__exit__.return_value = None
    return stream


@pytest.fixture
def silent_server():
    """A local socket that accepts connections but never answers.

    The kernel completes the TCP handshake from the listen backlog, so a
    client can send its request and then waits on the response.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    host, port = sock.getsockname()
    yield f"http://{host}:{port}/notify"
    sock.close()


@pytest.fixture
def closed_port_url():
    """URL of a local port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    host, port = sock.getsockname()
    sock.close()
    return f"http://{host}:{port}/notify"


@pytest.fixture
def trickle_server():
    """A local server that answers 200 but never finishes the body.

    After the headers it sends one chunk of a chunked body every 0.2s, so
    no single read ever waits long enough to hit a per-read timeout.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    sock.settimeout(0.1)
    stop = threading.Event()

    def serve():
        while not stop.is_set():
            try:
                conn, _ = sock.accept()
            except socket.timeout:
                continue
            except OSError:
                return
            with conn:
                try:
                    conn.recv(65536)
                    conn.sendall(
                        b"HTTP/1.1 200 OK\r\n"
                        b"Content-Type: text/plain\r\n"
                        b"Transfer-Encoding: chunked\r\n\r\n"
                    )
                    while not stop.wait(0.2):
                        conn.sendall(b"1\r\nx\r\n")
                except OSError:
                    pass

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    host, port = sock.getsockname()
    yield f"http://{host}:{port}/notify"
    stop.set()
    thread.join(timeout=2)
    sock.close()
