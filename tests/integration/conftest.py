"""Integration test fixtures (local HTTP server).

Starts a real HTTP server on localhost in a background thread. The server's
behaviour per request is scripted by the test through ``server.responses``.
"""

import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

DISCONNECT = "disconnect"


class RecordingHandler(BaseHTTPRequestHandler):
    """Replays scripted responses and records every request received."""

    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")

        server = self.server
        with server.lock:
            server.received.append({"path": self.path, "headers": self.headers, "body": body})
            action = server.responses.pop(0) if server.responses else (200, "ok")

        if action == DISCONNECT:
            # Close without a status line; the client sees a transport failure
            self.close_connection = True
            return

        status_code, text = action
        payload = text.encode("utf-8")
        self.send_response(status_code)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def http_server():
    """Running local server; yields it with ``url``, ``received`` and ``responses``.

    Script a dropped connection by queueing ``server.disconnect``.
    """
    server = ThreadingHTTPServer(("127.0.0.1", 0), RecordingHandler)
    server.lock = threading.Lock()
    server.received = []
    server.responses = []
    server.disconnect = DISCONNECT
    server.url = f"http://127.0.0.1:{server.server_address[1]}/ingest"

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def unused_url() -> str:
    """URL on a local port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/ingest"
