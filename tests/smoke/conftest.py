"""
Smoke-test fixtures for the Kanban board.

Starts the real threaded Werkzeug server in a background thread on an
ephemeral local port, so smoke tests exercise the full HTTP stack
(socket, request parsing, response framing) with plain ``requests``.

Key SDET Concepts Demonstrated:
- Session-scoped live server shared across the smoke suite
- Clean shutdown of the server thread at session end
"""

from __future__ import annotations

import threading
from collections.abc import Generator

import pytest
from werkzeug.serving import make_server

from kanban_app import create_app


@pytest.fixture(scope="session")
def live_server() -> Generator[str, None, None]:
    """Yield the base URL of a running board server with an empty store."""
    application = create_app("testing")
    server = make_server("127.0.0.1", 0, application, threaded=True)

    server_thread = threading.Thread(target=server.serve_forever, daemon=True)
    server_thread.start()

    yield f"http://127.0.0.1:{server.server_port}"

    server.shutdown()
    server_thread.join(timeout=5)
    server.server_close()
