"""WSGI entry point for the Kanban board service."""

from __future__ import annotations

import logging
import os

from werkzeug.serving import make_server

from kanban_app import create_app

logger = logging.getLogger(__name__)

app = create_app(os.getenv("FLASK_ENV", "production"))


def main() -> None:
    """Serve the board on HOST:PORT, one thread per request."""
    host = app.config["HOST"]
    port = app.config["PORT"]

    try:
        server = make_server(host, port, app, threaded=True)
    except (OSError, SystemExit) as exc:
        # werkzeug reports bind failures by exiting; both end the process.
        logger.critical("Unable to listen on %s:%s: %s", host, port, exc)
        raise SystemExit(1) from exc

    logger.info("Kanban board listening on %s:%s", host, port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
