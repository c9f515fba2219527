"""
Flask application factory module.

This module creates and configures the Kanban board service using the
factory pattern. Each application owns its own ``TaskStore``, so tests
(and any embedding code) get an isolated board per app instance.

The factory also installs the cross-origin policy shared by every
route: OPTIONS requests are answered with 204 before routing, and every
response carries permissive CORS headers.
"""

from __future__ import annotations

import logging

from flask import Flask, Response, current_app, jsonify, request

from config import get_config

from .i18n import message
from .store import TaskStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

STORE_EXTENSION_KEY = "task_store"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type"


def get_store() -> TaskStore:
    """Return the task store bound to the current application."""
    return current_app.extensions[STORE_EXTENSION_KEY]


def no_content() -> Response:
    """Build an empty 204 response without a Content-Type header."""
    response = Response(status=204)
    response.headers.pop("Content-Type", None)
    return response


def create_app(config_name: str | None = None, store: TaskStore | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        store: Task store to serve. A fresh, empty store is created
               when omitted.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    logging.getLogger().setLevel(app.config["LOG_LEVEL"])

    logger.info("Creating app with config: %s", config_class.__name__)

    # Keep task fields in declaration order in JSON bodies.
    app.json.sort_keys = False
    # "/tasks//1" must fail the path-shape check instead of being redirected.
    app.url_map.merge_slashes = False

    app.extensions[STORE_EXTENSION_KEY] = store if store is not None else TaskStore()

    _register_cors(app)
    _register_error_handlers(app)

    # Register blueprints
    from .routes.api import api_bp

    app.register_blueprint(api_bp)

    return app


def _register_cors(app: Flask) -> None:
    """Install the preflight short-circuit and the CORS response headers."""

    @app.before_request
    def short_circuit_preflight() -> Response | None:
        if request.method == "OPTIONS":
            return no_content()
        return None

    @app.after_request
    def apply_response_headers(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = app.config["CORS_ALLOW_ORIGIN"]
        response.headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
        if response.mimetype == "application/json":
            response.headers["Content-Type"] = JSON_CONTENT_TYPE
        return response


def _register_error_handlers(app: Flask) -> None:
    """Render routing and server errors as JSON bodies."""

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(error: Exception) -> tuple[Response, int]:
        # A wrong method on a known path is reported exactly like an unknown path.
        return jsonify({"error": message("not_found")}), 404

    @app.errorhandler(500)
    def internal_error(error: Exception) -> tuple[Response, int]:
        logger.error("Internal server error: %s", error)
        return jsonify({"error": message("internal_error")}), 500
