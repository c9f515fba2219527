"""
REST API endpoints for the Kanban board.

This module provides CRUD operations for tasks via HTTP methods.
All bodies are JSON; every failure is ``{"error": <message>}``.

Endpoints:
    GET    /tasks          - List all tasks
    POST   /tasks          - Create a new task
    PUT    /tasks/<id>     - Partially update a task
    DELETE /tasks/<id>     - Delete a task

Any other method or path is answered with 404: a wrong method is not
distinguished from a wrong path, and a malformed id is not distinguished
from an unknown one.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, Response, abort, jsonify, request
from werkzeug.exceptions import BadRequest

from .. import get_store, no_content
from ..i18n import message
from ..store import InvalidStatusError, TaskNotFoundError
from ..validation import (
    PayloadError,
    build_candidate,
    build_patch,
    check_task_payload,
    parse_task_id,
    validate_new_task,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def error_response(key: str, status_code: int) -> tuple[Response, int]:
    """Build a JSON error response from a message catalog key."""
    return jsonify({"error": message(key)}), status_code


def read_task_payload() -> dict[str, Any]:
    """
    Decode the request body as a task-shaped JSON object.

    The body is decoded regardless of the declared Content-Type.

    Raises:
        PayloadError: If the body is not valid JSON or not task-shaped.
    """
    try:
        data = request.get_json(force=True)
    except (BadRequest, RecursionError) as exc:
        # Nesting deeper than the interpreter recursion limit is a decode failure too.
        raise PayloadError("request body is not valid JSON") from exc
    return check_task_payload(data)


def require_task_id() -> int:
    """Parse the task id from the request path, aborting with 404 if malformed."""
    task_id = parse_task_id(request.path)
    if task_id is None:
        logger.warning("Malformed task path: %s", request.path)
        abort(404)
    return task_id


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/tasks", methods=["GET"])
def list_tasks() -> tuple[Response, int]:
    """
    List all tasks.

    Returns:
        JSON array of tasks and 200 status code.
    """
    # Flask routes HEAD here implicitly; only GET reads the list.
    if request.method != "GET":
        abort(404)

    tasks = get_store().list()
    logger.info("GET /tasks - Returning %s tasks", len(tasks))
    return jsonify([task.to_dict() for task in tasks]), 200


@api_bp.route("/tasks", methods=["POST"])
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Request Body (JSON):
        title: Task title (required, non-empty after trimming)
        description: Task description (optional)
        status: Task status (optional, default: todo)

    Returns:
        JSON response with created task and 201 status code,
        or error message and 400 if decoding or validation fails.
    """
    logger.info("POST /tasks - Creating new task")

    try:
        data = read_task_payload()
    except PayloadError as exc:
        logger.warning("Rejected create payload: %s", exc)
        return error_response("invalid_json", 400)

    is_valid, error = validate_new_task(data)
    if not is_valid:
        logger.warning("Validation failed: %s", error)
        return error_response(error, 400)

    task = get_store().create(build_candidate(data))

    logger.info("Created task with ID: %s", task.id)
    return jsonify(task.to_dict()), 201


@api_bp.route("/tasks/<path:task_ref>", methods=["PUT"])
def update_task(task_ref: str) -> tuple[Response, int]:
    """
    Update an existing task.

    Request Body (JSON), all fields optional:
        title: New title; ignored when empty after trimming
        description: New description; an empty value clears it
        status: New status; ignored when empty

    Returns:
        JSON response with updated task and 200 status code,
        400 for an undecodable body or invalid status,
        or 404 if the path is malformed or the task does not exist.
    """
    task_id = require_task_id()
    logger.info("PUT /tasks/%s - Updating task", task_id)

    try:
        data = read_task_payload()
    except PayloadError as exc:
        logger.warning("Rejected update payload for task %s: %s", task_id, exc)
        return error_response("invalid_json", 400)

    try:
        task = get_store().update(task_id, build_patch(data))
    except TaskNotFoundError:
        logger.warning("Task %s not found", task_id)
        return error_response("not_found", 404)
    except InvalidStatusError as exc:
        logger.warning("Validation failed for task %s: %s", task_id, exc)
        return error_response("invalid_status", 400)

    logger.info("Updated task %s", task_id)
    return jsonify(task.to_dict()), 200


@api_bp.route("/tasks/<path:task_ref>", methods=["DELETE"])
def delete_task(task_ref: str) -> Response | tuple[Response, int]:
    """
    Delete a task.

    Returns:
        Empty 204 response, or error message and 404 if the path is
        malformed or the task does not exist.
    """
    task_id = require_task_id()
    logger.info("DELETE /tasks/%s - Deleting task", task_id)

    try:
        get_store().delete(task_id)
    except TaskNotFoundError:
        logger.warning("Task %s not found", task_id)
        return error_response("not_found", 404)

    logger.info("Deleted task %s", task_id)
    return no_content()
