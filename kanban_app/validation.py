"""
Request validation helpers shared by the task routes.

These functions are free of Flask request state so they can be unit
tested directly: the routes decode the body, then hand the result here
for shape checks, field validation and conversion into model objects.
"""

from __future__ import annotations

import re
from typing import Any

from .models import Task, TaskPatch, TaskStatus, is_valid_status

# A task id is an optional sign followed by ASCII digits, nothing else.
_TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# JSON type expected for each known field of a task payload (null is always allowed).
TASK_FIELD_TYPES: dict[str, type] = {
    "id": int,
    "title": str,
    "description": str,
    "status": str,
}


class PayloadError(ValueError):
    """Raised when a request body is not a task-shaped JSON object."""


def parse_task_id(path: str) -> int | None:
    """
    Extract the task id from a ``/tasks/{id}`` path.

    The path is valid only when, after trimming slashes from both ends
    and splitting on ``/``, it has exactly two segments: the literal
    ``tasks`` and a signed 64-bit integer.

    Args:
        path: The request path, e.g. ``"/tasks/3"``.

    Returns:
        The parsed id, or ``None`` for any other shape.
    """
    parts = path.strip("/").split("/")
    if len(parts) != 2 or parts[0] != "tasks":
        return None
    if not _TASK_ID_PATTERN.fullmatch(parts[1]):
        return None
    task_id = int(parts[1])
    if not _INT64_MIN <= task_id <= _INT64_MAX:
        return None
    return task_id


def check_task_payload(data: Any) -> dict[str, Any]:
    """
    Check that a decoded body has the shape of a task.

    JSON ``null`` counts as an empty object. Unknown keys are ignored,
    but a known key holding the wrong JSON type is rejected.

    Returns:
        The payload as a dictionary.

    Raises:
        PayloadError: If the body is not an object or a field has the
            wrong type.
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PayloadError(f"expected a JSON object, got {type(data).__name__}")

    for field, expected in TASK_FIELD_TYPES.items():
        value = data.get(field)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, expected):
            raise PayloadError(f"field '{field}' must be of type {expected.__name__}")
    return data


def validate_new_task(data: dict[str, Any]) -> tuple[bool, str | None]:
    """
    Validate a creation payload.

    Args:
        data: A payload accepted by ``check_task_payload``.

    Returns:
        Tuple of (is_valid, error_key). ``error_key`` names an entry of
        the message catalog.
    """
    title = data.get("title") or ""
    if not title.strip():
        return False, "title_required"

    status = data.get("status") or TaskStatus.TODO.value
    if not is_valid_status(status):
        return False, "invalid_status"

    return True, None


def build_candidate(data: dict[str, Any]) -> Task:
    """Turn a validated creation payload into an unsaved task (id 0)."""
    return Task(
        id=0,
        title=data["title"],
        description=data.get("description") or "",
        status=data.get("status") or TaskStatus.TODO.value,
    )


def build_patch(data: dict[str, Any]) -> TaskPatch:
    """
    Turn an update payload into a ``TaskPatch``.

    ``description`` counts as supplied whenever the key is present, so
    ``""`` and ``null`` both clear it; an absent key leaves it alone.
    """
    description = None
    if "description" in data:
        description = data["description"] or ""
    return TaskPatch(
        title=data.get("title"),
        description=description,
        status=data.get("status"),
    )
