"""
Data models for the Kanban board service.

Tasks ("cards") live only in memory, so the models are plain dataclasses
rather than ORM rows. ``Task`` is the stored record, ``TaskPatch`` carries
the optional fields of an update request.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """
    Enumeration of the three board columns a task can sit in.

    Inherits from ``str`` so each member compares equal to its raw wire
    value and serialises without an explicit ``.value``.
    """

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def values(cls) -> list[str]:
        """Return the wire values in column order."""
        return [status.value for status in cls]


def is_valid_status(value: Any) -> bool:
    """Return True when ``value`` is one of the three status strings."""
    return isinstance(value, str) and value in TaskStatus.values()


@dataclass
class Task:
    """
    A single card on the board.

    Attributes:
        id: Store-assigned identifier, never reused.
        title: Short title; non-empty after trimming.
        description: Free text, may be empty.
        status: One of the ``TaskStatus`` values.
    """

    id: int
    title: str
    description: str = ""
    status: str = TaskStatus.TODO.value

    def copy(self) -> Task:
        """Return an independent copy of this record."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to its JSON representation.

        Returns:
            Dictionary with ``id``, ``title``, ``description`` and
            ``status`` in that order.
        """
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
        }

    def __repr__(self) -> str:
        return f"<Task {self.id}: {self.title}>"


@dataclass(frozen=True)
class TaskPatch:
    """Fields supplied by an update request; ``None`` means not supplied."""

    title: str | None = None
    description: str | None = None
    status: str | None = None
