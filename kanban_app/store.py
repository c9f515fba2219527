"""
In-memory task store.

``TaskStore`` is the only owner of task records. Every operation runs
under one ``threading.Lock`` so reads and writes are fully serialised,
and records cross the store boundary only as copies: callers can never
mutate a stored task except through ``update``.

A store is an ordinary object created by the application factory (or by a
test) and handed to the request handlers; there is no module-level state.
"""

from __future__ import annotations

import logging
import threading

from .models import Task, TaskPatch, TaskStatus, is_valid_status

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Base class for task store failures."""


class TaskNotFoundError(TaskStoreError):
    """Raised when no task exists for the requested identifier."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class InvalidStatusError(TaskStoreError):
    """Raised when a status outside ``TaskStatus`` reaches the store."""

    def __init__(self, status: str) -> None:
        super().__init__(f"Invalid status {status!r}; expected one of {TaskStatus.values()}")
        self.status = status


class TaskStore:
    """Thread-safe mapping of task id to task record."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[int, Task] = {}
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list(self) -> list[Task]:
        """Return a snapshot of every stored task (order not guaranteed)."""
        with self._lock:
            return [task.copy() for task in self._tasks.values()]

    def create(self, candidate: Task) -> Task:
        """
        Store a new task and assign it the next identifier.

        The candidate's ``id`` is ignored. An empty status defaults to
        ``todo``.

        Args:
            candidate: Validated task fields.

        Returns:
            A copy of the stored task, including its assigned id.

        Raises:
            InvalidStatusError: If the candidate's status is not valid.
        """
        status = candidate.status or TaskStatus.TODO.value
        if not is_valid_status(status):
            raise InvalidStatusError(status)

        with self._lock:
            task = Task(
                id=self._next_id,
                title=candidate.title,
                description=candidate.description,
                status=status,
            )
            self._next_id += 1
            self._tasks[task.id] = task
            return task.copy()

    def get(self, task_id: int) -> Task:
        """
        Return a copy of the task with the given id.

        Raises:
            TaskNotFoundError: If the id is unknown.
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task.copy()

    def update(self, task_id: int, patch: TaskPatch) -> Task:
        """
        Apply a partial update to a stored task.

        - ``title`` replaces the stored title only when it is non-empty
          after trimming.
        - ``description`` replaces the stored description whenever it is
          supplied, so an empty string clears it.
        - ``status`` replaces the stored status when non-empty; it is
          checked before any field changes, so a bad status leaves the
          record untouched.

        Returns:
            A copy of the updated task.

        Raises:
            TaskNotFoundError: If the id is unknown.
            InvalidStatusError: If a non-empty status is not valid.
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)

            if patch.status and not is_valid_status(patch.status):
                raise InvalidStatusError(patch.status)

            if patch.title is not None and patch.title.strip():
                task.title = patch.title
            if patch.description is not None:
                task.description = patch.description
            if patch.status:
                task.status = patch.status

            return task.copy()

    def delete(self, task_id: int) -> None:
        """
        Remove the task with the given id.

        Raises:
            TaskNotFoundError: If the id is unknown.
        """
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]
        logger.debug("Removed task %s from store", task_id)
