"""
Shared pytest fixtures for the Kanban board test suite.

This module contains fixtures that are shared across all test modules.
Every test gets its own ``TaskStore`` and its own application bound to
that store, so tests never see each other's tasks and ids always start
at 1.

Key Concepts Demonstrated:
- Fixture dependencies (store -> app -> client)
- Test data factories
- Isolation through dependency injection instead of teardown
"""

import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from kanban_app import create_app
from kanban_app.models import Task, TaskStatus
from kanban_app.store import TaskStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def store() -> TaskStore:
    """Provide a fresh, empty task store."""
    return TaskStore()


@pytest.fixture
def app(store):
    """
    Create an application instance bound to the test's store.

    Args:
        store: Task store fixture.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing", store=store)
    yield application


@pytest.fixture
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory(store):
    """
    Factory fixture for creating tasks directly in the store.

    Example:
        def test_something(task_factory):
            task = task_factory(title="My Task")
            assert task.id == 1
    """

    def _create_task(
        title: str | None = None,
        description: str | None = None,
        status: str = TaskStatus.TODO.value,
    ) -> Task:
        candidate = Task(
            id=0,
            title=title or fake.sentence(nb_words=4),
            description=fake.paragraph() if description is None else description,
            status=status,
        )
        return store.create(candidate)

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """Create a single sample task for tests that need one task."""
    return task_factory(
        title="Sample Task",
        description="This is a sample task for testing",
        status=TaskStatus.TODO.value,
    )


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    """Create one task per board column plus an extra in-progress card."""
    return [
        task_factory(title="Plan sprint", status=TaskStatus.TODO.value),
        task_factory(title="Build board", status=TaskStatus.IN_PROGRESS.value),
        task_factory(title="Ship release", status=TaskStatus.DONE.value),
        task_factory(title="Review PR", status=TaskStatus.IN_PROGRESS.value),
    ]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_task_data() -> dict[str, Any]:
    """Provide valid task data for POST/PUT requests."""
    return {
        "title": "Test Task",
        "description": "This is a test task description",
        "status": TaskStatus.IN_PROGRESS.value,
    }


@pytest.fixture
def minimal_task_data() -> dict[str, str]:
    """Provide minimal valid task data (only required fields)."""
    return {"title": "Minimal Task"}


@pytest.fixture
def api_headers() -> dict[str, str]:
    """Provide common headers for API requests."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
