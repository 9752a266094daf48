"""Pytest fixtures for the Task Tracker API tests."""

import pytest
from fastapi.testclient import TestClient

from task_tracker.main import create_app
from task_tracker.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    """Create an empty task store."""
    return TaskStore()


@pytest.fixture
def client(store: TaskStore) -> TestClient:
    """Create a test client for the API backed by a fresh store."""
    return TestClient(create_app(store))
