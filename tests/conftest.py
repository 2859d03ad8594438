from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from task_tracker.api.main import create_app
from task_tracker.config.settings import Settings
from task_tracker.storage.memory import TaskStore


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def client(store: TaskStore) -> Iterator[TestClient]:
    app = create_app(store=store, settings_override=Settings(app_name="task-tracker-test"))
    with TestClient(app) as test_client:
        yield test_client
