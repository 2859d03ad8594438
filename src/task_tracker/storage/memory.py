"""Process-local task store."""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime

from task_tracker.storage.errors import TaskNotFoundError
from task_tracker.storage.models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """Thread-safe in-memory collection of tasks.

    Tasks are kept in insertion order and ids come from a counter that starts
    at 1 and only moves forward, so a deleted id is never handed out again.
    Nothing survives a process restart.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        # Path operations run in a thread pool; one lock covers list and counter.
        self._lock = threading.Lock()

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            return self._find(task_id)

    def create_task(self, title: str, description: str) -> Task:
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                status="OPEN",
                created_at=datetime.now(UTC),
            )
            self._next_id += 1
            self._tasks.append(task)
        logger.info("task_store event=created task_id=%s status=%s", task.id, task.status)
        return task

    def update_task_status(self, task_id: int, status: TaskStatus) -> Task:
        with self._lock:
            task = self._find(task_id)
            previous = task.status
            task.status = status
        logger.info(
            "task_store event=status_updated task_id=%s from_status=%s to_status=%s",
            task_id,
            previous,
            status,
        )
        return task

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            found = self._find(task_id)
            self._tasks = [task for task in self._tasks if task.id != found.id]
        logger.info("task_store event=deleted task_id=%s", task_id)

    def _find(self, task_id: int) -> Task:
        """Scan for a task by id; caller must hold the lock."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        logger.debug("task_store event=not_found task_id=%s", task_id)
        raise TaskNotFoundError(task_id)
