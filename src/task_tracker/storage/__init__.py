"""Task storage and models."""

from task_tracker.storage.errors import TaskNotFoundError
from task_tracker.storage.memory import TaskStore
from task_tracker.storage.models import CreateTaskRequest, Task, TaskStatus, UpdateTaskStatusRequest

__all__ = [
    "CreateTaskRequest",
    "Task",
    "TaskNotFoundError",
    "TaskStatus",
    "TaskStore",
    "UpdateTaskStatusRequest",
]
