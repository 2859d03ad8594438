"""Errors raised by the task store."""

from __future__ import annotations


class TaskNotFoundError(KeyError):
    """Raised when an operation references a task id that is not in the store."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        self.message = f"Task with ID {task_id} not found"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message with quotes.
        return self.message
