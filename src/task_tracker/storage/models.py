"""Task record and request bodies shared by the store and the API."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

# Status is a plain label: any value may move to any other value.
TaskStatus = Literal["OPEN", "IN_PROGRESS", "DONE"]


class Task(BaseModel):
    """One tracked task."""

    id: int
    title: str
    description: str
    status: TaskStatus = "OPEN"
    # Exposed as `createdAt` in API responses.
    created_at: datetime = Field(serialization_alias="createdAt")


class CreateTaskRequest(BaseModel):
    """Request body for POST /tasks."""

    title: str
    description: str


class UpdateTaskStatusRequest(BaseModel):
    """Request body for PATCH /tasks/{task_id}/status."""

    status: TaskStatus
