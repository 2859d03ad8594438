"""FastAPI app entrypoint for task-tracker."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response, status

from task_tracker.config.settings import Settings, get_settings
from task_tracker.storage.errors import TaskNotFoundError
from task_tracker.storage.memory import TaskStore
from task_tracker.storage.models import CreateTaskRequest, Task, UpdateTaskStatusRequest

logger = logging.getLogger(__name__)


def create_app(
    *,
    store: TaskStore | None = None,
    settings_override: Settings | None = None,
) -> FastAPI:
    """Build a fresh app around one task store.

    Each call owns its own store unless one is passed in, so tests can start
    from an empty collection or inspect the store directly.
    """
    settings = settings_override or get_settings()
    task_store = store if store is not None else TaskStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "app event=startup service=%s env=%s", settings.app_name, settings.app_env
        )
        yield
        logger.info(
            "app event=shutdown service=%s tasks=%s",
            settings.app_name,
            len(app.state.store.list_tasks()),
        )

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    # Shared objects live in app.state so route handlers can reuse them.
    app.state.store = task_store
    app.state.settings = settings

    def _get_store(request: Request) -> TaskStore:
        return request.app.state.store

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": settings.app_name}

    @app.get("/tasks", response_model=list[Task])
    def list_tasks(request: Request) -> list[Task]:
        return _get_store(request).list_tasks()

    @app.get("/tasks/{task_id}", response_model=Task)
    def get_task(task_id: int, request: Request) -> Task:
        try:
            return _get_store(request).get_task(task_id)
        except TaskNotFoundError as exc:
            raise HTTPException(status_code=404, detail=exc.message) from exc

    @app.post("/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
    def create_task(payload: CreateTaskRequest, request: Request) -> Task:
        return _get_store(request).create_task(payload.title, payload.description)

    @app.patch("/tasks/{task_id}/status", response_model=Task)
    def update_task_status(
        task_id: int, payload: UpdateTaskStatusRequest, request: Request
    ) -> Task:
        try:
            return _get_store(request).update_task_status(task_id, payload.status)
        except TaskNotFoundError as exc:
            raise HTTPException(status_code=404, detail=exc.message) from exc

    @app.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_task(task_id: int, request: Request) -> Response:
        try:
            _get_store(request).delete_task(task_id)
        except TaskNotFoundError as exc:
            raise HTTPException(status_code=404, detail=exc.message) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


# Module-level app for `uvicorn task_tracker.api.main:app`.
app = create_app()
