from __future__ import annotations

import pytest
from pydantic import ValidationError

from task_tracker.api.main import create_app
from task_tracker.config.settings import Settings
from task_tracker.storage.memory import TaskStore


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("TASK_TRACKER_PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_name == "task-tracker"
    assert settings.port == 3000
    assert settings.log_level == "INFO"


def test_prefixed_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_TRACKER_APP_NAME", "tasks-staging")
    monkeypatch.setenv("TASK_TRACKER_PORT", "8081")
    monkeypatch.setenv("PORT", "9000")
    settings = Settings(_env_file=None)
    assert settings.app_name == "tasks-staging"
    assert settings.port == 8081


def test_bare_port_variable_is_used_as_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TASK_TRACKER_PORT", raising=False)
    monkeypatch.setenv("PORT", "9000")
    assert Settings(_env_file=None).port == 9000


def test_invalid_port_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_TRACKER_PORT", "70000")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_create_app_uses_given_store_and_settings() -> None:
    store = TaskStore()
    settings = Settings(_env_file=None, app_name="custom", port=4000)
    app = create_app(store=store, settings_override=settings)
    assert app.state.store is store
    assert app.state.settings.port == 4000
    assert app.title == "custom"


def test_create_app_builds_separate_stores() -> None:
    first = create_app()
    second = create_app()
    assert first.state.store is not second.state.store
