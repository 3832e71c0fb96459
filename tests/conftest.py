# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbot.cli.bootstrap import create_initial_state
from taskbot.core.state import AppState
from taskbot.tasks.task_models import Task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace instead of real config keeps tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskbot-test",
        log_level="DEBUG",
        log_to_file=True,
        data_dir=tmp_path,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task.plain("read book"),
        Task.timed("return book", datetime(2024, 1, 2, 18, 0)),
        Task.plain("Buy Milk", is_done=True),
        Task.timed("project meeting", datetime(2024, 1, 1, 9, 30)),
    ]
