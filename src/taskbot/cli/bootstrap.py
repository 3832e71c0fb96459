# src/taskbot/cli/bootstrap.py

"""
Composition root:
- loads settings once,
- configures logging,
- wires a TaskList into AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import get_settings
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, tasks: Iterable[Task] = ()) -> AppState:
    """
    Create AppState holding a fresh TaskList.

    `tasks` lets the persistence collaborator hand over records it has already loaded.
    """
    if settings is None:
        settings = get_settings()
    return AppState(settings=settings, task_list=TaskList(tasks))


def init_app(*, settings=None, tasks: Iterable[Task] = ()) -> AppState:
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=bool(getattr(settings, "log_to_file", True)),
    )

    state = create_initial_state(settings=settings, tasks=tasks)
    logger.info(
        "Starting %s with %d tasks (log file: %s).",
        getattr(settings, "app_name", "taskbot"),
        len(state.task_list),
        log_file,
    )
    return state
