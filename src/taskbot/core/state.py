# src/taskbot/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList


@dataclass
class AppState:
    # Settings object (real Settings or a test double with the same attributes).
    settings: Any
    task_list: TaskList = field(default_factory=lambda: TaskList([]))
