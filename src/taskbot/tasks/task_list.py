# src/taskbot/tasks/task_list.py

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator
from enum import StrEnum

from .errors import InvalidArgumentError, InvalidIndexError
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


def _compare(t1: Task, t2: Task, order: SortOrder) -> int:
    """
    Comparator used by TaskList.sort():
    - both timed: by time (earlier first for ASC, later first for DESC)
    - exactly one timed: the timed task goes after the plain one, for either order
    - neither timed: equal (stable sort keeps insertion order)
    """
    match (t1.kind, t2.kind):
        case (TaskKind.TIMED, TaskKind.TIMED):
            assert t1.time is not None and t2.time is not None
            if t1.time == t2.time:
                return 0
            earlier_first = -1 if t1.time < t2.time else 1
            return earlier_first if order is SortOrder.ASC else -earlier_first
        case (TaskKind.TIMED, _):
            return 1
        case (_, TaskKind.TIMED):
            return -1
        case _:
            return 0


class TaskList:
    """
    Ordered, mutable list of tasks with user-facing confirmation messages.

    The list owns its records: the constructor copies the given iterable and
    `tasks` only hands out a read-only snapshot.
    """

    def __init__(self, tasks: Iterable[Task]) -> None:
        if tasks is None:
            raise TypeError("TaskList requires an iterable of tasks (use [] for an empty list).")
        self._tasks: list[Task] = list(tasks)
        for pos, task in enumerate(self._tasks):
            if not isinstance(task, Task):
                raise InvalidArgumentError(
                    f"Expected a Task at position {pos}, got {type(task).__name__}."
                )

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def _check_index(self, idx: int) -> None:
        if idx < 0 or idx >= len(self._tasks):
            raise InvalidIndexError(idx, len(self._tasks))

    def get(self, idx: int) -> Task:
        self._check_index(idx)
        return self._tasks[idx]

    def list_all(self) -> str:
        lines = ["Here are the tasks in your list:\n"]
        for i, task in enumerate(self._tasks, start=1):
            lines.append(f"{i}. {task.render()}\n")
        return "".join(lines)

    def mark(self, idx: int, state: bool) -> str:
        task = self.get(idx)
        task.set_done(state)
        logger.debug("Task %d marked done=%s: %s", idx, state, task.name)

        if state:
            header = "Nice! I've marked this task as done:\n"
        else:
            header = "Ok, I've marked this task as not done yet:\n"
        return f"{header}{task.render()}\n"

    def pop(self, idx: int) -> Task:
        """Remove and return the task at idx; later tasks shift left by one."""
        self._check_index(idx)
        task = self._tasks.pop(idx)
        logger.debug("Task %d removed: %s (remaining=%d)", idx, task.name, len(self._tasks))
        return task

    def remove(self, idx: int) -> str:
        task = self.pop(idx)
        return (
            "Got it. I've removed this task:\n"
            f"{task.render()}\n"
            f"Now you have {len(self._tasks)} tasks in the list\n"
        )

    def add(self, task: Task) -> str:
        if not isinstance(task, Task):
            raise InvalidArgumentError(f"Expected a Task, got {type(task).__name__}.")
        self._tasks.append(task)
        logger.debug("Task added: %s (total=%d)", task.name, len(self._tasks))
        return (
            "Got it. I've added this task:\n"
            f"{task.render()}\n"
            f"Now you have {len(self._tasks)} tasks in the list\n"
        )

    def find(self, query: str) -> str:
        """Case-insensitive substring search; keeps each match's original 1-based position."""
        if query is None:
            raise InvalidArgumentError("Search query must be a string.")

        needle = query.lower()
        lines = ["Here are the tasks matching your query:\n"]
        for i, task in enumerate(self._tasks, start=1):
            if needle in task.name.lower():
                lines.append(f"{i}. {task.render()}\n")
        return "".join(lines)

    def sort(self, order: SortOrder) -> str:
        try:
            order = SortOrder(order)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown sort order: {order!r}") from e

        # list.sort is stable, so comparator ties keep their relative order.
        self._tasks.sort(key=functools.cmp_to_key(lambda a, b: _compare(a, b, order)))
        logger.debug("Task list sorted (%s, size=%d)", order, len(self._tasks))

        if order is SortOrder.ASC:
            return "List has been sorted in ascending order!"
        return "List has been sorted in descending order!"
