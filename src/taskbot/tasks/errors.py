# src/taskbot/tasks/errors.py

from __future__ import annotations


class TaskError(RuntimeError):
    """Base class for recoverable task-list failures (caught by the command layer)."""


class InvalidIndexError(TaskError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Invalid task index {index}: the list has {size} tasks.")


class InvalidArgumentError(TaskError, ValueError):
    pass


class TaskDecodeError(InvalidArgumentError):
    pass
