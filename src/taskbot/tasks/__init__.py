from .errors import InvalidArgumentError, InvalidIndexError, TaskDecodeError, TaskError
from .task_list import SortOrder, TaskList
from .task_models import Task, TaskKind

__all__ = [
    "InvalidArgumentError",
    "InvalidIndexError",
    "SortOrder",
    "Task",
    "TaskDecodeError",
    "TaskError",
    "TaskKind",
    "TaskList",
]
