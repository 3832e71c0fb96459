# src/taskbot/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.state import AppState
from ..tasks.errors import InvalidArgumentError, TaskError
from ..tasks.task_list import SortOrder
from ..tasks.task_models import Task

CommandArgs = dict[str, Any]
CommandHandler = Callable[[AppState, CommandArgs], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Name -> handler registry used by the command-dispatch layer.

    Arguments arrive already parsed (index, query, sort order, Task);
    handlers return the confirmation text produced by the TaskList.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, name: str, **args: Any) -> str:
        """
        Run command `name` against state.task_list.
        Task errors become a user-facing reply; anything else propagates.
        """
        key = name.lower()
        handler = self._handlers.get(key)
        if not handler:
            return f"Unknown command: {name}. Use help to list available commands."

        try:
            return handler(state, args)
        except TaskError as e:
            logger.info("Command %s failed: %s", key, e)
            return f"OOPS!!! {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _require(args: CommandArgs, key: str) -> Any:
    if key not in args or args[key] is None:
        raise InvalidArgumentError(f"Missing argument: {key}")
    return args[key]


def _index(args: CommandArgs) -> int:
    raw = _require(args, "index")
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidArgumentError(f"Task index must be an integer, got {raw!r}.")
    return raw


def cmd_help(state: AppState, args: CommandArgs) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: CommandArgs) -> str:
    return state.task_list.list_all()


def cmd_add(state: AppState, args: CommandArgs) -> str:
    task = _require(args, "task")
    if not isinstance(task, Task):
        raise InvalidArgumentError(f"Expected a Task, got {type(task).__name__}.")
    return state.task_list.add(task)


def cmd_mark(state: AppState, args: CommandArgs) -> str:
    return state.task_list.mark(_index(args), True)


def cmd_unmark(state: AppState, args: CommandArgs) -> str:
    return state.task_list.mark(_index(args), False)


def cmd_delete(state: AppState, args: CommandArgs) -> str:
    return state.task_list.remove(_index(args))


def cmd_find(state: AppState, args: CommandArgs) -> str:
    query = _require(args, "query")
    return state.task_list.find(str(query))


def cmd_sort(state: AppState, args: CommandArgs) -> str:
    raw = args.get("order", SortOrder.ASC)
    order = raw.lower() if isinstance(raw, str) else raw
    return state.task_list.sort(order)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: add(task=Task).")
registry.register("mark", cmd_mark, help_text="Mark a task as done: mark(index=0-based).")
registry.register("unmark", cmd_unmark, help_text="Mark a task as not done: unmark(index=0-based).")
registry.register(
    "delete", cmd_delete, help_text="Remove a task: delete(index=0-based).", aliases=["remove"]
)
registry.register("find", cmd_find, help_text="Search task names (case-insensitive): find(query=str).")
registry.register("sort", cmd_sort, help_text="Sort tasks by time: sort(order=asc|desc).")
