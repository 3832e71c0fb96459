# src/taskbot/tasks/task_models.py

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from .errors import InvalidArgumentError

FIELD_SEP = "|"
ESCAPE_CHAR = "\\"
DISPLAY_DATE_FORMAT = "%b %d %Y %H:%M"


class TaskKind(StrEnum):
    """
    Task variant tag.

    PLAIN tasks carry only a name and a done flag.
    TIMED tasks additionally carry a timestamp (deadline / event time) used for sorting.
    """

    PLAIN = "plain"
    TIMED = "timed"


def escape_field(text: str) -> str:
    return text.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2).replace(FIELD_SEP, ESCAPE_CHAR + FIELD_SEP)


def format_date(dt: datetime) -> str:
    """Display format for timestamps, e.g. 'Jan 02 2024 10:00'."""
    return dt.strftime(DISPLAY_DATE_FORMAT)


class Task:
    """
    One to-do entry.

    `name`, `kind` and `time` are fixed at construction; `is_done` changes
    only through set_done().
    """

    __slots__ = ("_kind", "_name", "_is_done", "_time")

    def __init__(
        self,
        name: str,
        is_done: bool = False,
        *,
        kind: TaskKind = TaskKind.PLAIN,
        time: datetime | None = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Task name must be a non-empty string.")

        try:
            kind = TaskKind(kind)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown task kind: {kind!r}") from e
        if kind is TaskKind.TIMED and not isinstance(time, datetime):
            raise InvalidArgumentError("Timed task requires a datetime value.")
        if kind is TaskKind.PLAIN and time is not None:
            raise InvalidArgumentError("Plain task cannot carry a time.")

        self._kind = kind
        self._name = name
        self._is_done = bool(is_done)
        self._time = time

    @classmethod
    def plain(cls, name: str, is_done: bool = False) -> Task:
        return cls(name, is_done, kind=TaskKind.PLAIN)

    @classmethod
    def timed(cls, name: str, time: datetime, is_done: bool = False) -> Task:
        return cls(name, is_done, kind=TaskKind.TIMED, time=time)

    @property
    def kind(self) -> TaskKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_done(self) -> bool:
        return self._is_done

    @property
    def time(self) -> datetime | None:
        return self._time

    @property
    def is_timed(self) -> bool:
        return self._kind is TaskKind.TIMED

    def get_name(self) -> str:
        return self._name

    def set_done(self, state: bool) -> None:
        self._is_done = bool(state)

    def render(self) -> str:
        status = "X" if self._is_done else " "
        return f"[{status}] {self._name}"

    def encode(self) -> str:
        """
        Encode for the persistence collaborator:
          plain: "<0|1>|<name>"
          timed: "<0|1>|<name>|<ISO-8601 time>"

        Separator and escape characters inside the name are backslash-escaped.
        """
        parts = ["1" if self._is_done else "0", escape_field(self._name)]
        match self._kind:
            case TaskKind.TIMED:
                assert self._time is not None
                parts.append(self._time.isoformat())
            case TaskKind.PLAIN:
                pass
        return FIELD_SEP.join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self._time is None:
            return f"Task({self._name!r}, is_done={self._is_done})"
        return f"Task({self._name!r}, is_done={self._is_done}, time={self._time.isoformat()})"
