# src/taskbot/tasks/task_codec.py

"""
Line codec for the persistence collaborator.

Task.encode() produces one line per task; this module turns such lines back
into Task objects. No file I/O happens here.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .errors import TaskDecodeError
from .task_models import ESCAPE_CHAR, FIELD_SEP, Task


def split_fields(line: str) -> list[str]:
    """Split on unescaped separators and unescape each field."""
    fields: list[str] = []
    buf: list[str] = []
    chars = iter(line)
    for ch in chars:
        if ch == ESCAPE_CHAR:
            nxt = next(chars, None)
            if nxt is None:
                raise TaskDecodeError(f"Dangling escape at end of line: {line!r}")
            buf.append(nxt)
        elif ch == FIELD_SEP:
            fields.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    fields.append("".join(buf))
    return fields


def decode_task(line: str) -> Task:
    fields = split_fields(line.rstrip("\r\n"))
    if len(fields) not in (2, 3):
        raise TaskDecodeError(f"Expected 2 or 3 fields, got {len(fields)}: {line!r}")

    done_flag, name = fields[0], fields[1]
    if done_flag not in ("0", "1"):
        raise TaskDecodeError(f"Invalid done flag {done_flag!r}: {line!r}")
    is_done = done_flag == "1"

    if len(fields) == 2:
        return Task.plain(name, is_done)

    try:
        when = datetime.fromisoformat(fields[2])
    except ValueError as e:
        raise TaskDecodeError(f"Invalid timestamp {fields[2]!r}: {line!r}") from e
    return Task.timed(name, when, is_done)


def encode_tasks(tasks: Iterable[Task]) -> list[str]:
    return [t.encode() for t in tasks]


def decode_tasks(lines: Iterable[str]) -> list[Task]:
    return [decode_task(line) for line in lines if line.strip()]
