# tests/test_task_codec.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskbot.tasks.errors import InvalidArgumentError, TaskDecodeError
from taskbot.tasks.task_codec import decode_task, decode_tasks, encode_tasks, split_fields
from taskbot.tasks.task_models import Task, TaskKind


def test_decode_plain_and_timed() -> None:
    plain = decode_task("1|read book")
    assert plain.kind is TaskKind.PLAIN
    assert plain.name == "read book"
    assert plain.is_done is True

    timed = decode_task("0|return book|2024-01-02T18:00:00\n")
    assert timed.kind is TaskKind.TIMED
    assert timed.time == datetime(2024, 1, 2, 18, 0)
    assert timed.is_done is False


def test_persisted_lines_restore_name_and_done_flag(sample_tasks) -> None:
    restored = decode_tasks(encode_tasks(sample_tasks))
    assert [(t.name, t.is_done, t.time) for t in restored] == [
        (t.name, t.is_done, t.time) for t in sample_tasks
    ]


def test_name_with_separator_survives() -> None:
    task = Task.plain(r"pay A|B invoice \ urgent")
    assert decode_task(task.encode()).name == task.name


def test_split_fields_unescapes() -> None:
    assert split_fields(r"0|a\|b|c") == ["0", "a|b", "c"]


def test_decode_tasks_skips_blank_lines() -> None:
    assert [t.name for t in decode_tasks(["0|a", "", "   ", "1|b"])] == ["a", "b"]


@pytest.mark.parametrize(
    "line",
    [
        "read book",
        "2|read book",
        "0|a|b|c",
        "0|meeting|not-a-date",
        "0|dangling\\",
    ],
)
def test_decode_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(TaskDecodeError):
        decode_task(line)


def test_decode_rejects_empty_name() -> None:
    with pytest.raises(InvalidArgumentError):
        decode_task("0|")


def test_decode_whitespace_only_name() -> None:
    task = decode_task("0|  ")
    assert task.name == "  "
    assert task.encode() == "0|  "
