# tests/test_task_models.py

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta, timezone

import pytest

from taskstore.tasks.task_models import ZERO_TIME, Task, parse_timestamp


def test_to_dict_exposes_exactly_four_fields() -> None:
    task = Task(id=3, text="file report", tags=("work", "urgent"), due=datetime(2024, 1, 5, 14, 0, tzinfo=UTC))

    data = task.to_dict()
    assert data == {
        "id": 3,
        "text": "file report",
        "tags": ["work", "urgent"],
        "due": "2024-01-05T14:00:00+00:00",
    }
    # Must be JSON-encodable as-is.
    assert json.loads(json.dumps(data)) == data


def test_to_dict_zero_time() -> None:
    task = Task(id=0, text="", tags=(), due=ZERO_TIME)
    assert task.to_dict()["due"] == "0001-01-01T00:00:00+00:00"
    assert task.to_dict()["tags"] == []


def test_from_dict_accepts_z_suffix_and_offsets() -> None:
    task = Task.from_dict({"id": 1, "text": "t", "tags": ["a"], "due": "2024-02-01T08:15:00Z"})
    assert task.due == datetime(2024, 2, 1, 8, 15, tzinfo=UTC)
    assert task.tags == ("a",)

    task2 = Task.from_dict({"id": 2, "text": "t", "tags": [], "due": "2024-02-01T08:15:00-05:00"})
    assert task2.due.utcoffset() == timedelta(hours=-5)
    assert task2.due_date() == (2024, 2, 1)


def test_from_dict_defaults() -> None:
    task = Task.from_dict({"id": 7})
    assert task == Task(id=7, text="", tags=(), due=ZERO_TIME)


def test_from_dict_reads_back_to_dict_output() -> None:
    tz = timezone(timedelta(hours=2))
    task = Task(id=5, text="call mom", tags=("home", "home"), due=datetime(2024, 2, 1, 20, 0, tzinfo=tz))
    assert Task.from_dict(task.to_dict()) == task


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"id": "1"},
        {"id": True},
        {"id": 1, "tags": "home"},
        {"id": 1, "tags": ["ok", 2]},
        {"id": 1, "due": "not a date"},
        {"id": 1, "due": 12345},
        {"id": -3},
        {"id": 1, "tags": ""},
        {"id": 1, "text": 123},
        {"id": 1, "text": ["a"]},
        ["id"],
        "not an object",
        None,
    ],
)
def test_from_dict_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(ValueError):
        Task.from_dict(payload)


def test_parse_timestamp_passes_datetime_through() -> None:
    dt = datetime(2024, 1, 1, tzinfo=UTC)
    assert parse_timestamp(dt) is dt


def test_has_tag_is_case_sensitive() -> None:
    task = Task(id=0, text="", tags=("Home",), due=ZERO_TIME)
    assert task.has_tag("Home")
    assert not task.has_tag("home")


def test_from_dict_accepts_id_zero_and_null_tags() -> None:
    task = Task.from_dict({"id": 0, "text": "", "tags": None, "due": None})
    assert task == Task(id=0, text="", tags=(), due=ZERO_TIME)
